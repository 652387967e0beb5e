import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config

# Routers
from routers.admin import router as admin_router
from routers.generate import router as generate_router
from routers.health import router as health_router
from routers.questions import router as questions_router

logger = logging.getLogger("kidquiz-supply")
logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Kid Quiz – Content Supply API")

# Allow calls from the quiz web client
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(questions_router)  # /questions, /questions/supply, /questions/top-up
app.include_router(generate_router)  # /generate-questions
app.include_router(admin_router)  # /admin/...
app.include_router(health_router)  # /health/...
