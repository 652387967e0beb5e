from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from deps.supply import get_orchestrator
from generation import ConfigurationError, GenerationError, RateLimited
from schemas.questions import ErrorOut, GenerateRequest, QuestionsOut
from supply import SupplyOrchestrator

log = logging.getLogger(__name__)

router = APIRouter(tags=["generate"])


def _error(status: int, body: ErrorOut) -> JSONResponse:
    return JSONResponse(status_code=status, content=body.model_dump(exclude_none=True))


@router.post(
    "/generate-questions",
    response_model=QuestionsOut,
    response_model_exclude_none=True,
    responses={429: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def generate_questions(
    req: GenerateRequest, orchestrator: SupplyOrchestrator = Depends(get_orchestrator)
):
    """Fresh (or cached) generated questions, with no static fallback."""
    try:
        batch, _ = await orchestrator.generate_fresh(req.category, req.topic)
    except RateLimited as e:
        return _error(
            429,
            ErrorOut(
                error="Rate limit exceeded",
                details="Too many requests. Please try again in a moment or use static questions.",
                retryAfter=e.retry_after,
            ),
        )
    except ConfigurationError:
        log.error("generation requested but GEMINI_API_KEY is not configured")
        return _error(500, ErrorOut(error="API key not configured"))
    except GenerationError as e:
        log.warning("generation for %r failed: %s", req.category, e)
        return _error(500, ErrorOut(error="Failed to generate questions", details=str(e)))
    return QuestionsOut(questions=batch)
