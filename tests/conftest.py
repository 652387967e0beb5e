import os
import tempfile

# Point the app at a throwaway SQLite file before db.py is imported
_DB_DIR = tempfile.mkdtemp(prefix="kidquiz-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'pool.db')}"

import pytest  # noqa: E402

import models  # noqa: E402,F401
from db import Base, engine  # noqa: E402

Base.metadata.create_all(engine)


@pytest.fixture(autouse=True)
def _no_real_credentials(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
