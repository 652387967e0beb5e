# routers/health.py
from pathlib import Path

from fastapi import APIRouter, HTTPException
from sqlalchemy import inspect, text

from alembic.config import Config
from alembic.script import ScriptDirectory
from db import engine
from models import QuestionPoolRecord

_ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/db")
def health_db():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            has_pool = inspect(conn).has_table(QuestionPoolRecord.__tablename__)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"db_error: {type(e).__name__}: {e}")
    return {"ok": True, "pool_table": has_pool}


def _alembic_heads() -> list[str]:
    cfg = Config(str(_ALEMBIC_INI))
    script = ScriptDirectory.from_config(cfg)
    return list(script.get_heads())


@router.get("/migrations")
def health_migrations():
    """Compare the migration head(s) on disk with the version stamped in the DB."""
    try:
        heads = _alembic_heads()
    except Exception as e:
        return {"ok": False, "error": f"alembic_config: {e}", "code_heads": [], "db_version": None}

    try:
        with engine.connect() as conn:
            if not inspect(conn).has_table("alembic_version"):
                db_ver = None
            else:
                db_ver = conn.execute(
                    text("SELECT version_num FROM alembic_version")
                ).scalar_one_or_none()
    except Exception as e:
        return {"ok": False, "error": f"db_connect_failed: {e}", "code_heads": heads, "db_version": None}

    synced = db_ver in heads
    return {"ok": synced, "synced": synced, "db_version": db_ver, "code_heads": heads}
