from __future__ import annotations

from fastapi import APIRouter, Depends

from bank import reload_bank
from deps.auth import require_admin
from deps.supply import get_orchestrator
from supply import SupplyOrchestrator

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.post("/reload")
def reload_catalog():
    n = reload_bank()
    return {"ok": True, "count": n}


@router.get("/pools/{category}")
def pool_status(category: str, orchestrator: SupplyOrchestrator = Depends(get_orchestrator)):
    size = orchestrator.pool.size(category)
    pending = orchestrator.scheduler.in_flight(category) if orchestrator.scheduler else False
    return {"ok": True, "category": category, "size": size, "refill_pending": pending}


@router.post("/cache/clear")
def clear_cache(orchestrator: SupplyOrchestrator = Depends(get_orchestrator)):
    return {"ok": True, "cleared": orchestrator.cache.clear()}
