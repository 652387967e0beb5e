from __future__ import annotations

import random as _rnd
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from bank import categories, get_static
from deps.supply import get_orchestrator
from schemas.questions import (
    ErrorOut,
    Question,
    QuestionsOut,
    SupplyRequest,
    SupplyResponse,
    TopUpRequest,
)
from supply import NoContentError, SupplyOrchestrator

router = APIRouter(tags=["questions"])


def _no_content(e: NoContentError) -> JSONResponse:
    body = ErrorOut(error="No content", details=str(e))
    return JSONResponse(status_code=404, content=body.model_dump(exclude_none=True))


@router.get("/questions", response_model=List[Question], response_model_exclude_none=True)
def list_questions(
    category: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    random: bool = Query(default=False, description="If true, shuffle before limiting"),
):
    # static catalog only; the pool is reached through /questions/supply
    if category:
        qs = get_static(category)
    else:
        qs = [q for c in categories() for q in get_static(c)]

    if random:
        _rnd.shuffle(qs)

    if limit is not None:
        qs = qs[:limit]

    return qs


@router.get("/questions/categories")
def list_categories():
    return {"categories": categories()}


@router.post("/questions/supply", response_model=SupplyResponse, response_model_exclude_none=True)
async def supply_questions(
    req: SupplyRequest, orchestrator: SupplyOrchestrator = Depends(get_orchestrator)
):
    try:
        result = await orchestrator.supply(req.category, req.topic)
    except NoContentError as e:
        return _no_content(e)
    return SupplyResponse(questions=result.questions, source=result.source)


@router.post("/questions/top-up", response_model=QuestionsOut, response_model_exclude_none=True)
def top_up_questions(
    req: TopUpRequest, orchestrator: SupplyOrchestrator = Depends(get_orchestrator)
):
    try:
        qs = orchestrator.top_up(req.category, req.remaining)
    except NoContentError as e:
        return _no_content(e)
    return QuestionsOut(questions=qs)
