# schemas/questions.py
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

# ---------- Question wire shape ----------


class Option(BaseModel):
    txt: str
    icon: str


class Question(BaseModel):
    model_config = ConfigDict(extra="ignore")

    q: str = Field(min_length=1)
    a: Option
    b: Option
    correct: Literal["a", "b"]
    # specialised question kinds
    display: Optional[str] = None
    speakText: Optional[str] = None
    pattern: Optional[List[str]] = None
    options: Optional[List[Option]] = None

    def wire(self) -> dict:
        return self.model_dump(exclude_none=True)


# ---------- Supply ----------


class SupplyRequest(BaseModel):
    category: str = Field(min_length=1)
    topic: Optional[str] = None


class SupplyResponse(BaseModel):
    questions: List[Question]
    source: str


class TopUpRequest(BaseModel):
    category: str = Field(min_length=1)
    remaining: List[Question] = []


# ---------- Direct generation ----------


class GenerateRequest(BaseModel):
    category: str = Field(min_length=1)
    topic: Optional[str] = None


class QuestionsOut(BaseModel):
    questions: List[Question]


class ErrorOut(BaseModel):
    error: str
    details: Optional[str] = None
    retryAfter: Optional[int] = None
