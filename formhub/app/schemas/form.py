"""Pydantic schemes for forms.
"""
# app/schemas/form.py
from pydantic import BaseModel, Field
from typing import List
from datetime import datetime
from formhub.db.models.question import QuestionType
from formhub.results.schemas import UserInfo


class FormTitleOut(BaseModel):
    id: int
    title: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class FormTitleList(BaseModel):
    count: int
    forms: List[FormTitleOut] = Field(default_factory=list)


class AnswerOptionOut(BaseModel):
    text: str


class QuestionOut(BaseModel):
    id: int
    title: str
    description: str | None = None
    type: QuestionType
    required: bool = False
    answers: List[AnswerOptionOut] = Field(default_factory=list)


class FormOut(BaseModel):
    """Form definition with its author, questions and answer options."""
    id: int
    title: str
    description: str | None = None
    created_at: datetime | None = None
    anonymous: bool
    author: UserInfo
    questions: List[QuestionOut] = Field(default_factory=list)
