"""Pydantic schemas for the row streams and the aggregated result tree.
"""
# results/schemas.py
from datetime import datetime
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
from formhub.db.models.question import QuestionType


class UserInfo(BaseModel):
    id: int
    username: str
    first_name: str
    last_name: str
    email: str | None = None


class DefinitionRow(BaseModel):
    """One row of the form x author x question x answer option join.

    Question fields are empty for a form without questions, answer fields
    are empty for a question without options.
    """
    model_config = ConfigDict(frozen=True)

    form_id: int
    form_title: str
    form_description: str | None = None
    form_created_at: datetime | None = None
    form_anonymous: bool

    author_id: int
    author_username: str
    author_first_name: str
    author_last_name: str
    author_email: str | None = None

    question_id: int | None = None
    question_title: str | None = None
    question_description: str | None = None
    question_type: QuestionType | None = None
    question_required: bool | None = None

    answer_id: int | None = None
    answer_text: str | None = None


class PassageRow(BaseModel):
    """One row of the passage x respondent x submitted answer join."""
    model_config = ConfigDict(frozen=True)

    passage_id: int
    respondent_id: int
    respondent_username: str
    respondent_first_name: str
    respondent_last_name: str
    respondent_email: str | None = None
    question_id: int
    answer_text: str


class PassageAnswerFact(BaseModel):
    model_config = ConfigDict(frozen=True)

    passage_id: int
    question_id: int
    answer_text: str
    respondent: UserInfo


class PassageStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    form_passage_count: int = 0
    question_passage_count: Dict[int, int] = Field(default_factory=dict)
    passage_facts: Tuple[PassageAnswerFact, ...] = ()


class AnswerResult(BaseModel):
    text: str
    selected_times_answer: int = 0


class QuestionResult(BaseModel):
    id: int
    title: str
    description: str | None = None
    type: QuestionType
    required: bool = False
    number_of_passages_question: int = 0
    answers: List[AnswerResult] = Field(default_factory=list)


class FormResult(BaseModel):
    id: int
    title: str
    description: str | None = None
    created_at: Optional[datetime] = None
    anonymous: bool
    author: UserInfo
    number_of_passages_form: int = 0
    questions: List[QuestionResult] = Field(default_factory=list)
    participants: List[UserInfo] = Field(default_factory=list)
