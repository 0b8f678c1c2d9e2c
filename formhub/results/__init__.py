"""Flattening and aggregation of form results.

Definition rows and passage rows come in flat. A `FormResult` tree with
response statistics comes out.
"""
from .engine import compute_form_result
from .errors import ResultsError, DataIntegrityError, UnknownQuestionError, FormMismatchError
from .merge import merge
from .schemas import (
    AnswerResult,
    DefinitionRow,
    FormResult,
    PassageAnswerFact,
    PassageRow,
    PassageStats,
    QuestionResult,
    UserInfo,
)
from .stats import collect
from .tree import build
