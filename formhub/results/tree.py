"""Definition pass: rebuilds the Form -> Question -> AnswerOption tree.

The join repeats every question once per answer option, so questions are
indexed by id and options by (question id, text). Both keep first-seen order.
"""
# results/tree.py
from typing import Dict, Iterable, Optional, Tuple

from formhub.results.errors import FormMismatchError
from formhub.results.schemas import AnswerResult, DefinitionRow, FormResult, QuestionResult, UserInfo


def build(rows: Iterable[DefinitionRow]) -> Optional[FormResult]:
    """Build the form tree without statistics.

    Args:
        rows: Definition rows of a single form, in display order.

    Returns:
        FormResult | None: The tree with zeroed counts, or None if there are no rows.

    Raises:
        FormMismatchError: If the rows belong to more than one form.
    """
    form: Optional[FormResult] = None
    questions: Dict[int, QuestionResult] = {}
    answers: Dict[Tuple[int, str], AnswerResult] = {}

    for row in rows:
        if form is None:
            form = _form_from_row(row)
        elif row.form_id != form.id:
            raise FormMismatchError(form.id, row.form_id)

        if row.question_id is None:
            continue

        question = questions.get(row.question_id)
        if question is None:
            question = QuestionResult(
                id=row.question_id,
                title=row.question_title,
                description=row.question_description,
                type=row.question_type,
                required=bool(row.question_required),
            )
            questions[row.question_id] = question
            form.questions.append(question)

        if row.answer_text is None:
            continue

        key = (row.question_id, row.answer_text)
        if key not in answers:
            answer = AnswerResult(text=row.answer_text)
            answers[key] = answer
            question.answers.append(answer)

    return form


def _form_from_row(row: DefinitionRow) -> FormResult:
    return FormResult(
        id=row.form_id,
        title=row.form_title,
        description=row.form_description,
        created_at=row.form_created_at,
        anonymous=row.form_anonymous,
        author=UserInfo(
            id=row.author_id,
            username=row.author_username,
            first_name=row.author_first_name,
            last_name=row.author_last_name,
            email=row.author_email,
        ),
    )
