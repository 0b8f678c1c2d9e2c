"""Read-only queries feeding the results engine.

Both queries return flat join rows in a stable order:
- definition rows: form, author, questions by position, answer options by position;
- passage rows: passages with their respondent and submitted answers.
"""
# db/queries.py
from typing import List
from sqlalchemy import select
from sqlalchemy.orm import Session

from formhub.db.models import User, Form, Question, AnswerOption, FormPassage, PassageAnswer
from formhub.results.schemas import DefinitionRow, PassageRow


def definition_rows_query(form_id: int):
    return (
        select(
            Form.id.label("form_id"),
            Form.title.label("form_title"),
            Form.description.label("form_description"),
            Form.created_at.label("form_created_at"),
            Form.anonymous.label("form_anonymous"),
            User.id.label("author_id"),
            User.username.label("author_username"),
            User.first_name.label("author_first_name"),
            User.last_name.label("author_last_name"),
            User.email.label("author_email"),
            Question.id.label("question_id"),
            Question.title.label("question_title"),
            Question.description.label("question_description"),
            Question.type.label("question_type"),
            Question.required.label("question_required"),
            AnswerOption.id.label("answer_id"),
            AnswerOption.text.label("answer_text"),
        )
        .select_from(Form)
        .join(User, Form.author_id == User.id)
        .outerjoin(Question, Question.form_id == Form.id)
        .outerjoin(AnswerOption, AnswerOption.question_id == Question.id)
        .where(Form.id == form_id)
        .order_by(Question.position, Question.id, AnswerOption.position, AnswerOption.id)
    )


def passage_rows_query(form_id: int):
    return (
        select(
            FormPassage.id.label("passage_id"),
            User.id.label("respondent_id"),
            User.username.label("respondent_username"),
            User.first_name.label("respondent_first_name"),
            User.last_name.label("respondent_last_name"),
            User.email.label("respondent_email"),
            PassageAnswer.question_id.label("question_id"),
            PassageAnswer.answer_text.label("answer_text"),
        )
        .select_from(FormPassage)
        .join(User, FormPassage.user_id == User.id)
        .join(PassageAnswer, PassageAnswer.form_passage_id == FormPassage.id)
        .where(FormPassage.form_id == form_id)
        .order_by(FormPassage.id, PassageAnswer.id)
    )


def fetch_definition_rows(db: Session, form_id: int) -> List[DefinitionRow]:
    rows = db.execute(definition_rows_query(form_id))
    return [DefinitionRow.model_validate(dict(row._mapping)) for row in rows]


def fetch_passage_rows(db: Session, form_id: int) -> List[PassageRow]:
    rows = db.execute(passage_rows_query(form_id))
    return [PassageRow.model_validate(dict(row._mapping)) for row in rows]
