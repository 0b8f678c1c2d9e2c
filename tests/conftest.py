"""Shared fixtures: a temporary SQLite database, seeded forms and row builders."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from formhub.app.main import app
from formhub.db import Base
from formhub.db.models import User, Form, Question, QuestionType, AnswerOption, FormPassage, PassageAnswer
from formhub.db.session import get_db, get_session_factory
from formhub.results import DefinitionRow, PassageRow


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'formhub.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def people(db):
    users = {
        name: User(username=name, first_name=name.title(), last_name="Tester", email=f"{name}@example.com")
        for name in ("alice", "bob", "carol", "dave")
    }
    db.add_all(users.values())
    db.commit()
    return users


@pytest.fixture
def colour_form(db, people):
    """Build the "Favourite colour" form and its passages.

    Q1 (single choice, options Red/Blue) and Q2 (free text, no options).
    bob: Red + "Warm"; carol: Red; dave: Blue + "Calm".
    """
    def make(anonymous=False, title="Favourite colour"):
        form = Form(title=title, description="Pick one", anonymous=anonymous, author=people["alice"])
        q1 = Question(title="Colour?", type=QuestionType.single_choice, required=True, position=1)
        q1.options = [AnswerOption(text="Red", position=1), AnswerOption(text="Blue", position=2)]
        q2 = Question(title="Why?", description="Free text", type=QuestionType.text, position=2)
        form.questions = [q1, q2]
        db.add(form)
        db.flush()

        for respondent, answers in (
            ("bob", [(q1, "Red"), (q2, "Warm")]),
            ("carol", [(q1, "Red")]),
            ("dave", [(q1, "Blue"), (q2, "Calm")]),
        ):
            passage = FormPassage(form=form, respondent=people[respondent])
            passage.answers = [PassageAnswer(question_id=q.id, answer_text=text) for q, text in answers]
            db.add(passage)
        db.commit()
        return form
    return make


@pytest.fixture
def client(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    yield TestClient(app)
    app.dependency_overrides.clear()


FORM_FIELDS = dict(
    form_id=1,
    form_title="Survey",
    form_description=None,
    form_anonymous=False,
    author_id=100,
    author_username="alice",
    author_first_name="Alice",
    author_last_name="Author",
    author_email="alice@example.com",
)


@pytest.fixture
def definition_row():
    """Builder for definition rows; `question=(id, type)` and `answer=(id, text)`."""
    def make(question=None, answer=None, **overrides):
        fields = dict(FORM_FIELDS)
        if question is not None:
            qid, qtype = question
            fields.update(
                question_id=qid,
                question_title=f"Question {qid}",
                question_type=qtype,
                question_required=False,
            )
        if answer is not None:
            fields.update(answer_id=answer[0], answer_text=answer[1])
        fields.update(overrides)
        return DefinitionRow(**fields)
    return make


@pytest.fixture
def passage_row():
    def make(passage_id, user_id, question_id, text):
        return PassageRow(
            passage_id=passage_id,
            respondent_id=user_id,
            respondent_username=f"user{user_id}",
            respondent_first_name="First",
            respondent_last_name=f"Last{user_id}",
            respondent_email=f"user{user_id}@example.com",
            question_id=question_id,
            answer_text=text,
        )
    return make
