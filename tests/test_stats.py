"""
Tests for the statistics pass.
"""

import pytest
from pydantic import ValidationError
from formhub.results import collect


def test_empty_stream():
    stats = collect([])

    assert stats.form_passage_count == 0
    assert stats.question_passage_count == {}
    assert stats.passage_facts == ()


def test_counts_distinct_passages(passage_row):
    """A passage answering one question twice counts once for it."""
    rows = [
        passage_row(1, 7, question_id=10, text="Red"),
        passage_row(1, 7, question_id=10, text="Blue"),
        passage_row(1, 7, question_id=11, text="because"),
        passage_row(2, 8, question_id=10, text="Red"),
    ]

    stats = collect(rows)

    assert stats.form_passage_count == 2
    assert stats.question_passage_count == {10: 2, 11: 1}


def test_facts_keep_row_order_and_identity(passage_row):
    rows = [
        passage_row(2, 8, question_id=10, text="Blue"),
        passage_row(1, 7, question_id=10, text="Red"),
        passage_row(2, 8, question_id=11, text="Red"),
    ]

    facts = collect(rows).passage_facts

    assert [(f.passage_id, f.question_id, f.answer_text) for f in facts] == [
        (2, 10, "Blue"),
        (1, 10, "Red"),
        (2, 11, "Red"),
    ]
    assert facts[0].respondent.id == 8
    assert facts[0].respondent.username == "user8"
    assert facts[1].respondent.email == "user7@example.com"


def test_stats_are_immutable(passage_row):
    stats = collect([passage_row(1, 7, question_id=10, text="Red")])

    with pytest.raises(ValidationError):
        stats.form_passage_count = 5
