"""Merge pass: applies passage statistics to the form tree.
"""
# results/merge.py
from typing import Dict, Tuple

from formhub.results.errors import UnknownQuestionError
from formhub.results.schemas import AnswerResult, FormResult, PassageStats, QuestionResult, UserInfo


def merge(form: FormResult, stats: PassageStats) -> FormResult:
    """Combine the definition tree with the collected statistics.

    The given tree is left untouched; a completed copy is returned.

    Args:
        form: Tree produced by `build`.
        stats: Statistics produced by `collect`.

    Returns:
        FormResult: The tree with counts, answers and participants filled in.

    Raises:
        UnknownQuestionError: If a passage answers a question absent from the tree.
    """
    result = form.model_copy(deep=True)
    result.number_of_passages_form = stats.form_passage_count

    questions: Dict[int, QuestionResult] = {}
    answers: Dict[Tuple[int, str], AnswerResult] = {}
    for question in result.questions:
        question.number_of_passages_question = stats.question_passage_count.get(question.id, 0)
        questions[question.id] = question
        for answer in question.answers:
            answers[(question.id, answer.text)] = answer

    participants: Dict[int, UserInfo] = {}
    for fact in stats.passage_facts:
        question = questions.get(fact.question_id)
        if question is None:
            raise UnknownQuestionError(fact.passage_id, fact.question_id)

        key = (fact.question_id, fact.answer_text)
        answer = answers.get(key)
        if answer is None:
            answer = AnswerResult(text=fact.answer_text)
            answers[key] = answer
            question.answers.append(answer)
        answer.selected_times_answer += 1

        if fact.respondent.id not in participants:
            participants[fact.respondent.id] = fact.respondent.model_copy()

    return _finalize(result, participants)


def _finalize(result: FormResult, participants: Dict[int, UserInfo]) -> FormResult:
    # anonymous forms never expose respondents, whatever the facts carry
    if result.anonymous:
        result.participants = []
    else:
        result.participants = list(participants.values())
    return result
