# results/stats.py
from typing import Dict, Iterable, List, Set

from formhub.results.schemas import PassageAnswerFact, PassageRow, PassageStats, UserInfo


def collect(rows: Iterable[PassageRow]) -> PassageStats:
    """Count distinct passages per form and per question.

    Answer texts are passed through as facts in row order; they are
    matched against the form tree only when merging.
    """
    passage_ids: Set[int] = set()
    question_passages: Dict[int, Set[int]] = {}
    facts: List[PassageAnswerFact] = []

    for row in rows:
        passage_ids.add(row.passage_id)
        question_passages.setdefault(row.question_id, set()).add(row.passage_id)
        facts.append(PassageAnswerFact(
            passage_id=row.passage_id,
            question_id=row.question_id,
            answer_text=row.answer_text,
            respondent=UserInfo(
                id=row.respondent_id,
                username=row.respondent_username,
                first_name=row.respondent_first_name,
                last_name=row.respondent_last_name,
                email=row.respondent_email,
            ),
        ))

    return PassageStats(
        form_passage_count=len(passage_ids),
        question_passage_count={qid: len(pids) for qid, pids in question_passages.items()},
        passage_facts=tuple(facts),
    )
