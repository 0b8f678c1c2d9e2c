# results/engine.py
from typing import Iterable, Optional

from formhub.results.merge import merge
from formhub.results.schemas import DefinitionRow, FormResult, PassageRow
from formhub.results.stats import collect
from formhub.results.tree import build


def compute_form_result(
    definition_rows: Iterable[DefinitionRow],
    passage_rows: Iterable[PassageRow],
) -> Optional[FormResult]:
    """Run the definition, statistics and merge passes over already fetched rows.

    Returns None when the form has no definition rows.
    """
    form = build(definition_rows)
    if form is None:
        return None
    return merge(form, collect(passage_rows))
