"""Computing form results from the database.

The definition pass and the statistics pass read their own row streams in
separate sessions and run side by side; the merge waits for both. When the
caller is cancelled, or one read fails, the statements still running on the
other sessions are interrupted.
"""
# app/services/results.py
import asyncio
import threading
from typing import Optional
from sqlalchemy.orm import Session, sessionmaker

from formhub.db.session import LocalSession
from formhub.db.queries import fetch_definition_rows, fetch_passage_rows
from formhub.results import FormResult, PassageStats, build, collect, merge
from formhub.app.core.logging import get_logs_writer_logger

logger = get_logs_writer_logger(__name__)


class ReadAborted(Exception):
    # Raised inside a pass whose request has already been aborted.
    pass


class _ActiveReads:
    """DBAPI connections held by the passes of one request."""

    def __init__(self):
        self._lock = threading.Lock()
        self._connections = []
        self.aborted = False

    def attach(self, db: Session) -> None:
        dbapi_connection = db.connection().connection.dbapi_connection
        with self._lock:
            if self.aborted:
                raise ReadAborted()
            self._connections.append(dbapi_connection)

    def check(self) -> None:
        if self.aborted:
            raise ReadAborted()

    def abort(self) -> None:
        with self._lock:
            self.aborted = True
            connections = list(self._connections)
        for dbapi_connection in connections:
            # sqlite3 exposes interrupt(), psycopg exposes cancel()
            stop = getattr(dbapi_connection, "interrupt", None) or getattr(dbapi_connection, "cancel", None)
            if stop is not None:
                stop()


def _definition_pass(session_factory: sessionmaker, form_id: int, reads: Optional[_ActiveReads] = None) -> Optional[FormResult]:
    with session_factory() as db:
        if reads is not None:
            reads.attach(db)
        rows = fetch_definition_rows(db, form_id)
        if reads is not None:
            reads.check()
        return build(rows)


def _statistics_pass(session_factory: sessionmaker, form_id: int, reads: _ActiveReads) -> PassageStats:
    with session_factory() as db:
        reads.attach(db)
        rows = fetch_passage_rows(db, form_id)
        reads.check()
        return collect(rows)


async def compute_form_result(form_id: int, session_factory: sessionmaker = LocalSession) -> Optional[FormResult]:
    """Compute the results of a form.

    Args:
        form_id: The form ID.
        session_factory: Sessionmaker; each pass opens its own session.

    Returns:
        FormResult | None: The aggregated results, or None if the form does not exist.

    Raises:
        DataIntegrityError: If the passages do not match the form definition.
        SQLAlchemyError: If reading either row stream fails.
        CancelledError: If the caller was cancelled; both reads are interrupted.
    """
    reads = _ActiveReads()
    try:
        form, stats = await asyncio.gather(
            asyncio.to_thread(_definition_pass, session_factory, form_id, reads),
            asyncio.to_thread(_statistics_pass, session_factory, form_id, reads),
        )
    except asyncio.CancelledError:
        logger.warning("Results for form %s cancelled, interrupting reads", form_id)
        reads.abort()
        raise
    except Exception:
        reads.abort()
        raise

    if form is None:
        return None

    result = merge(form, stats)
    logger.info(
        "Results for form %s: %d passage(s), %d question(s), %d participant(s)",
        form_id, result.number_of_passages_form, len(result.questions), len(result.participants),
    )
    return result


def compute_form_definition(form_id: int, session_factory: sessionmaker = LocalSession) -> Optional[FormResult]:
    """Form tree without statistics, or None if the form does not exist."""
    return _definition_pass(session_factory, form_id)
