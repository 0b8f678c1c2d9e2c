"""Read-only endpoints for forms and their results.

- form list and form definition;
- aggregated results as JSON and as an HTML page.
"""
# app/routers/forms.py
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy import select

from formhub.app.core.config import settings
from formhub.app.core.logging import get_logs_writer_logger
from formhub.app.schemas.form import FormOut, FormTitleList, FormTitleOut
from formhub.app.services.results import compute_form_definition, compute_form_result
from formhub.db.session import get_db, get_session_factory
from formhub.db.models import Form
from formhub.results import DataIntegrityError, FormResult

logger = get_logs_writer_logger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=settings.JINJA2_TEMPLATES)


async def _load_results(form_id: int, session_factory: sessionmaker) -> FormResult:
    try:
        result = await compute_form_result(form_id, session_factory)
    except DataIntegrityError as e:
        logger.error("Inconsistent results data for form %s: %s", form_id, e)
        raise HTTPException(status_code=500, detail=f"Inconsistent results data: {e}")
    if result is None:
        logger.warning("Results requested for missing form %s", form_id)
        raise HTTPException(status_code=404, detail="Form not found")
    return result


@router.get("/api/forms", response_model=FormTitleList)
def list_forms(db: Session = Depends(get_db)):
    """List all forms.

    Args:
        db: The DB session.

    Returns:
        FormTitleList: The number of forms and their titles.
    """
    forms = db.execute(select(Form).order_by(Form.id)).scalars().all()
    return FormTitleList(
        count=len(forms),
        forms=[FormTitleOut.model_validate(f) for f in forms],
    )


@router.get("/api/forms/{form_id}", response_model=FormOut)
def get_form(form_id: int, session_factory: sessionmaker = Depends(get_session_factory)):
    """Get the form definition by ID.

    Args:
        form_id: The form ID.
        session_factory: Sessionmaker for the definition query.

    Returns:
        FormOut: The form with its questions and answer options.

    Errors:
        404: The form was not found.
    """
    form = compute_form_definition(form_id, session_factory)
    if form is None:
        raise HTTPException(status_code=404, detail="Form not found")
    return FormOut.model_validate(form.model_dump())


@router.get("/api/forms/{form_id}/results", response_model=FormResult)
async def get_form_results(form_id: int, session_factory: sessionmaker = Depends(get_session_factory)):
    """Get the aggregated results of a form.

    Args:
        form_id: The form ID.
        session_factory: Sessionmaker for the two row queries.

    Returns:
        FormResult: Questions with answer counts; participants only for non-anonymous forms.

    Errors:
        404: The form was not found.
        500: Passages reference questions that are not part of the form.
    """
    return await _load_results(form_id, session_factory)


@router.get("/forms/{form_id}/results", response_class=HTMLResponse)
async def form_results_page(form_id: int, request: Request, session_factory: sessionmaker = Depends(get_session_factory)):
    result = await _load_results(form_id, session_factory)
    return templates.TemplateResponse(
        request,
        "results.html",
        {"form": result},
    )
