"""Form draft, submission and status for the page to poll."""
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel

from ainft.api.state import AppState, get_state
from ainft.core.contract import UnsupportedNetworkError
from ainft.core.form_controller import BusyError, DraftValidationError, NothingToRetryError
from ainft.models.form import UIStatus

router = APIRouter()


class DraftBody(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


def _status_to_dict(s: UIStatus) -> dict:
    failure = None
    if s.failure is not None:
        failure = {
            "kind": s.failure.kind.value,
            "message": s.failure.message,
            "phase": s.failure.phase.value if s.failure.phase else None,
        }
    return {
        "state": s.state.value,
        "busy": s.busy,
        "message": s.status_message,
        "name": s.name,
        "description": s.description,
        "image": s.preview_data_uri,
        "url": s.url,
        "link_label": s.link_label,
        "error": failure,
        "can_retry_mint": s.can_retry_mint,
    }


@router.get("")
def get_form(state: AppState = Depends(get_state)):
    """Return UI status: state, busy flag, status text, preview and link."""
    return _status_to_dict(state.form.snapshot())


@router.put("/draft")
def put_draft(body: DraftBody, state: AppState = Depends(get_state)):
    """Update name and/or description."""
    try:
        state.form.update_draft(name=body.name, description=body.description)
    except BusyError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _status_to_dict(state.form.snapshot())


@router.post("/submit", status_code=202)
def submit(
    body: DraftBody | None = Body(None),
    state: AppState = Depends(get_state),
):
    """Create & Mint. Optional body updates the draft first."""
    try:
        if body is not None and (body.name is not None or body.description is not None):
            state.form.update_draft(name=body.name, description=body.description)
        state.form.submit()
    except DraftValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (BusyError, UnsupportedNetworkError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _status_to_dict(state.form.snapshot())


@router.post("/retry-mint", status_code=202)
def retry_mint(state: AppState = Depends(get_state)):
    """Mint the already-uploaded image again after a failed mint."""
    try:
        state.form.retry_mint()
    except (BusyError, NothingToRetryError, UnsupportedNetworkError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _status_to_dict(state.form.snapshot())
