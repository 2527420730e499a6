"""Column selection API routes."""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from sheetpick.api.dependencies import get_loaded_session
from sheetpick.session import ExtractionSession

from .files import preview_payload


router = APIRouter()


class ToggleRequest(BaseModel):
    """Column toggle request body."""
    included: bool


def selection_payload(session: ExtractionSession) -> dict:
    return {
        "columns": session.store.columns(),
        "preview": preview_payload(session),
    }


@router.get("/columns")
async def list_columns(session: ExtractionSession = Depends(get_loaded_session)) -> dict:
    """List columns with their selection state."""
    return selection_payload(session)


@router.put("/columns/{index}")
async def toggle_column(
    index: int,
    request: ToggleRequest,
    session: ExtractionSession = Depends(get_loaded_session),
) -> dict:
    """Include or exclude one column."""
    try:
        session.store.toggle(index, request.included)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return selection_payload(session)


@router.post("/columns/select-all")
async def select_all(session: ExtractionSession = Depends(get_loaded_session)) -> dict:
    """Select every column."""
    session.store.select_all()
    return selection_payload(session)


@router.post("/columns/deselect-all")
async def deselect_all(session: ExtractionSession = Depends(get_loaded_session)) -> dict:
    """Clear the selection."""
    session.store.deselect_all()
    return selection_payload(session)
