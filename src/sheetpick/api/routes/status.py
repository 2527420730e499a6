"""Status API routes."""
from fastapi import APIRouter, Depends

from sheetpick.api.dependencies import get_session
from sheetpick.session import ExtractionSession


router = APIRouter()


@router.get("/status")
async def get_status(session: ExtractionSession = Depends(get_session)) -> dict:
    """Get what is currently loaded."""
    store = session.store
    return {
        "loaded": session.is_loaded,
        "filename": session.filename,
        "mode": session.mode,
        "rows": store.dataset.row_count,
        "columns": store.dataset.width,
        "selected": len(store.selection),
    }


@router.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
