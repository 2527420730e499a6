"""File upload, preview and export API routes."""
from typing import Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, UploadFile
from fastapi.responses import Response

from sheetpick.api.dependencies import get_loaded_session, get_session
from sheetpick.session import ExtractionSession
from sheetpick.summary import format_summary


router = APIRouter()
logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def preview_payload(session: ExtractionSession, limit: Optional[int] = None) -> dict:
    view = session.store.preview(limit)
    return {
        "headers": view.headers,
        "indices": view.indices,
        "rows": list(view),
        "total_rows": session.store.dataset.row_count,
    }


def summary_payload(session: ExtractionSession) -> Optional[dict]:
    if session.summary is None:
        return None
    return {
        "values": session.summary.as_dict(),
        "display": format_summary(session.summary),
    }


@router.post("/upload")
async def upload_file(
    file: UploadFile,
    session: ExtractionSession = Depends(get_session),
) -> dict:
    """Load a spreadsheet, replacing whatever was loaded before."""
    data = await file.read()

    max_size = session.config.api.max_upload_mb * 1024 * 1024
    if len(data) > max_size:
        raise HTTPException(status_code=413, detail="File too large")

    result = await session.load(data, filename=file.filename)
    if result is None:
        raise HTTPException(status_code=409, detail="Superseded by a newer upload")

    return {
        "filename": session.filename,
        "mode": session.mode,
        "columns": session.store.columns(),
        "preview": preview_payload(session),
        "summary": summary_payload(session),
    }


@router.get("/preview")
async def get_preview(
    limit: Optional[int] = Query(None, ge=0),
    session: ExtractionSession = Depends(get_loaded_session),
) -> dict:
    """Get the leading rows with only the selected columns."""
    return preview_payload(session, limit)


@router.get("/summary")
async def get_summary(session: ExtractionSession = Depends(get_loaded_session)) -> dict:
    """Get the formatted summary of the loaded settlement sheet."""
    summary = summary_payload(session)
    if summary is None:
        raise HTTPException(status_code=404, detail="No summary for this file")
    return summary


@router.get("/export")
async def export_file(session: ExtractionSession = Depends(get_loaded_session)):
    """Download the selected columns as a new workbook."""
    content = session.export()
    filename = session.config.export.filename
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
