"""Shared request dependencies."""
from fastapi import HTTPException, Request

from sheetpick.session import ExtractionSession


def get_session(request: Request) -> ExtractionSession:
    """Get the application's extraction session."""
    return request.app.state.session


def get_loaded_session(request: Request) -> ExtractionSession:
    """Get the session, failing if no file has been loaded yet."""
    session = get_session(request)
    if not session.is_loaded:
        raise HTTPException(status_code=409, detail="No file loaded")
    return session
