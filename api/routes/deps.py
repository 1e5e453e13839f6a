"""Route dependencies and helpers

Provides clean access to application state without Law of Demeter violations.
"""
from typing import Optional

from fastapi import HTTPException, Request

from app_state import AppState
from storage import DriveStore


def get_app_state(request: Request) -> AppState:
    """Get AppState from request

    Encapsulates the request.app.state.app_state chain.
    """
    return request.app.state.app_state


def get_drive_store(request: Request) -> DriveStore:
    """Get the drive store, or 500 when startup has not wired one"""
    store = get_app_state(request).get_drive_store()
    if store is None:
        raise HTTPException(status_code=500, detail="storage not initialized")
    return store


def parse_optional_id(value) -> Optional[str]:
    """Trim an optional id; blank means absent"""
    trimmed = (value or "").strip()
    return trimmed or None
