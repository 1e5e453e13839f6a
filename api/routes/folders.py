"""Folder routes."""
import logging

from fastapi import APIRouter, Depends, HTTPException

from models import CreateFolderRequest, FolderResponse
from routes.deps import get_drive_store
from routes.payloads import json_body
from storage import DriveStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/folders", response_model=FolderResponse, status_code=201)
async def create_folder(request_data: CreateFolderRequest = Depends(json_body(CreateFolderRequest)),
                        store: DriveStore = Depends(get_drive_store)):
    """Create a folder under parent_id (or at the root)

    The name is trimmed and must not be blank. The parent is not checked
    for cycles.
    """
    name = request_data.clean_name()
    if not name:
        raise HTTPException(status_code=400, detail="folder name is required")

    try:
        folder = await store.create_folder(name, request_data.parent_id)
        return FolderResponse.model_validate(folder)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to create folder %r", name)
        raise HTTPException(status_code=500, detail="failed to create folder")
