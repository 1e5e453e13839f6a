"""Drive listing route."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from models import DriveListingResponse
from routes.deps import get_drive_store, parse_optional_id
from storage import DriveStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/drive", response_model=DriveListingResponse)
async def list_drive(parent_id: Optional[str] = None,
                     store: DriveStore = Depends(get_drive_store)):
    """
    List folders and documents directly under a folder

    Args:
        parent_id: Folder id; omitted or blank lists the root level

    Returns:
        Folders ordered by name and documents (without content) ordered
        by most recently updated
    """
    try:
        listing = await store.list_drive(parse_optional_id(parent_id))
        return DriveListingResponse.model_validate(listing)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to load drive (parent_id=%r)", parent_id)
        raise HTTPException(status_code=500, detail="failed to load drive")
