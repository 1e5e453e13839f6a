"""Document routes module."""
import logging

from fastapi import APIRouter, Depends, HTTPException

from models import CreateDocumentRequest, DocumentResponse, UpdateDocumentRequest
from routes.deps import get_drive_store
from routes.payloads import json_body
from storage import DocumentNotFoundError, DriveStore

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "document not found"
MISSING_ID_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.post("/api/documents", response_model=DocumentResponse, status_code=201)
async def create_document(request_data: CreateDocumentRequest = Depends(json_body(CreateDocumentRequest)),
                          store: DriveStore = Depends(get_drive_store)):
    """Create a document; a blank title becomes "Untitled"."""
    try:
        doc = await store.create_document(
            request_data.clean_title(),
            request_data.clean_content(),
            request_data.folder_id
        )
        return DocumentResponse.model_validate(doc)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to create document")
        raise HTTPException(status_code=500, detail="failed to create document")


@router.api_route("/api/documents/", methods=MISSING_ID_METHODS, include_in_schema=False)
async def missing_document_id():
    """A document path without an id is not found, whatever the method"""
    raise HTTPException(status_code=404, detail="not found")


@router.get("/api/documents/{document_id}", response_model=DocumentResponse)
async def get_document(document_id: str, store: DriveStore = Depends(get_drive_store)):
    """Get a document including its content"""
    try:
        doc = await store.get_document(document_id)
        return DocumentResponse.model_validate(doc)
    except HTTPException:
        raise
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except Exception:
        logger.exception("Failed to load document %s", document_id)
        raise HTTPException(status_code=500, detail="failed to load document")


@router.put("/api/documents/{document_id}", response_model=DocumentResponse)
async def update_document(document_id: str,
                          request_data: UpdateDocumentRequest = Depends(json_body(UpdateDocumentRequest)),
                          store: DriveStore = Depends(get_drive_store)):
    """Replace a document's title, content and folder

    Refreshes updated_at. Concurrent updates are last-write-wins.
    """
    try:
        doc = await store.update_document(
            document_id,
            request_data.clean_title(),
            request_data.clean_content(),
            request_data.folder_id
        )
        return DocumentResponse.model_validate(doc)
    except HTTPException:
        raise
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except Exception:
        logger.exception("Failed to update document %s", document_id)
        raise HTTPException(status_code=500, detail="failed to update document")
