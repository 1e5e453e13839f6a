from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DOCUMENT_TITLE = "Untitled"


class StrictRequest(BaseModel):
    """Request body base: unknown fields are rejected"""
    model_config = ConfigDict(extra="forbid")


class CreateFolderRequest(StrictRequest):
    name: Optional[str] = Field(default=None, description="Folder name (trimmed, required)")
    parent_id: Optional[str] = Field(default=None, description="Parent folder id, null for root")

    def clean_name(self) -> str:
        return (self.name or "").strip()


class DocumentRequest(StrictRequest):
    """Shared body of document create and update requests"""
    title: Optional[str] = Field(default=None, description="Title; blank becomes 'Untitled'")
    folder_id: Optional[str] = Field(default=None, description="Containing folder id, null for root")
    content: Optional[str] = Field(default=None, description="Document text")

    def clean_title(self) -> str:
        return (self.title or "").strip() or DEFAULT_DOCUMENT_TITLE

    def clean_content(self) -> str:
        return self.content or ""


class CreateDocumentRequest(DocumentRequest):
    pass


class UpdateDocumentRequest(DocumentRequest):
    pass


class FolderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    parent_id: Optional[UUID] = None
    name: str
    created_at: datetime
    updated_at: datetime


class DocumentSummary(BaseModel):
    """Document metadata as shown in a drive listing (no content)"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    folder_id: Optional[UUID] = None
    title: str
    created_at: datetime
    updated_at: datetime


class DocumentResponse(DocumentSummary):
    content: str = ""


class DriveListingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    folders: List[FolderResponse] = []
    documents: List[DocumentSummary] = []


class HealthResponse(BaseModel):
    status: str


class ErrorResponse(BaseModel):
    error: str
