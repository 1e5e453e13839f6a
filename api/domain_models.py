"""Domain models for the drive"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

@dataclass
class Folder:
    """A folder in the drive tree.

    parent_id is a weak reference by value: None means the folder sits at
    the root. Nothing prevents a folder from being nested under one of its
    own descendants.
    """
    id: UUID
    parent_id: Optional[UUID]
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row) -> 'Folder':
        """Build a Folder from a database row (asyncpg Record or mapping)"""
        return cls(
            id=row['id'],
            parent_id=row['parent_id'],
            name=row['name'],
            created_at=row['created_at'],
            updated_at=row['updated_at']
        )

@dataclass
class Document:
    """A text document, optionally placed in a folder.

    content is None for metadata-only rows (drive listings).
    """
    id: UUID
    folder_id: Optional[UUID]
    title: str
    created_at: datetime
    updated_at: datetime
    content: Optional[str] = None

    @classmethod
    def from_row(cls, row) -> 'Document':
        """Build a Document from a database row.

        Rows selected without the content column produce a metadata-only
        document.
        """
        return cls(
            id=row['id'],
            folder_id=row['folder_id'],
            title=row['title'],
            created_at=row['created_at'],
            updated_at=row['updated_at'],
            content=row['content'] if 'content' in row.keys() else None
        )

@dataclass
class DriveListing:
    """Folders and documents directly under one parent (or the root)"""
    folders: List[Folder] = field(default_factory=list)
    documents: List[Document] = field(default_factory=list)
