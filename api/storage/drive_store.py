"""
Drive data access: folders and documents in PostgreSQL.

Every operation issues one parameterized statement (two for the listing)
and is bounded by the query timeout. Database errors surface unchanged;
the only distinguished outcome is DocumentNotFoundError.
"""
import asyncio
import logging
from typing import Optional

from domain_models import Document, DriveListing, Folder

logger = logging.getLogger(__name__)

DEFAULT_QUERY_TIMEOUT = 3.0

LIST_FOLDERS_SQL = """
    SELECT id, parent_id, name, created_at, updated_at
    FROM folders
    WHERE ($1::uuid IS NULL AND parent_id IS NULL) OR parent_id = $1
    ORDER BY name
"""

LIST_DOCUMENTS_SQL = """
    SELECT id, folder_id, title, created_at, updated_at
    FROM documents
    WHERE ($1::uuid IS NULL AND folder_id IS NULL) OR folder_id = $1
    ORDER BY updated_at DESC
"""

CREATE_FOLDER_SQL = """
    INSERT INTO folders (name, parent_id)
    VALUES ($1, $2)
    RETURNING id, parent_id, name, created_at, updated_at
"""

CREATE_DOCUMENT_SQL = """
    INSERT INTO documents (title, content, folder_id)
    VALUES ($1, $2, $3)
    RETURNING id, folder_id, title, content, created_at, updated_at
"""

GET_DOCUMENT_SQL = """
    SELECT id, folder_id, title, content, created_at, updated_at
    FROM documents
    WHERE id = $1
"""

UPDATE_DOCUMENT_SQL = """
    UPDATE documents
    SET title = $2,
        content = $3,
        folder_id = $4,
        updated_at = NOW()
    WHERE id = $1
    RETURNING id, folder_id, title, content, created_at, updated_at
"""


class DocumentNotFoundError(LookupError):
    """No document row matched the given id"""

    def __init__(self, document_id):
        super().__init__(f"document not found: {document_id}")
        self.document_id = document_id


class DriveStore:
    """Stateless facade over the connection pool.

    Args:
        pool: asyncpg pool (or anything exposing fetch/fetchrow)
        query_timeout: Seconds each operation may take
    """

    def __init__(self, pool, query_timeout: float = DEFAULT_QUERY_TIMEOUT):
        self.pool = pool
        self.query_timeout = query_timeout

    async def _bounded(self, coro):
        return await asyncio.wait_for(coro, timeout=self.query_timeout)

    async def list_drive(self, parent_id: Optional[str] = None) -> DriveListing:
        """List one level of the drive.

        Folders are ordered by name, documents by most recently updated.
        Documents are metadata-only (no content).
        """
        return await self._bounded(self._list_drive(parent_id))

    async def _list_drive(self, parent_id):
        folder_rows = await self.pool.fetch(LIST_FOLDERS_SQL, parent_id)
        document_rows = await self.pool.fetch(LIST_DOCUMENTS_SQL, parent_id)
        return DriveListing(
            folders=[Folder.from_row(row) for row in folder_rows],
            documents=[Document.from_row(row) for row in document_rows],
        )

    async def create_folder(self, name: str, parent_id: Optional[str] = None) -> Folder:
        row = await self._bounded(self.pool.fetchrow(CREATE_FOLDER_SQL, name, parent_id))
        return Folder.from_row(row)

    async def create_document(self, title: str, content: str,
                              folder_id: Optional[str] = None) -> Document:
        row = await self._bounded(
            self.pool.fetchrow(CREATE_DOCUMENT_SQL, title, content, folder_id)
        )
        return Document.from_row(row)

    async def get_document(self, document_id) -> Document:
        """Fetch a document with its content.

        Raises:
            DocumentNotFoundError: If no row has this id
            asyncpg.DataError: If document_id is not a valid UUID
        """
        row = await self._bounded(self.pool.fetchrow(GET_DOCUMENT_SQL, str(document_id)))
        if row is None:
            raise DocumentNotFoundError(document_id)
        return Document.from_row(row)

    async def update_document(self, document_id, title: str, content: str,
                              folder_id: Optional[str] = None) -> Document:
        """Replace title, content and folder; refresh updated_at.

        Last write wins, no version check is made.

        Raises:
            DocumentNotFoundError: If no row has this id
        """
        row = await self._bounded(
            self.pool.fetchrow(UPDATE_DOCUMENT_SQL, str(document_id), title, content, folder_id)
        )
        if row is None:
            raise DocumentNotFoundError(document_id)
        logger.debug("Updated document %s", document_id)
        return Document.from_row(row)
