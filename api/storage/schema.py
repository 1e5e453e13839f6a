"""
Drive schema bootstrap.

The server never creates tables itself; this is run through
`manage.py init-db` against a fresh database.
"""
import logging

logger = logging.getLogger(__name__)


class PostgresSchemaManager:
    """Creates the folders and documents tables (idempotent).

    Tables:
    - folders: tree nodes, parent_id references folders(id)
    - documents: text bodies, folder_id references folders(id)
    """

    def __init__(self, conn):
        self.conn = conn

    async def create_schema(self):
        """Create all required tables and indexes."""
        await self.conn.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto")
        await self._create_folders_table()
        await self._create_documents_table()
        logger.info("Drive schema initialized")

    async def _create_folders_table(self):
        await self.conn.execute("""
            CREATE TABLE IF NOT EXISTS folders (
                id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
                parent_id UUID NULL REFERENCES folders(id),
                name TEXT NOT NULL,
                created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
                updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
            )
        """)
        await self.conn.execute(
            "CREATE INDEX IF NOT EXISTS idx_folders_parent ON folders(parent_id)"
        )

    async def _create_documents_table(self):
        await self.conn.execute("""
            CREATE TABLE IF NOT EXISTS documents (
                id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
                folder_id UUID NULL REFERENCES folders(id),
                title TEXT NOT NULL,
                content TEXT NOT NULL DEFAULT '',
                created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
                updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
            )
        """)
        await self.conn.execute(
            "CREATE INDEX IF NOT EXISTS idx_documents_folder ON documents(folder_id)"
        )

    async def table_names(self):
        """Names of the drive tables that currently exist"""
        rows = await self.conn.fetch("""
            SELECT table_name FROM information_schema.tables
            WHERE table_schema = current_schema()
              AND table_name IN ('folders', 'documents')
            ORDER BY table_name
        """)
        return [row['table_name'] for row in rows]
