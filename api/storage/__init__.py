"""PostgreSQL storage for the drive.

- postgres_connection: asyncpg pool lifecycle
- drive_store: folder/document queries
- schema: table bootstrap for manage.py
"""

from .postgres_connection import PostgresPool
from .drive_store import DriveStore, DocumentNotFoundError
from .schema import PostgresSchemaManager

__all__ = [
    'PostgresPool',
    'DriveStore',
    'DocumentNotFoundError',
    'PostgresSchemaManager',
]
