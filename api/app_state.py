"""Application state container

Holds the only shared resources of the process: the connection pool and
the store built on top of it. Routes reach them through routes.deps.
"""


class StorageServices:
    """Storage dependencies

    The pool owns the connections; the store is a stateless facade over it.
    """

    def __init__(self):
        self.pool = None
        self.store = None


class AppState:
    """Application state container

    Delegation methods hide internal structure (Law of Demeter).
    """

    def __init__(self):
        self.storage = StorageServices()

    # === Service Access Delegation (for route handlers) ===

    def get_pool(self):
        """Get PostgreSQL pool manager"""
        return self.storage.pool

    def get_drive_store(self):
        """Get drive store for folder/document operations"""
        return self.storage.store

    def set_storage(self, pool, store):
        """Install the opened pool and its store"""
        self.storage.pool = pool
        self.storage.store = store

    # === Lifecycle Management Delegation ===

    async def close_all_resources(self):
        """Close the connection pool and drop the store"""
        pool = self.storage.pool
        self.storage.store = None
        self.storage.pool = None
        if pool:
            await pool.close()
