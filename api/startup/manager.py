"""Startup manager - orchestrates application initialization and shutdown."""
import logging

from app_state import AppState
from config import default_config
from startup.config_validator import ConfigValidator
from storage import DriveStore, PostgresPool

logger = logging.getLogger(__name__)


class StartupManager:
    """Manages application startup.

    - validate config
    - open and ping the connection pool (fail fast)
    - wire the drive store into app state
    """

    def __init__(self, app_state: AppState, config=default_config):
        self.state = app_state
        self.config = config

    async def initialize(self):
        """Initialize all components"""
        logger.info("Initializing Dox drive API...")
        self._validate_config()
        self._report_database_source()
        pool = await self._open_pool()
        store = DriveStore(pool.pool, query_timeout=self.config.database.query_timeout)
        self.state.set_storage(pool, store)
        logger.info("Dox drive API ready")

    async def shutdown(self):
        """Release resources"""
        await self.state.close_all_resources()
        logger.info("Dox drive API stopped")

    def _validate_config(self):
        """Validate configuration before startup"""
        ConfigValidator(self.config).validate()
        logger.info("Configuration validated")

    def _report_database_source(self):
        if self.config.database.using_default_url:
            logger.warning("DATABASE_URL not set, using default local database")

    async def _open_pool(self) -> PostgresPool:
        """Open the pool; any failure aborts startup"""
        pool = self._create_pool()
        try:
            await pool.open()
        except Exception as e:
            logger.error("Database unreachable at startup: %s", str(e) or type(e).__name__)
            raise
        return pool

    def _create_pool(self) -> PostgresPool:
        return PostgresPool(self.config.database)
