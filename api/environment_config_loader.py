"""
Environment configuration loader.

Reading environment variables lives with the data source (environment)
rather than in the Config dataclasses.
"""
import os
from pathlib import Path

from config import Config, DatabaseConfig, ServerConfig, LoggingConfig

class EnvironmentConfigLoader:
    """Loads configuration from environment variables.

    Single Responsibility: Environment access logic.
    """

    def load(self) -> Config:
        """Create Config from environment variables"""
        return Config(
            database=self._load_database_config(),
            server=self._load_server_config(),
            logging=self._load_logging_config()
        )

    def _load_database_config(self) -> DatabaseConfig:
        """Load database configuration from environment"""
        config = DatabaseConfig.from_url(self._get_optional("DATABASE_URL", "").strip())
        config.pool_min_size = self._get_int("DB_POOL_MIN_SIZE", DatabaseConfig.pool_min_size)
        config.pool_max_size = self._get_int("DB_POOL_MAX_SIZE", DatabaseConfig.pool_max_size)
        config.query_timeout = self._get_float("DB_QUERY_TIMEOUT", DatabaseConfig.query_timeout)
        config.connect_timeout = self._get_float("DB_CONNECT_TIMEOUT", DatabaseConfig.connect_timeout)
        return config

    def _load_server_config(self) -> ServerConfig:
        """Load HTTP server configuration from environment"""
        return ServerConfig(
            host=self._get_optional("HOST", ServerConfig.host),
            port=self._get_int("PORT", ServerConfig.port),
            public_dir=Path(self._get_optional("PUBLIC_DIR", "public")),
            max_body_bytes=self._get_int("MAX_BODY_BYTES", ServerConfig.max_body_bytes)
        )

    def _load_logging_config(self) -> LoggingConfig:
        """Load logging configuration from environment"""
        return LoggingConfig(
            level=self._get_optional("LOG_LEVEL", LoggingConfig.level).upper()
        )

    def _get_optional(self, key: str, default: str) -> str:
        """Get optional string environment variable"""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable"""
        value = os.getenv(key, str(default))
        return int(value)

    def _get_float(self, key: str, default: float) -> float:
        """Get float environment variable"""
        value = os.getenv(key, str(default))
        return float(value)
