"""
Configuration constants for the Dox drive API
"""
from pathlib import Path
from dataclasses import dataclass, field

DEFAULT_DATABASE_URL = "postgres://localhost:5432/dox?sslmode=disable"

@dataclass
class DatabaseConfig:
    """PostgreSQL connection and query configuration.

    The pool is opened once at startup and shared by every request.
    Each store call is bounded by query_timeout; the startup ping is
    bounded by connect_timeout.
    """
    database_url: str = DEFAULT_DATABASE_URL
    # True when DATABASE_URL was absent and the local default is in use
    using_default_url: bool = True
    pool_min_size: int = 1
    pool_max_size: int = 10
    query_timeout: float = 3.0
    connect_timeout: float = 5.0

    @classmethod
    def from_url(cls, url: str) -> 'DatabaseConfig':
        """Create config for an explicit connection string.

        Falls back to the local default when url is empty.
        """
        if not url:
            return cls()
        return cls(database_url=url, using_default_url=False)

    @property
    def scheme(self) -> str:
        """URL scheme, e.g. 'postgres' or 'postgresql'"""
        from urllib.parse import urlparse
        return urlparse(self.database_url).scheme

@dataclass
class ServerConfig:
    """HTTP server configuration"""
    host: str = "0.0.0.0"
    port: int = 8080
    public_dir: Path = Path("public")
    max_body_bytes: int = 1 << 20

@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

@dataclass
class Config:
    """Main configuration container"""
    database: DatabaseConfig
    server: ServerConfig
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> 'Config':
        """Create config from environment - delegates to EnvironmentConfigLoader"""
        from environment_config_loader import EnvironmentConfigLoader
        return EnvironmentConfigLoader().load()

# Default instance
default_config = Config.from_env()
