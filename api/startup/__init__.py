"""Startup modules for component initialization.

- ConfigValidator: config checks before anything connects
- StartupManager: pool lifecycle and store wiring
"""

from .config_validator import ConfigValidator, ConfigValidationError
from .manager import StartupManager

__all__ = [
    'ConfigValidator',
    'ConfigValidationError',
    'StartupManager',
]
