"""HTTP middleware and exception handlers"""

from .errors import register_error_handlers, error_response
from .request_logging import RequestLoggingMiddleware

__all__ = [
    'register_error_handlers',
    'error_response',
    'RequestLoggingMiddleware',
]
