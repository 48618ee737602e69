from .cors import CORS_HEADERS, CORSHeadersMiddleware
from .request_context import RequestContextMiddleware

__all__ = [
    "CORS_HEADERS",
    "CORSHeadersMiddleware",
    "RequestContextMiddleware",
]
