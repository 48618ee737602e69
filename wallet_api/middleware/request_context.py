"""
Per-request context for the wallet API.

Tags every request with an id shared by all log lines it produces, and emits a
single ``wallet_request`` summary once the response is ready. Routes that
parse a wallet body leave the resolved ``WalletRequest`` on ``request.state``
so the summary names the address and chain that were served.
"""

import time
import uuid
from typing import Any, Dict, Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ..services import get_chain_name

REQUEST_ID_HEADER = "x-request-id"

logger = structlog.stdlib.get_logger("wallet_api.requests")


def resolve_request_id(request: Request) -> str:
    return request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]


def wallet_fields(request: Request) -> Dict[str, Any]:
    """Address and chain of the wallet a route resolved, if any."""
    wallet = getattr(request.state, "wallet", None)
    if wallet is None:
        return {}
    return {
        "address": wallet.address,
        "chain_id": wallet.chain_id,
        "chain": get_chain_name(wallet.chain_id),
    }


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id for downstream logs and summarize each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = resolve_request_id(request)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        response: Optional[Response] = None
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            status = response.status_code if response is not None else 500
            if status >= 500:
                emit = logger.error
            elif status >= 400:
                emit = logger.warning
            else:
                emit = logger.info

            emit(
                "wallet_request",
                method=request.method,
                path=request.url.path,
                status=status,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
                **wallet_fields(request),
            )
