from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import portfolio, wallet
from .config import settings
from .errors import WalletApiError
from .logging_config import setup_logging
from .middleware import CORSHeadersMiddleware, RequestContextMiddleware
from .types import ErrorResponse

setup_logging(settings.log_level, settings.log_json)

# Create FastAPI app
app = FastAPI(
    title="Wallet Portfolio API",
    description="Token holdings, balances and wallet summaries for EVM addresses",
    version=settings.api_version,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Outermost last: the request summary covers every response, including preflights
app.add_middleware(CORSHeadersMiddleware)
app.add_middleware(RequestContextMiddleware)


def _error_response(message: str, status_code: int, headers=None) -> JSONResponse:
    return JSONResponse(
        ErrorResponse(error=message).model_dump(),
        status_code=status_code,
        headers=headers,
    )


@app.exception_handler(WalletApiError)
async def wallet_api_error_handler(request: Request, exc: WalletApiError) -> JSONResponse:
    return _error_response(exc.message, exc.status_code)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = str(exc.detail)
    if exc.status_code == 405:
        allowed = (exc.headers or {}).get("Allow")
        message = f"Method not allowed. Use {allowed}." if allowed else "Method not allowed."
    return _error_response(message, exc.status_code, exc.headers)


# Include routers
app.include_router(portfolio.router, tags=["Portfolio"])
app.include_router(wallet.router, tags=["Wallet"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "wallet_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower()
    )
