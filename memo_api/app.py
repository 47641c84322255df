# FILE: memo_api/app.py
"""
FastAPI application entry point for the Memo API
In-memory memo store with create/list/update/delete over HTTP
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from memo_api import __version__
from memo_api.config import configure_logging, get_settings
from memo_api.errors import MemoError
from memo_api.middleware.body_limit import BodySizeLimitMiddleware
from memo_api.middleware.request_log import RequestLogMiddleware
from memo_api.routes import health, memos

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown"""
    configure_logging()
    logger.info(f"Starting Memo API v{__version__} ({settings.environment})")

    yield

    logger.info("Shutting down Memo API")


app = FastAPI(
    title="Memo API",
    description="Reminder (memo) management backed by an in-memory store",
    version=__version__,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Body size limit
app.add_middleware(BodySizeLimitMiddleware, max_size=settings.body_size_limit_kb * 1024)

# Access log + correlation ID
app.add_middleware(RequestLogMiddleware)


# Exception handlers
@app.exception_handler(MemoError)
async def memo_exception_handler(request: Request, exc: MemoError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message}
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', []))}: {err.get('msg')}"
        for err in errors
    )
    logger.warning(f"Invalid request {request.method} {request.url.path}: {detail}")
    return JSONResponse(
        status_code=400,
        content={"message": f"Invalid request: {detail}"}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error"}
    )


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(memos.router, prefix="/api/memos", tags=["memos"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Memo API",
        "version": __version__,
        "status": "active"
    }


def main():
    import uvicorn
    configure_logging()
    uvicorn.run(
        "memo_api.app:app",
        host=settings.backend_host,
        port=settings.backend_port,
        reload=settings.environment == "development"
    )


if __name__ == "__main__":
    main()
