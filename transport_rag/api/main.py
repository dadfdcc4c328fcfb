"""
FastAPI application entry point.

Builds the RAG service in the lifespan startup phase, registers routers,
middleware and error handlers, and launches uvicorn. Uvicorn runs the
lifespan before it binds the listening socket, so no request can reach
a partially built index; a startup failure aborts the process.

Dependencies: fastapi, uvicorn, transport_rag.core, transport_rag.observability
System role: Application initialization and configuration
"""

import logging
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from transport_rag.api.routers import health_router, query_router
from transport_rag.configs import RAGServiceSettings, get_rag_service_settings
from transport_rag.core.exceptions import (
    InvalidQueryError,
    ServiceNotReadyError,
    TransportRAGException,
)
from transport_rag.core.rag_query import RAGService, build_rag_service
from transport_rag.observability.logger import configure_logging
from transport_rag.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)

ServiceFactory = Callable[[RAGServiceSettings], Awaitable[RAGService]]


def _build_lifespan(settings: RAGServiceSettings, service_factory: ServiceFactory):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Builds the index and chat model once; stores the service in app state.
        """
        logger.info("Application startup: initializing RAG service")
        try:
            app.state.rag_service = await service_factory(settings)
        except Exception as e:
            logger.exception(
                "Failed to initialize RAG service",
                extra={"error": str(e)},
            )
            raise

        logger.info(
            f"RAG service ready | chunks={app.state.rag_service.index.chunk_count}"
        )

        yield

        app.state.rag_service = None
        logger.info("Application shutdown")

    return lifespan


async def invalid_query_handler(request: Request, exc: InvalidQueryError) -> JSONResponse:
    """Render a missing/empty query as 400."""
    return JSONResponse(status_code=400, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed bodies (not JSON, non-string query) like a missing query."""
    logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Missing query"})


async def service_not_ready_handler(request: Request, exc: ServiceNotReadyError) -> JSONResponse:
    """Render queries that arrive before initialization as 503."""
    return JSONResponse(status_code=503, content={"error": exc.message})


async def rag_error_handler(request: Request, exc: TransportRAGException) -> JSONResponse:
    """Render retrieval/generation failures as 500 with the underlying message."""
    logger.error(f"Error: {type(exc).__name__}: {exc}")
    return JSONResponse(status_code=500, content={"error": exc.message})


def create_app(
    settings: RAGServiceSettings | None = None,
    service_factory: ServiceFactory | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: RAG service settings (uses environment if None)
        service_factory: Async factory building the RAGService at startup

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_rag_service_settings()

    app = FastAPI(
        title="Transport Policy RAG API",
        description="Retrieval-augmented answers over the transport policy document",
        version="1.0.0",
        debug=settings.debug,
        lifespan=_build_lifespan(settings, service_factory or build_rag_service),
    )
    app.state.rag_service = None

    # Add observability middleware (added first = last to execute)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(InvalidQueryError, invalid_query_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ServiceNotReadyError, service_not_ready_handler)
    app.add_exception_handler(TransportRAGException, rag_error_handler)

    app.include_router(query_router)
    app.include_router(health_router)

    return app


def run() -> None:
    """Run the query service; exits non-zero if startup fails."""
    settings = get_rag_service_settings()
    configure_logging(settings.effective_log_level)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        lifespan="on",
    )


if __name__ == "__main__":
    run()
