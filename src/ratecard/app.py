"""HTTP entry point for the rate card engine.

Configures:
- **structlog** with JSON rendering (production) or colored console (development)
- **Request IDs** bound into structlog contextvars for every request
- **Prometheus** HTTP metrics plus a quotes-calculated counter on ``/metrics``
- Routes: ``GET /health``, ``POST /calculate``, ``POST /quick-estimate``
"""

from __future__ import annotations

import asyncio
import logging

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ratecard.config import Settings, get_settings
from ratecard.domain.errors import PricingError
from ratecard.domain.models import QuoteRequest
from ratecard.observability.metrics import record_quote, setup_metrics
from ratecard.observability.middleware import RequestIdMiddleware
from ratecard.pricing import (
    PricingResult,
    QuickEstimate,
    QuickEstimateRequest,
    calculate_quick_estimate,
)
from ratecard.quotes import price_quote

logger = structlog.get_logger()


def configure_logging(production: bool = False) -> None:
    """Configure structlog for production (JSON) or development (console).

    Production mode (*production=True*): JSON rendering at INFO level.
    Development mode: colored console rendering at DEBUG level.

    Args:
        production: Enable production mode if ``True``.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        log_level = logging.INFO
    else:
        renderer = structlog.dev.ConsoleRenderer()
        log_level = logging.DEBUG

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service="ratecard")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI app with tracing, metrics and pricing routes.

    Args:
        settings: Service settings.  If ``None``, ``get_settings()`` is used.

    Returns:
        The configured FastAPI application.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(title="Rate Card Engine")
    app.state.settings = settings
    app.add_middleware(RequestIdMiddleware)
    setup_metrics(app)

    @app.exception_handler(PricingError)
    async def pricing_error_handler(request: Request, exc: PricingError) -> JSONResponse:
        """Reject briefs that break the engine's input contract with a 422."""
        logger.warning("quote_request_rejected", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Log invalid payloads, then answer with FastAPI's standard 422 body."""
        logger.warning(
            "quote_request_rejected",
            path=request.url.path,
            error_count=len(exc.errors()),
        )
        return await request_validation_exception_handler(request, exc)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Liveness probe -- always returns 200 if the process is running."""
        return {"status": "healthy"}

    @app.post("/calculate")
    async def calculate(quote: QuoteRequest, request: Request) -> PricingResult:
        """Price a profile and brief into a full quote."""
        result = price_quote(quote, request.app.state.settings)
        record_quote(result.pricing_model)
        return result

    @app.post("/quick-estimate")
    async def quick_estimate(estimate_request: QuickEstimateRequest) -> QuickEstimate:
        """Estimate a rate from follower count, platform, format and niche."""
        return calculate_quick_estimate(estimate_request)

    return app


async def main() -> None:
    """Main entry point: configure logging and serve the API with uvicorn."""
    settings = get_settings()
    configure_logging(production=settings.production)
    logger.info("Application starting", port=settings.api_port)

    config = uvicorn.Config(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        log_level="info",
    )
    server = uvicorn.Server(config)
    await server.serve()


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
