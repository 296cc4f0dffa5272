"""
FastAPI main application
REST API server for the portfolio dashboard.
"""
import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.core.config import settings
from backend.app.api.api import api_router
from dashboard.config.settings import validate_all_configs

# Logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Sentry (global)
if settings.SENTRY_ENABLED and settings.SENTRY_DSN:
    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration
    from sentry_sdk.integrations.logging import LoggingIntegration

    def before_send_filter(event, hint):
        """Mask credentials in request headers"""
        if 'request' in event:
            headers = event['request'].get('headers', {})
            for key in ['Authorization', 'Cookie']:
                if key in headers:
                    headers[key] = '***MASKED***'
        return event

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=0.1,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR
            ),
        ],
        before_send=before_send_filter,
        send_default_pii=False,
        attach_stacktrace=True,
    )
    logger.info(f"Sentry initialized (environment: {settings.SENTRY_ENVIRONMENT})")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifecycle

    Startup: validate configuration
    Shutdown: nothing to release; storage is in memory
    """
    logger.info("Starting application...")
    validate_all_configs()
    logger.info("Application started")

    yield

    logger.info("Application stopped")


# FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=f"{settings.API_PREFIX}/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["*"],
)

# API routes
app.include_router(api_router, prefix=settings.API_PREFIX)

# Prometheus metrics endpoint
if settings.PROMETHEUS_ENABLED:
    from backend.app.services.metrics import metrics_app, record_http_request

    @app.middleware("http")
    async def prometheus_middleware(request: Request, call_next):
        """Record request count and latency per route template"""
        start = time.perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        endpoint = getattr(route, "path", request.url.path)
        if not endpoint.startswith("/metrics"):
            record_http_request(
                request.method,
                endpoint,
                response.status_code,
                time.perf_counter() - start,
            )
        return response

    app.mount("/metrics", metrics_app)
    logger.info("Prometheus metrics endpoint enabled: /metrics")


@app.get("/")
async def root() -> dict:
    """Root endpoint"""
    return {
        "message": "Portfolio Dashboard API",
        "version": settings.VERSION,
        "docs": f"{settings.API_PREFIX}/docs",
    }


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.VERSION,
    }


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request data is a 400"""
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": jsonable_errors(exc)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    if settings.SENTRY_ENABLED:
        import sentry_sdk
        with sentry_sdk.new_scope() as scope:
            scope.set_tag("endpoint", str(request.url))
            scope.set_context("request", {
                "method": request.method,
                "url": str(request.url),
            })
            sentry_sdk.capture_exception(exc)

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "type": type(exc).__name__,
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors without the raw input or exception context"""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "backend.app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.LOG_LEVEL.lower(),
    )
