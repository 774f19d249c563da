# src/catalog/main.py
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from catalog.api.router import api_router
from catalog.core.config import Settings, get_settings
from catalog.core.logging_config import configure_logging
from catalog.core.metrics import REQUEST_COUNT
from catalog.core.rate_limit import limiter
from catalog.domain.models import HealthStatus

settings = get_settings()
access_logger = logging.getLogger("catalog.access")


def _route_template(request: Request) -> str:
    # Label by route template so per-id paths share one series
    route = request.scope.get("route")
    return getattr(route, "path", "unmatched")


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        REQUEST_COUNT.labels(
            method=request.method,
            path=_route_template(request),
            status_code=str(response.status_code),
        ).inc()
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        client = request.client.host if request.client else "-"
        access_logger.info(
            '%s "%s %s" %d "%s"',
            client,
            request.method,
            request.url.path,
            response.status_code,
            request.headers.get("user-agent", "-"),
        )
        return response


class VersionHeaderMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers["X-Version"] = settings.version_header
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging(settings.log_level)
    access_logger.info("%s %s starting", settings.app_name, settings.app_version)
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Rate Limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(MetricsMiddleware)
app.add_middleware(AccessLogMiddleware)
app.add_middleware(VersionHeaderMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.api_route("/health", methods=["GET", "HEAD"], response_model=HealthStatus, tags=["Health"])
async def health_check(config: Settings = Depends(get_settings)) -> HealthStatus:
    return HealthStatus(status="ok", version=config.app_version)


@app.get("/metrics", tags=["Monitoring"])
async def metrics_endpoint() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


# Included last: "/{product_id}" would otherwise shadow /health and /metrics
app.include_router(api_router)
