"""
GitHub Widgets: API Server
==========================

Read-only HTTP surface returning SVG widgets.

Endpoints:
- GET /health                              -> Liveness + cache stats
- GET /api/v1/experience-timeline.svg      -> Experience timeline
- GET /api/v1/experience-timeline.json     -> Timeline geometry as JSON
- GET /api/v1/timeseries-history.svg       -> Contributions chart
- GET /api/v1/most-starred.svg             -> Most starred repositories

Every failure is answered with an error SVG card so embedding pages
show the reason instead of a broken image.

Usage:
    uvicorn github_widgets.api.server:app --reload
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional
from urllib.parse import unquote

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..contracts.base import WidgetError
from ..engine import WidgetConfig, WidgetService
from ..render import error_svg
from .mapper import TimelineDTO, map_layout_to_dto

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"
CACHE_OK = "public, max-age=3600"
CACHE_NONE = "no-cache, no-store, must-revalidate"


# =============================================================================
# RESPONSES
# =============================================================================

def svg_response(svg: str, cache_hit: bool) -> Response:
    return Response(
        content=svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"Cache-Control": CACHE_OK, "X-Cache": "HIT" if cache_hit else "MISS"},
    )


def error_response(message: str, status_code: int) -> Response:
    return Response(
        content=error_svg(message, status_code),
        status_code=status_code,
        media_type=SVG_MEDIA_TYPE,
        headers={"Cache-Control": CACHE_NONE},
    )


def _include_dates(value: Optional[str]) -> bool:
    # Anything but the literal "false" keeps dates on
    return value != "false"


def _decode(value: Optional[str]) -> Optional[str]:
    # Embedding pages commonly percent-encode the CSV twice
    return unquote(value) if value else value


# =============================================================================
# APP FACTORY
# =============================================================================

def create_app(
    config: Optional[WidgetConfig] = None,
    service: Optional[WidgetService] = None,
) -> FastAPI:
    """Build the app. Without a service one is created from the environment at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.service is None:
            app.state.service = WidgetService(config or WidgetConfig.from_env())
            logger.info("Widget service initialized")
        yield
        logger.info("Shutting down widget service")

    app = FastAPI(
        title="GitHub Widgets API",
        version="0.1.0",
        description="Animated SVG widgets for GitHub profiles",
        lifespan=lifespan,
    )
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # =========================================================================
    # ERROR MAPPING
    # =========================================================================

    @app.exception_handler(WidgetError)
    async def widget_error_handler(request: Request, exc: WidgetError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.display_message)
        return error_response(exc.display_message, exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            message = f"Endpoint {request.url.path} not found"
        elif exc.status_code == 405:
            message = f"Method {request.method} not allowed"
        else:
            message = str(exc.detail)
        return error_response(message, exc.status_code)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unexpected error on %s %s", request.method, request.url.path)
        return error_response("An unexpected error occurred", 500)

    # =========================================================================
    # ENDPOINTS
    # =========================================================================

    def _service(request: Request) -> WidgetService:
        service = request.app.state.service
        if service is None:
            raise StarletteHTTPException(status_code=503, detail="Service not initialized")
        return service

    @app.get("/health")
    async def health_check(request: Request):
        """System status."""
        stats = _service(request).cache.get_stats()
        return {
            "status": "online",
            "cache": {
                "entries": stats.total_entries,
                "hits": stats.hit_count,
                "misses": stats.miss_count,
                "evictions": stats.eviction_count,
            },
        }

    @app.get("/api/v1/experience-timeline.svg")
    async def experience_timeline_svg(
        request: Request,
        experienceCSV: Optional[str] = Query(None),
        includeDates: Optional[str] = Query(None),
    ):
        logger.info("GET experience-timeline.svg")
        svg, hit = await _service(request).render_experience_timeline(
            _decode(experienceCSV), _include_dates(includeDates)
        )
        return svg_response(svg, hit)

    @app.get("/api/v1/experience-timeline.json", response_model=TimelineDTO)
    async def experience_timeline_json(
        request: Request,
        experienceCSV: Optional[str] = Query(None),
        includeDates: Optional[str] = Query(None),
    ):
        logger.info("GET experience-timeline.json")
        layout = await _service(request).timeline_layout(
            _decode(experienceCSV), _include_dates(includeDates)
        )
        return map_layout_to_dto(layout)

    @app.get("/api/v1/timeseries-history.svg")
    async def timeseries_history_svg(
        request: Request,
        userName: Optional[str] = Query(None),
        range_text: Optional[str] = Query(None, alias="range"),
    ):
        logger.info("GET timeseries-history.svg user=%s range=%s", userName, range_text)
        svg, hit = await _service(request).render_activity(userName, range_text)
        return svg_response(svg, hit)

    @app.get("/api/v1/most-starred.svg")
    async def most_starred_svg(
        request: Request,
        userName: Optional[str] = Query(None),
        top: Optional[str] = Query(None),
        title: Optional[str] = Query(None),
        theme: Optional[str] = Query(None),
        animationDuration: Optional[str] = Query(None),
    ):
        logger.info("GET most-starred.svg user=%s top=%s", userName, top)
        svg, hit = await _service(request).render_most_starred(userName, top, title, theme, animationDuration)
        return svg_response(svg, hit)

    return app


app = create_app()
