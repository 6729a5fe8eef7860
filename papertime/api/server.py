"""FastAPI server exposing the recommendation engine.

Provides HTTP endpoints for:
- POST /api/recommend - Filter and rank the current paper pool
- POST /api/filter - Filter the pool without ranking
- /live - Liveness probe
- /metrics - Prometheus metrics in text format

Usage:
    from papertime.api.server import create_app
    app = create_app(RecommendationService(JsonFilePaperSource("papers.json")))
"""

from typing import Any, Dict

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from papertime.models.config import AppConfig
from papertime.models.filters import FilterCriteria
from papertime.models.recommendation import RecommendRequest
from papertime.observability.context import correlation_id_context
from papertime.observability.logging import bind_context, clear_context, get_logger
from papertime.observability.metrics import get_metrics_content_type, get_metrics_text
from papertime.services.recommendation_service import RecommendationService
from papertime.services.sources.json_file import JsonFilePaperSource

logger = get_logger("api")

REQUEST_ID_HEADER = "X-Request-ID"


def create_app(
    service: RecommendationService,
    title: str = "PaperTime API",
    version: str = "0.1.0",
) -> FastAPI:
    """Create FastAPI application bound to a recommendation service.

    Args:
        service: Service answering requests
        title: API title
        version: API version

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        version=version,
        description="arXiv paper recommendations and filtering",
    )

    @app.middleware("http")
    async def correlation_middleware(request: Request, call_next):
        with correlation_id_context(request.headers.get(REQUEST_ID_HEADER)) as corr_id:
            clear_context()
            bind_context(method=request.method, path=request.url.path)
            try:
                response = await call_next(request)
            finally:
                clear_context()
        response.headers[REQUEST_ID_HEADER] = corr_id
        return response

    @app.post(
        "/api/recommend",
        response_model=None,
        summary="Recommend papers",
        responses={
            200: {"description": "Ranked papers, or empty list with message"},
            500: {"description": "Recommendation failed"},
        },
    )
    def recommend(body: RecommendRequest) -> Response:
        """Filter the pool and rank it against the liked papers."""
        try:
            result = service.recommend(body)
        except Exception:
            logger.exception("recommendation_failed")
            return JSONResponse(
                content={"error": "Failed to generate recommendations"},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return JSONResponse(content=result.to_dict(), status_code=status.HTTP_200_OK)

    @app.post("/api/filter", response_model=None, summary="Filter papers")
    def filter_papers(criteria: FilterCriteria) -> Response:
        """Apply filters only; papers keep source order."""
        try:
            papers = service.filter(criteria)
        except Exception:
            logger.exception("filter_failed")
            return JSONResponse(
                content={"error": "Failed to load papers"},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return JSONResponse(content={"papers": [p.to_dict() for p in papers]})

    @app.get("/live", response_model=None, summary="Liveness probe")
    async def liveness_probe() -> Dict[str, Any]:
        return {"alive": True, "message": "Service is alive"}

    @app.get(
        "/metrics",
        response_class=PlainTextResponse,
        summary="Prometheus metrics",
    )
    async def prometheus_metrics() -> Response:
        return Response(content=get_metrics_text(), media_type=get_metrics_content_type())

    @app.get("/", response_model=None, summary="Root endpoint")
    async def root() -> Dict[str, Any]:
        return {
            "name": title,
            "version": version,
            "source": service.source.name,
            "endpoints": {
                "recommend": "/api/recommend",
                "filter": "/api/filter",
                "live": "/live",
                "metrics": "/metrics",
            },
        }

    return app


def create_app_from_config(config: AppConfig) -> FastAPI:
    """Build the app from configuration; requires ``settings.papers_path``."""
    if not config.settings.papers_path:
        raise ValueError("settings.papers_path must point to a papers JSON file")

    service = RecommendationService(
        JsonFilePaperSource(config.settings.papers_path),
        ranking_config=config.ranking,
        settings=config.settings,
    )
    return create_app(service)


def run_server(config: AppConfig) -> None:  # pragma: no cover
    """Run the API server (blocking)."""
    import uvicorn

    app = create_app_from_config(config)
    logger.info(
        "api_server_starting",
        host=config.settings.host,
        port=config.settings.port,
    )
    uvicorn.run(
        app,
        host=config.settings.host,
        port=config.settings.port,
        log_level=config.settings.log_level.lower(),
    )
