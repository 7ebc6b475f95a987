from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from safety_devkit.observability import (
    configure_logging,
    configure_otel,
    configure_probe_access_log_filter,
)

from safety_api.dependencies import get_settings
from safety_api.errors import ApiError
from safety_api.middleware import ObservabilityMiddleware
from safety_api.observability import PrometheusMetricsCollector, RecentRequestsCollector
from safety_api.response import error_response, success_response
from safety_api.routers.geo import router as geo_router
from safety_api.routers.guardian import router as guardian_router
from safety_api.routers.route_safety import router as route_safety_router


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="HerSafety API", version="0.1.0")
    configure_logging(settings.LOG_LEVEL)
    configure_otel(service_name=settings.SERVICE_NAME)
    configure_probe_access_log_filter()
    app.state.api_metrics = RecentRequestsCollector()
    app.state.prom_metrics = PrometheusMetricsCollector()
    app.add_middleware(
        ObservabilityMiddleware,
        collectors=[app.state.api_metrics, app.state.prom_metrics],
    )
    app.include_router(geo_router)
    app.include_router(route_safety_router)
    app.include_router(guardian_router)

    @app.get("/healthz")
    async def healthz() -> dict:
        return success_response({"status": "ok"}, meta={})

    @app.get("/readyz")
    async def readyz() -> dict:
        return success_response({"status": "ready"}, meta={})

    @app.get("/metrics")
    async def metrics() -> Response:
        payload = app.state.prom_metrics.render()
        return Response(content=payload, media_type="text/plain; version=0.0.4")

    @app.exception_handler(ApiError)
    async def handle_api_error(_: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=error_response(exc.code, exc.message))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        message = "; ".join(err["msg"] for err in exc.errors())
        return JSONResponse(
            status_code=422,
            content=error_response("VALIDATION_ERROR", message),
        )

    return app


app = create_app()
