"""FastAPI application exposing the costing engine over HTTP."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from asset_costing.config.settings import Settings
from asset_costing.errors import (
    CalculatorNotFoundError,
    PreconditionError,
    RateLookupError,
    RequestValidationError,
)
from asset_costing.registry import CalculatorRegistry, build_default_registry
from asset_costing.schemas import (
    AssetCostResponseModel,
    AssetNamesResponse,
    CostRequestModel,
    HealthResponse,
)

logger = logging.getLogger(__name__)


def create_app(
    registry: Optional[CalculatorRegistry] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the app around a registry constructed once at startup."""
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        docs_url="/api/docs" if settings.docs_enabled else None,
        redoc_url=None,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.registry = registry if registry is not None else build_default_registry()
    app.state.started_at = time.monotonic()
    logger.info(
        f"Registered calculators: {app.state.registry.get_available_asset_names()}"
    )

    @app.exception_handler(RequestValidationError)
    @app.exception_handler(PreconditionError)
    @app.exception_handler(RateLookupError)
    async def bad_request(request: Request, exc: Exception) -> JSONResponse:
        logger.warning(f"Rejected {request.url.path}: {exc}")
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(CalculatorNotFoundError)
    async def not_found(request: Request, exc: CalculatorNotFoundError) -> JSONResponse:
        logger.warning(f"Rejected {request.url.path}: {exc}")
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.post("/costing", response_model=AssetCostResponseModel)
    async def calculate_asset_cost(body: CostRequestModel, request: Request):
        """Calculate build and run cost for an asset."""
        registry: CalculatorRegistry = request.app.state.registry
        response = registry.calculate_asset_cost(body.to_domain())
        return AssetCostResponseModel.from_domain(response)

    @app.get("/costing/asset-names", response_model=AssetNamesResponse)
    async def get_asset_names(request: Request):
        """List the asset names that have a calculator."""
        registry: CalculatorRegistry = request.app.state.registry
        return AssetNamesResponse(asset_names=registry.get_available_asset_names())

    @app.get("/")
    async def hello():
        return {"message": "Hello World!"}

    @app.get("/health", response_model=HealthResponse)
    async def health(request: Request):
        """Health check endpoint."""
        return HealthResponse(
            status="ok",
            uptime=time.monotonic() - request.app.state.started_at,
            timestamp=datetime.now(tz=timezone.utc),
        )

    return app


app = create_app()


def serve(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Run the API with uvicorn."""
    settings = Settings()
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
