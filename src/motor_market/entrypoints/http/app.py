import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from motor_market.entrypoints.http.exception_handlers import register_exception_handlers
from motor_market.entrypoints.http.routes.dealers import router as dealers_router
from motor_market.entrypoints.http.routes.favorites import router as favorites_router
from motor_market.entrypoints.http.routes.health import router as health_router
from motor_market.entrypoints.http.routes.inventory_logs import router as inventory_logs_router
from motor_market.entrypoints.http.routes.pricing import router as pricing_router
from motor_market.entrypoints.http.routes.reviews import router as reviews_router
from motor_market.entrypoints.http.routes.sales import router as sales_router
from motor_market.entrypoints.http.routes.vehicles import router as vehicles_router
from motor_market.infra.db.session import dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # The engine is created lazily by the first request; release its pool on shutdown
    dispose_engine()
    logger.info("Database connections released")


def build_app() -> FastAPI:
    app = FastAPI(
        title="Motor Market API",
        description="""
        Vehicle marketplace API for dealers and buyers.

        ## Features
        - Search vehicles with filters, sorting and pagination
        - Estimate vehicle prices with an itemized breakdown
        - Track inventory status and price changes with an audit log
        - Record sales and aggregate dealer reviews
        - Save favorite vehicles per shopper
        - Compute per-period dealer analytics

        ## Money
        All monetary values are decimal strings (e.g. "25000.00").

        ## Authentication
        Currently no authentication required (development phase).

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(vehicles_router, prefix="/v1")
    app.include_router(pricing_router, prefix="/v1")
    app.include_router(dealers_router, prefix="/v1")
    app.include_router(reviews_router, prefix="/v1")
    app.include_router(sales_router, prefix="/v1")
    app.include_router(inventory_logs_router, prefix="/v1")
    app.include_router(favorites_router, prefix="/v1")

    return app


app = build_app()
