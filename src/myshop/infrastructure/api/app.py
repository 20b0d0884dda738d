"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from myshop.infrastructure.api.errors import register_exception_handlers
from myshop.infrastructure.api.routes import order_router, product_router
from myshop.infrastructure.logging import configure_logging
from myshop.infrastructure.settings import get_settings


def create_app() -> FastAPI:
    configure_logging(get_settings())

    app = FastAPI(
        title="MyShop API",
        description="Catalog and order management",
        version="0.1.0",
    )
    app.include_router(product_router)
    app.include_router(order_router)
    register_exception_handlers(app)
    return app
