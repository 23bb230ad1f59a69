"""
Storefront API Application

Demonstration e-commerce REST API: products, categories, users, carts and
orders over an in-memory store, with bearer-token authentication guarding
the user, cart and order routes.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, get_settings
from .core.errors import register_exception_handlers
from .core.middleware import RequestLoggingMiddleware
from .database import DataStore, seed_store
from .models.common import HealthResponse
from .routes import (
    auth_router,
    cart_router,
    categories_router,
    orders_router,
    products_router,
    users_router,
)
from .security.auth import DEFAULT_ACCOUNTS, AuthStore

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DataStore] = None,
    auth_store: Optional[AuthStore] = None,
) -> FastAPI:
    """
    Build an application instance.

    Args:
        settings: Configuration; defaults to the cached environment settings
        store: Data store to serve; a new one (seeded if enabled) when omitted
        auth_store: Account/session storage; seeded with the demo accounts
            when omitted and seeding is enabled
    """
    settings = settings or get_settings()

    if store is None:
        store = DataStore()
        if settings.seed_data:
            seed_store(store)

    if auth_store is None:
        accounts = DEFAULT_ACCOUNTS if settings.seed_data else {}
        auth_store = AuthStore(accounts=accounts, token_ttl_seconds=settings.token_ttl_seconds)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info(f"{settings.app_name} starting up...")
        logger.info(
            f"Store: {len(store.products.products)} products, "
            f"{len(store.users.users)} users, {len(auth_store.accounts)} accounts"
        )
        yield
        logger.info(f"{settings.app_name} shutting down...")

    app = FastAPI(
        title=settings.app_name,
        description="Demonstration e-commerce REST API with an in-memory store",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store
    app.state.auth_store = auth_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app, debug=settings.debug)

    app.include_router(auth_router)
    app.include_router(products_router)
    app.include_router(categories_router)
    app.include_router(users_router)
    app.include_router(cart_router)
    app.include_router(orders_router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint"""
        return HealthResponse(status="ok", service="storefront")

    return app


configure_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
