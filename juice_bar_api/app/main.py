"""
Main entrypoint for the Juice Bar API.

This module assembles the FastAPI application: logging, middleware,
error handlers, the REST routers, the health check and the GraphQL
endpoint.  ``create_app`` builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn juice_bar_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from .api.endpoints import health
from .api.errors import register_exception_handlers
from .api.router import router as api_router
from .core.config import settings
from .core.events import EventBroker
from .core.logging_config import setup_logging
from .core.store import RecordStore
from .gql import create_graphql_router
from .services import Catalog

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[RecordStore] = None,
    broker: Optional[EventBroker] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecordStore]
        Record store to serve.  When omitted a new store is created,
        holding the demo catalog unless ``SEED_DATA`` is disabled.
    broker : Optional[EventBroker]
        Broker feeding GraphQL subscriptions.  A private one, sized by
        ``SUBSCRIPTION_BUFFER``, is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file)

    if store is None:
        store = RecordStore.seeded() if settings.seed_data else RecordStore()
    if broker is None:
        broker = EventBroker(max_pending=settings.subscription_buffer)
    catalog = Catalog(store, broker)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.catalog = catalog

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(health.router, tags=["health"])
    app.include_router(create_graphql_router(catalog), prefix=settings.graphql_path, tags=["graphql"])

    logger.info(
        "%s %s ready: REST under /api, GraphQL at %s (%d juices, %d orders)",
        settings.project_name,
        settings.api_version,
        settings.graphql_path,
        len(store.juices),
        len(store.orders),
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
