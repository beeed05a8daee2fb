"""
Main entrypoint for the Records API.

This module assembles the FastAPI application: it configures logging,
builds the ``DocumentStore`` for the configured data directory,
registers the envelope exception handlers and includes the resource
routers.  ``create_app`` returns a configured app; the module-level
``app`` is built from environment settings so the service can be run
with::

    uvicorn records_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.errors import register_exception_handlers
from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.storage import DocumentStore
from .services.customer_service import CustomerService
from .services.employee_service import EmployeeService

SERVICES = (EmployeeService, CustomerService)


def build_store(settings: Settings) -> DocumentStore:
    """Create a store knowing every resource document."""
    return DocumentStore(
        settings.get_data_dir(),
        {service.document: service.collection for service in SERVICES},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the environment-derived defaults.

    Returns
    -------
    FastAPI
        A configured application with ``app.state.store`` set.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    store = build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.init_documents:
            for name in store.collections:
                await store.ensure(name)
        logger.info("Serving documents from %s", store.data_dir)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    register_exception_handlers(app)
    app.include_router(router)
    return app


app = create_app()
