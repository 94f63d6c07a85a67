from typing import Annotated
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from dishka import AsyncContainer, FromComponent
from dishka.integrations.fastapi import inject, setup_dishka

from core.container import container
from core.environment.config import Settings
from core.exception_handler import (
    validation_exception_handler,
    http_exception_handler,
    starlette_exception_handler,
    custom_exception_handler
)
from core.exceptions import BaseCustomException
from contract_info.categories import CATEGORIES
from contract_info.router import router as contract_info_router

APP_NAME = "Project Contract Info API"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Aggregated on-chain information about project contracts"


def create_app(container: AsyncContainer) -> FastAPI:
    """
    Build the application around a dependency container.

    Parameters
    ----------
    container : AsyncContainer
        Dishka container resolving application dependencies

    Returns
    -------
    FastAPI
        Configured application
    """
    app = FastAPI(
        title=APP_NAME,
        version=APP_VERSION,
        description=APP_DESCRIPTION,
    )

    setup_dishka(container, app)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(StarletteHTTPException, starlette_exception_handler)
    app.add_exception_handler(BaseCustomException, custom_exception_handler)
    app.add_exception_handler(Exception, custom_exception_handler)

    app.include_router(contract_info_router)

    @app.get("/")
    @inject
    async def root(settings: Annotated[Settings, FromComponent("environment")]):
        """
        Root endpoint.

        Parameters
        ----------
        settings : Settings
            Application settings

        Returns
        -------
        dict
            Application information
        """
        return {
            "name": APP_NAME,
            "version": APP_VERSION,
            "description": APP_DESCRIPTION,
            "endpoints": {
                "project_contract": "/project-contract",
                "docs": "/docs"
            },
            "contract_types": [category.display_name for category in CATEGORIES.values()],
            "networks": list(settings.rpc_urls)
        }

    @app.get("/health")
    async def health():
        """
        Basic health check endpoint.

        Returns
        -------
        dict
            Health status
        """
        return {"status": "healthy", "version": APP_VERSION}

    return app


app = create_app(container)
