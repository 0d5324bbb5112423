"""FastAPI application factory for the tdtxt REST API."""

from fastapi import APIRouter, FastAPI

from .task_routes import register_task_routes


def create_app() -> FastAPI:
    """Build and return the FastAPI app."""
    app = FastAPI(title="tdtxt", docs_url="/api/docs", openapi_url="/api/openapi.json")

    api = APIRouter(prefix="/api")
    register_task_routes(api)
    app.include_router(api)

    return app
