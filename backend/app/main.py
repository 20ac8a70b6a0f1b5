import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from strawberry.fastapi import GraphQLRouter
from app.config import Settings, get_settings
from app.container import Container
from app.graphql.schema import schema
from app.api.errors import register_exception_handlers
from app.api.wishlists import router as wishlists_router
from app.api.users import router as users_router
from app.logger import setup_logging

logger = logging.getLogger(__name__)


async def get_context(request: Request):
    """Build GraphQL context with the app's container"""
    return {"request": request, "container": request.app.state.container}


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Defaults to the cached environment settings
        container: Pre-built container (tests inject one with their own repositories)
    """
    settings = settings or get_settings()
    setup_logging(settings)
    container = container or Container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events"""
        await container.startup()
        logger.info("%s started with %s storage", settings.app_name, settings.storage_backend)

        yield

        logger.info("Shutting down...")
        await container.shutdown()
        logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        description="Per-user wishlists with REST and GraphQL access",
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # REST API routers
    app.include_router(wishlists_router)
    app.include_router(users_router)

    # GraphQL endpoint
    graphql_app = GraphQLRouter(schema, context_getter=get_context)
    app.include_router(graphql_app, prefix="/graphql")

    @app.get("/")
    async def root():
        return {
            "message": settings.app_name,
            "version": settings.version,
            "endpoints": {
                "swagger": "/docs",
                "openapi": "/openapi.json",
                "graphql": "/graphql",
                "rest": "/api",
            }
        }

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


if __name__ == "__main__":
    import uvicorn

    # Equivalent to: uvicorn app.main:create_app --factory
    settings = get_settings()
    uvicorn.run("app.main:create_app", factory=True, host=settings.host, port=settings.port)
