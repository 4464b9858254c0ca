"""
FastAPI application serving the miniblog GraphQL API
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import Settings, settings as default_settings
from .logging import configure_logging, get_logger
from .middleware import RequestLoggingMiddleware
from .schema import create_graphql_router, validate_schema
from .seed import seed_store
from .store import BlogStore

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None, store: Optional[BlogStore] = None
) -> FastAPI:
    """Create the application around a single store shared by all requests."""
    settings = settings or default_settings
    store = store if store is not None else BlogStore()

    configure_logging(debug=settings.debug, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting miniblog API", graphql_path=settings.graphql_path)
        if settings.seed_sample_data:
            seed_store(store)
        yield
        logger.info("Shutting down miniblog API")

    app = FastAPI(
        title="miniblog",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "version": __version__,
            "posts": store.post_count(),
            "users": store.user_count(),
        }

    try:
        validate_schema()
    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise

    app.include_router(
        create_graphql_router(store, path=settings.graphql_path, graphiql=settings.graphiql)
    )
    return app


def main() -> None:
    import uvicorn

    print(f"\n🚀 Starting miniblog on http://{default_settings.host}:{default_settings.port}{default_settings.graphql_path}")
    uvicorn.run(
        "miniblog.app:create_app",
        factory=True,
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.reload,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
