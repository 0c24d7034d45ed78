"""
Main FastAPI application for the Phonebook backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..directory.client import DirectoryClient
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..people.seed import create_store
from ..people.store import PersonStore

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting Phonebook API...",
        people=app.state.store.count(),
        directory_url=app.state.directory.url,
    )

    yield

    logger.info("Shutting down Phonebook API...")


def create_app(
    store: PersonStore | None = None,
    directory: DirectoryClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Record store owned by this app (a seeded store by default)
        directory: Directory client (built from settings by default)
    """

    app = FastAPI(
        title="Phonebook API",
        description="GraphQL directory of people",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.store = store if store is not None else create_store()
    app.state.directory = directory or DirectoryClient(
        settings.directory_url, timeout=settings.directory_timeout
    )

    from ..graphql.schema import GRAPHQL_PATH, create_graphql_router, validate_schema

    app.add_middleware(LoggingContextMiddleware, graphql_path=GRAPHQL_PATH)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        # Fail fast: the server should not start with a broken schema
        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(graphiql=settings.debug), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=GRAPHQL_PATH)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "phonebook.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
