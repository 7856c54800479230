"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from lexpipe import __version__
from lexpipe.api import router
from lexpipe.data.cache.cache_memory import InMemoryCache
from lexpipe.data.loaders.loader_package import PackageResourceLoader
from lexpipe.data.registry import ResourceRegistry
from lexpipe.morphology import LemmatizerFactory
from lexpipe.settings import Settings
from lexpipe.tokenization import TokenizerFactory

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan handler: load resources once and build the frozen components."""
    logger.info("🚀 Starting lexpipe lifespan...")

    settings: Settings = app.state.settings
    registry: ResourceRegistry = app.state.resource_registry

    try:
        await registry.hydrate_cache()

        logger.info("🔄 Initializing tokenizer...")
        app.state.tokenizer = await TokenizerFactory.create(registry, settings.tokenizer_config())

        logger.info("🔄 Initializing lemmatizer...")
        app.state.lemmatizer = await LemmatizerFactory.create(registry)

    except Exception as e:
        logger.error(f"❌ Startup initialization failed: {e}")
        raise

    logger.info("✅ All systems operational")

    yield

    logger.info("🛑 Shutting down lexpipe...")


def create_app(settings=None) -> FastAPI:
    """Create and configure FastAPI application."""

    # Use provided settings or get default
    if settings is None:
        from lexpipe.settings import get_settings
        settings = get_settings()

    setup_logging(settings)

    # Construct ResourceRegistry
    cache = InMemoryCache()
    loader = PackageResourceLoader(settings.resource_dir)
    resource_registry = ResourceRegistry(loader=loader, cache=cache, ttl=settings.resource_cache_ttl)

    app = FastAPI(
        title="lexpipe - English tokenizer and lemmatizer",
        version=__version__,
        description=f"Running in {settings.app_env} mode",
        lifespan=lifespan
    )

    # Store dependencies in app state
    app.state.settings = settings
    app.state.resource_registry = resource_registry
    app.state.tokenizer = None
    app.state.lemmatizer = None

    app.include_router(router)

    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint."""
        state = request.app.state
        resources = await state.resource_registry.test_health()
        ready = state.tokenizer is not None and state.lemmatizer is not None
        return {
            "status": "healthy" if ready and resources["overall"] else "starting",
            "service": "lexpipe",
            "tokenizer": state.tokenizer is not None,
            "lemmatizer": state.lemmatizer is not None,
            "resources": resources,
        }

    return app


if __name__ == "__main__":
    import uvicorn
    from lexpipe.settings import get_settings

    settings = get_settings()
    uvicorn.run(
        "lexpipe.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower()
    )
