import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from people_api.api.middleware.transaction import TransactionIdMiddleware
from people_api.api.routers.health import router as health_router
from people_api.api.routers.people import router as people_router
from people_api.core.config import Settings, load_settings
from people_api.core.logging_config import configure_logging
from people_api.db.neo4j_connector import close_driver, create_driver
from people_api.services.people import PeopleCypherDriver

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, people_driver: PeopleCypherDriver | None = None) -> FastAPI:
    """Build the application.

    With `people_driver` given (tests), no Neo4j driver is created; otherwise one
    is opened on startup and closed on shutdown.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        neo4j_driver = None
        if app.state.people_driver is None:
            neo4j_driver = create_driver(settings)
            app.state.people_driver = PeopleCypherDriver(neo4j_driver, settings.neo4j_database)
        logger.info("%s starting, connecting to %s", settings.app_name, settings.neo4j_uri)
        try:
            yield
        finally:
            close_driver(neo4j_driver)

    app = FastAPI(title="Public People API", version=settings.app_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.people_driver = people_driver

    app.add_middleware(TransactionIdMiddleware)

    app.include_router(health_router)
    app.include_router(people_router)
    return app


app = create_app()
