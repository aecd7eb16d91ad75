import logging

from neo4j import Driver, GraphDatabase

from people_api.core.config import Settings

logger = logging.getLogger(__name__)


def create_driver(settings: Settings) -> Driver:
    """Create a pooled Neo4j driver from settings.

    The driver connects lazily; nothing is sent to the server until the first
    session is used. Without NEO4J_PASSWORD the driver connects unauthenticated.
    """
    auth = None
    if settings.neo4j_password:
        auth = (settings.neo4j_user, settings.neo4j_password)
    try:
        driver = GraphDatabase.driver(
            settings.neo4j_uri,
            auth=auth,
            max_connection_pool_size=settings.neo4j_max_pool_size,
        )
    except Exception as exc:
        raise RuntimeError(
            f"Failed to create Neo4j driver for URI '{settings.neo4j_uri}'. "
            f"Check NEO4J_URI and the credentials.\nError: {exc}"
        ) from exc
    logger.info("Neo4j driver created for %s", settings.neo4j_uri)
    return driver


def close_driver(driver) -> None:
    if driver is not None:
        driver.close()
        logger.info("Neo4j driver closed")
