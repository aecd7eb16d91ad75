from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from people_api.api.dependencies import get_people_driver, get_settings
from people_api.core.config import Settings
from people_api.core.exceptions import DataAccessError
from people_api.services.people import PeopleCypherDriver

router = APIRouter(tags=["health"])


def _neo4j_check(driver: PeopleCypherDriver) -> dict:
    """FT-style health check entry for Neo4j connectivity."""
    try:
        driver.check_connectivity()
        ok, output = True, "Connectivity to neo4j is ok"
    except DataAccessError as exc:
        ok, output = False, str(exc)
    return {
        "name": "Check connectivity to Neo4j",
        "ok": ok,
        "severity": 1,
        "businessImpact": "Unable to respond to Public People api requests",
        "technicalSummary": "Cannot connect to Neo4j. If this check fails, check that the Neo4j instance is up and running.",
        "panicGuide": "Check NEO4J_URI for this service and that the Neo4j cluster is reachable.",
        "checkOutput": output,
        "lastUpdated": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }


@router.get("/__health")
def api_health(
    driver: PeopleCypherDriver = Depends(get_people_driver),
    settings: Settings = Depends(get_settings),
):
    check = _neo4j_check(driver)
    return {
        "schemaVersion": 1,
        "name": settings.app_name,
        "description": "Checks for accessing neo4j",
        "checks": [check],
        "ok": check["ok"],
    }


@router.get("/__gtg", response_class=PlainTextResponse)
def api_good_to_go(driver: PeopleCypherDriver = Depends(get_people_driver)):
    """503 when the store is unreachable, so a load balancer can take the node out."""
    try:
        driver.check_connectivity()
    except DataAccessError as exc:
        return PlainTextResponse(str(exc), status_code=503)
    return "OK"


@router.get("/__build-info")
@router.get("/build-info")
def api_build_info(settings: Settings = Depends(get_settings)):
    return {"appName": settings.app_name, "version": settings.app_version}
