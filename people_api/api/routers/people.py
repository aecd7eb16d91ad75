import logging
import re
import uuid as uuidlib

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from people_api.api.dependencies import get_people_driver, get_settings, get_trace_id
from people_api.core.config import Settings
from people_api.core.exceptions import DataAccessError, DataIntegrityError
from people_api.services.people import PeopleCypherDriver, redirect_location, resolve_redirect

logger = logging.getLogger(__name__)

router = APIRouter(tags=["people"])

BAD_REQUEST_MSG = "Invalid or missing UUID."
PERSON_NOT_FOUND_MSG = "Person not found."
REDIRECTED_PERSON_MSG = "Person %s is concorded to %s."

# uuid.UUID alone accepts stray hyphens and unbalanced braces.
UUID_PATTERN = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


def _message(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


@router.get("/ping", response_class=PlainTextResponse)
@router.get("/__ping", response_class=PlainTextResponse)
def ping():
    return "pong"


@router.get("/people/{uuid}")
def api_get_person(
    uuid: str,
    request: Request,
    driver: PeopleCypherDriver = Depends(get_people_driver),
    settings: Settings = Depends(get_settings),
    trace_id: str = Depends(get_trace_id),
):
    if not UUID_PATTERN.fullmatch(uuid):
        return _message(400, BAD_REQUEST_MSG)
    requested = uuidlib.UUID(uuid)

    try:
        person = driver.read(str(requested), trace_id)
    except DataIntegrityError as exc:
        logger.error("Invariant violated for uuid %s (tid=%s): %s", requested, trace_id, exc)
        return _message(500, exc.message)
    except DataAccessError as exc:
        return _message(500, exc.message)

    if person is None:
        return _message(404, PERSON_NOT_FOUND_MSG)

    decision = resolve_redirect(person, requested)
    if decision.redirect:
        target = redirect_location(request.url.path, uuid, decision.canonical_uuid)
        if request.url.query:
            target = f"{target}?{request.url.query}"
        return _message(
            301,
            REDIRECTED_PERSON_MSG % (requested, decision.canonical_uuid),
            headers={"Location": target},
        )

    return JSONResponse(
        status_code=200,
        content=person.to_public(),
        headers={"Cache-Control": settings.cache_control_header},
    )
