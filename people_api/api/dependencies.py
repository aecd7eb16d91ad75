from fastapi import Request

from people_api.core.config import Settings
from people_api.services.people import PeopleCypherDriver


def get_people_driver(request: Request) -> PeopleCypherDriver:
    return request.app.state.people_driver


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_trace_id(request: Request) -> str:
    return getattr(request.state, "trace_id", "") or ""
