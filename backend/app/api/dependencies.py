"""Route Dependencies: per-app collaborators resolved from app.state.

Invariants:
    - Settings and route table are bound once in create_app, read-only afterwards
    - Tests swap the route table through app.dependency_overrides, never by patching modules
"""

from fastapi import Request

from app.config import Settings
from app.core.route_protocols import RouteTable


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_route_table(request: Request) -> RouteTable:
    return request.app.state.route_table
