"""Factory for the set of resource services bound to one client."""
from __future__ import annotations
from dataclasses import dataclass

from .apps import AppService
from .client import OktaClient
from .events import EventService
from .groups import GroupService
from .roles import RoleService
from .schemas import SchemaService
from .sessions import SessionService
from .users import UserService


@dataclass(frozen=True)
class ResourceSet:
    """One service instance per resource family, all sharing the same client."""
    apps: AppService
    users: UserService
    groups: GroupService
    roles: RoleService
    sessions: SessionService
    schemas: SchemaService
    events: EventService


def build_resources(client: OktaClient) -> ResourceSet:
    """Create every resource service around a single OktaClient."""
    return ResourceSet(
        apps=AppService(client),
        users=UserService(client),
        groups=GroupService(client),
        roles=RoleService(client),
        sessions=SessionService(client),
        schemas=SchemaService(client),
        events=EventService(client),
    )
