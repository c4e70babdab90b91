"""Okta API client library.

This package provides the request dispatch layer and the resource services.

Architecture:
- client.py: HTTP client with base URL, SSWS authentication and dispatch
- response.py: Status-code based response normalization
- exceptions.py: Typed exceptions for error handling
- users.py, apps.py, groups.py, roles.py, sessions.py, schemas.py, events.py:
  one service per resource family
- resources.py: Factory building the full set of services

Usage:
    from oktaclient.config import resolve_profile
    from oktaclient.core import OktaClient, build_resources

    client = OktaClient(resolve_profile("acme", "api-token"))
    resources = build_resources(client)
    user = resources.users.get("00u1abcd")
"""
from .exceptions import (
    OktaError,
    OktaConfigError,
    OktaAPIError,
    OktaDecodeError,
)
from .response import (
    SUCCESS_STATUS_CODES,
    NormalizedResult,
    classify,
    is_success,
    normalize,
)
from .client import OktaClient, to_payload
from .users import UserService
from .apps import AppService
from .groups import GroupService
from .roles import RoleService
from .sessions import SessionService
from .schemas import SchemaService
from .events import EventService
from .resources import ResourceSet, build_resources

__all__ = [
    # Exceptions
    "OktaError",
    "OktaConfigError",
    "OktaAPIError",
    "OktaDecodeError",

    # Normalization
    "SUCCESS_STATUS_CODES",
    "NormalizedResult",
    "classify",
    "is_success",
    "normalize",

    # Client
    "OktaClient",
    "to_payload",

    # Services
    "UserService",
    "AppService",
    "GroupService",
    "RoleService",
    "SessionService",
    "SchemaService",
    "EventService",
    "ResourceSet",
    "build_resources",
]
