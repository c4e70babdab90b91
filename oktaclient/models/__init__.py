"""Okta resource data models."""
from .user import (
    PROVIDER_TYPES,
    Credentials,
    Password,
    Profile,
    Provider,
    RecoveryQuestion,
    User,
)
from .entities import (
    Application,
    Event,
    Group,
    GroupProfile,
    Role,
    Schema,
    Session,
)

__all__ = [
    "PROVIDER_TYPES",
    "Credentials",
    "Password",
    "Profile",
    "Provider",
    "RecoveryQuestion",
    "User",
    "Application",
    "Event",
    "Group",
    "GroupProfile",
    "Role",
    "Schema",
    "Session",
]
