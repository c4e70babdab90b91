"""Configuration module for the Okta client."""
from .settings import (
    ClientConfig,
    ConnectionProfile,
    Settings,
    load_settings,
    resolve_profile,
)

__all__ = ["ClientConfig", "ConnectionProfile", "Settings", "load_settings", "resolve_profile"]
