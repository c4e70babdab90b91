"""Python client for the Okta identity management API."""
from .core import (
    OktaAPIError,
    OktaConfigError,
    OktaDecodeError,
    OktaError,
    OktaClient,
    ResourceSet,
    build_resources,
    normalize,
)
from .config import ClientConfig, ConnectionProfile, load_settings, resolve_profile
from .okta import Okta

__all__ = [
    "Okta",
    "OktaClient",
    "ClientConfig",
    "ConnectionProfile",
    "ResourceSet",
    "build_resources",
    "load_settings",
    "normalize",
    "resolve_profile",
    "OktaError",
    "OktaAPIError",
    "OktaConfigError",
    "OktaDecodeError",
]
