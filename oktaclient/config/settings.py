"""Client options, connection profile resolution and environment settings."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from oktaclient.core.exceptions import OktaConfigError

logger = logging.getLogger(__name__)

PRODUCTION_DOMAIN = "okta.com"
PREVIEW_DOMAIN = "oktapreview.com"

# Option keys accepted by ClientConfig.from_mapping -> dataclass field
_OPTION_KEYS = {
    "apiVersion": "api_version",
    "bootstrap": "bootstrap",
    "useAutoResourceBinding": "bootstrap",
    "headers": "headers",
    "preview": "preview",
    "timeout": "timeout",
}


def _validate_headers(headers: Any) -> Mapping[str, str]:
    if not isinstance(headers, Mapping):
        raise OktaConfigError(f"headers must be a mapping, got {type(headers).__name__}")
    for name, value in headers.items():
        if not isinstance(name, str) or not isinstance(value, str):
            raise OktaConfigError(f"Invalid header {name!r}: names and values must be strings")
    return MappingProxyType(dict(headers))


@dataclass(frozen=True)
class ClientConfig:
    """Caller options for an Okta client.

    Attributes:
        api_version: API version path segment (default: "v1")
        bootstrap: Build resource services eagerly at construction (default: True)
        headers: Extra request headers, merged over the built-in ones
        preview: Target the oktapreview.com host instead of okta.com
        timeout: Request timeout in seconds; None keeps the requests default
    """
    api_version: str = "v1"
    bootstrap: bool = True
    headers: Mapping[str, str] = field(default_factory=dict)
    preview: bool = False
    timeout: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.api_version, str) or not self.api_version.strip():
            raise OktaConfigError("apiVersion must be a non-empty string")
        if "/" in self.api_version:
            raise OktaConfigError(f"apiVersion must be a single path segment, got {self.api_version!r}")
        if not isinstance(self.bootstrap, bool):
            raise OktaConfigError("bootstrap must be a boolean")
        if not isinstance(self.preview, bool):
            raise OktaConfigError("preview must be a boolean")
        if self.timeout is not None:
            if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
                raise OktaConfigError("timeout must be a positive number or None")
        object.__setattr__(self, "headers", _validate_headers(self.headers))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "ClientConfig":
        """Build a config from camelCase option keys (apiVersion, preview, ...)."""
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            if key not in _OPTION_KEYS:
                raise OktaConfigError(f"Unknown client option '{key}'")
            kwargs[_OPTION_KEYS[key]] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class ConnectionProfile:
    """Resolved, immutable connection settings for one Okta organization."""
    org: str
    api_key: str = field(repr=False)
    api_version: str = "v1"
    preview: bool = False
    headers: Mapping[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "headers", _validate_headers(self.headers))

    @property
    def domain(self) -> str:
        return PREVIEW_DOMAIN if self.preview else PRODUCTION_DOMAIN

    @property
    def host(self) -> str:
        return f"{self.org}.{self.domain}"

    @property
    def base_url(self) -> str:
        return f"https://{self.host}/api/{self.api_version}/"


def resolve_profile(
    org: str,
    api_key: str,
    config: Union[ClientConfig, Mapping[str, Any], None] = None,
) -> ConnectionProfile:
    """Merge caller options with defaults into a ConnectionProfile.

    Args:
        org: Organization subdomain (e.g. "acme" for acme.okta.com)
        api_key: Okta API token
        config: ClientConfig, mapping of camelCase options, or None for defaults

    Returns:
        Immutable connection profile

    Raises:
        OktaConfigError: If any input is missing or invalid
    """
    if not isinstance(org, str) or not org.strip():
        raise OktaConfigError("Organization subdomain is required")
    if "." in org or "/" in org:
        raise OktaConfigError(f"Organization must be a bare subdomain, got {org!r}")
    if not isinstance(api_key, str) or not api_key.strip():
        raise OktaConfigError("API key is required")

    if config is None:
        config = ClientConfig()
    elif not isinstance(config, ClientConfig):
        if not isinstance(config, Mapping):
            raise OktaConfigError(f"config must be a ClientConfig or mapping, got {type(config).__name__}")
        config = ClientConfig.from_mapping(config)

    return ConnectionProfile(
        org=org.strip(),
        api_key=api_key.strip(),
        api_version=config.api_version,
        preview=config.preview,
        headers=config.headers,
        timeout=config.timeout,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Environment settings
# ─────────────────────────────────────────────────────────────────────────────
def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.debug("Loaded %s from /run/secrets", secret_name)
                return secret_value
        except OSError as e:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, e)

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.debug("Loaded %s from environment", env_var)
            return secret_value

    return None


def _env_flag(var_name: str, default: bool = False) -> bool:
    value = os.environ.get(var_name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Okta connection settings loaded from the environment."""
    org: str
    api_key: str = field(repr=False)
    api_version: str = "v1"
    preview: bool = False
    timeout: Optional[float] = None

    def to_config(self) -> ClientConfig:
        return ClientConfig(api_version=self.api_version, preview=self.preview, timeout=self.timeout)

    def to_profile(self) -> ConnectionProfile:
        return resolve_profile(self.org, self.api_key, self.to_config())


def load_settings(org: Optional[str] = None, api_key: Optional[str] = None) -> Settings:
    """Load Okta settings from environment variables and /run/secrets.

    Args:
        org: Explicit organization, used instead of OKTA_ORG
        api_key: Explicit API token, used instead of the secret file and OKTA_API_KEY

    Variables:
        OKTA_ORG: Organization subdomain (required)
        OKTA_API_KEY: API token (required; /run/secrets/okta_api_key preferred)
        OKTA_API_VERSION: API version (default: v1)
        OKTA_PREVIEW: "true" to target oktapreview.com
        OKTA_TIMEOUT: Request timeout in seconds

    Raises:
        OktaConfigError: If a required value is missing or malformed
    """
    org = (org or os.environ.get("OKTA_ORG", "")).strip()
    if not org:
        raise OktaConfigError("Environment variable OKTA_ORG is required.")

    api_key = api_key or _load_secret_from_file("okta_api_key", "OKTA_API_KEY")
    if not api_key:
        raise OktaConfigError(
            "OKTA_API_KEY not found. Provide it via /run/secrets/okta_api_key or the environment."
        )

    timeout: Optional[float] = None
    raw_timeout = os.environ.get("OKTA_TIMEOUT")
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise OktaConfigError(f"OKTA_TIMEOUT must be a number, got {raw_timeout!r}") from None

    return Settings(
        org=org,
        api_key=api_key,
        api_version=os.environ.get("OKTA_API_VERSION", "v1"),
        preview=_env_flag("OKTA_PREVIEW"),
        timeout=timeout,
    )


__all__ = [
    "ClientConfig",
    "ConnectionProfile",
    "Settings",
    "resolve_profile",
    "load_settings",
    "PRODUCTION_DOMAIN",
    "PREVIEW_DOMAIN",
]
