"""Client entry point: resolves configuration and wires the resource services."""
from __future__ import annotations
from typing import Any, Mapping, Optional, Union

import requests

from oktaclient.config.settings import ClientConfig, ConnectionProfile, Settings, resolve_profile
from oktaclient.core.client import OktaClient
from oktaclient.core.exceptions import OktaConfigError
from oktaclient.core.resources import ResourceSet, build_resources


class Okta:
    """Okta API client for one organization.

    Usage:
        with Okta("acme", "api-token", {"preview": True}) as okta:
            user = okta.resources.users.get("00u1abcd")

    Resource methods return decoded JSON (dicts and lists). Wrap results with
    the matching model when needed, e.g. `User.from_dict(user)` from
    `oktaclient.models`.

    With bootstrap enabled (the default) the resource services are built at
    construction; otherwise on first access of `resources`.
    """

    def __init__(
        self,
        org: str,
        api_key: str,
        config: Union[ClientConfig, Mapping[str, Any], None] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            org: Organization subdomain
            api_key: Okta API token
            config: ClientConfig or mapping of options
                (apiVersion, bootstrap, headers, preview, timeout)
            session: Optional requests.Session to send requests through

        Raises:
            OktaConfigError: If any input is invalid
        """
        if config is None:
            config = ClientConfig()
        elif not isinstance(config, ClientConfig):
            if not isinstance(config, Mapping):
                raise OktaConfigError(f"config must be a ClientConfig or mapping, got {type(config).__name__}")
            config = ClientConfig.from_mapping(config)

        self._config = config
        self._profile = resolve_profile(org, api_key, config)
        self._client = OktaClient(self._profile, session=session)
        self._resources: Optional[ResourceSet] = None
        if config.bootstrap:
            self._resources = build_resources(self._client)

    @classmethod
    def from_settings(cls, settings: Settings, session: Optional[requests.Session] = None) -> "Okta":
        """Build a client from environment settings (see load_settings)."""
        return cls(settings.org, settings.api_key, settings.to_config(), session=session)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def profile(self) -> ConnectionProfile:
        return self._profile

    @property
    def base_url(self) -> str:
        return self._profile.base_url

    @property
    def client(self) -> OktaClient:
        """The shared authenticated transport."""
        return self._client

    @property
    def resources(self) -> ResourceSet:
        if self._resources is None:
            self._resources = build_resources(self._client)
        return self._resources

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Okta":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Okta(base_url={self.base_url!r})"
