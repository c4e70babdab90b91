"""Low-level HTTP client for the Okta API.

Owns the session, base URL and authentication headers shared by every
resource service.
"""
from __future__ import annotations
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

import requests
from requests.auth import AuthBase
from requests.structures import CaseInsensitiveDict

from .response import normalize

if TYPE_CHECKING:
    from oktaclient.config.settings import ConnectionProfile

logger = logging.getLogger(__name__)

AUTH_SCHEME = "SSWS"
JSON_CONTENT_TYPE = "application/json"


def _prepare_params(params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Drop None values and render booleans the way the API expects them."""
    if not params:
        return None
    prepared: Dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        prepared[key] = value
    return prepared or None


def _without_authorization(headers: Mapping[str, str]) -> Dict[str, str]:
    return {k: v for k, v in headers.items() if k.lower() != "authorization"}


def to_payload(value: Any) -> Any:
    """Convert a model (anything with to_dict) into a JSON body; pass mappings through."""
    if value is None:
        return None
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Mapping):
        return dict(value)
    return value


class SSWSAuth(AuthBase):
    """Attach the Okta API token to a request.

    Passed per request, so it wins over session auth and netrc credentials.
    """

    def __init__(self, api_key: str):
        self._api_key = api_key

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers["Authorization"] = f"{AUTH_SCHEME} {self._api_key}"
        return r


class OktaClient:
    """HTTP client bound to one Okta organization and API version.

    Features:
    - Single requests.Session reused across all calls
    - SSWS token authentication owned by the client, applied per request
      (a session shared between clients is never modified)
    - Raw responses are returned without raising on HTTP errors;
      issue() adds normalization on top

    Usage:
        client = OktaClient(resolve_profile("acme", "api-token"))
        resp = client.get("users/me")
        user = client.issue("GET", "users/me")
    """

    def __init__(self, profile: "ConnectionProfile", session: Optional[requests.Session] = None):
        """Initialize Okta client.

        Args:
            profile: Resolved connection profile
            session: Optional pre-built session (defaults to a new requests.Session)
        """
        self._profile = profile
        self._session = session or requests.Session()
        self._auth = SSWSAuth(profile.api_key)
        self._headers = CaseInsensitiveDict({
            "Accept": JSON_CONTENT_TYPE,
            "Content-Type": JSON_CONTENT_TYPE,
        })
        # Caller headers win, except Authorization which is always ours
        self._headers.update(_without_authorization(profile.headers))

    @property
    def base_url(self) -> str:
        return self._profile.base_url

    @property
    def timeout(self) -> Optional[float]:
        return self._profile.timeout

    @property
    def default_headers(self) -> Mapping[str, str]:
        """Read-only snapshot of the headers sent with every request."""
        headers = dict(self._headers)
        headers["Authorization"] = f"{AUTH_SCHEME} {self._profile.api_key}"
        return MappingProxyType(headers)

    def url_for(self, path: str) -> str:
        """Join a relative API path onto the base URL."""
        return f"{self.base_url}{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Execute a request and return the raw response.

        Args:
            method: HTTP verb
            path: API path relative to the base URL (e.g. "users/00u1")
            params: Query parameters; None values are omitted
            json: JSON-serializable request body
            headers: Per-request headers (Authorization cannot be overridden)

        Returns:
            Response object, whatever its status code
        """
        url = self.url_for(path)
        merged = self._headers.copy()
        if headers:
            merged.update(_without_authorization(headers))

        resp = self._session.request(
            method.upper(),
            url,
            params=_prepare_params(params),
            json=json,
            headers=merged,
            auth=self._auth,
            timeout=self.timeout,
        )
        logger.debug("%s %s -> %s", method.upper(), url, resp.status_code)
        return resp

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None, **kwargs) -> requests.Response:
        """Execute GET request."""
        return self.request("GET", path, params=params, **kwargs)

    def post(self, path: str, json: Any = None, params: Optional[Mapping[str, Any]] = None, **kwargs) -> requests.Response:
        """Execute POST request."""
        return self.request("POST", path, params=params, json=json, **kwargs)

    def put(self, path: str, json: Any = None, params: Optional[Mapping[str, Any]] = None, **kwargs) -> requests.Response:
        """Execute PUT request."""
        return self.request("PUT", path, params=params, json=json, **kwargs)

    def delete(self, path: str, params: Optional[Mapping[str, Any]] = None, **kwargs) -> requests.Response:
        """Execute DELETE request."""
        return self.request("DELETE", path, params=params, **kwargs)

    def issue(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        as_object: bool = False,
    ) -> Any:
        """Execute a request and normalize its response.

        Returns:
            Decoded JSON value ({} for an empty success body)

        Raises:
            OktaAPIError: On any status outside 200-206
            OktaDecodeError: On a success response that is not JSON
        """
        resp = self.request(method, path, params=query, json=body)
        return normalize(resp, as_object=as_object)

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    def __enter__(self) -> "OktaClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
