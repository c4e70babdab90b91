"""Okta-specific exceptions for error handling."""
from __future__ import annotations
from typing import Any, Optional


class OktaError(Exception):
    """Base exception for all Okta client operations."""
    pass


class OktaConfigError(OktaError, ValueError):
    """Invalid construction input (options, credentials, enum values).

    Raised locally, before any request reaches the network.
    """
    pass


class OktaAPIError(OktaError):
    """Non-success HTTP response from the Okta API.

    Attributes:
        status_code: HTTP status code
        body: Decoded JSON error body (None when empty or not JSON)
        endpoint: URL of the request that failed
    """

    def __init__(self, status_code: int, body: Any, endpoint: str = ""):
        self.status_code = status_code
        self.body = body
        self.endpoint = endpoint
        super().__init__(self._describe())

    def _field(self, name: str) -> Optional[Any]:
        if isinstance(self.body, dict):
            return self.body.get(name)
        return None

    @property
    def error_code(self) -> Optional[str]:
        """Okta error code, e.g. E0000007."""
        return self._field("errorCode")

    @property
    def error_summary(self) -> Optional[str]:
        return self._field("errorSummary")

    @property
    def error_id(self) -> Optional[str]:
        return self._field("errorId")

    @property
    def error_causes(self) -> list:
        return self._field("errorCauses") or []

    def _describe(self) -> str:
        detail = self.error_summary or (self.body if self.body is not None else "no error body")
        if self.error_code:
            detail = f"{self.error_code}: {detail}"
        return f"[{self.status_code}] {self.endpoint}: {detail}"


class OktaDecodeError(OktaError):
    """Success response whose body is not valid JSON.

    Attributes:
        status_code: HTTP status code
        endpoint: URL of the request
        text: Raw response text
    """

    def __init__(self, status_code: int, endpoint: str, text: str):
        self.status_code = status_code
        self.endpoint = endpoint
        self.text = text
        super().__init__(f"[{status_code}] {endpoint}: response body is not valid JSON")
