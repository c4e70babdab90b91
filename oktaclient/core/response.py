"""Classify Okta API responses into decoded values or structured errors."""
from __future__ import annotations
import json
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any, Optional

import requests

from .exceptions import OktaAPIError, OktaDecodeError

SUCCESS_STATUS_CODES = frozenset({200, 201, 202, 203, 204, 205, 206})


def is_success(status_code: int) -> bool:
    """Return True if the status code belongs to the success set."""
    return status_code in SUCCESS_STATUS_CODES


@dataclass(frozen=True)
class NormalizedResult:
    """Outcome of one API call: exactly one of value/error is set."""
    status_code: int
    value: Any = None
    error: Optional[OktaAPIError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the decoded value, or raise the structured error."""
        if self.error is not None:
            raise self.error
        return self.value


def _decode(text: str, as_object: bool) -> Any:
    if as_object:
        return json.loads(text, object_hook=lambda d: SimpleNamespace(**d))
    return json.loads(text)


def _decode_error_body(resp: requests.Response) -> Any:
    # Error bodies are always decoded as mappings; unparseable bodies become None
    if not resp.content:
        return None
    try:
        return json.loads(resp.text)
    except ValueError:
        return None


def classify(resp: requests.Response, as_object: bool = False) -> NormalizedResult:
    """Classify a response strictly by status code.

    Args:
        resp: Raw response returned by OktaClient.request
        as_object: Decode success bodies into SimpleNamespace objects
            instead of dicts

    Returns:
        NormalizedResult carrying either the decoded value or an OktaAPIError

    Raises:
        OktaDecodeError: If a success response has a non-JSON body
    """
    if not is_success(resp.status_code):
        error = OktaAPIError(resp.status_code, _decode_error_body(resp), resp.url or "")
        return NormalizedResult(status_code=resp.status_code, error=error)

    if not resp.content:
        value = SimpleNamespace() if as_object else {}
        return NormalizedResult(status_code=resp.status_code, value=value)

    try:
        value = _decode(resp.text, as_object)
    except ValueError:
        raise OktaDecodeError(resp.status_code, resp.url or "", resp.text) from None
    return NormalizedResult(status_code=resp.status_code, value=value)


def normalize(resp: requests.Response, as_object: bool = False) -> Any:
    """Return the decoded success value or raise OktaAPIError."""
    return classify(resp, as_object=as_object).unwrap()
