"""Okta Events API (system log)."""
from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional

from .client import OktaClient


class EventService:
    """Service for reading system log events."""

    def __init__(self, client: OktaClient):
        self.client = client

    def list(self, query: Optional[Mapping[str, Any]] = None) -> List[Dict]:
        """Fetch a page of events.

        Args:
            query: Query parameters (startDate, filter, limit, after)

        Returns:
            List of events
        """
        return self.client.issue("GET", "events", query=query)
