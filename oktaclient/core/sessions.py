"""Okta session management operations."""
from __future__ import annotations
from typing import Dict, Optional

from .client import OktaClient


class SessionService:
    """Service for managing Okta user sessions."""

    def __init__(self, client: OktaClient):
        """Initialize session service.

        Args:
            client: Okta client shared by all services
        """
        self.client = client

    def create(self, session_token: str, additional_fields: Optional[str] = None) -> Dict:
        """Create a session from a session token obtained via the Authentication API.

        Args:
            session_token: One-time session token
            additional_fields: Comma separated optional session properties

        Returns:
            New session. An invalid token yields a 401.
        """
        return self.client.issue(
            "POST",
            "sessions",
            query={"additionalFields": additional_fields},
            body={"sessionToken": session_token},
        )

    def extend(self, sid: str) -> Dict:
        """Extend the lifetime of a session. Unknown sessions yield a 404."""
        return self.client.issue("PUT", f"sessions/{sid}")

    def close(self, sid: str) -> Dict:
        """Close a session (logout)."""
        return self.client.issue("DELETE", f"sessions/{sid}")
