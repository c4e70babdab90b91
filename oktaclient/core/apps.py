"""Okta application management operations.

https://developer.okta.com/docs/reference/api/apps/
"""
from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional

from .client import OktaClient, to_payload
from .response import is_success, normalize


class AppService:
    """Service for managing Okta applications and their assignments."""

    def __init__(self, client: OktaClient):
        """Initialize application service.

        Args:
            client: Okta client shared by all services
        """
        self.client = client

    def add(
        self,
        name: str,
        label: str,
        sign_on_mode: str,
        settings: Optional[Mapping[str, Any]] = None,
        activate: bool = True,
    ) -> Dict:
        """Add a new application to the organization.

        Args:
            name: Catalog app name (e.g. "bookmark", "template_swa")
            label: Display label
            sign_on_mode: Sign-on mode (e.g. "BOOKMARK", "SAML_2_0")
            settings: App-specific settings (sent as settings.app)
            activate: Activate the application on creation

        Returns:
            Created application
        """
        return self.client.issue(
            "POST",
            "apps",
            query={"activate": activate},
            body={
                "name": name,
                "label": label,
                "signOnMode": sign_on_mode,
                "settings": {"app": dict(settings or {})},
            },
        )

    def get(self, aid: str) -> Dict:
        return self.client.issue("GET", f"apps/{aid}")

    def list(self, query: Optional[Mapping[str, Any]] = None) -> List[Dict]:
        """Enumerate applications (q, filter, limit, after)."""
        return self.client.issue("GET", "apps", query=query)

    def update(self, aid: str, app: Any) -> Dict:
        """Replace an application definition."""
        return self.client.issue("PUT", f"apps/{aid}", body=to_payload(app))

    def delete(self, aid: str) -> Dict:
        """Remove an inactive application."""
        return self.client.issue("DELETE", f"apps/{aid}")

    def activate(self, aid: str) -> Dict:
        return self.client.issue("POST", f"apps/{aid}/lifecycle/activate")

    def deactivate(self, aid: str) -> Dict:
        return self.client.issue("POST", f"apps/{aid}/lifecycle/deactivate")

    # ─────────────────────────────────────────────────────────────────────
    # User assignments
    # ─────────────────────────────────────────────────────────────────────
    def assign_user(self, aid: str, app_user: Mapping[str, Any]) -> Dict:
        """Assign a user to the application.

        Args:
            aid: Application ID
            app_user: Application user: id, scope, credentials, profile

        Returns:
            Application user
        """
        return self.client.issue("POST", f"apps/{aid}/users", body=dict(app_user))

    def get_user(self, aid: str, uid: str) -> Dict:
        return self.client.issue("GET", f"apps/{aid}/users/{uid}")

    def list_users(self, aid: str, limit: Optional[int] = None, after: Optional[str] = None) -> List[Dict]:
        """Enumerate application user assignments (cursor paginated)."""
        return self.client.issue("GET", f"apps/{aid}/users", query={"limit": limit, "after": after})

    def update_user(self, aid: str, uid: str, app_user: Mapping[str, Any]) -> Dict:
        """Update an assigned user's app credentials and/or profile."""
        return self.client.issue("POST", f"apps/{aid}/users/{uid}", body=dict(app_user))

    def remove_user(self, aid: str, uid: str) -> Dict:
        """Remove a user assignment. The user's app profile is not recoverable."""
        return self.client.issue("DELETE", f"apps/{aid}/users/{uid}")

    # ─────────────────────────────────────────────────────────────────────
    # Group assignments
    # ─────────────────────────────────────────────────────────────────────
    def assign_group(self, aid: str, gid: str, app_group: Optional[Mapping[str, Any]] = None) -> Dict:
        """Assign a group to the application (priority and/or profile in app_group)."""
        return self.client.issue("PUT", f"apps/{aid}/groups/{gid}", body=dict(app_group or {}))

    def get_group(self, aid: str, gid: str) -> Dict:
        return self.client.issue("GET", f"apps/{aid}/groups/{gid}")

    def list_groups(self, aid: str, limit: Optional[int] = None, after: Optional[str] = None) -> List[Dict]:
        return self.client.issue("GET", f"apps/{aid}/groups", query={"limit": limit, "after": after})

    def remove_group(self, aid: str, gid: str) -> Dict:
        return self.client.issue("DELETE", f"apps/{aid}/groups/{gid}")

    # ─────────────────────────────────────────────────────────────────────
    # Key credentials
    # ─────────────────────────────────────────────────────────────────────
    def generate_key(self, aid: str, validity_years: int) -> Dict:
        """Generate a new X.509 certificate for an application key credential."""
        return self.client.issue(
            "POST", f"apps/{aid}/credentials/keys/generate", query={"validityYears": validity_years}
        )

    def list_keys(self, aid: str) -> List[Dict]:
        return self.client.issue("GET", f"apps/{aid}/credentials/keys")

    def get_key(self, aid: str, kid: str) -> Dict:
        return self.client.issue("GET", f"apps/{aid}/credentials/keys/{kid}")

    def get_saml_metadata(self, aid: str, kid: str) -> str:
        """Preview SAML metadata for a key credential.

        Returns:
            SAML metadata XML document

        Raises:
            OktaAPIError: On any non-success status
        """
        resp = self.client.get(
            f"apps/{aid}/sso/saml/metadata",
            params={"kid": kid},
            headers={"Accept": "application/xml"},
        )
        if is_success(resp.status_code):
            return resp.text
        return normalize(resp)
