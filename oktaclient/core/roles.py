"""Okta administrator role assignment operations.

https://developer.okta.com/docs/reference/api/roles/
"""
from __future__ import annotations
from typing import Dict, List, Optional

from .client import OktaClient


class RoleService:
    """Service for assigning administrator roles to users."""

    def __init__(self, client: OktaClient):
        """Initialize role service.

        Args:
            client: Okta client shared by all services
        """
        self.client = client

    def list(self, uid: str) -> List[Dict]:
        """List all roles assigned to a user."""
        return self.client.issue("GET", f"users/{uid}/roles")

    def assign(self, uid: str, role_type: str) -> Dict:
        """Assign a role to a user.

        Args:
            uid: User ID
            role_type: Role type (e.g. "SUPER_ADMIN", "USER_ADMIN", "APP_ADMIN")

        Returns:
            Assigned role
        """
        return self.client.issue("POST", f"users/{uid}/roles", body={"type": role_type})

    def unassign(self, uid: str, rid: str) -> Dict:
        """Unassign a role from a user (204 No Content)."""
        return self.client.issue("DELETE", f"users/{uid}/roles/{rid}")

    def list_group_targets(
        self, uid: str, rid: str, limit: Optional[int] = None, after: Optional[str] = None
    ) -> List[Dict]:
        """List group targets of a USER_ADMIN role assignment."""
        return self.client.issue(
            "GET", f"users/{uid}/roles/{rid}/targets/groups", query={"limit": limit, "after": after}
        )

    def list_app_targets(
        self, uid: str, rid: str, limit: Optional[int] = None, after: Optional[str] = None
    ) -> List[Dict]:
        """List catalog app targets of an APP_ADMIN role assignment."""
        return self.client.issue(
            "GET", f"users/{uid}/roles/{rid}/targets/catalog/apps", query={"limit": limit, "after": after}
        )
