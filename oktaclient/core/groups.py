"""Okta group management operations.

https://developer.okta.com/docs/reference/api/groups/
"""
from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Union

from oktaclient.models import GroupProfile

from .client import OktaClient, to_payload

GroupProfileLike = Union[GroupProfile, Mapping[str, Any]]


class GroupService:
    """Service for managing Okta groups and group membership.

    Only groups of type OKTA_GROUP can be modified; the API rejects
    writes to APP_GROUP and BUILT_IN groups.
    """

    def __init__(self, client: OktaClient):
        """Initialize group service.

        Args:
            client: Okta client shared by all services
        """
        self.client = client

    def add(self, profile: GroupProfileLike) -> Dict:
        """Add a new OKTA_GROUP group.

        Args:
            profile: okta:user_group profile (name, description)

        Returns:
            Created group
        """
        return self.client.issue("POST", "groups", body={"profile": to_payload(profile)})

    def get(self, gid: str) -> Dict:
        return self.client.issue("GET", f"groups/{gid}")

    def list(self, query: Optional[Mapping[str, Any]] = None) -> List[Dict]:
        """Enumerate groups (q, filter, limit, after)."""
        return self.client.issue("GET", "groups", query=query)

    def update(self, gid: str, profile: GroupProfileLike) -> Dict:
        """Replace the profile of an OKTA_GROUP group."""
        return self.client.issue("PUT", f"groups/{gid}", body={"profile": to_payload(profile)})

    def remove(self, gid: str) -> Dict:
        return self.client.issue("DELETE", f"groups/{gid}")

    def list_members(self, gid: str, limit: Optional[int] = None, after: Optional[str] = None) -> List[Dict]:
        """Enumerate users that are members of the group.

        Args:
            gid: Group ID
            limit: Page size
            after: Opaque cursor from a previous page

        Returns:
            One page of users
        """
        return self.client.issue("GET", f"groups/{gid}/users", query={"limit": limit, "after": after})

    def add_user(self, gid: str, uid: str) -> Dict:
        return self.client.issue("PUT", f"groups/{gid}/users/{uid}")

    def remove_user(self, gid: str, uid: str) -> Dict:
        return self.client.issue("DELETE", f"groups/{gid}/users/{uid}")

    def list_apps(self, gid: str, limit: Optional[int] = None, after: Optional[str] = None) -> List[Dict]:
        """Enumerate applications assigned to the group."""
        return self.client.issue("GET", f"groups/{gid}/apps", query={"limit": limit, "after": after})
