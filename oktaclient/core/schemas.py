"""Okta user schema operations."""
from __future__ import annotations
from typing import Any, Dict, Mapping

from .client import OktaClient

USER_SCHEMA_PATH = "meta/schemas/user/default"


class SchemaService:
    """Service for reading and extending the default user schema."""

    def __init__(self, client: OktaClient):
        self.client = client

    def get_user_schema(self) -> Dict:
        """Fetch the default user schema."""
        return self.client.issue("GET", USER_SCHEMA_PATH)

    def update_user_properties(self, definitions: Mapping[str, Any]) -> Dict:
        """Add, update or remove custom user profile properties.

        Properties must be explicitly set to None to be removed; anything
        else is a partial update.

        Args:
            definitions: Subschema definitions, e.g. {"custom": {...}}

        Returns:
            Updated user schema
        """
        return self.client.issue("POST", USER_SCHEMA_PATH, body={"definitions": dict(definitions)})
