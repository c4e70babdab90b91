"""Okta user management operations.

https://developer.okta.com/docs/reference/api/users/
"""
from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Union

from oktaclient.models import Credentials, Profile

from .client import OktaClient, to_payload

ProfileLike = Union[Profile, Mapping[str, Any]]
CredentialsLike = Union[Credentials, Mapping[str, Any]]


class UserService:
    """Service for managing Okta users.

    Methods return the decoded JSON. Load a result into a model with
    `User.from_dict(result)` when typed access is wanted.
    """

    def __init__(self, client: OktaClient):
        """Initialize user service.

        Args:
            client: Okta client shared by all services
        """
        self.client = client

    def create(
        self,
        profile: ProfileLike,
        credentials: Optional[CredentialsLike] = None,
        provider: bool = False,
        activate: bool = True,
    ) -> Dict:
        """Create a new user with or without credentials.

        Args:
            profile: User profile properties
            credentials: Password, recovery question and/or provider
            provider: Create the user with the authentication provider in credentials
            activate: Run the activation lifecycle operation on creation

        Returns:
            Created user representation
        """
        return self.client.issue(
            "POST",
            "users",
            query={"provider": provider, "activate": activate},
            body={
                "profile": to_payload(profile),
                "credentials": to_payload(credentials) or {},
            },
        )

    def get(self, uid: str) -> Dict:
        """Fetch a user by id, login, or login shortname."""
        return self.client.issue("GET", f"users/{uid}")

    def list(self, query: Optional[Mapping[str, Any]] = None) -> List[Dict]:
        """Enumerate users.

        Args:
            query: Query parameters (q, filter, search, limit, after)

        Returns:
            One page of users
        """
        return self.client.issue("GET", "users", query=query)

    def update(
        self,
        uid: str,
        profile: Optional[ProfileLike] = None,
        credentials: Optional[CredentialsLike] = None,
    ) -> Dict:
        """Partially update a user's profile and/or credentials (POST semantics)."""
        body: Dict[str, Any] = {}
        if profile is not None:
            body["profile"] = to_payload(profile)
        if credentials is not None:
            body["credentials"] = to_payload(credentials)
        return self.client.issue("POST", f"users/{uid}", body=body)

    def apps(self, uid: str) -> List[Dict]:
        """Fetch appLinks for all direct or group-assigned applications."""
        return self.client.issue("GET", f"users/{uid}/appLinks")

    def groups(self, uid: str) -> List[Dict]:
        """Fetch the groups the user is a member of."""
        return self.client.issue("GET", f"users/{uid}/groups")

    # ─────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────
    def activate(self, uid: str, send_email: Optional[bool] = None) -> Dict:
        """Activate a STAGED user.

        Returns:
            Empty object, or an activation link when send_email is False
        """
        return self.client.issue("POST", f"users/{uid}/lifecycle/activate", query={"sendEmail": send_email})

    def deactivate(self, uid: str) -> Dict:
        """Deactivate a user (transitions to DEPROVISIONED)."""
        return self.client.issue("POST", f"users/{uid}/lifecycle/deactivate")

    def suspend(self, uid: str) -> Dict:
        """Suspend an ACTIVE user.

        A non-ACTIVE user yields a 400 with error code E0000001.
        """
        return self.client.issue("POST", f"users/{uid}/lifecycle/suspend")

    def unsuspend(self, uid: str) -> Dict:
        """Return a SUSPENDED user to ACTIVE."""
        return self.client.issue("POST", f"users/{uid}/lifecycle/unsuspend")

    def unlock(self, uid: str) -> Dict:
        """Return a LOCKED_OUT user to ACTIVE."""
        return self.client.issue("POST", f"users/{uid}/lifecycle/unlock")

    def reset_password(self, uid: str, send_email: bool = True) -> Dict:
        """Generate a one-time password reset token; moves the user to RECOVERY.

        Returns:
            Empty object, or a resetPasswordUrl when send_email is False
        """
        return self.client.issue("POST", f"users/{uid}/lifecycle/reset_password", query={"sendEmail": send_email})

    def expire_password(self, uid: str, temp_password: bool = False) -> Dict:
        """Expire the user's password (PASSWORD_EXPIRED).

        With temp_password the password is reset to a returned temporary one.
        """
        return self.client.issue(
            "POST", f"users/{uid}/lifecycle/expire_password", query={"tempPassword": temp_password}
        )

    def reset_factors(self, uid: str) -> Dict:
        """Reset all MFA factor enrollments for the user."""
        return self.client.issue("POST", f"users/{uid}/lifecycle/reset_factors")

    # ─────────────────────────────────────────────────────────────────────
    # Credentials
    # ─────────────────────────────────────────────────────────────────────
    def forgot_password(self, uid: str, send_email: bool = False) -> Dict:
        """Generate a forgot-password token for a user with a recovery question."""
        return self.client.issue(
            "POST", f"users/{uid}/credentials/forgot_password", query={"sendEmail": send_email}
        )

    def forgot_password_reset(self, uid: str, password: str, recovery_answer: str) -> Dict:
        """Set a new password by answering the current recovery question.

        Returns:
            User credentials object
        """
        return self.client.issue(
            "POST",
            f"users/{uid}/credentials/forgot_password",
            body={
                "password": {"value": password},
                "recovery_question": {"answer": recovery_answer},
            },
        )

    def change_password(self, uid: str, old_password: str, new_password: str) -> Dict:
        """Change a password after validating the current one."""
        return self.client.issue(
            "POST",
            f"users/{uid}/credentials/change_password",
            body={
                "oldPassword": {"value": old_password},
                "newPassword": {"value": new_password},
            },
        )

    def change_recovery_question(self, uid: str, password: str, question: str, answer: str) -> Dict:
        """Replace the user's recovery question, authorized by their password."""
        return self.client.issue(
            "POST",
            f"users/{uid}/credentials/change_recovery_question",
            body={
                "password": {"value": password},
                "recovery_question": {"question": question, "answer": answer},
            },
        )
