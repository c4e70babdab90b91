"""Okta User data model.

Mirrors the JSON shape of the Users API:
https://developer.okta.com/docs/reference/api/users/

Field names follow the API's camelCase so that to_dict() output can be sent
as-is. Models carry no behavior beyond conversion.
"""
from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any

from oktaclient.core.exceptions import OktaConfigError

PROVIDER_TYPES = ("OKTA", "ACTIVE_DIRECTORY", "LDAP", "FEDERATION", "SOCIAL")


def _compact(d: dict) -> dict:
    """Drop keys whose value is None."""
    return {k: v for k, v in d.items() if v is not None}


@dataclass
class Password:
    """Password credential. `value` is write-only on the API side."""
    value: str | None = None
    hash: dict | None = None

    def to_dict(self) -> dict:
        return _compact({"value": self.value, "hash": self.hash})

    @classmethod
    def from_dict(cls, data: dict) -> "Password":
        return cls(value=data.get("value"), hash=data.get("hash"))


@dataclass
class RecoveryQuestion:
    """Recovery question credential. `answer` is write-only."""
    question: str | None = None
    answer: str | None = None

    def to_dict(self) -> dict:
        return _compact({"question": self.question, "answer": self.answer})

    @classmethod
    def from_dict(cls, data: dict) -> "RecoveryQuestion":
        return cls(question=data.get("question"), answer=data.get("answer"))


@dataclass
class Provider:
    """
    Authentication provider for a user's credentials.

    Supported types:
    - OKTA
    - ACTIVE_DIRECTORY
    - LDAP
    - FEDERATION
    - SOCIAL

    Assigning any other type raises OktaConfigError.
    """
    type: str | None = None
    name: str | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "type" and value is not None and value not in PROVIDER_TYPES:
            raise OktaConfigError(f"Invalid provider type {value!r}: expected one of {', '.join(PROVIDER_TYPES)}")
        super().__setattr__(name, value)

    def to_dict(self) -> dict:
        return _compact({"type": self.type, "name": self.name})

    @classmethod
    def from_dict(cls, data: dict) -> "Provider":
        return cls(type=data.get("type"), name=data.get("name"))


@dataclass
class Credentials:
    """Primary authentication and recovery credentials of a user."""
    password: Password | None = None
    recovery_question: RecoveryQuestion | None = None
    provider: Provider | None = None

    def to_dict(self) -> dict:
        d = {}
        if self.password is not None:
            d["password"] = self.password.to_dict()
        if self.recovery_question is not None:
            d["recovery_question"] = self.recovery_question.to_dict()
        if self.provider is not None:
            d["provider"] = self.provider.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "Credentials":
        password = data.get("password")
        question = data.get("recovery_question")
        provider = data.get("provider")
        return cls(
            password=Password.from_dict(password) if password is not None else None,
            recovery_question=RecoveryQuestion.from_dict(question) if question is not None else None,
            provider=Provider.from_dict(provider) if provider is not None else None,
        )


@dataclass
class Profile:
    """
    User profile (base attributes of the default user schema).

    Attributes not in the base schema (custom profile properties) are kept in
    `extra` and merged back by to_dict().
    """
    login: str | None = None
    email: str | None = None
    firstName: str | None = None
    lastName: str | None = None
    middleName: str | None = None
    nickName: str | None = None
    displayName: str | None = None
    secondEmail: str | None = None
    profileUrl: str | None = None
    preferredLanguage: str | None = None
    userType: str | None = None
    organization: str | None = None
    title: str | None = None
    division: str | None = None
    department: str | None = None
    costCenter: str | None = None
    employeeNumber: str | None = None
    mobilePhone: str | None = None
    primaryPhone: str | None = None
    streetAddress: str | None = None
    city: str | None = None
    state: str | None = None
    zipCode: str | None = None
    countryCode: str | None = None
    extra: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Only populated attributes, custom ones included."""
        d = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        d = _compact(d)
        d.update(self.extra)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "Profile":
        known = {f.name for f in fields(cls) if f.name != "extra"}
        kwargs = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        return cls(extra=extra, **kwargs)


@dataclass
class User:
    """Okta User resource (read side; status fields are set by the server)."""
    id: str | None = None
    status: str | None = None
    created: str | None = None
    activated: str | None = None
    statusChanged: str | None = None
    lastLogin: str | None = None
    lastUpdated: str | None = None
    passwordChanged: str | None = None
    transitioningToStatus: str | None = None
    profile: Profile = field(default_factory=Profile)
    credentials: Credentials | None = None
    links: dict | None = None

    def to_dict(self) -> dict:
        d = _compact({
            "id": self.id,
            "status": self.status,
            "created": self.created,
            "activated": self.activated,
            "statusChanged": self.statusChanged,
            "lastLogin": self.lastLogin,
            "lastUpdated": self.lastUpdated,
            "passwordChanged": self.passwordChanged,
            "transitioningToStatus": self.transitioningToStatus,
        })
        d["profile"] = self.profile.to_dict()
        if self.credentials is not None:
            d["credentials"] = self.credentials.to_dict()
        if self.links is not None:
            d["_links"] = self.links
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        credentials = data.get("credentials")
        return cls(
            id=data.get("id"),
            status=data.get("status"),
            created=data.get("created"),
            activated=data.get("activated"),
            statusChanged=data.get("statusChanged"),
            lastLogin=data.get("lastLogin"),
            lastUpdated=data.get("lastUpdated"),
            passwordChanged=data.get("passwordChanged"),
            transitioningToStatus=data.get("transitioningToStatus"),
            profile=Profile.from_dict(data.get("profile") or {}),
            credentials=Credentials.from_dict(credentials) if credentials is not None else None,
            links=data.get("_links"),
        )
