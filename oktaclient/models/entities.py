"""Okta resource records other than User.

Plain mirrors of the API JSON shapes, produced from decoded response bodies.
"""
from __future__ import annotations
from dataclasses import dataclass, field

from .user import _compact


@dataclass
class GroupProfile:
    """okta:user_group profile."""
    name: str
    description: str | None = None

    def to_dict(self) -> dict:
        return _compact({"name": self.name, "description": self.description})

    @classmethod
    def from_dict(cls, data: dict) -> "GroupProfile":
        return cls(name=data.get("name", ""), description=data.get("description"))


@dataclass
class Group:
    """Okta Group resource. Only OKTA_GROUP groups are writable."""
    profile: GroupProfile
    id: str | None = None
    type: str | None = None
    created: str | None = None
    lastUpdated: str | None = None
    lastMembershipUpdated: str | None = None
    objectClass: list[str] = field(default_factory=list)
    links: dict | None = None

    def to_dict(self) -> dict:
        d = _compact({
            "id": self.id,
            "type": self.type,
            "created": self.created,
            "lastUpdated": self.lastUpdated,
            "lastMembershipUpdated": self.lastMembershipUpdated,
        })
        if self.objectClass:
            d["objectClass"] = list(self.objectClass)
        d["profile"] = self.profile.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "Group":
        return cls(
            profile=GroupProfile.from_dict(data.get("profile") or {}),
            id=data.get("id"),
            type=data.get("type"),
            created=data.get("created"),
            lastUpdated=data.get("lastUpdated"),
            lastMembershipUpdated=data.get("lastMembershipUpdated"),
            objectClass=data.get("objectClass") or [],
            links=data.get("_links"),
        )


@dataclass
class Application:
    """Okta Application resource."""
    name: str
    label: str | None = None
    signOnMode: str | None = None
    id: str | None = None
    status: str | None = None
    created: str | None = None
    lastUpdated: str | None = None
    features: list[str] = field(default_factory=list)
    settings: dict = field(default_factory=dict)
    credentials: dict | None = None
    links: dict | None = None

    def to_dict(self) -> dict:
        d = _compact({
            "id": self.id,
            "name": self.name,
            "label": self.label,
            "signOnMode": self.signOnMode,
            "status": self.status,
            "created": self.created,
            "lastUpdated": self.lastUpdated,
            "credentials": self.credentials,
        })
        if self.features:
            d["features"] = list(self.features)
        if self.settings:
            d["settings"] = self.settings
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "Application":
        return cls(
            name=data.get("name", ""),
            label=data.get("label"),
            signOnMode=data.get("signOnMode"),
            id=data.get("id"),
            status=data.get("status"),
            created=data.get("created"),
            lastUpdated=data.get("lastUpdated"),
            features=data.get("features") or [],
            settings=data.get("settings") or {},
            credentials=data.get("credentials"),
            links=data.get("_links"),
        )


@dataclass
class Role:
    """Administrator role assigned to a user (e.g. SUPER_ADMIN, USER_ADMIN)."""
    type: str
    id: str | None = None
    label: str | None = None
    status: str | None = None
    assignmentType: str | None = None
    created: str | None = None
    lastUpdated: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Role":
        return cls(
            type=data.get("type", ""),
            id=data.get("id"),
            label=data.get("label"),
            status=data.get("status"),
            assignmentType=data.get("assignmentType"),
            created=data.get("created"),
            lastUpdated=data.get("lastUpdated"),
        )


@dataclass
class Session:
    """Okta SSO session."""
    id: str
    userId: str | None = None
    login: str | None = None
    status: str | None = None
    createdAt: str | None = None
    expiresAt: str | None = None
    lastPasswordVerification: str | None = None
    lastFactorVerification: str | None = None
    amr: list[str] = field(default_factory=list)
    idp: dict | None = None
    mfaActive: bool | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        return cls(
            id=data.get("id", ""),
            userId=data.get("userId"),
            login=data.get("login"),
            status=data.get("status"),
            createdAt=data.get("createdAt"),
            expiresAt=data.get("expiresAt"),
            lastPasswordVerification=data.get("lastPasswordVerification"),
            lastFactorVerification=data.get("lastFactorVerification"),
            amr=data.get("amr") or [],
            idp=data.get("idp"),
            mfaActive=data.get("mfaActive"),
        )


@dataclass
class Schema:
    """User schema: base and custom property definitions."""
    id: str | None = None
    name: str | None = None
    title: str | None = None
    type: str | None = None
    created: str | None = None
    lastUpdated: str | None = None
    definitions: dict = field(default_factory=dict)
    properties: dict = field(default_factory=dict)

    @property
    def custom_properties(self) -> dict:
        return (self.definitions.get("custom") or {}).get("properties") or {}

    @classmethod
    def from_dict(cls, data: dict) -> "Schema":
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            title=data.get("title"),
            type=data.get("type"),
            created=data.get("created"),
            lastUpdated=data.get("lastUpdated"),
            definitions=data.get("definitions") or {},
            properties=data.get("properties") or {},
        )


@dataclass
class Event:
    """System log event from the Events API."""
    eventId: str
    published: str | None = None
    requestId: str | None = None
    sessionId: str | None = None
    action: dict = field(default_factory=dict)
    actors: list[dict] = field(default_factory=list)
    targets: list[dict] = field(default_factory=list)

    @property
    def object_type(self) -> str | None:
        return self.action.get("objectType")

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        return cls(
            eventId=data.get("eventId", ""),
            published=data.get("published"),
            requestId=data.get("requestId"),
            sessionId=data.get("sessionId"),
            action=data.get("action") or {},
            actors=data.get("actors") or [],
            targets=data.get("targets") or [],
        )
