"""
Record shapes returned by the data access and service layers.

Keys follow the external API naming convention (compact camelCase), matching
what the GraphQL contract exposes.
"""

from typing import Required, TypedDict


class AppRecord(TypedDict):
    id: int
    name: str
    description: str | None
    iconUrl: str | None
    screenshotUrls: list[str]
    repoUrl: str | None
    license: str | None
    createdAt: int
    updatedAt: int


class CategoryRecord(TypedDict):
    id: int
    name: str
    description: str | None
    createdAt: int
    updatedAt: int


class PersonRecord(TypedDict):
    id: int
    name: str
    email: str | None
    webUrl: str | None
    createdAt: int
    updatedAt: int


class ReleaseRecord(TypedDict):
    id: int
    appId: int
    version: str
    description: str | None
    downloadUrl: str
    webUrl: str | None
    createdAt: int
    updatedAt: int


class UserRecord(TypedDict):
    id: str
    name: str | None
    email: str | None
    avatarUrl: str | None
    createdAt: int
    updatedAt: int


class UserInput(TypedDict, total=False):
    """Fields accepted when provisioning a user; timestamps are stamped on insert."""

    id: Required[str]
    name: str | None
    email: str | None
    avatarUrl: str | None


class UserPatch(TypedDict, total=False):
    name: str | None
    email: str | None
    avatarUrl: str | None
    updatedAt: int


class AppAuthorMapRecord(TypedDict):
    appId: int
    personId: int


class AppMaintainerMapRecord(TypedDict):
    appId: int
    personId: int


class AppCategoryMapRecord(TypedDict):
    appId: int
    categoryId: int


class HealthRecord(TypedDict):
    version: str
    uptime: int
    date: str
    databaseLatency: int
