"""Models shared by the messaging resource providers."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from ._base import Extensible, ResourceModel


class AccessRights(str, Enum):
    MANAGE = "Manage"
    SEND = "Send"
    LISTEN = "Listen"


class Sku(ResourceModel):
    name: str | None = None
    tier: str | None = None
    capacity: int | None = None

    required_fields = ("name",)


class TrackedResource(ResourceModel):
    """Fields common to every top-level ARM resource."""

    id: str | None = None
    name: str | None = None
    type: str | None = None
    location: str | None = None
    tags: dict[str, str] | None = None


class AuthorizationRuleProperties(ResourceModel):
    rights: list[Extensible[AccessRights]] | None = None

    required_fields = ("rights",)


class SharedAccessAuthorizationRule(ResourceModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None
    properties: AuthorizationRuleProperties | None = None

    @classmethod
    def with_rights(cls, *rights: AccessRights) -> SharedAccessAuthorizationRule:
        return cls(properties=AuthorizationRuleProperties(rights=list(rights)))

    @property
    def rights(self) -> list[AccessRights | str]:
        if self.properties is None or self.properties.rights is None:
            return []
        return list(self.properties.rights)


class AccessKeys(ResourceModel):
    primary_connection_string: str | None = Field(default=None, alias="primaryConnectionString")
    secondary_connection_string: str | None = Field(
        default=None, alias="secondaryConnectionString"
    )
    primary_key: str | None = Field(default=None, alias="primaryKey")
    secondary_key: str | None = Field(default=None, alias="secondaryKey")
    key_name: str | None = Field(default=None, alias="keyName")


__all__ = [
    "AccessKeys",
    "AccessRights",
    "AuthorizationRuleProperties",
    "SharedAccessAuthorizationRule",
    "Sku",
    "TrackedResource",
]
