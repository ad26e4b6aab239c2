"""Typed models for resource groups."""

from __future__ import annotations

from pydantic import Field

from ._base import ResourceModel


class ResourceGroupProperties(ResourceModel):
    provisioning_state: str | None = Field(default=None, alias="provisioningState")


class ResourceGroup(ResourceModel):
    id: str | None = None
    name: str | None = None
    location: str | None = None
    managed_by: str | None = Field(default=None, alias="managedBy")
    tags: dict[str, str] | None = None
    properties: ResourceGroupProperties | None = None

    required_fields = ("location",)

    @property
    def provisioning_state(self) -> str | None:
        return self.properties.provisioning_state if self.properties else None


class ResourceGroupListResult(ResourceModel):
    value: list[ResourceGroup] = Field(default_factory=list)
    next_link: str | None = Field(default=None, alias="nextLink")


__all__ = ["ResourceGroup", "ResourceGroupListResult", "ResourceGroupProperties"]
