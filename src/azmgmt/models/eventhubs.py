"""Typed models for the Microsoft.EventHub resource provider."""

from __future__ import annotations

from enum import Enum

from pydantic import ConfigDict, Field

from ._base import Extensible, ResourceModel, WireDateTime
from .common import Sku, TrackedResource


class IdentityType(str, Enum):
    SYSTEM_ASSIGNED = "SystemAssigned"


class Identity(ResourceModel):
    """Managed identity assigned to a namespace by the service."""

    principal_id: str | None = Field(default=None, alias="principalId")
    tenant_id: str | None = Field(default=None, alias="tenantId")
    type: Extensible[IdentityType] | None = None

    model_config = ConfigDict(frozen=True)


class NamespaceProperties(ResourceModel):
    provisioning_state: str | None = Field(default=None, alias="provisioningState")
    created_at: WireDateTime | None = Field(default=None, alias="createdAt")
    updated_at: WireDateTime | None = Field(default=None, alias="updatedAt")
    service_bus_endpoint: str | None = Field(default=None, alias="serviceBusEndpoint")
    metric_id: str | None = Field(default=None, alias="metricId")
    is_auto_inflate_enabled: bool | None = Field(default=None, alias="isAutoInflateEnabled")
    maximum_throughput_units: int | None = Field(default=None, alias="maximumThroughputUnits")
    kafka_enabled: bool | None = Field(default=None, alias="kafkaEnabled")


class EventHubNamespace(TrackedResource):
    sku: Sku | None = None
    identity: Identity | None = None
    properties: NamespaceProperties | None = None

    required_fields = ("location",)

    @property
    def provisioning_state(self) -> str | None:
        return self.properties.provisioning_state if self.properties else None


class EventHubProperties(ResourceModel):
    partition_ids: list[str] | None = Field(default=None, alias="partitionIds")
    created_at: WireDateTime | None = Field(default=None, alias="createdAt")
    updated_at: WireDateTime | None = Field(default=None, alias="updatedAt")
    message_retention_in_days: int | None = Field(default=None, alias="messageRetentionInDays")
    partition_count: int | None = Field(default=None, alias="partitionCount")
    status: str | None = None


class EventHub(ResourceModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None
    properties: EventHubProperties | None = None


__all__ = [
    "EventHub",
    "EventHubNamespace",
    "EventHubProperties",
    "Identity",
    "IdentityType",
    "NamespaceProperties",
]
