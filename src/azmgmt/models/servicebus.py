"""Typed models for the Microsoft.ServiceBus resource provider."""

from __future__ import annotations

from pydantic import Field

from ._base import ResourceModel, WireDateTime
from .common import Sku, TrackedResource


class ServiceBusNamespaceProperties(ResourceModel):
    provisioning_state: str | None = Field(default=None, alias="provisioningState")
    created_at: WireDateTime | None = Field(default=None, alias="createdAt")
    updated_at: WireDateTime | None = Field(default=None, alias="updatedAt")
    service_bus_endpoint: str | None = Field(default=None, alias="serviceBusEndpoint")
    metric_id: str | None = Field(default=None, alias="metricId")


class ServiceBusNamespace(TrackedResource):
    sku: Sku | None = None
    properties: ServiceBusNamespaceProperties | None = None

    required_fields = ("location",)

    @property
    def provisioning_state(self) -> str | None:
        return self.properties.provisioning_state if self.properties else None


class QueueProperties(ResourceModel):
    lock_duration: str | None = Field(default=None, alias="lockDuration")
    max_size_in_megabytes: int | None = Field(default=None, alias="maxSizeInMegabytes")
    requires_session: bool | None = Field(default=None, alias="requiresSession")
    dead_lettering_on_message_expiration: bool | None = Field(
        default=None, alias="deadLetteringOnMessageExpiration"
    )
    max_delivery_count: int | None = Field(default=None, alias="maxDeliveryCount")
    message_count: int | None = Field(default=None, alias="messageCount")
    status: str | None = None


class Queue(ResourceModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None
    properties: QueueProperties | None = None


class TopicProperties(ResourceModel):
    max_size_in_megabytes: int | None = Field(default=None, alias="maxSizeInMegabytes")
    enable_partitioning: bool | None = Field(default=None, alias="enablePartitioning")
    support_ordering: bool | None = Field(default=None, alias="supportOrdering")
    subscription_count: int | None = Field(default=None, alias="subscriptionCount")
    status: str | None = None


class Topic(ResourceModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None
    properties: TopicProperties | None = None


__all__ = [
    "Queue",
    "QueueProperties",
    "ServiceBusNamespace",
    "ServiceBusNamespaceProperties",
    "Topic",
    "TopicProperties",
]
