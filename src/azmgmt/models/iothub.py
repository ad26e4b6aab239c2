"""Typed models for the Microsoft.Devices (IoT Hub) resource provider."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from ._base import Extensible, ResourceModel, WireDateTime
from .common import TrackedResource


class IotHubSku(str, Enum):
    F1 = "F1"
    S1 = "S1"
    S2 = "S2"
    S3 = "S3"
    B1 = "B1"
    B2 = "B2"
    B3 = "B3"


class IotHubSkuInfo(ResourceModel):
    name: Extensible[IotHubSku] | None = None
    tier: str | None = None
    capacity: int | None = None

    required_fields = ("name",)


class EventHubProperties(ResourceModel):
    """Built-in Event Hub compatible endpoint of an IoT hub."""

    retention_time_in_days: int | None = Field(default=None, alias="retentionTimeInDays")
    partition_count: int | None = Field(default=None, alias="partitionCount")
    partition_ids: list[str] | None = Field(default=None, alias="partitionIds")
    path: str | None = None
    endpoint: str | None = None


class RoutingEventHubProperties(ResourceModel):
    connection_string: str | None = Field(default=None, alias="connectionString")
    name: str | None = None
    subscription_id: str | None = Field(default=None, alias="subscriptionId")
    resource_group: str | None = Field(default=None, alias="resourceGroup")

    required_fields = ("connection_string", "name")


RoutingServiceBusQueueEndpointProperties = RoutingEventHubProperties
RoutingServiceBusTopicEndpointProperties = RoutingEventHubProperties


class RoutingEndpoints(ResourceModel):
    service_bus_queues: list[RoutingServiceBusQueueEndpointProperties] | None = Field(
        default=None, alias="serviceBusQueues"
    )
    service_bus_topics: list[RoutingServiceBusTopicEndpointProperties] | None = Field(
        default=None, alias="serviceBusTopics"
    )
    event_hubs: list[RoutingEventHubProperties] | None = Field(default=None, alias="eventHubs")


class RouteProperties(ResourceModel):
    name: str | None = None
    source: str | None = None
    condition: str | None = None
    endpoint_names: list[str] | None = Field(default=None, alias="endpointNames")
    is_enabled: bool | None = Field(default=None, alias="isEnabled")

    required_fields = ("name", "source", "endpoint_names")


class RoutingProperties(ResourceModel):
    endpoints: RoutingEndpoints | None = None
    routes: list[RouteProperties] | None = None
    fallback_route: dict[str, Any] | None = Field(default=None, alias="fallbackRoute")


class IotHubProperties(ResourceModel):
    state: str | None = None
    provisioning_state: str | None = Field(default=None, alias="provisioningState")
    host_name: str | None = Field(default=None, alias="hostName")
    event_hub_endpoints: dict[str, EventHubProperties] | None = Field(
        default=None, alias="eventHubEndpoints"
    )
    routing: RoutingProperties | None = None
    enable_file_upload_notifications: bool | None = Field(
        default=None, alias="enableFileUploadNotifications"
    )
    features: str | None = None
    comments: str | None = None


class IotHubDescription(TrackedResource):
    etag: str | None = None
    sku: IotHubSkuInfo | None = None
    properties: IotHubProperties | None = None

    required_fields = ("location", "sku")

    @property
    def provisioning_state(self) -> str | None:
        return self.properties.provisioning_state if self.properties else None


class IotHubDescriptionListResult(ResourceModel):
    value: list[IotHubDescription] = Field(default_factory=list)
    next_link: str | None = Field(default=None, alias="nextLink")


class CertificateProperties(ResourceModel):
    subject: str | None = None
    expiry: WireDateTime | None = None
    thumbprint: str | None = None
    is_verified: bool | None = Field(default=None, alias="isVerified")
    created: WireDateTime | None = None
    updated: WireDateTime | None = None
    certificate: str | None = None


class CertificateDescription(ResourceModel):
    id: str | None = None
    name: str | None = None
    etag: str | None = None
    type: str | None = None
    properties: CertificateProperties | None = None


class CertificateListDescription(ResourceModel):
    value: list[CertificateDescription] = Field(default_factory=list)


class CertificatePropertiesWithNonce(CertificateProperties):
    verification_code: str | None = Field(default=None, alias="verificationCode")


class CertificateWithNonceDescription(ResourceModel):
    id: str | None = None
    name: str | None = None
    etag: str | None = None
    type: str | None = None
    properties: CertificatePropertiesWithNonce | None = None


class CertificateVerificationDescription(ResourceModel):
    certificate: str | None = None

    required_fields = ("certificate",)


__all__ = [
    "CertificateDescription",
    "CertificateListDescription",
    "CertificateProperties",
    "CertificatePropertiesWithNonce",
    "CertificateVerificationDescription",
    "CertificateWithNonceDescription",
    "EventHubProperties",
    "IotHubDescription",
    "IotHubDescriptionListResult",
    "IotHubProperties",
    "IotHubSku",
    "IotHubSkuInfo",
    "RouteProperties",
    "RoutingEndpoints",
    "RoutingEventHubProperties",
    "RoutingProperties",
    "RoutingServiceBusQueueEndpointProperties",
    "RoutingServiceBusTopicEndpointProperties",
]
