"""Re-export typed models for the azmgmt SDK."""

from __future__ import annotations

from ._base import Extensible, FieldState, ResourceModel, Unrecognized, WireDateTime
from .batch import (
    ActivateApplicationPackageParameters,
    AddApplicationParameters,
    Application,
    ApplicationListResult,
    ApplicationPackage,
    AutoStorageBaseProperties,
    AutoStorageProperties,
    BatchAccount,
    BatchAccountCreateParameters,
    PackageState,
    UpdateApplicationParameters,
)
from .common import AccessKeys, AccessRights, SharedAccessAuthorizationRule, Sku
from .eventhubs import EventHub, EventHubNamespace, Identity, IdentityType
from .iothub import (
    CertificateDescription,
    CertificateListDescription,
    CertificateProperties,
    CertificateWithNonceDescription,
    IotHubDescription,
    IotHubProperties,
    IotHubSku,
    IotHubSkuInfo,
)
from .resources import ResourceGroup
from .servicebus import Queue, ServiceBusNamespace, Topic

__all__ = [
    "AccessKeys",
    "AccessRights",
    "ActivateApplicationPackageParameters",
    "AddApplicationParameters",
    "Application",
    "ApplicationListResult",
    "ApplicationPackage",
    "AutoStorageBaseProperties",
    "AutoStorageProperties",
    "BatchAccount",
    "BatchAccountCreateParameters",
    "CertificateDescription",
    "CertificateListDescription",
    "CertificateProperties",
    "CertificateWithNonceDescription",
    "EventHub",
    "EventHubNamespace",
    "Extensible",
    "FieldState",
    "Identity",
    "IdentityType",
    "IotHubDescription",
    "IotHubProperties",
    "IotHubSku",
    "IotHubSkuInfo",
    "PackageState",
    "Queue",
    "ResourceGroup",
    "ResourceModel",
    "ServiceBusNamespace",
    "SharedAccessAuthorizationRule",
    "Sku",
    "Topic",
    "Unrecognized",
    "UpdateApplicationParameters",
    "WireDateTime",
]
