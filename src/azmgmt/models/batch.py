"""Typed models for Batch accounts and their applications."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from ._base import Extensible, ResourceModel, WireDateTime


class PackageState(str, Enum):
    PENDING = "Pending"
    ACTIVE = "Active"
    UNMAPPED = "Unmapped"


class ApplicationPackage(ResourceModel):
    """A single uploaded version of an application."""

    id: str | None = None
    version: str | None = None
    state: Extensible[PackageState] | None = None
    format: str | None = None
    storage_url: str | None = Field(default=None, alias="storageUrl")
    storage_url_expiry: WireDateTime | None = Field(default=None, alias="storageUrlExpiry")
    last_activation_time: WireDateTime | None = Field(default=None, alias="lastActivationTime")


class Application(ResourceModel):
    """An application and its packages, in the order the service returned them."""

    id: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    packages: list[ApplicationPackage] | None = None
    allow_updates: bool | None = Field(default=None, alias="allowUpdates")
    default_version: str | None = Field(default=None, alias="defaultVersion")

    def get_package(self, version: str) -> ApplicationPackage | None:
        for package in self.packages or []:
            if package.version == version:
                return package
        return None


class ApplicationListResult(ResourceModel):
    value: list[Application] = Field(default_factory=list)
    next_link: str | None = Field(default=None, alias="nextLink")


class AddApplicationParameters(ResourceModel):
    allow_updates: bool | None = Field(default=None, alias="allowUpdates")
    display_name: str | None = Field(default=None, alias="displayName")


class UpdateApplicationParameters(ResourceModel):
    allow_updates: bool | None = Field(default=None, alias="allowUpdates")
    default_version: str | None = Field(default=None, alias="defaultVersion")
    display_name: str | None = Field(default=None, alias="displayName")


class ActivateApplicationPackageParameters(ResourceModel):
    format: str | None = None

    required_fields = ("format",)


class AutoStorageBaseProperties(ResourceModel):
    storage_account_id: str | None = Field(default=None, alias="storageAccountId")

    required_fields = ("storage_account_id",)


class AutoStorageProperties(AutoStorageBaseProperties):
    last_key_sync: WireDateTime | None = Field(default=None, alias="lastKeySync")


class BatchAccountCreateParameters(ResourceModel):
    location: str | None = None
    tags: dict[str, str] | None = None
    auto_storage: AutoStorageBaseProperties | None = Field(default=None, alias="autoStorage")

    required_fields = ("location",)

    def to_wire(self) -> dict[str, object]:
        payload = super().to_wire()
        auto_storage = payload.pop("autoStorage", None)
        if auto_storage is not None:
            payload["properties"] = {"autoStorage": auto_storage}
        return payload


class BatchAccountProperties(ResourceModel):
    account_endpoint: str | None = Field(default=None, alias="accountEndpoint")
    provisioning_state: str | None = Field(default=None, alias="provisioningState")
    auto_storage: AutoStorageProperties | None = Field(default=None, alias="autoStorage")
    core_quota: int | None = Field(default=None, alias="coreQuota")
    pool_quota: int | None = Field(default=None, alias="poolQuota")
    active_job_and_job_schedule_quota: int | None = Field(
        default=None, alias="activeJobAndJobScheduleQuota"
    )


class BatchAccount(ResourceModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None
    location: str | None = None
    tags: dict[str, str] | None = None
    properties: BatchAccountProperties | None = None

    @property
    def provisioning_state(self) -> str | None:
        return self.properties.provisioning_state if self.properties else None


__all__ = [
    "ActivateApplicationPackageParameters",
    "AddApplicationParameters",
    "Application",
    "ApplicationListResult",
    "ApplicationPackage",
    "AutoStorageBaseProperties",
    "AutoStorageProperties",
    "BatchAccount",
    "BatchAccountCreateParameters",
    "BatchAccountProperties",
    "PackageState",
    "UpdateApplicationParameters",
]
