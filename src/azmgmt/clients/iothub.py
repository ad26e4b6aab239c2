from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..models.iothub import (
    CertificateDescription,
    CertificateListDescription,
    CertificateProperties,
    CertificateVerificationDescription,
    CertificateWithNonceDescription,
    IotHubDescription,
    IotHubDescriptionListResult,
)
from ._base import ManagementClient, OperationGroup, require

DEFAULT_API_VERSION = "2020-03-01"

_PROVIDER = "Microsoft.Devices/IotHubs"


def _if_match(etag: str | None) -> dict[str, str] | None:
    return {"If-Match": etag} if etag else None


class IotHubResourceOperations(OperationGroup):
    _client: IotHubClient

    def create_or_update(
        self,
        resource_group_name: str,
        resource_name: str,
        iot_hub_description: IotHubDescription,
        if_match: str | None = None,
        *,
        raw: bool = False,
    ) -> Any:
        """Create or update a hub; updates must carry the current ``etag``."""

        require("resource_group_name", resource_group_name)
        require("resource_name", resource_name)
        require("iot_hub_description", iot_hub_description)
        iot_hub_description.validate_required()
        hub, resp = self._client._create_or_update(
            self._client._hub_path(resource_group_name, resource_name),
            iot_hub_description.to_wire(),
            IotHubDescription,
            headers=_if_match(if_match or iot_hub_description.etag),
        )
        return self._client._result(hub, resp, raw)

    def get(self, resource_group_name: str, resource_name: str, *, raw: bool = False) -> Any:
        require("resource_group_name", resource_group_name)
        require("resource_name", resource_name)
        resp = self._client._send(
            "GET", self._client._hub_path(resource_group_name, resource_name), expected=(200,)
        )
        return self._client._result(self._client._deserialize(IotHubDescription, resp), resp, raw)

    def list_by_resource_group(self, resource_group_name: str) -> list[IotHubDescription]:
        require("resource_group_name", resource_group_name)
        path = self._client._provider_path(resource_group_name, _PROVIDER)
        return list(self._client._iter_pages(path, IotHubDescriptionListResult))

    def delete(self, resource_group_name: str, resource_name: str, *, raw: bool = False) -> Any:
        require("resource_group_name", resource_group_name)
        require("resource_name", resource_name)
        resp = self._client._delete(self._client._hub_path(resource_group_name, resource_name))
        return self._client._result(None, resp, raw)


class CertificatesOperations(OperationGroup):
    """X.509 CA certificates registered with an IoT hub."""

    _client: IotHubClient

    def _path(
        self, resource_group_name: str, resource_name: str, certificate_name: str, *segments: str
    ) -> str:
        return self._client._hub_path(
            resource_group_name, resource_name, "certificates", certificate_name, *segments
        )

    def list_by_iot_hub(
        self, resource_group_name: str, resource_name: str, *, raw: bool = False
    ) -> Any:
        require("resource_group_name", resource_group_name)
        require("resource_name", resource_name)
        resp = self._client._send(
            "GET",
            self._client._hub_path(resource_group_name, resource_name, "certificates"),
            expected=(200,),
        )
        certificates = self._client._deserialize(CertificateListDescription, resp)
        return self._client._result(certificates, resp, raw)

    def get(
        self,
        resource_group_name: str,
        resource_name: str,
        certificate_name: str,
        *,
        raw: bool = False,
    ) -> Any:
        require("resource_group_name", resource_group_name)
        require("resource_name", resource_name)
        require("certificate_name", certificate_name)
        resp = self._client._send(
            "GET",
            self._path(resource_group_name, resource_name, certificate_name),
            expected=(200,),
        )
        certificate = self._client._deserialize(CertificateDescription, resp)
        return self._client._result(certificate, resp, raw)

    def create_or_update(
        self,
        resource_group_name: str,
        resource_name: str,
        certificate_name: str,
        if_match: str | None,
        properties: CertificateProperties,
        *,
        raw: bool = False,
    ) -> Any:
        """Upload a certificate; pass ``if_match`` to replace an existing one."""

        require("resource_group_name", resource_group_name)
        require("resource_name", resource_name)
        require("certificate_name", certificate_name)
        require("properties", properties)
        body = CertificateDescription(properties=properties).to_wire()
        resp = self._client._send(
            "PUT",
            self._path(resource_group_name, resource_name, certificate_name),
            expected=(200, 201),
            body=body,
            headers=_if_match(if_match),
        )
        certificate = self._client._deserialize(CertificateDescription, resp)
        return self._client._result(certificate, resp, raw)

    def generate_verification_code(
        self,
        resource_group_name: str,
        resource_name: str,
        certificate_name: str,
        if_match: str,
        *,
        raw: bool = False,
    ) -> Any:
        """Return the certificate with a nonce to sign for proof of possession."""

        require("resource_group_name", resource_group_name)
        require("resource_name", resource_name)
        require("certificate_name", certificate_name)
        require("if_match", if_match)
        resp = self._client._send(
            "POST",
            self._path(
                resource_group_name, resource_name, certificate_name, "generateVerificationCode"
            ),
            expected=(200,),
            headers=_if_match(if_match),
        )
        certificate = self._client._deserialize(CertificateWithNonceDescription, resp)
        return self._client._result(certificate, resp, raw)

    def verify(
        self,
        resource_group_name: str,
        resource_name: str,
        certificate_name: str,
        if_match: str,
        certificate: str,
        *,
        raw: bool = False,
    ) -> Any:
        """Submit the signed verification certificate (PEM) for a CA certificate."""

        require("resource_group_name", resource_group_name)
        require("resource_name", resource_name)
        require("certificate_name", certificate_name)
        require("if_match", if_match)
        require("certificate", certificate)
        body = CertificateVerificationDescription(certificate=certificate).to_wire()
        resp = self._client._send(
            "POST",
            self._path(resource_group_name, resource_name, certificate_name, "verify"),
            expected=(200,),
            body=body,
            headers=_if_match(if_match),
        )
        verified = self._client._deserialize(CertificateDescription, resp)
        return self._client._result(verified, resp, raw)

    def delete(
        self,
        resource_group_name: str,
        resource_name: str,
        certificate_name: str,
        if_match: str,
        *,
        raw: bool = False,
    ) -> Any:
        require("resource_group_name", resource_group_name)
        require("resource_name", resource_name)
        require("certificate_name", certificate_name)
        require("if_match", if_match)
        resp = self._client._send(
            "DELETE",
            self._path(resource_group_name, resource_name, certificate_name),
            expected=(200, 204),
            headers=_if_match(if_match),
        )
        return self._client._result(None, resp, raw)


class IotHubClient(ManagementClient):
    """Client for IoT hubs and their CA certificates."""

    default_api_version = DEFAULT_API_VERSION

    def __init__(
        self,
        token_getter: Callable[[], str] | None = None,
        subscription_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(token_getter, subscription_id, **kwargs)
        self.iot_hub_resource = IotHubResourceOperations(self)
        self.certificates = CertificatesOperations(self)

    def _hub_path(self, resource_group_name: str, resource_name: str, *segments: str) -> str:
        return self._provider_path(resource_group_name, _PROVIDER, resource_name, *segments)


__all__ = [
    "CertificatesOperations",
    "DEFAULT_API_VERSION",
    "IotHubClient",
    "IotHubResourceOperations",
]
