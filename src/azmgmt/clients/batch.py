from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..models.batch import (
    ActivateApplicationPackageParameters,
    AddApplicationParameters,
    Application,
    ApplicationListResult,
    ApplicationPackage,
    BatchAccount,
    BatchAccountCreateParameters,
    UpdateApplicationParameters,
)
from ._base import ManagementClient, OperationGroup, require

DEFAULT_API_VERSION = "2015-12-01"

_PROVIDER = "Microsoft.Batch/batchAccounts"


class AccountOperations(OperationGroup):
    """Batch account lifecycle."""

    _client: BatchManagementClient

    def create(
        self,
        resource_group_name: str,
        account_name: str,
        parameters: BatchAccountCreateParameters,
        *,
        raw: bool = False,
    ) -> Any:
        """Create a Batch account, waiting for provisioning to finish."""

        require("resource_group_name", resource_group_name)
        require("account_name", account_name)
        require("parameters", parameters)
        parameters.validate_required()
        path = self._client._account_path(resource_group_name, account_name)
        account, resp = self._client._create_or_update(
            path, parameters.to_wire(), BatchAccount, expected=(200, 202)
        )
        return self._client._result(account, resp, raw)

    def get(self, resource_group_name: str, account_name: str, *, raw: bool = False) -> Any:
        require("resource_group_name", resource_group_name)
        require("account_name", account_name)
        path = self._client._account_path(resource_group_name, account_name)
        resp = self._client._send("GET", path, expected=(200,))
        return self._client._result(self._client._deserialize(BatchAccount, resp), resp, raw)

    def delete(self, resource_group_name: str, account_name: str, *, raw: bool = False) -> Any:
        require("resource_group_name", resource_group_name)
        require("account_name", account_name)
        path = self._client._account_path(resource_group_name, account_name)
        resp = self._client._delete(path)
        return self._client._result(None, resp, raw)


class ApplicationOperations(OperationGroup):
    """Applications and application packages within a Batch account."""

    _client: BatchManagementClient

    def add_application(
        self,
        resource_group_name: str,
        account_name: str,
        application_id: str,
        parameters: AddApplicationParameters | None = None,
        *,
        raw: bool = False,
    ) -> Any:
        """Register an application; the service may answer without a body."""

        require("resource_group_name", resource_group_name)
        require("account_name", account_name)
        require("application_id", application_id)
        path = self._client._application_path(resource_group_name, account_name, application_id)
        body = parameters.to_wire() if parameters is not None else None
        resp = self._client._send("PUT", path, expected=(201,), body=body)
        application = None
        if resp.content:
            application = self._client._deserialize(Application, resp)
        return self._client._result(application, resp, raw)

    def get_application(
        self,
        resource_group_name: str,
        account_name: str,
        application_id: str,
        *,
        raw: bool = False,
    ) -> Any:
        require("resource_group_name", resource_group_name)
        require("account_name", account_name)
        require("application_id", application_id)
        path = self._client._application_path(resource_group_name, account_name, application_id)
        resp = self._client._send("GET", path, expected=(200,))
        return self._client._result(self._client._deserialize(Application, resp), resp, raw)

    def list(
        self,
        resource_group_name: str,
        account_name: str,
        *,
        maxresults: int | None = None,
    ) -> list[Application]:
        """Return every application in the account, following ``nextLink`` pages."""

        require("resource_group_name", resource_group_name)
        require("account_name", account_name)
        path = self._client._account_path(resource_group_name, account_name, "applications")
        extra = {"maxresults": maxresults} if maxresults is not None else None
        return list(
            self._client._iter_pages(
                path, ApplicationListResult, params=self._client._with_api_version(extra)
            )
        )

    def update_application(
        self,
        resource_group_name: str,
        account_name: str,
        application_id: str,
        parameters: UpdateApplicationParameters,
        *,
        raw: bool = False,
    ) -> Any:
        require("resource_group_name", resource_group_name)
        require("account_name", account_name)
        require("application_id", application_id)
        require("parameters", parameters)
        path = self._client._application_path(resource_group_name, account_name, application_id)
        resp = self._client._send("PATCH", path, expected=(204,), body=parameters.to_wire())
        return self._client._result(None, resp, raw)

    def delete_application(
        self,
        resource_group_name: str,
        account_name: str,
        application_id: str,
        *,
        raw: bool = False,
    ) -> Any:
        require("resource_group_name", resource_group_name)
        require("account_name", account_name)
        require("application_id", application_id)
        path = self._client._application_path(resource_group_name, account_name, application_id)
        resp = self._client._send("DELETE", path, expected=(204,))
        return self._client._result(None, resp, raw)

    def add_application_package(
        self,
        resource_group_name: str,
        account_name: str,
        application_id: str,
        version: str,
        *,
        raw: bool = False,
    ) -> Any:
        """Create a package slot; the result carries the upload ``storage_url``."""

        require("resource_group_name", resource_group_name)
        require("account_name", account_name)
        require("application_id", application_id)
        require("version", version)
        path = self._client._package_path(resource_group_name, account_name, application_id, version)
        resp = self._client._send("PUT", path, expected=(201,))
        package = self._client._deserialize(ApplicationPackage, resp)
        return self._client._result(package, resp, raw)

    def get_application_package(
        self,
        resource_group_name: str,
        account_name: str,
        application_id: str,
        version: str,
        *,
        raw: bool = False,
    ) -> Any:
        require("resource_group_name", resource_group_name)
        require("account_name", account_name)
        require("application_id", application_id)
        require("version", version)
        path = self._client._package_path(resource_group_name, account_name, application_id, version)
        resp = self._client._send("GET", path, expected=(200,))
        package = self._client._deserialize(ApplicationPackage, resp)
        return self._client._result(package, resp, raw)

    def activate_application_package(
        self,
        resource_group_name: str,
        account_name: str,
        application_id: str,
        version: str,
        parameters: ActivateApplicationPackageParameters,
        *,
        raw: bool = False,
    ) -> Any:
        """Activate an uploaded package so pools can reference it."""

        require("resource_group_name", resource_group_name)
        require("account_name", account_name)
        require("application_id", application_id)
        require("version", version)
        require("parameters", parameters)
        parameters.validate_required()
        path = self._client._package_path(
            resource_group_name, account_name, application_id, version, "activate"
        )
        resp = self._client._send("POST", path, expected=(204,), body=parameters.to_wire())
        return self._client._result(None, resp, raw)

    def delete_application_package(
        self,
        resource_group_name: str,
        account_name: str,
        application_id: str,
        version: str,
        *,
        raw: bool = False,
    ) -> Any:
        require("resource_group_name", resource_group_name)
        require("account_name", account_name)
        require("application_id", application_id)
        require("version", version)
        path = self._client._package_path(resource_group_name, account_name, application_id, version)
        resp = self._client._send("DELETE", path, expected=(204,))
        return self._client._result(None, resp, raw)


class BatchManagementClient(ManagementClient):
    """Client for Batch accounts and application packages."""

    default_api_version = DEFAULT_API_VERSION

    def __init__(
        self,
        token_getter: Callable[[], str] | None = None,
        subscription_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(token_getter, subscription_id, **kwargs)
        self.account = AccountOperations(self)
        self.application = ApplicationOperations(self)

    def _account_path(self, resource_group_name: str, account_name: str, *segments: str) -> str:
        return self._provider_path(resource_group_name, _PROVIDER, account_name, *segments)

    def _application_path(
        self, resource_group_name: str, account_name: str, application_id: str, *segments: str
    ) -> str:
        return self._account_path(
            resource_group_name, account_name, "applications", application_id, *segments
        )

    def _package_path(
        self,
        resource_group_name: str,
        account_name: str,
        application_id: str,
        version: str,
        *segments: str,
    ) -> str:
        return self._application_path(
            resource_group_name, account_name, application_id, "versions", version, *segments
        )


__all__ = [
    "AccountOperations",
    "ApplicationOperations",
    "BatchManagementClient",
    "DEFAULT_API_VERSION",
]
