from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..models.resources import ResourceGroup, ResourceGroupListResult
from ._base import ManagementClient, OperationGroup, require

DEFAULT_API_VERSION = "2019-10-01"


class ResourceGroupOperations(OperationGroup):
    def create_or_update(
        self, resource_group_name: str, parameters: ResourceGroup, *, raw: bool = False
    ) -> Any:
        require("resource_group_name", resource_group_name)
        require("parameters", parameters)
        parameters.validate_required()
        path = self._client._subscription_path("resourcegroups", resource_group_name)
        resp = self._client._send("PUT", path, expected=(200, 201), body=parameters.to_wire())
        group = self._client._deserialize(ResourceGroup, resp)
        return self._client._result(group, resp, raw)

    def get(self, resource_group_name: str, *, raw: bool = False) -> Any:
        require("resource_group_name", resource_group_name)
        path = self._client._subscription_path("resourcegroups", resource_group_name)
        resp = self._client._send("GET", path, expected=(200,))
        return self._client._result(self._client._deserialize(ResourceGroup, resp), resp, raw)

    def check_existence(self, resource_group_name: str) -> bool:
        """Return ``True`` when the group exists (HEAD answers 204, 404 otherwise)."""

        require("resource_group_name", resource_group_name)
        path = self._client._subscription_path("resourcegroups", resource_group_name)
        resp = self._client._send("HEAD", path, expected=(204, 404))
        return resp.status_code == 204

    def list(self, *, top: int | None = None) -> list[ResourceGroup]:
        path = self._client._subscription_path("resourcegroups")
        extra = {"$top": top} if top is not None else None
        return list(
            self._client._iter_pages(
                path, ResourceGroupListResult, params=self._client._with_api_version(extra)
            )
        )

    def delete(self, resource_group_name: str, *, raw: bool = False) -> Any:
        """Delete the group and everything in it, waiting for completion."""

        require("resource_group_name", resource_group_name)
        path = self._client._subscription_path("resourcegroups", resource_group_name)
        resp = self._client._delete(path)
        return self._client._result(None, resp, raw)


class ResourceManagementClient(ManagementClient):
    """Client for subscription-level resource group management."""

    default_api_version = DEFAULT_API_VERSION

    def __init__(
        self,
        token_getter: Callable[[], str] | None = None,
        subscription_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(token_getter, subscription_id, **kwargs)
        self.resource_groups = ResourceGroupOperations(self)


__all__ = ["DEFAULT_API_VERSION", "ResourceGroupOperations", "ResourceManagementClient"]
