"""Operations shared by the Event Hubs and Service Bus providers.

Both providers expose namespaces containing entities (event hubs, queues or
topics) that carry shared access authorization rules and key listings under
identical paths. The concrete clients bind these operation groups to their
provider namespace and entity collection.
"""

from __future__ import annotations

from typing import Any, Generic

from ..models.common import AccessKeys, SharedAccessAuthorizationRule
from ._base import ManagementClient, ModelType, OperationGroup, require


class NamespaceOperations(OperationGroup, Generic[ModelType]):
    def __init__(
        self, client: ManagementClient, provider: str, model_cls: type[ModelType]
    ) -> None:
        super().__init__(client)
        self._provider = provider
        self._model_cls = model_cls

    def _path(self, resource_group_name: str, namespace_name: str) -> str:
        return self._client._provider_path(
            resource_group_name, self._provider, "namespaces", namespace_name
        )

    def create_or_update(
        self,
        resource_group_name: str,
        namespace_name: str,
        parameters: ModelType,
        *,
        raw: bool = False,
    ) -> Any:
        """Create or update a namespace, waiting until provisioning completes."""

        require("resource_group_name", resource_group_name)
        require("namespace_name", namespace_name)
        require("parameters", parameters)
        parameters.validate_required()
        namespace, resp = self._client._create_or_update(
            self._path(resource_group_name, namespace_name),
            parameters.to_wire(),
            self._model_cls,
        )
        return self._client._result(namespace, resp, raw)

    def get(self, resource_group_name: str, namespace_name: str, *, raw: bool = False) -> Any:
        require("resource_group_name", resource_group_name)
        require("namespace_name", namespace_name)
        resp = self._client._send(
            "GET", self._path(resource_group_name, namespace_name), expected=(200,)
        )
        return self._client._result(self._client._deserialize(self._model_cls, resp), resp, raw)

    def delete(self, resource_group_name: str, namespace_name: str, *, raw: bool = False) -> Any:
        require("resource_group_name", resource_group_name)
        require("namespace_name", namespace_name)
        resp = self._client._delete(self._path(resource_group_name, namespace_name))
        return self._client._result(None, resp, raw)


class EntityOperations(OperationGroup, Generic[ModelType]):
    """CRUD plus authorization rules for one entity collection of a namespace."""

    def __init__(
        self,
        client: ManagementClient,
        provider: str,
        collection: str,
        name_argument: str,
        model_cls: type[ModelType],
    ) -> None:
        super().__init__(client)
        self._provider = provider
        self._collection = collection
        self._name_argument = name_argument
        self._model_cls = model_cls

    def _path(
        self, resource_group_name: str, namespace_name: str, entity_name: str, *segments: str
    ) -> str:
        return self._client._provider_path(
            resource_group_name,
            self._provider,
            "namespaces",
            namespace_name,
            self._collection,
            entity_name,
            *segments,
        )

    def _require_entity(
        self, resource_group_name: str, namespace_name: str, entity_name: str
    ) -> None:
        require("resource_group_name", resource_group_name)
        require("namespace_name", namespace_name)
        require(self._name_argument, entity_name)

    def create_or_update(
        self,
        resource_group_name: str,
        namespace_name: str,
        entity_name: str,
        parameters: ModelType | None = None,
        *,
        raw: bool = False,
    ) -> Any:
        self._require_entity(resource_group_name, namespace_name, entity_name)
        payload = parameters if parameters is not None else self._model_cls()
        payload.validate_required()
        resp = self._client._send(
            "PUT",
            self._path(resource_group_name, namespace_name, entity_name),
            expected=(200, 201),
            body=payload.to_wire(),
        )
        return self._client._result(self._client._deserialize(self._model_cls, resp), resp, raw)

    def get(
        self, resource_group_name: str, namespace_name: str, entity_name: str, *, raw: bool = False
    ) -> Any:
        self._require_entity(resource_group_name, namespace_name, entity_name)
        resp = self._client._send(
            "GET", self._path(resource_group_name, namespace_name, entity_name), expected=(200,)
        )
        return self._client._result(self._client._deserialize(self._model_cls, resp), resp, raw)

    def delete(
        self, resource_group_name: str, namespace_name: str, entity_name: str, *, raw: bool = False
    ) -> Any:
        self._require_entity(resource_group_name, namespace_name, entity_name)
        resp = self._client._send(
            "DELETE",
            self._path(resource_group_name, namespace_name, entity_name),
            expected=(200, 204),
        )
        return self._client._result(None, resp, raw)

    def create_or_update_authorization_rule(
        self,
        resource_group_name: str,
        namespace_name: str,
        entity_name: str,
        authorization_rule_name: str,
        parameters: SharedAccessAuthorizationRule,
        *,
        raw: bool = False,
    ) -> Any:
        self._require_entity(resource_group_name, namespace_name, entity_name)
        require("authorization_rule_name", authorization_rule_name)
        require("parameters", parameters)
        parameters.validate_required()
        resp = self._client._send(
            "PUT",
            self._path(
                resource_group_name,
                namespace_name,
                entity_name,
                "authorizationRules",
                authorization_rule_name,
            ),
            expected=(200,),
            body=parameters.to_wire(),
        )
        rule = self._client._deserialize(SharedAccessAuthorizationRule, resp)
        return self._client._result(rule, resp, raw)

    def list_keys(
        self,
        resource_group_name: str,
        namespace_name: str,
        entity_name: str,
        authorization_rule_name: str,
        *,
        raw: bool = False,
    ) -> Any:
        """Return the primary/secondary keys and connection strings of a rule."""

        self._require_entity(resource_group_name, namespace_name, entity_name)
        require("authorization_rule_name", authorization_rule_name)
        resp = self._client._send(
            "POST",
            self._path(
                resource_group_name,
                namespace_name,
                entity_name,
                "authorizationRules",
                authorization_rule_name,
                "listKeys",
            ),
            expected=(200,),
        )
        return self._client._result(self._client._deserialize(AccessKeys, resp), resp, raw)


__all__ = ["EntityOperations", "NamespaceOperations"]
