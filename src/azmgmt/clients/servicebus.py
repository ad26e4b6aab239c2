from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..models.servicebus import Queue, ServiceBusNamespace, Topic
from ._base import ManagementClient
from ._messaging import EntityOperations, NamespaceOperations

DEFAULT_API_VERSION = "2017-04-01"

_PROVIDER = "Microsoft.ServiceBus"


class ServiceBusManagementClient(ManagementClient):
    """Client for Service Bus namespaces, queues, topics and their access rules."""

    default_api_version = DEFAULT_API_VERSION

    def __init__(
        self,
        token_getter: Callable[[], str] | None = None,
        subscription_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(token_getter, subscription_id, **kwargs)
        self.namespaces = NamespaceOperations(self, _PROVIDER, ServiceBusNamespace)
        self.queues = EntityOperations(self, _PROVIDER, "queues", "queue_name", Queue)
        self.topics = EntityOperations(self, _PROVIDER, "topics", "topic_name", Topic)


__all__ = ["DEFAULT_API_VERSION", "ServiceBusManagementClient"]
