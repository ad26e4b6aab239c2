from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..models.eventhubs import EventHub, EventHubNamespace
from ._base import ManagementClient
from ._messaging import EntityOperations, NamespaceOperations

DEFAULT_API_VERSION = "2017-04-01"

_PROVIDER = "Microsoft.EventHub"


class EventHubManagementClient(ManagementClient):
    """Client for Event Hubs namespaces, event hubs and their access rules."""

    default_api_version = DEFAULT_API_VERSION

    def __init__(
        self,
        token_getter: Callable[[], str] | None = None,
        subscription_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(token_getter, subscription_id, **kwargs)
        self.namespaces = NamespaceOperations(self, _PROVIDER, EventHubNamespace)
        self.event_hubs = EntityOperations(self, _PROVIDER, "eventhubs", "event_hub_name", EventHub)


__all__ = ["DEFAULT_API_VERSION", "EventHubManagementClient"]
