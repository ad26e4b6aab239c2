"""Clients and settings shared by the scenario tests of one test-suite run."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from ..clients._base import DEFAULT_BASE_URL
from ..clients.eventhubs import EventHubManagementClient
from ..clients.iothub import IotHubClient
from ..clients.resources import ResourceManagementClient
from ..clients.servicebus import ServiceBusManagementClient
from ..config import ACCESS_TOKEN_ENV, SUBSCRIPTION_ENV, resolve_subscription_id
from ..errors import ValidationError

logger = logging.getLogger(__name__)

LOCATION_ENV = "AZURE_VM_TEST_LOCATION"
DEFAULT_LOCATION = "westus2"


def resolve_test_location(
    env: Mapping[str, str] | None = None, default: str = DEFAULT_LOCATION
) -> str:
    """Return the region for scenario resources.

    A non-blank ``AZURE_VM_TEST_LOCATION`` wins, lowercased with spaces
    removed (``"West US 2"`` becomes ``"westus2"``).
    """

    source = os.environ if env is None else env
    value = source.get(LOCATION_ENV)
    if value is None or not value.strip():
        return default
    return value.replace(" ", "").lower()


@dataclass(frozen=True)
class ScenarioContext:
    resources: ResourceManagementClient
    iot_hub: IotHubClient
    event_hubs: EventHubManagementClient
    service_bus: ServiceBusManagementClient
    location: str
    subscription_id: str

    @classmethod
    def create(
        cls,
        subscription_id: str,
        *,
        token_getter: Callable[[], str] | None = None,
        transport_factory: Callable[[], httpx.BaseTransport] | None = None,
        base_url: str = DEFAULT_BASE_URL,
        location: str | None = None,
        env: Mapping[str, str] | None = None,
        **client_kwargs: Any,
    ) -> ScenarioContext:
        """Build every client against ``base_url``.

        ``transport_factory`` is called once per client, so each client can
        get its own recorded transport.
        """

        if not subscription_id:
            raise ValidationError("subscription_id")

        def transport() -> httpx.BaseTransport | None:
            return transport_factory() if transport_factory else None

        common = {"base_url": base_url, **client_kwargs}
        return cls(
            resources=ResourceManagementClient(
                token_getter, subscription_id, transport=transport(), **common
            ),
            iot_hub=IotHubClient(token_getter, subscription_id, transport=transport(), **common),
            event_hubs=EventHubManagementClient(
                token_getter, subscription_id, transport=transport(), **common
            ),
            service_bus=ServiceBusManagementClient(
                token_getter, subscription_id, transport=transport(), **common
            ),
            location=location or resolve_test_location(env),
            subscription_id=subscription_id,
        )

    @classmethod
    def from_environment(cls, env: Mapping[str, str] | None = None, **kwargs: Any) -> ScenarioContext:
        """Build a live context from ``AZURE_SUBSCRIPTION_ID`` and ``AZMGMT_ACCESS_TOKEN``."""

        source = os.environ if env is None else env
        subscription_id = source.get(SUBSCRIPTION_ENV) or resolve_subscription_id()
        token = source.get(ACCESS_TOKEN_ENV)
        token_getter = (lambda: token) if token else None
        return cls.create(subscription_id or "", token_getter=token_getter, env=env, **kwargs)

    def close(self) -> None:
        for client in (self.resources, self.iot_hub, self.event_hubs, self.service_bus):
            client.close()


class SharedContext:
    """Builds a :class:`ScenarioContext` on first use and reuses it afterwards.

    Concurrent first callers serialize on a lock; exactly one runs the
    factory and every caller receives the same instance.
    """

    def __init__(self, factory: Callable[[], ScenarioContext]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._value: ScenarioContext | None = None

    @property
    def initialized(self) -> bool:
        return self._value is not None

    def get(self) -> ScenarioContext:
        value = self._value
        if value is None:
            with self._lock:
                if self._value is None:
                    logger.info("Initializing shared scenario context")
                    self._value = self._factory()
                value = self._value
        return value

    def close(self) -> None:
        with self._lock:
            if self._value is not None:
                self._value.close()
                self._value = None


__all__ = [
    "DEFAULT_LOCATION",
    "LOCATION_ENV",
    "ScenarioContext",
    "SharedContext",
    "resolve_test_location",
]
