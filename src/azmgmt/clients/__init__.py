from ._base import RawResponse as RawResponse
from .batch import BatchManagementClient as BatchManagementClient
from .eventhubs import EventHubManagementClient as EventHubManagementClient
from .iothub import IotHubClient as IotHubClient
from .resources import ResourceManagementClient as ResourceManagementClient
from .servicebus import ServiceBusManagementClient as ServiceBusManagementClient

__all__ = [
    "BatchManagementClient",
    "EventHubManagementClient",
    "IotHubClient",
    "RawResponse",
    "ResourceManagementClient",
    "ServiceBusManagementClient",
]
