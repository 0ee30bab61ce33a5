"""Contract interfaces for buneary transports and providers."""

from .amqp_connection_interface import IAMQPConnection
from .management_client_interface import IManagementClient
from .message_publisher_interface import IMessagePublisher
from .provider_interface import IProvider

__all__ = [
    "IAMQPConnection",
    "IManagementClient",
    "IMessagePublisher",
    "IProvider",
]
