"""RabbitMQ client for managing exchanges, queues and bindings and for publishing messages."""

from importlib.metadata import PackageNotFoundError, version

from .config import API_DEFAULT_PORT, AMQP_DEFAULT_PORT, RabbitMQConfig
from .connection import AMQPConnection
from .contracts import IAMQPConnection, IManagementClient, IProvider
from .errors import (
    BrokerConnectionError,
    BunearyError,
    ConfigError,
    DeclareError,
    DeleteError,
    ListError,
    NotFoundError,
    PublishError,
    ReadError,
)
from .management import ManagementClient
from .models import Binding, BindingType, Exchange, ExchangeType, Message, Queue, QueueType
from .provider import ProviderDependencies, RabbitMQProvider

try:
    __version__ = version("buneary")
except PackageNotFoundError:
    __version__ = "UNDEFINED"

__all__ = [
    "AMQP_DEFAULT_PORT",
    "API_DEFAULT_PORT",
    "AMQPConnection",
    "Binding",
    "BindingType",
    "BrokerConnectionError",
    "BunearyError",
    "ConfigError",
    "DeclareError",
    "DeleteError",
    "Exchange",
    "ExchangeType",
    "IAMQPConnection",
    "IManagementClient",
    "IProvider",
    "ListError",
    "ManagementClient",
    "Message",
    "NotFoundError",
    "ProviderDependencies",
    "PublishError",
    "Queue",
    "QueueType",
    "RabbitMQConfig",
    "RabbitMQProvider",
    "ReadError",
]
