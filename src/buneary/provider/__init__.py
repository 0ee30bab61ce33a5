"""Provider combining the AMQP and management API transports."""

from .provider_dependencies import ProviderDependencies
from .rabbitmq_provider import RabbitMQProvider

__all__ = ["ProviderDependencies", "RabbitMQProvider"]
