"""RabbitMQ HTTP management API access."""

from .management_client import GET_MESSAGES_ACKMODE, ManagementClient

__all__ = ["GET_MESSAGES_ACKMODE", "ManagementClient"]
