"""Configuration primitives for wiring a `RabbitMQProvider`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from buneary.config import RabbitMQConfig
from buneary.connection import AMQPConnection
from buneary.contracts import IAMQPConnection, IManagementClient
from buneary.management import ManagementClient


@dataclass(frozen=True)
class ProviderDependencies:
    """Bundles the transport factories a provider calls for every operation."""

    make_amqp_connection: Callable[[RabbitMQConfig], IAMQPConnection] = field(
        default=lambda config: AMQPConnection(config)
    )
    make_management_client: Callable[[RabbitMQConfig], IManagementClient] = field(
        default=lambda config: ManagementClient(config)
    )
