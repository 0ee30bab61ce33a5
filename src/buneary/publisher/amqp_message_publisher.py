"""Publishes domain messages as AMQP basic.publish frames."""

from __future__ import annotations

import logging
import time
from typing import Callable

import pika
from pika.adapters.blocking_connection import BlockingChannel

from buneary.contracts import IMessagePublisher
from buneary.models import Message


class AMQPMessagePublisher(IMessagePublisher):
    """Publishes messages to an exchange without waiting for broker confirms."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self.logger = logging.getLogger(__name__)
        self._clock = clock

    def publish(self, *, channel: BlockingChannel, message: Message) -> None:
        channel.basic_publish(
            exchange=message.target.name,
            routing_key=message.routing_key,
            body=message.body,
            properties=pika.BasicProperties(
                headers=dict(message.headers),
                timestamp=int(self._clock()),
            ),
            mandatory=False,
        )

        self.logger.info(
            "Published message to exchange %r with routing_key=%r",
            message.target.name,
            message.routing_key,
        )
