"""AMQP connection management."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Optional, Type

import pika
from pika.adapters.blocking_connection import BlockingChannel, BlockingConnection
from pika.connection import Parameters

from buneary.config import RabbitMQConfig
from buneary.contracts import IAMQPConnection, IMessagePublisher
from buneary.errors import BrokerConnectionError, ConfigError, DeclareError, PublishError
from buneary.models import Message, Queue, wire_value
from buneary.publisher import AMQPMessagePublisher


class AMQPConnection(IAMQPConnection):
    """Manages the lifecycle of a blocking AMQP connection used for publishing.

    Connections are never reused: :meth:`connect` always dials the server again,
    closing whatever channel and connection were open before. Use the instance as a
    context manager so the connection is released on every exit path.
    """

    def __init__(
        self,
        config: RabbitMQConfig,
        publisher: Optional[IMessagePublisher] = None,
    ) -> None:
        self.uri = config.uri()
        try:
            self._parameters: Parameters = pika.URLParameters(self.uri)
        except ValueError as exc:
            raise ConfigError(f"Invalid RabbitMQ address provided: {config.address}") from exc

        self._address = config.address
        self.publisher = publisher or AMQPMessagePublisher()
        self.connection: Optional[BlockingConnection] = None
        self.channel: Optional[BlockingChannel] = None
        self.logger = logging.getLogger(__name__)

    def connect(self) -> BlockingChannel:
        self.close()

        self.logger.info("Connecting to RabbitMQ at %s", self._address)
        try:
            self.connection = pika.BlockingConnection(self._parameters)
        except pika.exceptions.AMQPError as exc:
            self.logger.error("Failed to establish RabbitMQ connection: %s", exc)
            raise BrokerConnectionError(f"dialling RabbitMQ server: {exc}") from exc

        try:
            self.channel = self.connection.channel()
        except pika.exceptions.AMQPError as exc:
            self.logger.error("Failed to open AMQP channel: %s", exc)
            self.close()
            raise BrokerConnectionError(f"establishing AMQP channel: {exc}") from exc

        self.logger.info("Connected to RabbitMQ.")
        return self.channel

    def publish(self, message: Message) -> None:
        channel = self._open_channel()
        try:
            self.publisher.publish(channel=channel, message=message)
        except pika.exceptions.AMQPError as exc:
            self.logger.error("Failed to publish message: %s", exc)
            raise PublishError(f"publishing message: {exc}") from exc

    def declare_queue(self, queue: Queue) -> str:
        channel = self._open_channel()
        try:
            result = channel.queue_declare(
                queue=queue.name,
                durable=queue.durable,
                auto_delete=queue.auto_delete,
                arguments={"x-queue-type": wire_value(queue.type)},
            )
        except pika.exceptions.AMQPError as exc:
            self.logger.error("Failed to declare queue: %s", exc)
            raise DeclareError(f"declaring queue: {exc}") from exc

        name: str = result.method.queue
        self.logger.info("Declared queue %r", name)
        return name

    def close(self) -> None:
        channel, self.channel = self.channel, None
        connection, self.connection = self.connection, None

        try:
            if channel and not channel.is_closed:
                channel.close()
                self.logger.info("Closed AMQP channel.")
        except pika.exceptions.AMQPError as exc:
            self.logger.warning("Failed to close AMQP channel: %s", exc)
        finally:
            if connection and not connection.is_closed:
                try:
                    connection.close()
                    self.logger.info("Closed RabbitMQ connection.")
                except pika.exceptions.AMQPError as exc:
                    self.logger.warning("Failed to close RabbitMQ connection: %s", exc)

    def _open_channel(self) -> BlockingChannel:
        if self.channel is None or self.channel.is_closed:
            return self.connect()
        return self.channel

    def __enter__(self) -> AMQPConnection:
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()
