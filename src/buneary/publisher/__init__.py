"""AMQP message publishing."""

from .amqp_message_publisher import AMQPMessagePublisher

__all__ = ["AMQPMessagePublisher"]
