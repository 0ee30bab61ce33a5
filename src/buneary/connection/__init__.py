"""AMQP connectivity."""

from .amqp_connection import AMQPConnection

__all__ = ["AMQPConnection"]
