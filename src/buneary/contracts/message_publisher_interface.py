"""Defines the contract for publishing messages on a channel."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pika.adapters.blocking_connection import BlockingChannel

from buneary.models import Message


class IMessagePublisher(ABC):
    """Turns a message into an AMQP publish frame."""

    @abstractmethod
    def publish(self, *, channel: BlockingChannel, message: Message) -> None:
        """Send a message to its target exchange."""
