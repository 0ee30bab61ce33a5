"""Defines the contract for AMQP connections."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type

from pika.adapters.blocking_connection import BlockingChannel

from buneary.models import Message, Queue


class IAMQPConnection(ABC):
    """Represents an AMQP connection capable of producing blocking channels."""

    @abstractmethod
    def connect(self) -> BlockingChannel:
        """Open a fresh connection and return a channel on it."""

    @abstractmethod
    def publish(self, message: Message) -> None:
        """Publish a message, connecting first if no channel is open."""

    @abstractmethod
    def declare_queue(self, queue: Queue) -> str:
        """Declare a queue and return the name the server assigned to it."""

    @abstractmethod
    def close(self) -> None:
        """Close the connection and associated resources."""

    @abstractmethod
    def __enter__(self) -> IAMQPConnection:
        """Enter a managed connection context."""

    @abstractmethod
    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        """Exit a managed connection context."""
