"""Defines the contract every buneary provider has to fulfil."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from buneary.models import Binding, Exchange, Message, Queue


class IProvider(ABC):
    """Single entry point for managing and using a RabbitMQ server."""

    @abstractmethod
    def create_exchange(self, exchange: Exchange) -> None:
        """Create a new exchange. Nothing happens if an identical one already exists."""

    @abstractmethod
    def create_queue(self, queue: Queue) -> str:
        """Create a new queue and return its name.

        If ``queue.name`` is empty, the server generates a name, which is returned.
        """

    @abstractmethod
    def create_binding(self, binding: Binding) -> None:
        """Create a new binding. Nothing happens if it already exists."""

    @abstractmethod
    def get_exchanges(
        self, predicate: Optional[Callable[[Exchange], bool]] = None
    ) -> List[Exchange]:
        """Return all exchanges passing ``predicate``; all of them if it is omitted."""

    @abstractmethod
    def get_queues(self, predicate: Optional[Callable[[Queue], bool]] = None) -> List[Queue]:
        """Return all queues passing ``predicate``; all of them if it is omitted."""

    @abstractmethod
    def get_bindings(
        self, predicate: Optional[Callable[[Binding], bool]] = None
    ) -> List[Binding]:
        """Return all bindings passing ``predicate``; all of them if it is omitted."""

    @abstractmethod
    def get_messages(self, queue: Queue, max_messages: int, requeue: bool) -> List[Message]:
        """Read up to ``max_messages`` messages from ``queue``.

        The messages are currently always re-queued by the server, whatever the
        value of ``requeue``.
        """

    @abstractmethod
    def publish_message(self, message: Message) -> None:
        """Publish a message to its target exchange, which must already exist."""

    @abstractmethod
    def delete_exchange(self, exchange: Exchange) -> None:
        """Delete an exchange. Fails if it does not exist."""

    @abstractmethod
    def delete_queue(self, queue: Queue) -> None:
        """Delete a queue. Fails if it does not exist."""
