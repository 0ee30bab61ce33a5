"""Defines the contract for the RabbitMQ management API client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List

from buneary.models import Binding, Exchange, Message, Queue


class IManagementClient(ABC):
    """Performs topology changes and message reads over the HTTP management API."""

    @abstractmethod
    def declare_exchange(self, exchange: Exchange) -> None:
        """Create an exchange. Declaring an existing, identical exchange is a no-op."""

    @abstractmethod
    def declare_queue(self, queue: Queue) -> str:
        """Create a named queue and return its name."""

    @abstractmethod
    def declare_binding(self, binding: Binding) -> None:
        """Create a binding from an exchange to a queue or exchange."""

    @abstractmethod
    def list_exchanges(self, predicate: Callable[[Exchange], bool]) -> List[Exchange]:
        """Return all exchanges accepted by ``predicate``, in server order."""

    @abstractmethod
    def list_queues(self, predicate: Callable[[Queue], bool]) -> List[Queue]:
        """Return all queues accepted by ``predicate``, in server order."""

    @abstractmethod
    def list_bindings(self, predicate: Callable[[Binding], bool]) -> List[Binding]:
        """Return all bindings accepted by ``predicate``, in server order."""

    @abstractmethod
    def get_messages(self, queue: Queue, max_messages: int, requeue: bool) -> List[Message]:
        """Read up to ``max_messages`` messages from ``queue``."""

    @abstractmethod
    def delete_exchange(self, name: str) -> None:
        """Delete the exchange called ``name``."""

    @abstractmethod
    def delete_queue(self, name: str) -> None:
        """Delete the queue called ``name``."""
