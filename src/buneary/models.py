"""Protocol-agnostic representations of RabbitMQ entities."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Union

_NAME_PATTERN = re.compile(r"[A-Za-z0-9\-_.:]+")


class ExchangeType(str, Enum):
    """Routing behavior of an exchange. Cannot be changed after creation."""

    DIRECT = "direct"
    HEADERS = "headers"
    FANOUT = "fanout"
    TOPIC = "topic"


class QueueType(str, Enum):
    CLASSIC = "classic"
    QUORUM = "quorum"


class BindingType(str, Enum):
    """Whether a binding targets a queue or another exchange."""

    TO_QUEUE = "queue"
    TO_EXCHANGE = "exchange"


def is_valid_name(name: str) -> bool:
    """Return whether ``name`` is a usable exchange or queue name.

    Valid names are not empty and only contain letters, digits, hyphens,
    underscores, periods and colons.
    """
    return _NAME_PATTERN.fullmatch(name) is not None


@dataclass(frozen=True)
class Exchange:
    """A RabbitMQ exchange.

    Names starting with ``amq.`` denote pre-defined exchanges. Exchanges read
    from the server may carry a type outside :class:`ExchangeType` (e.g. a
    plugin-provided type); it is then kept as a plain string.
    """

    name: str
    type: Union[ExchangeType, str] = ExchangeType.DIRECT
    durable: bool = False
    auto_delete: bool = False
    internal: bool = False
    no_wait: bool = False


@dataclass(frozen=True)
class Queue:
    """A message queue.

    An empty ``name`` asks the server to generate one. ``messages``, ``node`` and
    ``messages_unacknowledged`` are reported by the server and only populated when
    listing queues.
    """

    name: str = ""
    type: Union[QueueType, str] = QueueType.CLASSIC
    durable: bool = False
    auto_delete: bool = False
    messages: int = 0
    node: str = ""
    messages_unacknowledged: int = 0


@dataclass(frozen=True)
class Binding:
    """Routes messages from ``source`` to the queue or exchange named ``target_name``.

    Only the name of ``source`` is sent to the server. Binding a durable queue
    requires a durable source exchange; the server enforces this.
    """

    source: Exchange
    target_name: str
    key: str = ""
    type: Union[BindingType, str] = BindingType.TO_QUEUE


@dataclass(frozen=True)
class Message:
    """A message published to, or read back from, an exchange."""

    target: Exchange
    body: bytes = b""
    routing_key: str = ""
    headers: Dict[str, Any] = field(default_factory=dict)


def wire_value(value: Union[Enum, str]) -> str:
    """Return the string sent over the wire for an enum member or plain string."""
    if isinstance(value, Enum):
        return str(value.value)
    return value
