"""Error types raised by buneary operations."""

from __future__ import annotations


class BunearyError(Exception):
    """Base class for all errors raised by buneary."""


class ConfigError(BunearyError, ValueError):
    """Raised when the RabbitMQ address or credentials are malformed."""


class BrokerConnectionError(BunearyError):
    """Raised when a connection, channel or HTTP session cannot be set up."""


class DeclareError(BunearyError):
    """Raised when the server rejects an exchange, queue or binding declaration."""


class ListError(BunearyError):
    """Raised when a topology snapshot cannot be fetched or decoded."""


class ReadError(BunearyError):
    """Raised when messages cannot be read from a queue."""


class PublishError(BunearyError):
    """Raised when a message cannot be handed to the AMQP channel."""


class DeleteError(BunearyError):
    """Raised when the server rejects a deletion."""


class NotFoundError(DeleteError):
    """Raised when the exchange or queue to delete does not exist."""
