"""Client for the RabbitMQ HTTP management API."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar
from urllib.parse import quote

import requests

from buneary.config import DEFAULT_VHOST, RabbitMQConfig
from buneary.contracts import IManagementClient
from buneary.errors import (
    BrokerConnectionError,
    DeclareError,
    DeleteError,
    ListError,
    NotFoundError,
    ReadError,
)
from buneary.models import (
    Binding,
    BindingType,
    Exchange,
    ExchangeType,
    Message,
    Queue,
    QueueType,
    wire_value,
)

# Messages fetched through the API are always put back into the queue; see get_messages.
GET_MESSAGES_ACKMODE = "ack_requeue_true"

T = TypeVar("T")


class ManagementClient(IManagementClient):
    """Talks to the management API, opening a new HTTPS session for every call.

    All requests target the configured virtual host. Certificate validation follows
    ``RabbitMQConfig.verify_tls``, which is off by default.
    """

    def __init__(
        self,
        config: RabbitMQConfig,
        *,
        session_factory: Callable[[], requests.Session] = requests.Session,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.api_uri = config.api_uri()
        self._vhost = quote(DEFAULT_VHOST, safe="")
        self._auth = (config.user, config.password)
        self._verify = config.verify_tls
        self._timeout = config.timeout
        self._session_factory = session_factory
        self.logger = logger or logging.getLogger(__name__)

    def declare_exchange(self, exchange: Exchange) -> None:
        payload = {
            "type": wire_value(exchange.type),
            "durable": exchange.durable,
            "auto_delete": exchange.auto_delete,
            "internal": exchange.internal,
            "arguments": {},
        }
        try:
            response = self._send("PUT", self._path("exchanges", exchange.name), payload)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DeclareError(f"declaring exchange: {_describe(exc)}") from exc

        self.logger.info("Declared exchange %r", exchange.name)

    def declare_queue(self, queue: Queue) -> str:
        payload = {
            "durable": queue.durable,
            "auto_delete": queue.auto_delete,
            "arguments": {"x-queue-type": wire_value(queue.type)},
        }
        try:
            response = self._send("PUT", self._path("queues", queue.name), payload)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DeclareError(f"declaring queue: {_describe(exc)}") from exc

        self.logger.info("Declared queue %r", queue.name)
        return queue.name

    def declare_binding(self, binding: Binding) -> None:
        destination = "e" if binding.type == BindingType.TO_EXCHANGE else "q"
        path = "/api/bindings/{}/e/{}/{}/{}".format(
            self._vhost,
            quote(binding.source.name, safe=""),
            destination,
            quote(binding.target_name, safe=""),
        )
        payload = {"routing_key": binding.key, "arguments": {}}
        try:
            response = self._send("POST", path, payload)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DeclareError(f"declaring binding: {_describe(exc)}") from exc

        self.logger.info(
            "Declared binding %r -> %r with key %r",
            binding.source.name,
            binding.target_name,
            binding.key,
        )

    def list_exchanges(self, predicate: Callable[[Exchange], bool]) -> List[Exchange]:
        exchanges = self._list("exchanges", _to_exchange)
        return [exchange for exchange in exchanges if predicate(exchange)]

    def list_queues(self, predicate: Callable[[Queue], bool]) -> List[Queue]:
        queues = self._list("queues", _to_queue)
        return [queue for queue in queues if predicate(queue)]

    def list_bindings(self, predicate: Callable[[Binding], bool]) -> List[Binding]:
        bindings = self._list("bindings", _to_binding)
        return [binding for binding in bindings if predicate(binding)]

    def get_messages(self, queue: Queue, max_messages: int, requeue: bool) -> List[Message]:
        """Read up to ``max_messages`` messages from ``queue``.

        The request always uses the ``ack_requeue_true`` acknowledge mode, so the
        server puts every fetched message back into the queue no matter what
        ``requeue`` says. ``requeue`` is still sent along with the request.
        """
        payload = {
            "count": max_messages,
            "requeue": requeue,
            "encoding": "auto",
            "ackmode": GET_MESSAGES_ACKMODE,
        }
        path = self._path("queues", queue.name) + "/get"
        try:
            response = self._send("POST", path, payload)
        except requests.RequestException as exc:
            raise ReadError(f"reading messages: {_describe(exc)}") from exc

        if response.status_code != 200:
            raise ReadError(
                "RabbitMQ server returned non-200 status: "
                f"{response.status_code} {response.reason}"
            )

        try:
            records = response.json()
            messages = [_to_message(record) for record in records]
        except (ValueError, TypeError, KeyError, AttributeError, binascii.Error) as exc:
            raise ReadError(f"decoding messages: {exc}") from exc

        self.logger.info("Read %s message(s) from queue %r", len(messages), queue.name)
        return messages

    def delete_exchange(self, name: str) -> None:
        self._delete("exchanges", name, "exchange")

    def delete_queue(self, name: str) -> None:
        self._delete("queues", name, "queue")

    def _delete(self, collection: str, name: str, kind: str) -> None:
        try:
            response = self._send("DELETE", self._path(collection, name))
        except requests.RequestException as exc:
            raise DeleteError(f"deleting {kind}: {_describe(exc)}") from exc

        if response.status_code == 404:
            raise NotFoundError(f"deleting {kind}: {kind} {name!r} does not exist")

        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise DeleteError(f"deleting {kind}: {_describe(exc)}") from exc

        self.logger.info("Deleted %s %r", kind, name)

    def _list(self, collection: str, to_model: Callable[[Dict[str, Any]], T]) -> List[T]:
        try:
            response = self._send("GET", f"/api/{collection}/{self._vhost}")
            response.raise_for_status()
            records = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise ListError(f"listing {collection}: {_describe(exc)}") from exc

        if not isinstance(records, list):
            raise ListError(f"listing {collection}: unexpected response body")

        try:
            models = [to_model(record) for record in records]
        except (AttributeError, TypeError, ValueError) as exc:
            raise ListError(f"listing {collection}: malformed record: {exc}") from exc

        self.logger.debug("Fetched %s %s record(s)", len(models), collection)
        return models

    def _path(self, collection: str, name: str) -> str:
        return f"/api/{collection}/{self._vhost}/{quote(name, safe='')}"

    def _send(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        url = f"{self.api_uri}{path}"
        self.logger.debug("%s %s", method, url)

        with self._session_factory() as session:
            session.auth = self._auth
            session.verify = self._verify
            try:
                return session.request(method, url, json=payload, timeout=self._timeout)
            except requests.ConnectionError as exc:
                self.logger.error("Failed to reach management API at %s: %s", self.api_uri, exc)
                raise BrokerConnectionError(
                    f"connecting to management API at {self.api_uri}: {exc}"
                ) from exc


def _describe(exc: Exception) -> str:
    response = getattr(exc, "response", None)
    if response is None:
        return str(exc)

    try:
        reason = response.json().get("reason")
    except (ValueError, AttributeError):
        reason = None

    return f"{response.status_code} {reason or response.reason}"


def _enum_or_raw(enum_type: Any, value: str) -> Any:
    try:
        return enum_type(value)
    except ValueError:
        return value


def _to_exchange(record: Dict[str, Any]) -> Exchange:
    return Exchange(
        name=record.get("name", ""),
        type=_enum_or_raw(ExchangeType, record.get("type", "")),
        durable=bool(record.get("durable", False)),
        auto_delete=bool(record.get("auto_delete", False)),
        internal=bool(record.get("internal", False)),
    )


def _to_queue(record: Dict[str, Any]) -> Queue:
    return Queue(
        name=record.get("name", ""),
        type=_enum_or_raw(QueueType, record.get("type") or QueueType.CLASSIC.value),
        durable=bool(record.get("durable", False)),
        auto_delete=bool(record.get("auto_delete", False)),
        messages=record.get("messages") or 0,
        node=record.get("node") or record.get("leader") or "",
        messages_unacknowledged=record.get("messages_unacknowledged") or 0,
    )


def _to_binding(record: Dict[str, Any]) -> Binding:
    return Binding(
        type=_enum_or_raw(BindingType, record.get("destination_type", "")),
        source=Exchange(name=record.get("source", "")),
        target_name=record.get("destination", ""),
        key=record.get("routing_key", ""),
    )


def _to_message(record: Dict[str, Any]) -> Message:
    payload = record["payload"]
    headers = record.get("headers") or (record.get("properties") or {}).get("headers")
    if record.get("payload_encoding") == "base64":
        body = base64.b64decode(payload, validate=True)
    else:
        body = payload.encode("utf-8")

    return Message(
        target=Exchange(name=record["exchange"]),
        headers=dict(headers or {}),
        routing_key=record["routing_key"],
        body=body,
    )
