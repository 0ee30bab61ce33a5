import logging
from typing import Any, Callable, List, Optional

from buneary.config import RabbitMQConfig
from buneary.contracts import IManagementClient, IProvider
from buneary.errors import DeclareError
from buneary.models import Binding, Exchange, Message, Queue, is_valid_name

from .provider_dependencies import ProviderDependencies


def _accept_all(_: Any) -> bool:
    return True


class RabbitMQProvider(IProvider):
    """Manages a RabbitMQ server through AMQP and the HTTP management API.

    Publishing goes through AMQP, as does declaring a queue without a name, since
    only AMQP lets the server pick one. Everything else goes through the
    management API. No connection or session outlives the call that opened it.
    """

    def __init__(
        self,
        config: RabbitMQConfig,
        *,
        dependencies: Optional[ProviderDependencies] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.config = config
        self.dependencies = dependencies or ProviderDependencies()

    @classmethod
    def from_address(
        cls,
        address: str,
        user: str = "",
        password: str = "",
        *,
        dependencies: Optional[ProviderDependencies] = None,
        **options: Any,
    ) -> "RabbitMQProvider":
        config = RabbitMQConfig(address=address, user=user, password=password, **options)
        return cls(config, dependencies=dependencies)

    def create_exchange(self, exchange: Exchange) -> None:
        if not is_valid_name(exchange.name):
            raise DeclareError(f"declaring exchange: invalid exchange name {exchange.name!r}")

        self._management().declare_exchange(exchange)

    def create_queue(self, queue: Queue) -> str:
        if not queue.name:
            self.logger.info("Declaring server-named queue over AMQP")
            with self.dependencies.make_amqp_connection(self.config) as connection:
                return connection.declare_queue(queue)

        if not is_valid_name(queue.name):
            raise DeclareError(f"declaring queue: invalid queue name {queue.name!r}")

        return self._management().declare_queue(queue)

    def create_binding(self, binding: Binding) -> None:
        self._management().declare_binding(binding)

    def get_exchanges(
        self, predicate: Optional[Callable[[Exchange], bool]] = None
    ) -> List[Exchange]:
        return self._management().list_exchanges(predicate or _accept_all)

    def get_queues(self, predicate: Optional[Callable[[Queue], bool]] = None) -> List[Queue]:
        return self._management().list_queues(predicate or _accept_all)

    def get_bindings(
        self, predicate: Optional[Callable[[Binding], bool]] = None
    ) -> List[Binding]:
        return self._management().list_bindings(predicate or _accept_all)

    def get_messages(self, queue: Queue, max_messages: int, requeue: bool) -> List[Message]:
        return self._management().get_messages(queue, max_messages, requeue)

    def publish_message(self, message: Message) -> None:
        with self.dependencies.make_amqp_connection(self.config) as connection:
            connection.publish(message)

    def delete_exchange(self, exchange: Exchange) -> None:
        self._management().delete_exchange(exchange.name)

    def delete_queue(self, queue: Queue) -> None:
        self._management().delete_queue(queue.name)

    def _management(self) -> IManagementClient:
        return self.dependencies.make_management_client(self.config)
