"""Tests for the domain model."""

import pytest

from buneary.models import (
    Binding,
    BindingType,
    Exchange,
    ExchangeType,
    Message,
    Queue,
    QueueType,
    is_valid_name,
    wire_value,
)


@pytest.mark.parametrize("name", ["orders", "orders.created", "a-b_c:d", "Q1"])
def test_valid_names(name):
    assert is_valid_name(name)


@pytest.mark.parametrize("name", ["", "with space", "slash/name", "ümlaut", "star*"])
def test_invalid_names(name):
    assert not is_valid_name(name)


def test_defaults():
    assert Exchange(name="x") == Exchange(
        name="x",
        type=ExchangeType.DIRECT,
        durable=False,
        auto_delete=False,
        internal=False,
        no_wait=False,
    )
    queue = Queue()
    assert queue.name == ""
    assert queue.type == QueueType.CLASSIC
    assert (queue.messages, queue.node, queue.messages_unacknowledged) == (0, "", 0)
    assert Binding(source=Exchange(name="x"), target_name="q").type == BindingType.TO_QUEUE
    assert Message(target=Exchange(name="x")).headers == {}


def test_wire_value():
    assert wire_value(ExchangeType.HEADERS) == "headers"
    assert wire_value(QueueType.QUORUM) == "quorum"
    assert wire_value(BindingType.TO_EXCHANGE) == "exchange"
    assert wire_value("x-delayed-message") == "x-delayed-message"


def test_enum_members_compare_to_wire_strings():
    assert ExchangeType("fanout") is ExchangeType.FANOUT
    assert ExchangeType.TOPIC == "topic"
