"""Tests for config dataclasses and task context."""

import pytest
from natricine_rocketmq import (
    ClientConfig,
    ConsumerConfig,
    OffsetStartMode,
    ProducerConfig,
    RuntimeContext,
    Subscription,
    SubscriptionError,
    TaskContext,
)

TASK_ID = 3


class TestSubscriptionParse:
    @pytest.mark.parametrize("expression", [None, "", "*", " * "])
    def test_match_all(self, expression: str | None) -> None:
        subscription = Subscription.parse("orders", expression)
        assert subscription.matches_all
        assert subscription.tags == frozenset()

    def test_tags_split_and_stripped(self) -> None:
        subscription = Subscription.parse("orders", " a ||b|| ")
        assert subscription.tags == frozenset({"a", "b"})

    def test_empty_topic_rejected(self) -> None:
        with pytest.raises(SubscriptionError, match="topic"):
            Subscription.parse("", "*")

    def test_separator_only_rejected(self) -> None:
        with pytest.raises(SubscriptionError, match="no tags"):
            Subscription.parse("orders", "|| ||")


class TestConsumerSubscribe:
    def test_resubscribe_replaces_filter(self) -> None:
        consumer = ConsumerConfig()
        consumer.subscribe("orders", "a")
        consumer.subscribe("orders", "b")
        assert consumer.subscriptions["orders"].tags == frozenset({"b"})

    def test_default_expression(self) -> None:
        consumer = ConsumerConfig()
        consumer.subscribe("orders")
        assert consumer.subscriptions["orders"].matches_all


class TestComposition:
    def test_producer_and_consumer_own_separate_clients(self) -> None:
        producer = ProducerConfig()
        consumer = ConsumerConfig()
        assert producer.client is not consumer.client
        assert isinstance(producer.client, ClientConfig)

    def test_consumer_defaults_to_latest(self) -> None:
        assert ConsumerConfig().consume_from_where is OffsetStartMode.LATEST


class TestTaskContext:
    def test_satisfies_protocol(self) -> None:
        context = TaskContext(task_id=TASK_ID)
        assert isinstance(context, RuntimeContext)
        assert context.this_task_id() == TASK_ID
