"""Configuration dataclasses for RocketMQ producer and consumer clients."""

from dataclasses import dataclass, field
from enum import StrEnum

from natricine_rocketmq.errors import SubscriptionError
from natricine_rocketmq.keys import (
    DEFAULT_BROKER_HEARTBEAT_INTERVAL,
    DEFAULT_CONSUMER_MAX_THREADS,
    DEFAULT_CONSUMER_MIN_THREADS,
    DEFAULT_CONSUMER_OFFSET_PERSIST_INTERVAL,
    DEFAULT_NAME_SERVER_POLL_INTERVAL,
    DEFAULT_PRODUCER_RETRY_TIMES,
    DEFAULT_PRODUCER_TIMEOUT,
    DEFAULT_TAG,
)

TAG_SEPARATOR = "||"


class OffsetStartMode(StrEnum):
    """Where a consumer starts when its group has no committed offset."""

    EARLIEST = "earliest"
    LATEST = "latest"
    TIMESTAMP = "timestamp"


@dataclass
class ClientConfig:
    """Settings shared by producer and consumer clients."""

    namesrv_addr: str = ""
    """Name server address list, e.g. "host1:9876;host2:9876"."""

    client_ip: str = ""
    """IP address the client reports to brokers."""

    instance_name: str = "DEFAULT"
    """Distinguishes clients within one process."""

    client_callback_executor_threads: int = 1
    """Size of the callback thread pool."""

    poll_name_server_interval: int = DEFAULT_NAME_SERVER_POLL_INTERVAL
    """Milliseconds between route refreshes from the name server."""

    heartbeat_broker_interval: int = DEFAULT_BROKER_HEARTBEAT_INTERVAL
    """Milliseconds between heartbeats to brokers."""

    @property
    def client_id(self) -> str:
        """Identifier the broker sees for this client."""
        return f"{self.client_ip}@{self.instance_name}"


@dataclass
class ProducerConfig:
    """Configuration for a RocketMQ producer."""

    client: ClientConfig = field(default_factory=ClientConfig)
    """Shared client settings."""

    producer_group: str = ""
    """Producer group; only one live instance is allowed per group."""

    retry_times_when_send_failed: int = DEFAULT_PRODUCER_RETRY_TIMES
    """Retries for a failed synchronous send."""

    retry_times_when_send_async_failed: int = DEFAULT_PRODUCER_RETRY_TIMES
    """Retries for a failed asynchronous send."""

    send_msg_timeout: int = DEFAULT_PRODUCER_TIMEOUT
    """Send timeout in milliseconds."""


@dataclass(frozen=True)
class Subscription:
    """A topic subscription with its parsed tag filter."""

    topic: str
    expression: str = DEFAULT_TAG
    tags: frozenset[str] = frozenset()

    @property
    def matches_all(self) -> bool:
        return self.expression == DEFAULT_TAG

    @classmethod
    def parse(cls, topic: str, expression: str | None) -> "Subscription":
        """Build a subscription from a tag expression like "a || b"."""
        if not topic:
            msg = "Subscription topic must not be empty"
            raise SubscriptionError(msg)

        if not expression or expression.strip() == DEFAULT_TAG:
            return cls(topic=topic)

        tags = frozenset(
            tag.strip() for tag in expression.split(TAG_SEPARATOR) if tag.strip()
        )
        if not tags:
            msg = f"Tag expression {expression!r} contains no tags"
            raise SubscriptionError(msg)
        return cls(topic=topic, expression=expression, tags=tags)


@dataclass
class ConsumerConfig:
    """Configuration for a RocketMQ push consumer."""

    client: ClientConfig = field(default_factory=ClientConfig)
    """Shared client settings."""

    consumer_group: str = ""
    """Consumer group; instances sharing it split the topic's queues."""

    persist_consumer_offset_interval: int = DEFAULT_CONSUMER_OFFSET_PERSIST_INTERVAL
    """Milliseconds between offset persistence."""

    consume_thread_min: int = DEFAULT_CONSUMER_MIN_THREADS
    """Minimum consumption threads."""

    consume_thread_max: int = DEFAULT_CONSUMER_MAX_THREADS
    """Maximum consumption threads."""

    consume_from_where: OffsetStartMode = OffsetStartMode.LATEST
    """Start position when the group has no committed offset."""

    consume_timestamp: str | None = None
    """Start timestamp, used with OffsetStartMode.TIMESTAMP."""

    orderly: bool = False
    """Consume messages of a queue in order."""

    subscriptions: dict[str, Subscription] = field(default_factory=dict)
    """Active subscriptions keyed by topic."""

    def subscribe(self, topic: str, expression: str = DEFAULT_TAG) -> None:
        """Subscribe to a topic, replacing any earlier filter for it.

        Raises:
            SubscriptionError: If the topic is empty or the expression
                yields no tags.
        """
        self.subscriptions[topic] = Subscription.parse(topic, expression)
