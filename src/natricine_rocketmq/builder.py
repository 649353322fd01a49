"""Resolve RocketMQ client configuration from a property set."""

import logging
import os
import uuid

from natricine_rocketmq import keys
from natricine_rocketmq.config import (
    ClientConfig,
    ConsumerConfig,
    OffsetStartMode,
    ProducerConfig,
)
from natricine_rocketmq.context import RuntimeContext
from natricine_rocketmq.errors import InvalidConfiguration
from natricine_rocketmq.network import get_local_address
from natricine_rocketmq.properties import (
    PropertySet,
    get_bool,
    get_int,
    get_str,
    require,
)

logger = logging.getLogger("natricine.rocketmq")

_OFFSET_MODES = {
    keys.CONSUMER_OFFSET_EARLIEST: OffsetStartMode.EARLIEST,
    keys.CONSUMER_OFFSET_LATEST: OffsetStartMode.LATEST,
    keys.CONSUMER_OFFSET_TIMESTAMP: OffsetStartMode.TIMESTAMP,
}


def _default_identity(context: RuntimeContext | None) -> str:
    """Task id when running inside a task, otherwise a fresh random id."""
    if context is not None:
        return str(context.this_task_id())
    return str(uuid.uuid4())


def _default_callback_threads() -> int:
    return os.cpu_count() or 1


def build_common_config(
    props: PropertySet,
    client: ClientConfig,
    context: RuntimeContext | None = None,
) -> None:
    """Populate the settings shared by producers and consumers.

    Args:
        props: Property set to read from.
        client: Config to populate in place.
        context: Optional task context used for the default instance name.

    Raises:
        MissingRequiredField: If nameserver.addr is missing or empty.
        InvalidConfiguration: If a numeric property is not an integer.
    """
    client.namesrv_addr = require(props, keys.NAME_SERVER_ADDR)

    client.client_ip = get_str(props, keys.CLIENT_IP, "") or get_local_address()
    client.instance_name = get_str(props, keys.CLIENT_NAME, "") or _default_identity(
        context
    )

    client.client_callback_executor_threads = get_int(
        props, keys.CLIENT_CALLBACK_EXECUTOR_THREADS, _default_callback_threads()
    )
    client.poll_name_server_interval = get_int(
        props, keys.NAME_SERVER_POLL_INTERVAL, keys.DEFAULT_NAME_SERVER_POLL_INTERVAL
    )
    client.heartbeat_broker_interval = get_int(
        props, keys.BROKER_HEARTBEAT_INTERVAL, keys.DEFAULT_BROKER_HEARTBEAT_INTERVAL
    )


def build_producer_config(
    props: PropertySet,
    producer: ProducerConfig,
    context: RuntimeContext | None = None,
) -> None:
    """Populate a producer config in place.

    Only one producer instance may be live per group, so an unset group
    defaults to the task id (or a random id outside a task).
    """
    build_common_config(props, producer.client, context)

    producer.producer_group = get_str(
        props, keys.PRODUCER_GROUP, ""
    ) or _default_identity(context)

    retry_times = get_int(
        props, keys.PRODUCER_RETRY_TIMES, keys.DEFAULT_PRODUCER_RETRY_TIMES
    )
    producer.retry_times_when_send_failed = retry_times
    producer.retry_times_when_send_async_failed = retry_times
    producer.send_msg_timeout = get_int(
        props, keys.PRODUCER_TIMEOUT, keys.DEFAULT_PRODUCER_TIMEOUT
    )

    logger.debug(
        "Resolved producer group %s for client %s",
        producer.producer_group,
        producer.client.client_id,
    )


def _apply_offset_reset(props: PropertySet, consumer: ConsumerConfig) -> None:
    token = get_str(props, keys.CONSUMER_OFFSET_RESET_TO, keys.CONSUMER_OFFSET_LATEST)
    mode = _OFFSET_MODES.get(token)

    if mode is None:
        logger.warning(
            "Unknown %s value %r, starting from latest",
            keys.CONSUMER_OFFSET_RESET_TO,
            token,
        )
        mode = OffsetStartMode.LATEST

    consumer.consume_from_where = mode
    if mode is OffsetStartMode.TIMESTAMP:
        # Known defect: the selector token is used as the timestamp value.
        # No separate timestamp property is read.
        consumer.consume_timestamp = token
        logger.warning(
            "Timestamp start selected; consume_timestamp set to %r", token
        )


def build_consumer_config(
    props: PropertySet,
    consumer: ConsumerConfig,
    context: RuntimeContext | None = None,
) -> None:
    """Populate a push consumer config in place and subscribe it.

    Args:
        props: Property set to read from.
        consumer: Config to populate; its subscribe() is called once.
        context: Optional task context used for the default instance name.

    Raises:
        MissingRequiredField: If nameserver.addr, consumer.group or
            consumer.topic is missing or empty.
        InvalidConfiguration: If a numeric property is not an integer or
            the subscription is rejected.
    """
    build_common_config(props, consumer.client, context)

    consumer.consumer_group = require(props, keys.CONSUMER_GROUP)

    consumer.persist_consumer_offset_interval = get_int(
        props,
        keys.CONSUMER_OFFSET_PERSIST_INTERVAL,
        keys.DEFAULT_CONSUMER_OFFSET_PERSIST_INTERVAL,
    )
    consumer.consume_thread_min = get_int(
        props, keys.CONSUMER_MIN_THREADS, keys.DEFAULT_CONSUMER_MIN_THREADS
    )
    consumer.consume_thread_max = get_int(
        props, keys.CONSUMER_MAX_THREADS, keys.DEFAULT_CONSUMER_MAX_THREADS
    )
    if consumer.consume_thread_min > consumer.consume_thread_max:
        logger.warning(
            "consume_thread_min (%d) exceeds consume_thread_max (%d)",
            consumer.consume_thread_min,
            consumer.consume_thread_max,
        )
    consumer.orderly = get_bool(props, keys.CONSUMER_MESSAGES_ORDERLY, False)

    _apply_offset_reset(props, consumer)

    topic = require(props, keys.CONSUMER_TOPIC)
    tag = get_str(props, keys.CONSUMER_TAG, keys.DEFAULT_TAG)
    try:
        consumer.subscribe(topic, tag)
    except Exception as e:
        msg = f"Cannot subscribe to topic {topic!r} with tag {tag!r}: {e}"
        raise InvalidConfiguration(msg, keys.CONSUMER_TOPIC) from e

    logger.debug(
        "Consumer group %s subscribed to %s (%s)",
        consumer.consumer_group,
        topic,
        tag,
    )
