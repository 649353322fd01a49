"""Test fixtures for natricine-rocketmq."""

from collections.abc import Iterator

import pytest
from natricine_rocketmq import TaskContext, get_local_address

NAMESRV_ADDR = "127.0.0.1:9876"
TASK_ID = 7


@pytest.fixture
def common_props() -> dict[str, str]:
    """Smallest property set that resolves a client config."""
    return {"nameserver.addr": NAMESRV_ADDR}


@pytest.fixture
def consumer_props(common_props: dict[str, str]) -> dict[str, str]:
    """Property set with every key a consumer requires."""
    return {
        **common_props,
        "consumer.group": "order-consumers",
        "consumer.topic": "orders",
    }


@pytest.fixture
def task_context() -> TaskContext:
    return TaskContext(task_id=TASK_ID)


@pytest.fixture
def fresh_local_address() -> Iterator[None]:
    """Clear the cached local address before and after a test."""
    get_local_address.cache_clear()
    yield
    get_local_address.cache_clear()
