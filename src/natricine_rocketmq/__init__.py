"""natricine-rocketmq: RocketMQ client configuration for natricine."""

from natricine_rocketmq.builder import (
    build_common_config,
    build_consumer_config,
    build_producer_config,
)
from natricine_rocketmq.config import (
    ClientConfig,
    ConsumerConfig,
    OffsetStartMode,
    ProducerConfig,
    Subscription,
)
from natricine_rocketmq.context import RuntimeContext, TaskContext
from natricine_rocketmq.errors import (
    ConfigurationError,
    InvalidConfiguration,
    MissingRequiredField,
    SubscriptionError,
)
from natricine_rocketmq.network import get_local_address
from natricine_rocketmq.properties import (
    load_properties,
    parse_properties,
    properties_from_env,
)

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "ConsumerConfig",
    "InvalidConfiguration",
    "MissingRequiredField",
    "OffsetStartMode",
    "ProducerConfig",
    "RuntimeContext",
    "Subscription",
    "SubscriptionError",
    "TaskContext",
    "build_common_config",
    "build_consumer_config",
    "build_producer_config",
    "get_local_address",
    "load_properties",
    "parse_properties",
    "properties_from_env",
]
