"""natricine-rocketmq: RocketMQ client configuration."""

from natricine_rocketmq import (
    ClientConfig,
    ConsumerConfig,
    InvalidConfiguration,
    MissingRequiredField,
    OffsetStartMode,
    ProducerConfig,
    TaskContext,
    build_consumer_config,
    build_producer_config,
)

__all__ = [
    "ClientConfig",
    "ConsumerConfig",
    "InvalidConfiguration",
    "MissingRequiredField",
    "OffsetStartMode",
    "ProducerConfig",
    "TaskContext",
    "build_consumer_config",
    "build_producer_config",
]
