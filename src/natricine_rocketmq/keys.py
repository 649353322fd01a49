"""Property keys and defaults for RocketMQ clients."""

# Common
NAME_SERVER_ADDR = "nameserver.addr"  # required

CLIENT_NAME = "client.name"

CLIENT_IP = "client.ip"

CLIENT_CALLBACK_EXECUTOR_THREADS = "client.callback.executor.threads"

NAME_SERVER_POLL_INTERVAL = "nameserver.poll.interval"
DEFAULT_NAME_SERVER_POLL_INTERVAL = 30000  # 30 seconds

BROKER_HEARTBEAT_INTERVAL = "brokerserver.heartbeat.interval"
DEFAULT_BROKER_HEARTBEAT_INTERVAL = 30000  # 30 seconds

# Producer
PRODUCER_GROUP = "producer.group"

PRODUCER_RETRY_TIMES = "producer.retry.times"
DEFAULT_PRODUCER_RETRY_TIMES = 2

PRODUCER_TIMEOUT = "producer.timeout"
DEFAULT_PRODUCER_TIMEOUT = 3000  # 3 seconds

# Consumer
CONSUMER_GROUP = "consumer.group"  # required

CONSUMER_TOPIC = "consumer.topic"  # required

CONSUMER_TAG = "consumer.tag"
DEFAULT_TAG = "*"

CONSUMER_OFFSET_RESET_TO = "consumer.offset.reset.to"
CONSUMER_OFFSET_LATEST = "latest"
CONSUMER_OFFSET_EARLIEST = "earliest"
CONSUMER_OFFSET_TIMESTAMP = "timestamp"

CONSUMER_MESSAGES_ORDERLY = "consumer.messages.orderly"

CONSUMER_OFFSET_PERSIST_INTERVAL = "consumer.offset.persist.interval"
DEFAULT_CONSUMER_OFFSET_PERSIST_INTERVAL = 5000  # 5 seconds

CONSUMER_MIN_THREADS = "consumer.min.threads"
DEFAULT_CONSUMER_MIN_THREADS = 20

CONSUMER_MAX_THREADS = "consumer.max.threads"
DEFAULT_CONSUMER_MAX_THREADS = 64
