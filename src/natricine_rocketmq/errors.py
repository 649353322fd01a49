"""Exceptions raised while resolving client configuration."""


class ConfigurationError(ValueError):
    """Base class for configuration resolution failures."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class MissingRequiredField(ConfigurationError):  # noqa: N818
    """A required property is absent or empty."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Required property '{key}' is missing or empty", key)


class InvalidConfiguration(ConfigurationError):  # noqa: N818
    """A property value was rejected (bad number, refused subscription)."""


class SubscriptionError(ValueError):
    """The client refused a topic/tag subscription."""
