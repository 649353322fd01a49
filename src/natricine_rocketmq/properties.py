"""Property set readers and loaders."""

import os
from collections.abc import Mapping
from pathlib import Path

from natricine_rocketmq.errors import InvalidConfiguration, MissingRequiredField

PropertySet = Mapping[str, str]

DEFAULT_ENV_PREFIX = "ROCKETMQ_"

_COMMENT_CHARS = ("#", "!")
_SEPARATORS = ("=", ":", " ", "\t")


def get_str(props: PropertySet, key: str, default: str) -> str:
    """Return the value for key, or default when absent or empty."""
    value = props.get(key)
    if not value:
        return default
    return value


def require(props: PropertySet, key: str) -> str:
    """Return the value for a required key.

    Raises:
        MissingRequiredField: If the key is absent or empty.
    """
    value = props.get(key)
    if not value:
        raise MissingRequiredField(key)
    return value


def get_int(props: PropertySet, key: str, default: int) -> int:
    """Return the integer value for key, or default when absent or empty.

    Raises:
        InvalidConfiguration: If the value is not an integer.
    """
    value = props.get(key)
    if not value:
        return default
    try:
        return int(value.strip())
    except ValueError as e:
        msg = f"Property '{key}' must be an integer, got {value!r}"
        raise InvalidConfiguration(msg, key) from e


def get_bool(props: PropertySet, key: str, default: bool) -> bool:
    """Return the boolean value for key.

    Only "true" (any case) is true; any other non-empty value is false.
    """
    value = props.get(key)
    if not value:
        return default
    return value.strip().lower() == "true"


def _split_entry(line: str) -> tuple[str, str]:
    index = len(line)
    for i, char in enumerate(line):
        if char in _SEPARATORS:
            index = i
            break
    key = line[:index].rstrip()
    rest = line[index:].lstrip()
    # "key = value": whitespace first, then an explicit separator
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip()
    return key, rest


def parse_properties(text: str) -> dict[str, str]:
    """Parse a Java-style .properties document.

    Supports "#" and "!" comments, "=", ":" and whitespace separators,
    and backslash line continuation. Later duplicates win.
    """
    props: dict[str, str] = {}
    logical = ""

    for raw in text.splitlines():
        line = raw.strip() if not logical else raw.lstrip()
        if not logical and (not line or line.startswith(_COMMENT_CHARS)):
            continue

        if line.endswith("\\") and not line.endswith("\\\\"):
            logical += line[:-1]
            continue

        logical += line
        key, value = _split_entry(logical)
        logical = ""
        if key:
            props[key] = value

    if logical:
        key, value = _split_entry(logical)
        if key:
            props[key] = value

    return props


def load_properties(path: str | Path) -> dict[str, str]:
    """Read and parse a UTF-8 .properties file."""
    return parse_properties(Path(path).read_text(encoding="utf-8"))


def properties_from_env(
    prefix: str = DEFAULT_ENV_PREFIX,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Collect properties from prefixed environment variables.

    ROCKETMQ_NAMESERVER_ADDR becomes nameserver.addr.
    """
    env = os.environ if environ is None else environ
    props: dict[str, str] = {}
    for name, value in env.items():
        if not name.startswith(prefix) or name == prefix:
            continue
        key = name[len(prefix) :].lower().replace("_", ".")
        props[key] = value
    return props
