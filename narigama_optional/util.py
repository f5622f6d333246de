import dataclasses
import os

from narigama_optional.problem import InvalidArgument
from narigama_optional.problem import fail


TRUTHY = frozenset(("1", "true", "yes", "on"))
FALSY = frozenset(("0", "false", "no", "off", ""))


def env(key: str, default: str | None = None, convert=str):
    """A dataclass field loaded from the envvar `key` each time the dataclass is instantiated.

    `default` is converted as if it had come from the environment. Raises
    KeyError when the envvar is unset and there's no default.
    """

    def default_factory():
        raw = os.environ.get(key, default)
        if raw is None:
            raise KeyError(key)
        return convert(raw)

    return dataclasses.field(default_factory=default_factory)


def to_bool(value: str) -> bool:
    """Convert an envvar string into a bool, raises ValueError if it's not recognised."""
    value = value.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False
    raise ValueError("Can't convert '{}' to a bool.".format(value))


def require_callable(name: str, fn) -> None:
    """Ensure `fn` can be called, raises InvalidArgument otherwise."""
    if not callable(fn):
        msg = "The argument '{}' must be callable, got {}.".format(name, type(fn).__name__)
        fail(InvalidArgument(msg, context={"argument": name}))
