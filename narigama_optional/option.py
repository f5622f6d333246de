import copy
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from typing import Generic
from typing import TypeVar

from loguru import logger

from narigama_optional.problem import InvalidArgument
from narigama_optional.problem import InvalidState
from narigama_optional.problem import fail
from narigama_optional.util import require_callable


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, eq=False)
class Optional(Generic[T]):
    """A container that either holds a single non-None value, or nothing at all.

    Build one with Optional.of(), Optional.of_nullable() or Optional.empty().
    Calling Optional(...) directly isn't public API: it exists for the
    factories, and Optional() would be an empty Optional that isn't the shared
    Optional.empty() instance. Presence is tracked with an
    explicit flag, so falsy values (0, "", False, []) are perfectly valid
    payloads.

    >>> Optional.of_nullable(None).map(str.strip).or_else("default")
    'default'
    >>> Optional.of(" hi ").map(str.strip).get()
    'hi'
    """

    # inner value, never access it directly, use Optional.get() or one of the Optional.or_else*() family
    _value: T | None = None
    _present: bool = False

    # the shared empty instance, see Optional.empty()
    _EMPTY = None
    _EMPTY_LOCK = threading.Lock()

    def __post_init__(self):
        if self._present and self._value is None:
            fail(InvalidState("Value must not be None."))
        if not self._present and self._value is not None:
            fail(InvalidState("An empty Optional can't hold a value."))

    @classmethod
    def empty(cls) -> "Optional[Any]":
        """Return the shared empty Optional, it's the same object on every call."""
        if cls._EMPTY is None:
            with cls._EMPTY_LOCK:
                # another thread may have won the race while we waited
                if cls._EMPTY is None:
                    Optional._EMPTY = Optional()
                    logger.debug("Created the shared empty Optional.")
        return cls._EMPTY

    @classmethod
    def of(cls, value: T) -> "Optional[T]":
        """Wrap a value, raises InvalidState if it's None."""
        if value is None:
            fail(InvalidState("Value must not be None."))
        return Optional(value, True)

    @classmethod
    def of_nullable(cls, value: T | None) -> "Optional[T]":
        """Wrap a value, or return the empty Optional if it's None."""
        if value is None:
            return cls.empty()
        return cls.of(value)

    def get(self) -> T:
        """Return the value, raises InvalidState if missing.

        Prefer Optional.or_else_raise(), it says what happens on the tin."""
        return self.or_else_raise()

    def is_present(self) -> bool:
        return self._present

    def is_empty(self) -> bool:
        return not self._present

    def if_present(self, action: Callable[[T], Any]) -> None:
        """Call action(value) if a value is present, otherwise do nothing."""
        require_callable("action", action)
        if self._present:
            action(self._value)

    def if_present_or_else(self, action: Callable[[T], Any], empty_action: Callable[[], Any]) -> None:
        """Call action(value) if a value is present, otherwise call empty_action()."""
        require_callable("action", action)
        require_callable("empty_action", empty_action)
        if self._present:
            action(self._value)
        else:
            empty_action()

    def filter(self, predicate: Callable[[T], bool]) -> "Optional[T]":
        """Keep this Optional if the value matches predicate, otherwise return the empty Optional.

        The predicate is never called without a value. On a match, this exact
        instance is returned, not a copy."""
        require_callable("predicate", predicate)
        if self._present and predicate(self._value):
            return self
        return self.empty()

    def map(self, mapper: Callable[[T], U | None]) -> "Optional[U]":
        """Map Optional[T] to Optional[U] via the provided callable.

        This is eagerly evaluated. A None result collapses into the empty
        Optional, as if by Optional.of_nullable()."""
        require_callable("mapper", mapper)
        if not self._present:
            return self.empty()
        return self.of_nullable(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], "Optional[U]"]) -> "Optional[U]":
        """Like Optional.map(), but mapper already returns an Optional, which is returned as is.

        Raises InvalidState when mapper returns None, or anything else that
        isn't an Optional."""
        require_callable("mapper", mapper)
        if not self._present:
            return self.empty()

        result = mapper(self._value)
        if result is None:
            fail(InvalidState("Null result from flat mapping."))
        if not isinstance(result, Optional):
            msg = "Flat mapping must produce an Optional, got {}.".format(type(result).__name__)
            fail(InvalidState(msg))
        return result

    def or_(self, supplier: Callable[[], "Optional[T]"]) -> "Optional[T]":
        """Return this Optional if a value is present, otherwise the Optional produced by supplier."""
        require_callable("supplier", supplier)
        if self._present:
            return self

        result = supplier()
        if not isinstance(result, Optional):
            msg = "The supplier must produce an Optional, got {}.".format(type(result).__name__)
            fail(InvalidState(msg))
        return result

    def or_else(self, other: U) -> T | U:
        """Return the value if present, otherwise other. other may be None."""
        if self._present:
            return self._value
        return other

    def or_else_get(self, supplier: Callable[[], U]) -> T | U:
        """Return the value if present, otherwise the result of supplier()."""
        require_callable("supplier", supplier)
        if self._present:
            return self._value
        return supplier()

    def or_else_raise(self, error: BaseException | None = None) -> T:
        """Return the value if present, otherwise raise error.

        The given error is raised untouched, InvalidState is raised when no
        error was provided."""
        if self._present:
            return self._value

        if error is None:
            fail(InvalidState("No value present."))
        if not isinstance(error, BaseException):
            msg = "The argument 'error' must be an exception, got {}.".format(type(error).__name__)
            fail(InvalidArgument(msg, context={"argument": "error"}))
        raise error

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Optional):
            return NotImplemented
        if not self._present or not other._present:
            return self._present == other._present
        return self._value == other._value

    def __hash__(self) -> int:
        if not self._present:
            return hash((Optional, None))
        return hash((Optional, self._value))

    # copies and unpickled instances go back through the factories, so "no value" stays the shared instance
    def __copy__(self) -> "Optional[T]":
        if not self._present:
            return self.empty()
        return Optional(self._value, True)

    def __deepcopy__(self, memo: dict) -> "Optional[T]":
        if not self._present:
            return self.empty()
        return Optional(copy.deepcopy(self._value, memo), True)

    def __reduce__(self):
        if not self._present:
            return (Optional.empty, ())
        return (Optional.of, (self._value,))

    def __str__(self) -> str:
        if self._present:
            return "Optional[{}]".format(self._value)
        return "Optional.empty"

    __repr__ = __str__


empty = Optional.empty
of = Optional.of
of_nullable = Optional.of_nullable
