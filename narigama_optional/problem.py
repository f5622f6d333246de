"""
The errors raised by narigama_optional, declared as Problems.
"""
from loguru import logger


class ProblemMeta(type):
    """The Problem Metaclass, this will validate your Problems."""

    def __new__(cls, class_name, parents, attrs):  # noqa: D102
        # create the class
        _cls = type.__new__(cls, class_name, parents, attrs)

        # don't validate the base class
        if class_name == "OptionalProblem":
            return _cls

        # ensure required fields
        missing = []
        for key in ("title", "kind"):
            if key not in attrs:
                missing.append(key)

        if missing:
            fmt = "Can't build a Problem: {} is missing the field(s): {}"
            raise TypeError(fmt.format(class_name, ", ".join(missing)))

        # constructor
        def __init__(self, detail: str | None = None, context: dict | None = None):
            self.detail = detail or "No detail provided"
            self.context = context
            Exception.__init__(self, self.detail)

        # make it printable
        def __str__(self):
            return self.detail

        def __repr__(self):
            fmt = "<{}(title='{}', detail='{}')>"
            return fmt.format(self.__class__.__name__, self.title, self.detail)

        # diagnostics
        def to_dict(self) -> dict:
            data = {
                "title": self.title,  # a generic one liner about the issue
                "kind": self.kind,  # a stable, machine readable identifier
                "detail": self.detail,  # a more contextual one liner about the issue
            }

            # if provided, additional data for debugging, etc...
            if self.context:
                data["context"] = self.context

            return data

        # bolt methods on and return class
        _cls.__init__ = __init__
        _cls.__str__ = __str__
        _cls.__repr__ = __repr__
        _cls.to_dict = to_dict
        return _cls


class OptionalProblem(Exception, metaclass=ProblemMeta):
    """The base class for every error raised by an Optional, extend this to build new Problems.

    class NotAnInt(OptionalProblem):
        title = "The value was not an int"
        kind = "not-an-int"

    raise NotAnInt("Expected an int, got 'foo'")
    """


class InvalidState(OptionalProblem, ValueError):
    """A value was required, but none was present or a callable produced an unusable result."""

    title = "The Optional is in an invalid state for this operation."
    kind = "invalid-state"


class InvalidArgument(OptionalProblem, TypeError):
    """A required argument was missing or of the wrong kind, usually a callable."""

    title = "An invalid argument was passed to the Optional."
    kind = "invalid-argument"


def fail(problem: OptionalProblem):
    """Log and raise a Problem, the Problem's fields travel with the log record."""
    logger.bind(**problem.to_dict()).debug("{}: {}", problem.__class__.__name__, problem.detail)
    raise problem
