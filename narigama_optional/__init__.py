from narigama_optional import config
from narigama_optional import option
from narigama_optional import problem
from narigama_optional import util
from narigama_optional.config import Config
from narigama_optional.option import Optional
from narigama_optional.option import empty
from narigama_optional.option import of
from narigama_optional.option import of_nullable
from narigama_optional.problem import InvalidArgument
from narigama_optional.problem import InvalidState
from narigama_optional.problem import OptionalProblem


__all__ = [
    "Config",
    "InvalidArgument",
    "InvalidState",
    "Optional",
    "OptionalProblem",
    "empty",
    "of",
    "of_nullable",
]


config.configure_logging()
