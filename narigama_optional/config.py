import dataclasses

from loguru import logger

from narigama_optional import util


LOGGER_NAME = "narigama_optional"


@dataclasses.dataclass(frozen=True)
class Config:
    # log the package's internals at DEBUG level via loguru
    debug: bool = util.env("NARIGAMA_OPTIONAL_DEBUG", "false", convert=util.to_bool)


def load_config() -> Config:
    """Load Config from the environment, a bad value falls back to the defaults rather than breaking the import."""
    try:
        return Config()
    except ValueError as ex:
        logger.warning("Ignoring invalid configuration, using defaults: {}", ex)
        return Config(debug=False)


def configure_logging(config: Config | None = None) -> Config:
    """Enable or disable the package logger, libraries stay quiet unless asked."""
    config = config or load_config()
    if config.debug:
        logger.enable(LOGGER_NAME)
    else:
        logger.disable(LOGGER_NAME)
    return config
