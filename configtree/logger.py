import logging
import re
from typing import Any

import structlog
from structlog.types import Processor


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Configure structlog for the configtree package"""

    # An application embedding configtree may already own the structlog setup
    if structlog.is_configured():
        return

    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
            isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Pretty exceptions are left to the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class ConfigTreeStructLogger:
    """
    Structured logger for the configtree package.
    Uses context variables to bind data that will be automatically included in all log messages.
    """

    def __init__(self, log_name: str = "configtree"):
        self.logger = structlog.stdlib.get_logger(log_name)

    @staticmethod
    def _to_snake_case(name):
        """Convert CamelCase to snake_case"""
        return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()

    def bind(self, *args, **new_values: Any):
        """
        Bind values to the logger context.

        Args:
            *args: Configuration types or instances, bound under their snake_case
                class name (e.g. ``database_config='DatabaseConfig'``)
            **new_values: Key-value pairs to bind to the context
        """
        for arg in args:
            cls = arg if isinstance(arg, type) else type(arg)
            key = self._to_snake_case(cls.__name__)
            structlog.contextvars.bind_contextvars(**{key: cls.__qualname__})

        structlog.contextvars.bind_contextvars(**new_values)
        return self

    @staticmethod
    def unbind(*keys: str):
        """Unbind keys from the logger context"""
        structlog.contextvars.unbind_contextvars(*keys)

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


def get_logger(log_name: str = "configtree") -> ConfigTreeStructLogger:
    """Return a structured logger without touching the global logging setup."""
    return ConfigTreeStructLogger(log_name)


def init_logger(settings):
    """
    Initialize the structured logger for the configtree package.

    Args:
        settings: Settings object with logging options

    Returns:
        ConfigTreeStructLogger: Configured structured logger instance
    """
    log_level = "DEBUG" if settings.debug else settings.log_level

    setup_logging(json_logs=settings.json_logs, log_level=log_level)

    return ConfigTreeStructLogger("configtree")
