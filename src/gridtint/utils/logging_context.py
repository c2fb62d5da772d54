"""Context-aware logging utilities for GridTint."""

import contextvars
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gridtint.config import Config

# Context variables for tracking the range and operation being processed
current_range = contextvars.ContextVar[str | None]("current_range", default=None)
current_operation = contextvars.ContextVar[str | None]("current_operation", default=None)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context information."""

    def process(self, msg: str, kwargs: Mapping[str, Any]) -> tuple[str, Mapping[str, Any]]:
        """Add context information to log records."""
        range_address = current_range.get()
        operation = current_operation.get()

        extra = kwargs.get("extra", {})
        if range_address:
            extra["range"] = range_address
        if operation:
            extra["operation"] = operation

        kwargs["extra"] = extra

        context_parts = []
        if range_address:
            context_parts.append(f"range={range_address}")
        if operation:
            context_parts.append(f"op={operation}")

        if context_parts:
            msg = f"[{', '.join(context_parts)}] {msg}"

        return msg, kwargs


def get_contextual_logger(name: str) -> ContextualLogger:
    """Get a logger that automatically includes context information.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextualLogger instance
    """
    base_logger = logging.getLogger(name)
    return ContextualLogger(base_logger, {})


class _VarContext:
    """Sets a context variable for the duration of a ``with`` block."""

    var: contextvars.ContextVar[str | None]

    def __init__(self, value: str):
        self.value = value
        self.token = None

    def __enter__(self):
        self.token = self.var.set(self.value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            self.var.reset(self.token)


class RangeContext(_VarContext):
    """Context manager for tracking the range address being filtered."""

    var = current_range


class OperationContext(_VarContext):
    """Context manager for tracking current operation."""

    var = current_operation


def setup_logging(config: "Config") -> None:
    """Configure the root logger from a Config.

    ``logging.basicConfig`` is a no-op once the root logger has handlers, so
    an application that configures logging itself keeps its own setup.
    """
    level = logging.DEBUG if config.enable_debug else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        filename=config.log_file,
    )
