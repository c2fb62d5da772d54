"""Utility modules for GridTint."""

from .logging_context import (
    OperationContext,
    RangeContext,
    get_contextual_logger,
    setup_logging,
)

__all__ = ["get_contextual_logger", "setup_logging", "RangeContext", "OperationContext"]
