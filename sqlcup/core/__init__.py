"""Core data models and shared types."""

from sqlcup.core.config import config
from sqlcup.core.exceptions import (
    BadArgumentError,
    ConfigurationError,
    ScaffoldError,
    ValidationError,
)
from sqlcup.core.schemas import (
    Column,
    OutputSelector,
    ScaffoldArgs,
    ScaffoldOptions,
    ValidationResult,
)

__all__ = [
    "Column",
    "OutputSelector",
    "ScaffoldArgs",
    "ScaffoldOptions",
    "ValidationResult",
    "ScaffoldError",
    "BadArgumentError",
    "ValidationError",
    "ConfigurationError",
    "config",
]
