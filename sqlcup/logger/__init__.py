"""Centralized logging configuration for the sqlcup statement generator.

This module provides a configured logger instance that can be imported and used
throughout the application. The logger writes to standard error through a queue
handler using settings from logging_config.json, so standard output only ever
carries generated SQL.

Usage:
    from sqlcup.logger import logger

    logger.info("This is an info message")
    logger.warning("This is a warning message")
"""

from .logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
