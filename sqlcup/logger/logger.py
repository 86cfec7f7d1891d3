"""Logger instance and dictConfig setup for the sqlcup command."""

import atexit
import json
import logging
import logging.config
from pathlib import Path

# Configure logging
logger = logging.getLogger("sqlcup")


def setup_logger(level: str | None = None) -> None:
    """Configure logging from logging_config.json and start the queue listener.

    Args:
        level: Level name for the sqlcup logger, overriding the file's default
    """
    config_file = Path(__file__).parent / "logging_config.json"
    with open(config_file) as f:
        config = json.load(f)
    if level is not None:
        config["loggers"]["sqlcup"]["level"] = level
    logging.config.dictConfig(config)
    queue_handler = logging.getHandlerByName("queue_handler")
    if queue_handler is not None and hasattr(queue_handler, "listener"):
        # Type checker doesn't understand hasattr, so we access listener safely
        listener = getattr(queue_handler, "listener", None)
        if listener is not None:
            listener.start()
            atexit.register(listener.stop)
