"""Configuration for the sqlcup statement generator."""

import logging

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from .constants import DEFAULT_ID_COLUMN
from .exceptions import ConfigurationError


class ExitCodesConfig(BaseModel):
    """Configuration for exit codes."""

    success: int = 0
    error_unexpected: int = 1
    error_bad_argument: int = 2


class Config(BaseSettings):
    """Main configuration class for the sqlcup statement generator.

    Every field can be set from the environment with the ``SQLCUP_`` prefix,
    e.g. ``SQLCUP_ID_COLUMN=pk``. The option fields only provide defaults;
    command-line flags always win.
    """

    # CLI option defaults
    id_column: str = Field(
        default=DEFAULT_ID_COLUMN,
        min_length=1,
        description="Name of the column that identifies a row",
    )
    order_by: str = Field(
        default="", description="Expression for ORDER BY in the List query"
    )
    no_exists_clause: bool = Field(
        default=False, description="Omit IF NOT EXISTS in CREATE TABLE"
    )
    no_returning_clause: bool = Field(
        default=False, description="Omit RETURNING * in the Update query"
    )

    log_level: str = Field(default="WARNING", description="Logging level name")

    exit_codes: ExitCodesConfig = Field(default_factory=ExitCodesConfig)

    model_config = {
        "env_prefix": "SQLCUP_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    def __init__(self, **data):
        """Initialize config, reporting invalid values as ConfigurationError."""
        try:
            super().__init__(**data)
        except ValidationError as e:
            error = e.errors()[0]
            field_name = error["loc"][0] if error["loc"] else "unknown"
            env_var_name = f"{Config.model_config['env_prefix']}{field_name}".upper()
            raise ConfigurationError(
                variable_name=env_var_name, reason=error["msg"]
            ) from e

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and make sure logging knows it."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelNamesMapping().get(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level


# At application import time, populate os.environ from .env (if present).
load_dotenv()
config = Config()
