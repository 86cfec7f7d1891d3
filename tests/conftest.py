"""Test fixtures and configuration."""

import io
from unittest.mock import patch

import pytest

from sqlcup.core.config import Config
from sqlcup.core.schemas import Column, ScaffoldArgs, ScaffoldOptions
from sqlcup.io.output_manager import OutputManager


@pytest.fixture(autouse=True)
def patched_setup_logger():
    """Keep CLI runs from reconfiguring logging and starting listener threads."""
    with patch("sqlcup.cli.generator.setup_logger") as mock_setup:
        yield mock_setup


@pytest.fixture
def settings():
    """Configuration with built-in defaults, independent of the environment."""
    return Config(
        id_column="id",
        order_by="",
        no_exists_clause=False,
        no_returning_clause=False,
        log_level="WARNING",
    )


@pytest.fixture
def output_stream():
    """In-memory stream that collects generated text."""
    return io.StringIO()


@pytest.fixture
def output_manager(output_stream):
    """OutputManager writing to the in-memory stream."""
    return OutputManager(output_stream)


@pytest.fixture
def author_columns():
    """Columns of the authors example table."""
    return (
        Column(name="id", type="INTEGER", constraint="PRIMARY KEY", is_identifier=True),
        Column(name="name", type="text", constraint="NOT NULL"),
        Column(name="bio", type="text"),
    )


@pytest.fixture
def make_author_args(author_columns):
    """Factory for authors generation requests with custom options."""

    def _make(columns=None, **options) -> ScaffoldArgs:
        return ScaffoldArgs(
            table_name="authors",
            singular_entity_name="Author",
            plural_entity_name="Authors",
            columns=author_columns if columns is None else columns,
            options=ScaffoldOptions(**options),
        )

    return _make
