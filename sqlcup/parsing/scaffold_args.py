"""Building the generation request from command-line arguments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlcup.core.constants import ENTITY_SEPARATOR, NAME_SEGMENT_SEPARATOR
from sqlcup.core.exceptions import BadArgumentError, ValidationError
from sqlcup.core.schemas import ScaffoldArgs, ScaffoldOptions
from sqlcup.logger import logger
from sqlcup.parsing.column_parser import parse_column
from sqlcup.validation.scaffold_validator import ScaffoldValidator


def to_upper_camel_case(name: str) -> str:
    """Convert ``zipcode_import`` to ``ZipcodeImport``.

    Only the first letter of each segment is changed, the rest is kept as is.
    """
    return "".join(
        segment[:1].upper() + segment[1:]
        for segment in name.split(NAME_SEGMENT_SEPARATOR)
    )


def parse_entity_name(raw: str) -> tuple[str, str, str]:
    """Split a ``<singular>/<plural>`` entity name.

    Args:
        raw: Entity name as given on the command line

    Returns:
        Tuple of table name, singular entity name and plural entity name

    Raises:
        BadArgumentError: If the name does not have exactly two non-empty halves
    """
    parts = raw.split(ENTITY_SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise BadArgumentError(
            "invalid <name>, expected '<singular>/<plural>'", raw
        )
    singular, plural = parts
    return plural, to_upper_camel_case(singular), to_upper_camel_case(plural)


def build_scaffold_args(
    entity: str | None,
    raw_columns: Sequence[str],
    options: ScaffoldOptions | None = None,
    validator: ScaffoldValidator | None = None,
) -> ScaffoldArgs:
    """Parse and validate the positional arguments of an invocation.

    Parsing is all or nothing: the first invalid column aborts.

    Args:
        entity: The ``<singular>/<plural>`` argument, if given
        raw_columns: Column definitions in input order
        options: Resolved output options
        validator: Validator for the parsed column list

    Returns:
        The immutable generation request

    Raises:
        BadArgumentError: If any argument is missing or malformed
        ValidationError: If the parsed columns are inconsistent
    """
    options = options or ScaffoldOptions()
    validator = validator or ScaffoldValidator()

    if not entity:
        raise BadArgumentError("missing <name> and <column>")
    table_name, singular, plural = parse_entity_name(entity)
    if not raw_columns:
        raise BadArgumentError("missing <column>")

    columns = [parse_column(raw, options.id_column) for raw in raw_columns]
    logger.debug("Parsed %d column(s) for table %s", len(columns), table_name)

    validation_result = validator.validate_columns(columns)
    if not validation_result.is_valid:
        raise ValidationError(validation_result.errors)
    for warning in validation_result.warnings:
        logger.warning("%s: %s", table_name, warning)

    return ScaffoldArgs(
        table_name=table_name,
        singular_entity_name=singular,
        plural_entity_name=plural,
        columns=tuple(columns),
        options=options,
    )
