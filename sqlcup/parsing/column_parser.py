"""Parsing of plain and smart column definitions."""

from __future__ import annotations

from enum import Enum

from sqlcup.core.constants import (
    DEFAULT_ID_COLUMN,
    INTEGER_TYPE,
    NOT_NULL,
    PLAIN_SEPARATOR,
    PRIMARY_KEY,
    SMART_SEPARATOR,
    UNIQUE,
)
from sqlcup.core.exceptions import BadArgumentError
from sqlcup.core.schemas import Column


class ColumnTag(str, Enum):
    """Tags accepted in smart column definitions."""

    ID = "id"
    NULL = "null"
    UNIQUE = "unique"
    TEXT = "text"
    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"
    DATETIME = "datetime"
    BLOB = "blob"


TYPE_TAGS: dict[ColumnTag, str] = {
    ColumnTag.TEXT: "TEXT",
    ColumnTag.INT: INTEGER_TYPE,
    ColumnTag.FLOAT: "FLOAT",
    ColumnTag.DOUBLE: "DOUBLE",
    ColumnTag.DATETIME: "DATETIME",
    ColumnTag.BLOB: "BLOB",
}

# "@id" on its own is shorthand for the usual SQLite rowid column.
SMART_ID_COLUMN = Column(
    name="id", type=INTEGER_TYPE, constraint=PRIMARY_KEY, is_identifier=True
)


def parse_column(raw: str, id_column: str = DEFAULT_ID_COLUMN) -> Column:
    """Parse a single column definition.

    A definition is either plain (``name:type[:constraint]``) or smart
    (``[name]@tag...``); the separator it contains decides which.

    Args:
        raw: The column definition as given on the command line
        id_column: Name of the identifier column for plain definitions

    Returns:
        The parsed column

    Raises:
        BadArgumentError: If the definition is malformed
    """
    has_plain = PLAIN_SEPARATOR in raw
    has_smart = SMART_SEPARATOR in raw
    if has_plain and has_smart:
        raise BadArgumentError(
            f"ambiguous <column>, use either '{PLAIN_SEPARATOR}' or "
            f"'{SMART_SEPARATOR}'",
            raw,
        )
    if has_plain:
        return parse_plain_column(raw, id_column)
    if has_smart:
        return parse_smart_column(raw)
    raise BadArgumentError(
        "unrecognized <column>, expected '<name>:<type>[:<constraint>]' "
        "or '[<name>]@<tag>...'",
        raw,
    )


def parse_plain_column(raw: str, id_column: str = DEFAULT_ID_COLUMN) -> Column:
    """Parse a ``name:type[:constraint]`` definition."""
    parts = raw.split(PLAIN_SEPARATOR)
    if len(parts) < 2 or len(parts) > 3:
        raise BadArgumentError(
            "invalid <column>, expected '<name>:<type>' or "
            "'<name>:<type>:<constraint>'",
            raw,
        )
    name, column_type = parts[0], parts[1]
    if not name:
        raise BadArgumentError("invalid <column>, missing column name", raw)
    constraint = parts[2] if len(parts) == 3 else ""
    return Column(
        name=name,
        type=column_type,
        constraint=constraint,
        is_identifier=name.lower() == id_column.lower(),
    )


def parse_smart_column(raw: str) -> Column:
    """Parse a ``[name]@tag(@tag)*`` definition.

    Tags select the type and constraints; see ``ColumnTag``. Without a type
    tag only identifier columns are allowed, they default to INTEGER.
    """
    if raw == f"{SMART_SEPARATOR}{ColumnTag.ID.value}":
        return SMART_ID_COLUMN

    name, _, tag_text = raw.partition(SMART_SEPARATOR)
    if not name:
        raise BadArgumentError("invalid <column>, missing column name", raw)

    tags: set[ColumnTag] = set()
    column_type: str | None = None
    for text in tag_text.split(SMART_SEPARATOR):
        try:
            tag = ColumnTag(text)
        except ValueError as e:
            raise BadArgumentError(
                f"invalid <column>, unknown tag '{text}'", raw
            ) from e
        tags.add(tag)
        if tag in TYPE_TAGS:
            column_type = TYPE_TAGS[tag]

    if ColumnTag.ID in tags:
        if ColumnTag.UNIQUE in tags or ColumnTag.NULL in tags:
            raise BadArgumentError(
                "invalid <column>, identifier columns cannot be tagged "
                "'unique' or 'null'",
                raw,
            )
        column_type = column_type or INTEGER_TYPE
        constraint = PRIMARY_KEY
        # INTEGER PRIMARY KEY aliases the rowid in SQLite and is never NULL.
        if column_type != INTEGER_TYPE:
            constraint = f"{NOT_NULL} {PRIMARY_KEY}"
        return Column(
            name=name, type=column_type, constraint=constraint, is_identifier=True
        )

    if column_type is None:
        raise BadArgumentError("invalid <column>, missing column type", raw)

    clauses = []
    if ColumnTag.NULL not in tags:
        clauses.append(NOT_NULL)
    if ColumnTag.UNIQUE in tags:
        clauses.append(UNIQUE)
    return Column(name=name, type=column_type, constraint=" ".join(clauses).strip())
