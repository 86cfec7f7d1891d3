"""Pydantic models for type-safe data validation and parsing."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import DEFAULT_ID_COLUMN


class OutputSelector(str, Enum):
    """Which blocks of SQL text to generate."""

    BOTH = "both"
    SCHEMA = "schema"
    QUERIES = "queries"

    @property
    def includes_schema(self) -> bool:
        return self in (OutputSelector.BOTH, OutputSelector.SCHEMA)

    @property
    def includes_queries(self) -> bool:
        return self in (OutputSelector.BOTH, OutputSelector.QUERIES)


class Column(BaseModel):
    """One database column."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Column name, used verbatim in SQL")
    type: str = Field(..., description="SQL type keyword")
    constraint: str = Field(default="", description="SQL constraint clauses")
    is_identifier: bool = Field(
        default=False, description="Whether this column identifies a row"
    )


class ScaffoldOptions(BaseModel):
    """Output options resolved once from the command line."""

    model_config = ConfigDict(frozen=True)

    omit_exists_clause: bool = False
    id_column: str = DEFAULT_ID_COLUMN
    order_by: str = ""
    omit_returning_clause: bool = False
    output_selector: OutputSelector = OutputSelector.BOTH


class ScaffoldArgs(BaseModel):
    """The resolved generation request consumed by the statement formatter.

    The identifier column is derived from ``columns`` by value, so there is no
    separate reference to keep in sync.
    """

    model_config = ConfigDict(frozen=True)

    table_name: str = Field(..., min_length=1, description="SQL table name")
    singular_entity_name: str = Field(..., min_length=1)
    plural_entity_name: str = Field(..., min_length=1)
    columns: tuple[Column, ...] = Field(..., min_length=1)
    options: ScaffoldOptions = Field(default_factory=ScaffoldOptions)

    @model_validator(mode="after")
    def check_single_identifier(self) -> ScaffoldArgs:
        """Reject column lists with more than one identifier column."""
        identifiers = [c.name for c in self.columns if c.is_identifier]
        if len(identifiers) > 1:
            raise ValueError(
                f"multiple identifier columns: {', '.join(identifiers)}"
            )
        return self

    @property
    def identifier_column(self) -> Column | None:
        for column in self.columns:
            if column.is_identifier:
                return column
        return None

    @property
    def non_identifier_columns(self) -> tuple[Column, ...]:
        return tuple(c for c in self.columns if not c.is_identifier)

    @property
    def longest_name(self) -> int:
        return max(len(c.name) for c in self.columns)

    @property
    def longest_type(self) -> int:
        return max(len(c.type) for c in self.columns)


class ValidationResult(BaseModel):
    """Result of column list validation with type safety."""

    is_valid: bool = Field(..., description="Whether the columns passed validation")
    errors: list[str] = Field(
        default_factory=list, description="Validation error messages"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Validation warning messages"
    )

    def add_error(self, message: str) -> None:
        """Add an error message to the validation result."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message to the validation result."""
        self.warnings.append(message)
