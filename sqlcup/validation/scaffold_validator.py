"""Validation of parsed column lists before statements are generated."""

from __future__ import annotations

from collections.abc import Sequence

from sqlcup.core.schemas import Column, ValidationResult


class ScaffoldValidator:
    """Validates a parsed column list.

    Errors make generation impossible or the generated SQL wrong. Warnings
    point out query templates that will be left out.
    """

    def validate_columns(self, columns: Sequence[Column]) -> ValidationResult:
        """Validate a column list.

        Args:
            columns: Parsed columns in input order

        Returns:
            ValidationResult with validation status and any errors/warnings
        """
        result = ValidationResult(is_valid=True)

        self._validate_identifier(columns, result)
        self._validate_unique_names(columns, result)

        return result

    def _validate_identifier(
        self, columns: Sequence[Column], result: ValidationResult
    ) -> None:
        """Check that there is at most one identifier column.

        Args:
            columns: Columns to validate
            result: Result to record errors and warnings in
        """
        identifiers = [c.name for c in columns if c.is_identifier]
        if len(identifiers) > 1:
            result.add_error(
                f"multiple identifier columns: {', '.join(identifiers)}"
            )
            return

        if not identifiers:
            result.add_warning(
                "no identifier column, Get, Delete and Update queries are omitted"
            )
        elif len(identifiers) == len(columns):
            result.add_warning(
                "no non-identifier columns, Update query is omitted"
            )

    def _validate_unique_names(
        self, columns: Sequence[Column], result: ValidationResult
    ) -> None:
        """Check that no column name is used twice, ignoring case."""
        seen: set[str] = set()
        for column in columns:
            key = column.name.lower()
            if key in seen:
                result.add_error(f"duplicate column name: {column.name}")
            seen.add(key)
