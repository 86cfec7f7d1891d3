"""Rendering of CREATE TABLE statements and sqlc query templates."""

from __future__ import annotations

from sqlcup.core.constants import INDENT, QUERIES_BANNER, SCHEMA_BANNER
from sqlcup.core.schemas import ScaffoldArgs


class StatementFormatter:
    """Renders the SQL text for a generation request.

    Every ``format_*`` method returns one statement without a trailing
    newline; ``render`` assembles the blocks selected by the options.
    """

    def render(self, args: ScaffoldArgs) -> str:
        """Render schema and/or query blocks.

        Args:
            args: The generation request

        Returns:
            SQL text ending with a single newline
        """
        selector = args.options.output_selector
        blocks: list[tuple[str, str]] = []
        if selector.includes_schema:
            blocks.append((SCHEMA_BANNER, self.format_schema(args)))
        if selector.includes_queries:
            blocks.append((QUERIES_BANNER, self.format_queries(args)))

        if len(blocks) == 1:
            return blocks[0][1] + "\n"
        return "\n\n".join(f"{banner}\n\n{text}" for banner, text in blocks) + "\n"

    def format_schema(self, args: ScaffoldArgs) -> str:
        """Format the CREATE TABLE statement with aligned columns."""
        header = "CREATE TABLE "
        if not args.options.omit_exists_clause:
            header += "IF NOT EXISTS "
        lines = [f"{header}{args.table_name} ("]

        # Types start after the longest name, constraints after the longest type.
        type_width = len(INDENT) + args.longest_name + 1 + args.longest_type
        last = len(args.columns) - 1
        for i, column in enumerate(args.columns):
            line = f"{INDENT}{column.name.ljust(args.longest_name)} {column.type}"
            if column.constraint:
                line = f"{line.ljust(type_width)} {column.constraint}"
            if i < last:
                line += ","
            lines.append(line)

        lines.append(");")
        return "\n".join(lines)

    def format_queries(self, args: ScaffoldArgs) -> str:
        """Format all query templates that apply, separated by blank lines."""
        queries = []
        if args.identifier_column is not None:
            queries.append(self.format_get_query(args))
        queries.append(self.format_list_query(args))
        queries.append(self.format_create_query(args))
        if args.identifier_column is not None:
            queries.append(self.format_delete_query(args))
            if args.non_identifier_columns:
                queries.append(self.format_update_query(args))
        return "\n\n".join(queries)

    def format_get_query(self, args: ScaffoldArgs) -> str:
        identifier = self._identifier_name(args)
        return (
            f"-- name: Get{args.singular_entity_name} :one\n"
            f"SELECT * FROM {args.table_name}\n"
            f"WHERE {identifier} = ? LIMIT 1;"
        )

    def format_list_query(self, args: ScaffoldArgs) -> str:
        query = (
            f"-- name: List{args.plural_entity_name} :many\n"
            f"SELECT * FROM {args.table_name}"
        )
        if args.options.order_by:
            return f"{query}\nORDER BY {args.options.order_by};"
        return f"{query};"

    def format_create_query(self, args: ScaffoldArgs) -> str:
        label = f"-- name: Create{args.singular_entity_name} :one\n"
        columns = args.non_identifier_columns
        if not columns:
            return f"{label}INSERT INTO {args.table_name} DEFAULT VALUES\nRETURNING *;"

        names = ", ".join(c.name for c in columns)
        placeholders = ", ".join("?" for _ in columns)
        return (
            f"{label}"
            f"INSERT INTO {args.table_name} (\n"
            f"{INDENT}{names}\n"
            f") VALUES (\n"
            f"{INDENT}{placeholders}\n"
            f")\n"
            f"RETURNING *;"
        )

    def format_delete_query(self, args: ScaffoldArgs) -> str:
        identifier = self._identifier_name(args)
        return (
            f"-- name: Delete{args.singular_entity_name} :exec\n"
            f"DELETE FROM {args.table_name}\n"
            f"WHERE {identifier} = ?;"
        )

    def format_update_query(self, args: ScaffoldArgs) -> str:
        identifier = self._identifier_name(args)
        omit_returning = args.options.omit_returning_clause
        mode = ":exec" if omit_returning else ":one"
        assignments = ",\n".join(
            f"{INDENT}{c.name} = ?" for c in args.non_identifier_columns
        )
        query = (
            f"-- name: Update{args.singular_entity_name} {mode}\n"
            f"UPDATE {args.table_name}\n"
            f"SET\n"
            f"{assignments}\n"
            f"WHERE {identifier} = ?"
        )
        if omit_returning:
            return f"{query};"
        return f"{query}\nRETURNING *;"

    def _identifier_name(self, args: ScaffoldArgs) -> str:
        identifier = args.identifier_column
        if identifier is None:
            raise ValueError(f"table {args.table_name} has no identifier column")
        return identifier.name


def render(args: ScaffoldArgs) -> str:
    """Render the SQL text for ``args`` with a default formatter."""
    return StatementFormatter().render(args)
