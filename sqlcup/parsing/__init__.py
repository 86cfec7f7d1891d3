"""Parsing of command-line column and entity definitions."""

from sqlcup.parsing.column_parser import ColumnTag, parse_column
from sqlcup.parsing.scaffold_args import build_scaffold_args, parse_entity_name

__all__ = ["ColumnTag", "parse_column", "build_scaffold_args", "parse_entity_name"]
