"""SQL text rendering components."""

from sqlcup.rendering.statement_formatter import StatementFormatter, render

__all__ = ["StatementFormatter", "render"]
