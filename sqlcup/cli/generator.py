"""Main class that orchestrates SQL statement generation."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from sqlcup.core.config import Config, config
from sqlcup.core.exceptions import BadArgumentError
from sqlcup.core.schemas import OutputSelector, ScaffoldOptions
from sqlcup.io.output_manager import OutputManager
from sqlcup.logger import logger, setup_logger
from sqlcup.parsing.scaffold_args import build_scaffold_args
from sqlcup.rendering.statement_formatter import StatementFormatter

PROG = "sqlcup"

DESCRIPTION = """\
sqlcup - generate SQL statements for sqlc (https://sqlc.dev)

sqlcup prints SQL statements to stdout. The <name> argument must be of the
form <singular>/<plural> where <singular> names the generated record type and
<plural> is the name of the database table. sqlcup capitalizes those names
where required.

Each <column> argument defines a database column, either as
<name>:<type>[:<constraint>] or in the smart form [<name>]@<tag>[@<tag>...].
<name> also appears in the SQL queries; sqlcup never capitalizes it.

Smart column tags:
  @id        identifier column (INTEGER PRIMARY KEY unless a type is given)
  @null      allow NULL values (columns are NOT NULL by default)
  @unique    add a UNIQUE constraint
  @text @int @float @double @datetime @blob
             column type

If any part of a <column> contains a space, it may be necessary to add quotes
or escape those spaces, depending on the shell."""

EPILOG = """\
Examples:
  sqlcup author/authors "id:INTEGER:PRIMARY KEY" "name:text:NOT NULL" bio:text
  sqlcup --order-by name user/users @id name@text email@text@unique"""


# argparse only hands error() a message; these recover the offending input.
ARGPARSE_FRAGMENT_PATTERNS = (
    re.compile(r"invalid choice: '(?P<fragment>[^']*)'"),
    re.compile(r"invalid \w+ value: '(?P<fragment>[^']*)'"),
    re.compile(r"unrecognized arguments: (?P<fragment>.+)$"),
)


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports errors as BadArgumentError.

    The offending fragment is attached when argparse names one (invalid
    choices, unconvertible values, unknown options). Errors such as a missing
    option value have no fragment and carry only the message.
    """

    def error(self, message: str) -> NoReturn:
        for pattern in ARGPARSE_FRAGMENT_PATTERNS:
            match = pattern.search(message)
            if match:
                raise BadArgumentError(message, match.group("fragment"))
        raise BadArgumentError(message)


def build_argument_parser(settings: Config = config) -> ArgumentParser:
    """Build the command-line parser with defaults taken from ``settings``."""
    parser = ArgumentParser(
        prog=PROG,
        usage="%(prog)s [options] <name> <column> ...",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("name", nargs="?", help="entity name, <singular>/<plural>")
    parser.add_argument("columns", nargs="*", metavar="column", help="column definition")
    parser.add_argument(
        "--no-exists-clause",
        action="store_true",
        default=settings.no_exists_clause,
        help="omit IF NOT EXISTS in CREATE TABLE statements",
    )
    parser.add_argument(
        "--id-column",
        default=settings.id_column,
        metavar="NAME",
        help="name of the column that identifies a row (default: %(default)s)",
    )
    parser.add_argument(
        "--order-by",
        default=settings.order_by,
        metavar="EXPR",
        help="include ORDER BY in the 'SELECT *' statement",
    )
    parser.add_argument(
        "--no-returning-clause",
        action="store_true",
        default=settings.no_returning_clause,
        help="omit 'RETURNING *' in the UPDATE statement",
    )
    parser.add_argument(
        "--only",
        choices=[OutputSelector.SCHEMA.value, OutputSelector.QUERIES.value],
        help="only print the schema or the queries",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="PATH",
        help="write the statements to PATH instead of stdout",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log debug messages to stderr"
    )
    return parser


class ScaffoldGenerator:
    """Main class that orchestrates the statement generation process.

    This class coordinates argument parsing, column validation, rendering
    and output for a single invocation.
    """

    def __init__(
        self,
        settings: Config = config,
        output_manager: OutputManager | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            settings: Configuration providing option defaults and exit codes
            output_manager: Destination for generated text
        """
        self.settings = settings
        self.parser = build_argument_parser(settings)
        self.output_manager = output_manager or OutputManager()
        self.formatter = StatementFormatter()

    def run(self, argv: Sequence[str] | None = None) -> None:
        """Run the complete generation process.

        Args:
            argv: Command-line arguments without the program name

        Raises:
            SystemExit: If the arguments are invalid or any other error occurs
        """
        try:
            namespace = self.parser.parse_intermixed_args(argv)
            setup_logger("DEBUG" if namespace.verbose else self.settings.log_level)
            self.generate_from_namespace(namespace)
        except BadArgumentError as e:
            logger.debug("Rejected arguments: %s", e)
            print(f"{PROG}: {e}", file=sys.stderr)
            self.parser.print_help(sys.stderr)
            sys.exit(self.settings.exit_codes.error_bad_argument)
        except Exception:
            logger.exception("Unexpected error occurred")
            sys.exit(self.settings.exit_codes.error_unexpected)

    def run_for_testing(self, argv: Sequence[str]) -> str:
        """Run the generation process for testing.

        Unlike run(), this method raises exceptions instead of calling
        sys.exit(), making it suitable for unit tests.

        Returns:
            The generated SQL text

        Raises:
            BadArgumentError: If the arguments are invalid
        """
        return self.generate(argv)

    def generate(self, argv: Sequence[str] | None = None) -> str:
        """Parse arguments, render the statements and write them out.

        Returns:
            The generated SQL text
        """
        namespace = self.parser.parse_intermixed_args(argv)
        return self.generate_from_namespace(namespace)

    def generate_from_namespace(self, namespace: argparse.Namespace) -> str:
        """Render the statements for already parsed arguments and write them out."""
        options = self.resolve_options(namespace)

        args = build_scaffold_args(namespace.name, namespace.columns, options)
        logger.info(
            "Generating statements for %s (%d column(s))",
            args.table_name,
            len(args.columns),
        )
        text = self.formatter.render(args)

        if namespace.output is not None:
            output_path = self.output_manager.write_file(text, namespace.output)
            logger.info("Statements written to: %s", output_path)
        else:
            self.output_manager.write_text(text)
        return text

    def resolve_options(self, namespace: argparse.Namespace) -> ScaffoldOptions:
        """Turn parsed flags into the immutable options passed to the core."""
        output_selector = OutputSelector.BOTH
        if namespace.only is not None:
            output_selector = OutputSelector(namespace.only)
        return ScaffoldOptions(
            omit_exists_clause=namespace.no_exists_clause,
            id_column=namespace.id_column,
            order_by=namespace.order_by,
            omit_returning_clause=namespace.no_returning_clause,
            output_selector=output_selector,
        )


def main() -> None:
    """
    Entry point for the sqlcup command.

    Creates ScaffoldGenerator instance and runs generation process.
    """
    generator = ScaffoldGenerator()
    generator.run()
