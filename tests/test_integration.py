"""End-to-end tests of the command-line generator."""

import os
from unittest.mock import patch

import pytest

from sqlcup.cli.generator import ScaffoldGenerator, build_argument_parser
from sqlcup.core.config import Config
from sqlcup.core.exceptions import BadArgumentError

AUTHOR_ARGS = [
    "author/authors",
    "id:INTEGER:PRIMARY KEY",
    "name:text:NOT NULL",
    "bio:text",
]


def labels(text):
    return [line.split()[2] for line in text.splitlines() if line.startswith("-- name:")]


@pytest.fixture
def generator(settings, output_manager):
    return ScaffoldGenerator(settings=settings, output_manager=output_manager)


class TestScaffoldGeneration:
    """Test complete generation runs."""

    def test_author_example(self, generator, output_stream):
        """Should print schema and all five queries for the authors table."""
        text = generator.run_for_testing(AUTHOR_ARGS)

        assert output_stream.getvalue() == text
        assert "CREATE TABLE IF NOT EXISTS authors (\n" in text
        schema_lines = text.split("CREATE TABLE IF NOT EXISTS authors (\n")[1].splitlines()
        assert schema_lines[:3] == [
            "  id   INTEGER PRIMARY KEY,",
            "  name text    NOT NULL,",
            "  bio  text",
        ]
        assert labels(text) == [
            "GetAuthor",
            "ListAuthors",
            "CreateAuthor",
            "DeleteAuthor",
            "UpdateAuthor",
        ]

    def test_only_schema(self, generator):
        """Should not print any query labels."""
        text = generator.run_for_testing(["--only", "schema", *AUTHOR_ARGS])

        assert "-- name:" not in text
        assert "#" not in text

    def test_only_queries(self, generator):
        """Should not print the CREATE TABLE statement."""
        text = generator.run_for_testing([*AUTHOR_ARGS, "--only", "queries"])

        assert "CREATE TABLE" not in text
        assert labels(text)[0] == "GetAuthor"

    def test_no_returning_clause(self, generator):
        """Should label Update as :exec without RETURNING *."""
        text = generator.run_for_testing(["--no-returning-clause", *AUTHOR_ARGS])

        update = text.split("-- name: UpdateAuthor")[1]
        assert update.startswith(" :exec\n")
        assert "RETURNING" not in update
        assert update.rstrip().endswith("WHERE id = ?;")

    def test_no_exists_clause_and_order_by(self, generator):
        """Should honor both flags, even after positional arguments."""
        text = generator.run_for_testing(
            [*AUTHOR_ARGS, "--no-exists-clause", "--order-by", "name"]
        )

        assert "CREATE TABLE authors (" in text
        assert "SELECT * FROM authors\nORDER BY name;" in text

    def test_no_identifier_column(self, generator):
        """Should omit Get, Delete and Update without an identifier."""
        text = generator.run_for_testing(["note/notes", "title@text", "body@text@null"])

        assert labels(text) == ["ListNotes", "CreateNote"]

    def test_custom_id_column(self, generator):
        """Should use --id-column to find the identifier among plain columns."""
        text = generator.run_for_testing(
            ["--id-column", "uuid", "user/users", "uuid:TEXT:PRIMARY KEY", "name:text"]
        )

        assert "WHERE uuid = ? LIMIT 1;" in text
        assert "INSERT INTO users (\n  name\n)" in text

    def test_smart_columns(self, generator):
        """Should expand smart columns end to end."""
        text = generator.run_for_testing(
            ["zipcode_import/zipcode_imports", "@id", "code@text@unique", "note@text@null"]
        )

        assert "  id   INTEGER PRIMARY KEY,\n" in text
        assert "  code TEXT    NOT NULL UNIQUE,\n" in text
        assert "  note TEXT\n" in text
        assert "-- name: GetZipcodeImport :one" in text
        assert "-- name: ListZipcodeImports :many" in text

    def test_output_file(self, generator, output_stream, tmp_path):
        """Should write to the file given with --output instead of stdout."""
        output_path = tmp_path / "authors.sql"

        text = generator.run_for_testing(["-o", str(output_path), *AUTHOR_ARGS])

        assert output_path.read_text(encoding="utf-8") == text
        assert output_stream.getvalue() == ""

    def test_environment_defaults(self, output_manager):
        """Should take option defaults from SQLCUP_ variables."""
        env = {"SQLCUP_ID_COLUMN": "pk", "SQLCUP_ORDER_BY": "pk DESC"}
        with patch.dict(os.environ, env, clear=True):
            settings = Config(_env_file=None)
        generator = ScaffoldGenerator(settings=settings, output_manager=output_manager)

        text = generator.run_for_testing(["item/items", "pk:INTEGER", "label:text"])

        assert "WHERE pk = ? LIMIT 1;" in text
        assert "ORDER BY pk DESC;" in text

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["author/authors"],
            ["authors", "id:INTEGER"],
            ["author/authors", "a:b:c:d"],
            ["author/authors", "col@id@unique"],
            ["author/authors", "@id", "pk@text@id"],
            ["--only", "everything", *AUTHOR_ARGS],
            ["--unknown", *AUTHOR_ARGS],
        ],
    )
    def test_bad_arguments(self, generator, output_stream, argv):
        """Should raise BadArgumentError and produce no output."""
        with pytest.raises(BadArgumentError):
            generator.run_for_testing(argv)

        assert output_stream.getvalue() == ""


class TestExitBehavior:
    """Test the exit codes and messages of run()."""

    def test_success_does_not_exit(self, generator, output_stream):
        """Should return normally after printing the statements."""
        generator.run(AUTHOR_ARGS)

        assert "CREATE TABLE" in output_stream.getvalue()

    def test_bad_argument_exit(self, generator, settings, capsys):
        """Should print the error and help text and exit with the bad-argument code."""
        with pytest.raises(SystemExit) as exc_info:
            generator.run(["author/authors", "col@varchar"])

        assert exc_info.value.code == settings.exit_codes.error_bad_argument
        captured = capsys.readouterr()
        assert "sqlcup: bad argument: invalid <column>, unknown tag 'varchar'" in captured.err
        assert "usage: sqlcup [options] <name> <column> ..." in captured.err
        assert captured.out == ""

    def test_unexpected_error_exit(self, generator, settings, capsys):
        """Should exit with the unexpected-error code without help text."""
        with patch.object(generator.formatter, "render", side_effect=RuntimeError("boom")):
            with pytest.raises(SystemExit) as exc_info:
                generator.run(AUTHOR_ARGS)

        assert exc_info.value.code == settings.exit_codes.error_unexpected
        assert "usage:" not in capsys.readouterr().err

    def test_help_exits_successfully(self, generator, capsys):
        """Should print help on --help and exit with status 0."""
        with pytest.raises(SystemExit) as exc_info:
            generator.run(["--help"])

        assert exc_info.value.code == 0
        assert "Smart column tags:" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "flags", [["-v"], ["--verbose"], ["--verb"], ["-vo", "out.sql"]]
    )
    def test_verbose_logs_at_debug(self, generator, patched_setup_logger, tmp_path, flags):
        """Should configure DEBUG logging for every spelling argparse accepts."""
        flags = [str(tmp_path / f) if f.endswith(".sql") else f for f in flags]

        generator.run([*flags, *AUTHOR_ARGS])

        patched_setup_logger.assert_called_once_with("DEBUG")

    def test_log_level_from_settings(self, generator, settings, patched_setup_logger):
        """Should use the configured level without --verbose."""
        generator.run(AUTHOR_ARGS)

        patched_setup_logger.assert_called_once_with(settings.log_level)


class TestArgparseErrors:
    """Test that argparse failures carry the offending fragment."""

    def test_invalid_choice_fragment(self, generator):
        """Should attach the rejected --only value."""
        with pytest.raises(BadArgumentError) as exc_info:
            generator.run_for_testing(["--only", "everything", *AUTHOR_ARGS])

        assert exc_info.value.argument == "everything"
        assert "invalid choice" in exc_info.value.reason

    def test_unrecognized_option_fragment(self, generator):
        """Should attach the unknown option."""
        with pytest.raises(BadArgumentError) as exc_info:
            generator.run_for_testing(["--unknown", *AUTHOR_ARGS])

        assert exc_info.value.argument == "--unknown"

    def test_missing_option_value_has_no_fragment(self, generator):
        """Should report a missing option value with the message only."""
        with pytest.raises(BadArgumentError) as exc_info:
            generator.run_for_testing([*AUTHOR_ARGS, "--only"])

        assert exc_info.value.argument is None
        assert "expected one argument" in exc_info.value.reason


def test_parser_defaults_follow_settings(settings):
    settings = settings.model_copy(update={"id_column": "uuid", "no_exists_clause": True})
    namespace = build_argument_parser(settings).parse_intermixed_args(["a/b", "x:int"])
    assert namespace.id_column == "uuid"
    assert namespace.no_exists_clause is True
    assert namespace.only is None
