"""Writing generated SQL text to its destination."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO


class OutputManager:
    """Manages where generated SQL text ends up.

    By default text goes to standard output so it can be piped or copied
    into the schema and query files; it can also be written to a file.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the output manager.

        Args:
            stream: Stream for ``write_text``; standard output when omitted
        """
        self.stream = stream

    def write_text(self, text: str) -> None:
        """Write text to the configured stream.

        Args:
            text: SQL text to write
        """
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(text)
        stream.flush()

    def write_file(self, text: str, output_path: Path) -> Path:
        """Write text to a file, creating parent directories as needed.

        Args:
            text: SQL text to write
            output_path: Destination file

        Returns:
            Path where the file was written

        Raises:
            PermissionError: If unable to write file
        """
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)

            with open(output_path, "w", encoding="utf-8") as f:
                f.write(text)

            return output_path

        except Exception as e:
            raise PermissionError(
                f"Failed to write SQL to {output_path}: {e}"
            ) from e
