"""Delimited record reader.

Reads a semicolon-delimited text file into a record frame. The whole file is
read into memory inside a scoped block before it is split into lines, so the
file handle is released whether or not an error occurs.

Layout rules:
    - The first line is a header and is skipped (unless skip_header=False)
    - Trailing blank lines are ignored; a missing final newline is fine
    - Each line is stripped of surrounding whitespace, then split on the
      delimiter
    - Missing fields become empty strings; fields past the last known
      position are dropped
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import polars as pl

from regcheck.core.exceptions import ReaderError
from regcheck.core.schema import FIELD_COLUMNS, RECORD_SCHEMA

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ";"
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class RawRecord:
    """One split line of the source file."""

    line_number: int
    fields: tuple[str, ...]


def split_records(
    text: str,
    delimiter: str = DEFAULT_DELIMITER,
    skip_header: bool = True,
) -> list[RawRecord]:
    """Split file content into raw records.

    Args:
        text: Full file content
        delimiter: Field separator
        skip_header: Whether the first line is a header to skip

    Returns:
        Raw records in source order. Line numbers are 1-based physical lines.

    Example:
        >>> split_records("code;desc\\nA-123;Pen\\n")
        [RawRecord(line_number=2, fields=('A-123', 'Pen'))]
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")

    lines = text.split("\n")

    # Drop the blank terminator(s) rather than assuming exactly one
    while lines and not lines[-1].strip():
        lines.pop()

    start = 1 if skip_header else 0
    return [
        RawRecord(line_number=index + 1, fields=tuple(line.strip().split(delimiter)))
        for index, line in enumerate(lines)
        if index >= start
    ]


def records_to_frame(records: list[RawRecord]) -> pl.DataFrame:
    """Build a record frame from raw records.

    Fields are bound to columns by position. Records shorter than the layout
    get empty strings for the missing positions.
    """
    data: dict[str, list] = {"line_number": [record.line_number for record in records]}
    for position, column in enumerate(FIELD_COLUMNS):
        data[column] = [
            record.fields[position] if position < len(record.fields) else ""
            for record in records
        ]
    return pl.DataFrame(data, schema=RECORD_SCHEMA)


class DelimitedRecordReader:
    """Reader for semicolon-delimited record files with a header line."""

    def read(
        self,
        path: Path,
        delimiter: str = DEFAULT_DELIMITER,
        encoding: str = DEFAULT_ENCODING,
        skip_header: bool = True,
    ) -> pl.DataFrame:
        """Read a delimited file into a record frame.

        Args:
            path: Path to the input file
            delimiter: Field separator (default ";")
            encoding: Text encoding of the file (default "utf-8")
            skip_header: Whether to skip the first line

        Returns:
            Record frame with one row per record, in source order

        Raises:
            ReaderError: If the file cannot be opened, read, or decoded

        Example:
            >>> reader = DelimitedRecordReader()
            >>> df = reader.read(Path("registrations.csv"))
            >>> df.columns[:3]
            ['line_number', 'code', 'description']
        """
        path = Path(path)

        try:
            with path.open("r", encoding=encoding, newline="") as handle:
                text = handle.read()
        except FileNotFoundError as e:
            raise ReaderError(
                f"Input file not found: {path}",
                file_path=str(path),
                format="delimited",
                reason="File does not exist",
            ) from e
        except UnicodeDecodeError as e:
            raise ReaderError(
                f"Cannot decode {path} as {encoding}",
                file_path=str(path),
                format="delimited",
                reason=str(e),
                encoding=encoding,
            ) from e
        except LookupError as e:
            raise ReaderError(
                f"Unknown encoding: {encoding}",
                file_path=str(path),
                reason=str(e),
                encoding=encoding,
            ) from e
        except OSError as e:
            raise ReaderError(
                f"Cannot read input file: {path}",
                file_path=str(path),
                format="delimited",
                reason=str(e),
            ) from e

        records = split_records(text, delimiter=delimiter, skip_header=skip_header)
        logger.info("Read %d records from %s", len(records), path)

        return records_to_frame(records)
