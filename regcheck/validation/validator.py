"""Record format validator.

This module provides the RecordValidator that classifies every row of a
record frame and collects the verdicts into a ValidationReport.
"""

import logging
from datetime import datetime

import polars as pl

from regcheck.core.schema import FIELD_COLUMNS
from regcheck.validation.classifier import RecordClassifier
from regcheck.validation.report import RecordVerdict, ValidationReport

logger = logging.getLogger(__name__)


class RecordValidator:
    """Validates the field formats of every record in a record frame.

    Rows are classified independently and in row order, so the report lists
    verdicts in input order. A missing column or a null cell counts as an
    empty field and fails its rule like any other malformed value.

    Attributes:
        strict: Anchor the Amount and Email rules at both ends

    Example:
        >>> df = DelimitedRecordReader().read(Path("registrations.csv"))
        >>> report = RecordValidator().validate(df)
        >>> report.is_valid()
        False
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._classifier = RecordClassifier(strict=strict)

    def validate(self, df: pl.DataFrame, source: str | None = None) -> ValidationReport:
        """Classify every record of the frame.

        Args:
            df: Record frame (must not be mutated)
            source: Optional path of the file the frame was read from

        Returns:
            ValidationReport with one entry per row
        """
        timestamp = datetime.now()
        entries: list[RecordVerdict] = []

        for row_idx, row in enumerate(df.iter_rows(named=True)):
            line_number = row.get("line_number")
            if line_number is None:
                line_number = row_idx + 1

            fields = [_cell(row.get(column)) for column in FIELD_COLUMNS]
            logger.debug("Processing line %d, data: %s", line_number, fields)

            verdict = self._classifier.classify(fields)
            entries.append(RecordVerdict(line_number=line_number, verdict=verdict))

        logger.info("Classified %d records", len(entries))

        return ValidationReport(entries=entries, timestamp=timestamp, source=source)


def _cell(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
