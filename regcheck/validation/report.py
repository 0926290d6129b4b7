"""ValidationReport aggregation.

This module defines the ValidationReport class that collects the verdict of
every record in a file, in input order.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from regcheck.validation.classifier import PRECEDENCE
from regcheck.validation.verdict import Invalid, Verdict


@dataclass(frozen=True)
class RecordVerdict:
    """Verdict of one record together with its source line."""

    line_number: int
    verdict: Verdict

    def to_json(self) -> dict[str, Any]:
        """Export as a tagged entry: ``status`` is "ok" or "invalid"."""
        if isinstance(self.verdict, Invalid):
            return {
                "line_number": self.line_number,
                "status": "invalid",
                "field": self.verdict.role.label,
                "value": self.verdict.value,
            }
        return {
            "line_number": self.line_number,
            "status": "ok",
            "field": None,
            "value": None,
        }


@dataclass
class ValidationReport:
    """Aggregated verdicts for a record file.

    Attributes:
        entries: One RecordVerdict per record, in input order
        timestamp: When validation was performed
        source: Path of the validated file, if known

    Example:
        >>> report = RecordValidator().validate(df)
        >>> print(report.summary())
        Validation Summary: 3 records, 2 valid, 1 invalid
        >>> for line in report.format_lines():
        ...     print(line)
        Register OK
        Invalid Registration - Purchase Date: 2023-02-29
        Register OK
    """

    entries: list[RecordVerdict]
    timestamp: datetime = field(default_factory=datetime.now)
    source: str | None = None

    @property
    def total(self) -> int:
        return len(self.entries)

    @property
    def valid(self) -> int:
        return sum(1 for entry in self.entries if entry.verdict.is_ok)

    @property
    def invalid(self) -> int:
        return self.total - self.valid

    def is_valid(self) -> bool:
        """Check if every record passed.

        An empty report is valid.
        """
        return self.invalid == 0

    def summary(self) -> str:
        """Generate summary string.

        Example:
            >>> report.summary()
            'Validation Summary: 5 records, 4 valid, 1 invalid'
        """
        return (
            f"Validation Summary: {self.total} records, "
            f"{self.valid} valid, {self.invalid} invalid"
        )

    def failures_by_field(self) -> dict[str, int]:
        """Count invalid records by failing field, in precedence order.

        Fields with no failures are omitted.
        """
        counts = {role.label: 0 for role in PRECEDENCE}
        for entry in self.entries:
            if isinstance(entry.verdict, Invalid):
                counts[entry.verdict.role.label] += 1
        return {label: count for label, count in counts.items() if count}

    def format_lines(self, only_invalid: bool = False) -> list[str]:
        """One verdict line per record, in input order.

        Args:
            only_invalid: Skip records whose verdict is Ok
        """
        return [
            entry.verdict.format()
            for entry in self.entries
            if not (only_invalid and entry.verdict.is_ok)
        ]

    def format(self, only_invalid: bool = False) -> str:
        """Format report as human-readable text (verdict lines only)."""
        return "\n".join(self.format_lines(only_invalid=only_invalid))

    def to_json(self) -> dict[str, Any]:
        """Export report as JSON for programmatic access.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "source": self.source,
            "timestamp": self.timestamp.isoformat(),
            "summary": {
                "total": self.total,
                "valid": self.valid,
                "invalid": self.invalid,
                "is_valid": self.is_valid(),
                "failures_by_field": self.failures_by_field(),
            },
            "records": [entry.to_json() for entry in self.entries],
        }
