"""Shared test fixtures and Hypothesis strategies for regcheck tests."""

from datetime import date
from pathlib import Path

import polars as pl
import pytest
from hypothesis import settings
from hypothesis import strategies as st
from hypothesis.strategies import composite

from regcheck.core.schema import FIELD_COLUMNS, RECORD_SCHEMA

settings.register_profile("regcheck", max_examples=100, deadline=None)
settings.load_profile("regcheck")

HEADER = "code;description;purchase_date;category;amount;email"

VALID_FIELDS = ["A-123", "Office chair", "2023-05-17", "FURN", "149,90", "buyer@example.com"]


def valid_codes() -> st.SearchStrategy[str]:
    """Codes such as ``K-042``."""
    return st.from_regex(r"[A-Z]-[0-9]{3}", fullmatch=True)


def valid_purchase_dates() -> st.SearchStrategy[str]:
    """Real calendar dates between 1900 and 2099 in ``CCYY-MM-DD`` form."""
    return st.dates(min_value=date(1900, 1, 1), max_value=date(2099, 12, 31)).map(
        lambda d: d.isoformat()
    )


def valid_amounts() -> st.SearchStrategy[str]:
    """Amounts such as ``1234,56`` that match even with full anchoring."""
    return st.from_regex(r"[0-9]{1,4}(?:,[0-9]{1,2})?", fullmatch=True)


def valid_descriptions() -> st.SearchStrategy[str]:
    """Text with at least one printable, non-space character, no delimiter."""
    return st.text(
        alphabet=st.characters(
            categories=("Lu", "Ll", "Nd", "Zs"),
            include_characters=".,-_",
        ),
        min_size=1,
        max_size=40,
    ).filter(lambda text: text.strip() != "")


def valid_emails() -> st.SearchStrategy[str]:
    """Addresses that match both the loose and the strict email rule."""
    return st.from_regex(
        r"[A-Za-z0-9][A-Za-z0-9._%+-]{0,15}@[A-Za-z0-9][A-Za-z0-9.-]{0,15}\.[A-Za-z]{2,6}",
        fullmatch=True,
    )


@composite
def valid_records(draw: st.DrawFn) -> list[str]:
    """Generate six-field records whose every field passes its rule.

    The category field at position 3 is free text and never validated.
    """
    return [
        draw(valid_codes()),
        draw(valid_descriptions()),
        draw(valid_purchase_dates()),
        draw(st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ", max_size=8)),
        draw(valid_amounts()),
        draw(valid_emails()),
    ]


def make_frame(records: list[list[str]]) -> pl.DataFrame:
    """Build a record frame from positional records (line numbers start at 2)."""
    data: dict[str, list] = {"line_number": [i + 2 for i in range(len(records))]}
    for position, column in enumerate(FIELD_COLUMNS):
        data[column] = [r[position] if position < len(r) else "" for r in records]
    return pl.DataFrame(data, schema=RECORD_SCHEMA)


@pytest.fixture
def write_records(tmp_path: Path):
    """Write a record file with a header line and return its path.

    Example:
        >>> path = write_records([VALID_FIELDS], trailing_newline=True)
    """

    def _write(
        records: list[list[str]],
        name: str = "registrations.csv",
        trailing_newline: bool = True,
    ) -> Path:
        lines = [HEADER] + [";".join(record) for record in records]
        content = "\n".join(lines)
        if trailing_newline:
            content += "\n"
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
