"""Field format rules.

This module defines the five field roles of a registration record and the
pure format check bound to each one. Patterns are compiled once at import
time and never change.

Rules:
    - Code: one uppercase letter, a hyphen, three digits (``A-123``)
    - Purchase Date: ``CCYY-MM-DD`` for years 1900-2099, calendar-correct
      including Gregorian leap years
    - Amount: 1-4 integer digits with an optional comma and 1-2 decimals
      (``1234,56``)
    - Description: at least one non-whitespace character
    - Email: ``local@domain.tld`` with a TLD of two or more letters

Loose and strict matching:
    Amount is anchored at the end of the value only, so leading characters
    before a matching suffix are tolerated (``x12`` and ``12345`` match).
    Email is searched between word boundaries, so a value that contains an
    address matches (``mail: a@b.co``). Both are kept by default for
    compatibility with existing data. Passing ``strict=True`` anchors both
    patterns at the start and the end of the value.
"""

import re
from collections.abc import Callable
from enum import Enum

CODE_PATTERN = re.compile(r"[A-Z]-[0-9]{3}", re.ASCII)

# Leap years: 19xx/20xx multiples of 4 that are not centuries, plus 2000
_LEAP_YEAR = r"(?:(?:19|20)(?:[02468][48]|[13579][26]|[2468]0)|2000)"
_ANY_YEAR = r"(?:19|20)[0-9]{2}"
_MONTH_DAY = (
    r"(?:02-(?:0[1-9]|1[0-9]|2[0-8])"
    r"|(?:0[13-9]|1[0-2])-(?:0[1-9]|[12][0-9]|30)"
    r"|(?:0[13578]|1[02])-31)"
)
PURCHASE_DATE_PATTERN = re.compile(
    rf"{_LEAP_YEAR}-02-29|{_ANY_YEAR}-{_MONTH_DAY}",
    re.ASCII,
)

AMOUNT_PATTERN = re.compile(r"[0-9]{1,4}(?:,[0-9]{1,2})?\Z", re.ASCII)
STRICT_AMOUNT_PATTERN = re.compile(r"[0-9]{1,4}(?:,[0-9]{1,2})?", re.ASCII)

DESCRIPTION_PATTERN = re.compile(r"\S")

_EMAIL = r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"
EMAIL_PATTERN = re.compile(rf"\b{_EMAIL}\b", re.ASCII)
STRICT_EMAIL_PATTERN = re.compile(_EMAIL, re.ASCII)


def is_valid_code(value: str) -> bool:
    """Check a code such as ``A-123``; the whole value must match."""
    return CODE_PATTERN.fullmatch(value) is not None


def is_valid_purchase_date(value: str) -> bool:
    """Check a ``CCYY-MM-DD`` purchase date.

    Only years 1900-2099 are accepted. Day ranges follow the month, and
    February 29 is accepted only in leap years (2000 is one, 1900 is not).

    Example:
        >>> is_valid_purchase_date("2000-02-29")
        True
        >>> is_valid_purchase_date("1900-02-29")
        False
        >>> is_valid_purchase_date("2023-04-31")
        False
    """
    return PURCHASE_DATE_PATTERN.fullmatch(value) is not None


def is_valid_amount(value: str, strict: bool = False) -> bool:
    """Check an amount such as ``1234,56``.

    Args:
        value: Field value
        strict: Require the whole value to match. By default only the end of
            the value is anchored, so ``12345`` matches on its ``2345`` suffix.

    Example:
        >>> is_valid_amount("1,5")
        True
        >>> is_valid_amount("12345")
        True
        >>> is_valid_amount("12345", strict=True)
        False
    """
    if strict:
        return STRICT_AMOUNT_PATTERN.fullmatch(value) is not None
    return AMOUNT_PATTERN.search(value) is not None


def is_valid_description(value: str) -> bool:
    """Check that a description is not blank."""
    return DESCRIPTION_PATTERN.search(value) is not None


def is_valid_email(value: str, strict: bool = False) -> bool:
    """Check an email address.

    Args:
        value: Field value
        strict: Require the whole value to be the address. By default a value
            containing a word-bounded address matches.

    Example:
        >>> is_valid_email("a.b+c@example.com")
        True
        >>> is_valid_email("no-domain-dot@com")
        False
        >>> is_valid_email("<a@example.com>", strict=True)
        False
    """
    if strict:
        return STRICT_EMAIL_PATTERN.fullmatch(value) is not None
    return EMAIL_PATTERN.search(value) is not None


class FieldRole(Enum):
    """Semantic role of a record field.

    Each role carries its position in the record, the record frame column
    that holds it, and the label used in verdict lines.
    """

    CODE = (0, "code", "Code")
    DESCRIPTION = (1, "description", "Description")
    PURCHASE_DATE = (2, "purchase_date", "Purchase Date")
    AMOUNT = (4, "amount", "Amount")
    EMAIL = (5, "email", "Email")

    def __init__(self, index: int, column: str, label: str) -> None:
        self.index = index
        self.column = column
        self.label = label


_CHECKS: dict[FieldRole, Callable[[str, bool], bool]] = {
    FieldRole.CODE: lambda value, strict: is_valid_code(value),
    FieldRole.DESCRIPTION: lambda value, strict: is_valid_description(value),
    FieldRole.PURCHASE_DATE: lambda value, strict: is_valid_purchase_date(value),
    FieldRole.AMOUNT: is_valid_amount,
    FieldRole.EMAIL: is_valid_email,
}

RULE_DESCRIPTIONS: dict[FieldRole, str] = {
    FieldRole.CODE: "One uppercase letter, a hyphen and three digits (A-123)",
    FieldRole.PURCHASE_DATE: "Calendar date CCYY-MM-DD between 1900 and 2099, leap-year aware",
    FieldRole.AMOUNT: "1-4 integer digits with optional comma and 1-2 decimals (1234,56)",
    FieldRole.DESCRIPTION: "At least one non-whitespace character",
    FieldRole.EMAIL: "Email address local@domain.tld",
}


def check_field(role: FieldRole, value: str, strict: bool = False) -> bool:
    """Apply the rule bound to ``role`` to a field value."""
    return _CHECKS[role](value, strict)
