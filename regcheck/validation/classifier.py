"""Record classifier.

Applies the field rules to one record in a fixed precedence order and returns
a single verdict. The first failing rule decides the verdict; later fields
are not checked. If every rule passes, the record is ``Ok``.

Precedence:
    Code -> Purchase Date -> Amount -> Description -> Email
"""

from collections.abc import Sequence

from regcheck.validation.rules import FieldRole, check_field
from regcheck.validation.verdict import Invalid, Ok, Verdict


PRECEDENCE: tuple[FieldRole, ...] = (
    FieldRole.CODE,
    FieldRole.PURCHASE_DATE,
    FieldRole.AMOUNT,
    FieldRole.DESCRIPTION,
    FieldRole.EMAIL,
)


def field_value(fields: Sequence[str | None], role: FieldRole) -> str:
    """Return the value at the role's position, or "" if it is missing."""
    if role.index >= len(fields):
        return ""
    value = fields[role.index]
    return "" if value is None else value


class RecordClassifier:
    """Classifies records against the fixed rule set.

    The classifier is stateless apart from its matching mode, so one
    instance can be shared by any number of records.

    Attributes:
        strict: Anchor the Amount and Email rules at both ends

    Example:
        >>> classifier = RecordClassifier()
        >>> classifier.classify(["A-123", "Pen", "2023-05-01", "X", "12,50", "a@b.com"])
        Ok()
        >>> classifier.classify(["a-123", "Pen", "2023-02-29", "X", "12,50", "bad"])
        Invalid(role=<FieldRole.CODE: (0, 'code', 'Code')>, value='a-123')
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def classify(self, fields: Sequence[str | None]) -> Verdict:
        """Classify one record given as positional fields.

        Args:
            fields: Record fields in position order. Missing positions and
                    None values count as empty strings.

        Returns:
            ``Ok()``, or ``Invalid`` for the first failing role in PRECEDENCE
        """
        for role in PRECEDENCE:
            value = field_value(fields, role)
            if not check_field(role, value, strict=self.strict):
                return Invalid(role=role, value=value)
        return Ok()


def classify_record(fields: Sequence[str | None], strict: bool = False) -> Verdict:
    """Classify one record with a throwaway classifier."""
    return RecordClassifier(strict=strict).classify(fields)
