"""Record verdict types.

A verdict is the single outcome of classifying one record: either ``Ok`` or
``Invalid`` naming the first failing field and its value. ``Verdict`` is the
union of the two.
"""

from dataclasses import dataclass

from regcheck.validation.rules import FieldRole

OK_LINE = "Register OK"
INVALID_PREFIX = "Invalid Registration"


@dataclass(frozen=True)
class Ok:
    """Every field of the record passed its rule."""

    @property
    def is_ok(self) -> bool:
        return True

    def format(self) -> str:
        """Format as a verdict line.

        Example:
            >>> Ok().format()
            'Register OK'
        """
        return OK_LINE


@dataclass(frozen=True)
class Invalid:
    """The record failed the rule bound to ``role``.

    Attributes:
        role: First failing field in precedence order
        value: Raw value of that field ("" when the field was missing)
    """

    role: FieldRole
    value: str

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def reason(self) -> str:
        return f"Invalid {self.role.label.lower()} format"

    def format(self) -> str:
        """Format as a verdict line.

        Example:
            >>> Invalid(FieldRole.PURCHASE_DATE, "2023-02-29").format()
            'Invalid Registration - Purchase Date: 2023-02-29'
        """
        return f"{INVALID_PREFIX} - {self.role.label}: {self.value}"


Verdict = Ok | Invalid
