"""Record validation for regcheck.

This package holds the field format rules, the record classifier that applies
them in a fixed precedence order, and the report that collects one verdict per
record.
"""

# Classification
from regcheck.validation.classifier import PRECEDENCE, RecordClassifier, classify_record

# Reporting
from regcheck.validation.report import RecordVerdict, ValidationReport

# Field rules
from regcheck.validation.rules import (
    FieldRole,
    check_field,
    is_valid_amount,
    is_valid_code,
    is_valid_description,
    is_valid_email,
    is_valid_purchase_date,
)

# Frame validation
from regcheck.validation.validator import RecordValidator

# Verdicts
from regcheck.validation.verdict import Invalid, Ok, Verdict

__all__ = [
    # Field rules
    "FieldRole",
    "check_field",
    "is_valid_code",
    "is_valid_purchase_date",
    "is_valid_amount",
    "is_valid_description",
    "is_valid_email",
    # Verdicts
    "Ok",
    "Invalid",
    "Verdict",
    # Classification
    "PRECEDENCE",
    "RecordClassifier",
    "classify_record",
    # Reporting and validation
    "RecordVerdict",
    "ValidationReport",
    "RecordValidator",
]
