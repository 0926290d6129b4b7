"""Record frame schema definition.

Records read from a delimited file are held in a Polars DataFrame with a
fixed schema. Field columns appear in record position order, so that a row
can be turned back into the positional field sequence the classifier expects.

Schema:
    - line_number (Int64): 1-based physical line in the source file
    - code (Utf8): position 0
    - description (Utf8): position 1
    - purchase_date (Utf8): position 2
    - category (Utf8): position 3, carried but not validated
    - amount (Utf8): position 4
    - email (Utf8): position 5
"""

import polars as pl

# Field columns in record position order
FIELD_COLUMNS = [
    "code",
    "description",
    "purchase_date",
    "category",
    "amount",
    "email",
]

RECORD_SCHEMA = {
    "line_number": pl.Int64,
    **{column: pl.Utf8 for column in FIELD_COLUMNS},
}


def create_empty_records() -> pl.DataFrame:
    """Create an empty record frame with the correct schema.

    Example:
        >>> df = create_empty_records()
        >>> df.columns
        ['line_number', 'code', 'description', 'purchase_date', 'category', 'amount', 'email']
        >>> len(df)
        0
    """
    return pl.DataFrame(schema=RECORD_SCHEMA)
