"""regcheck: field format validation for delimited registration files."""

__version__ = "0.1.0"
