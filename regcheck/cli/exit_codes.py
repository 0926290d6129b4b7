"""Exit code constants for CLI commands.

Exit codes follow Unix conventions where 0 indicates success and non-zero
values indicate different kinds of failure.

Exit codes:
    0: SUCCESS - Every record is valid
    1: UNEXPECTED_ERROR - Unexpected/unhandled exception
    2: VALIDATION_ERROR - At least one record is invalid
    3: READER_ERROR - Input file could not be read
    4: CONFIG_ERROR - Configuration file or argument error
"""


class ExitCode:
    """Standard exit codes for CLI commands.

    Example:
        >>> from regcheck.cli.exit_codes import ExitCode
        >>> import sys
        >>>
        >>> sys.exit(ExitCode.SUCCESS if report.is_valid() else ExitCode.VALIDATION_ERROR)
    """

    SUCCESS = 0
    """Operation completed and every record is valid."""

    UNEXPECTED_ERROR = 1
    """Unexpected or unhandled exception occurred."""

    VALIDATION_ERROR = 2
    """One or more records failed validation."""

    READER_ERROR = 3
    """Input file reading failed."""

    CONFIG_ERROR = 4
    """Configuration file or argument error."""
