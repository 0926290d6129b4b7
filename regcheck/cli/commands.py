"""CLI command implementations.

This module implements the CLI commands for the regcheck tool:
- check: Validate every record of a delimited file
- list_rules: List the field rules in precedence order
- check_config: Validate configuration files

Each command is implemented as a function that returns an exit code,
enabling both direct invocation and subprocess-based testing.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Any

from cyclopts import Parameter

from regcheck.cli.config import ConfigError, load_config, merge_config, validate_config
from regcheck.cli.exit_codes import ExitCode
from regcheck.cli.output import configure_logging, handle_error
from regcheck.core.exceptions import ReaderError
from regcheck.core.reader import DelimitedRecordReader
from regcheck.validation.classifier import PRECEDENCE
from regcheck.validation.rules import RULE_DESCRIPTIONS
from regcheck.validation.validator import RecordValidator

logger = logging.getLogger(__name__)


def check(
    input_path: Annotated[Path, Parameter(help="Delimited record file")],
    delimiter: Annotated[str | None, Parameter(help="Field separator (default ';')")] = None,
    encoding: Annotated[str | None, Parameter(help="File encoding (default utf-8)")] = None,
    strict: Annotated[bool | None, Parameter(help="Anchor Amount and Email rules at both ends")] = None,
    output: Annotated[str | None, Parameter(help="Output format (text, json)")] = None,
    config: Annotated[Path | None, Parameter(help="Configuration file path")] = None,
    only_invalid: Annotated[bool, Parameter(help="Print invalid records only")] = False,
    summary: Annotated[bool, Parameter(help="Print a summary to stderr")] = False,
    verbose: Annotated[bool, Parameter(help="Show detailed error information")] = False,
    log_level: Annotated[str, Parameter(help="Log level (debug, info, warning, error)")] = "warning",
    log_file: Annotated[Path | None, Parameter(help="Log file path")] = None,
) -> int:
    """Check every record of a delimited file.

    Reads the file, classifies each record against the field rules and prints
    one verdict line per record in input order: ``Register OK`` or
    ``Invalid Registration - <Field>: <value>`` naming the first failing
    field.

    Args:
        input_path: Path to the record file (first line is a header)
        delimiter: Field separator (overrides config file)
        encoding: File encoding (overrides config file)
        strict: Anchor the Amount and Email rules (overrides config file)
        output: "text" for verdict lines, "json" for a JSON report
        config: Path to configuration file (optional)
        only_invalid: Print verdict lines for invalid records only
        summary: Print a summary line to stderr after the verdicts
        verbose: Show detailed error information including stack traces
        log_level: Logging level (debug, info, warning, error)
        log_file: Path to log file (optional)

    Returns:
        0 if every record is valid, 2 if any record is invalid, 3 if the file
        cannot be read, 4 for configuration errors

    Example:
        >>> from pathlib import Path
        >>> from regcheck.cli.commands import check
        >>>
        >>> exit_code = check(input_path=Path("registrations.csv"))
        Register OK
        Invalid Registration - Purchase Date: 2023-02-29
    """
    try:
        try:
            configure_logging(log_level, log_file)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return ExitCode.CONFIG_ERROR

        # CLI arguments take precedence over the config file
        cfg: dict[str, Any] = {}
        if config:
            cfg = load_config(config)
        cfg = merge_config(
            cfg,
            delimiter=delimiter,
            encoding=encoding,
            strict=strict,
            output=output,
        )

        errors = validate_config(cfg)
        if errors:
            print("✗ Invalid configuration:", file=sys.stderr)
            for error in errors:
                print(f"  {error}", file=sys.stderr)
            return ExitCode.CONFIG_ERROR

        logger.debug("Effective configuration: %s", cfg)

        df = DelimitedRecordReader().read(
            input_path,
            delimiter=cfg["delimiter"],
            encoding=cfg["encoding"],
            skip_header=cfg["skip_header"],
        )
        report = RecordValidator(strict=cfg["strict"]).validate(df, source=str(input_path))

        if cfg["output"] == "json":
            print(json.dumps(report.to_json(), indent=2, ensure_ascii=False))
        else:
            for line in report.format_lines(only_invalid=only_invalid):
                print(line)

        if summary:
            print(report.summary(), file=sys.stderr)
            for label, count in report.failures_by_field().items():
                print(f"  {label}: {count}", file=sys.stderr)

        return ExitCode.SUCCESS if report.is_valid() else ExitCode.VALIDATION_ERROR

    except ReaderError as e:
        handle_error(e, verbose=verbose)
        return ExitCode.READER_ERROR
    except ConfigError as e:
        handle_error(e, verbose=verbose)
        return ExitCode.CONFIG_ERROR
    except Exception as e:
        handle_error(e, verbose=verbose)
        return ExitCode.UNEXPECTED_ERROR


def list_rules() -> int:
    """List the field rules in precedence order.

    The first rule a record fails is the one reported for it.

    Returns:
        Exit code (always 0 for success)
    """
    print("Rules (checked in this order):")
    for position, role in enumerate(PRECEDENCE, 1):
        print(f"  {position}. {role.label:15} field {role.index}  {RULE_DESCRIPTIONS[role]}")

    return ExitCode.SUCCESS


def check_config(
    config_path: Annotated[Path, Parameter(help="Configuration file path")],
) -> int:
    """Validate configuration file.

    Loads a configuration file and checks its keys and values, displaying
    specific validation errors if found.

    Args:
        config_path: Path to configuration file to validate

    Returns:
        Exit code (0 for valid config, 4 for invalid config)
    """
    try:
        config = load_config(config_path)
        errors = validate_config(config)

        if errors:
            print("✗ Configuration validation failed:", file=sys.stderr)
            for error in errors:
                print(f"  {error}", file=sys.stderr)
            return ExitCode.CONFIG_ERROR

        print("✓ Configuration is valid")

        effective = merge_config(config)
        for key, value in effective.items():
            marker = "" if key in config else " (default)"
            print(f"  {key}: {value!r}{marker}")

        return ExitCode.SUCCESS

    except ConfigError as e:
        print("✗ Configuration error:", file=sys.stderr)
        print(f"  {e}", file=sys.stderr)
        return ExitCode.CONFIG_ERROR
    except Exception as e:
        handle_error(e, verbose=False)
        return ExitCode.UNEXPECTED_ERROR
