"""Configuration file loading and validation.

This module handles loading configuration from JSON and YAML files, merging
CLI arguments with file-based configuration (with CLI taking precedence), and
validating the resulting settings.

Configuration files can specify:
- delimiter: Field separator (default ";")
- encoding: Text encoding of the input file (default "utf-8")
- skip_header: Whether the first line is a header (default true)
- strict: Anchor the Amount and Email rules at both ends (default false)
- output: Output format, "text" or "json" (default "text")

Example config.yaml:
    delimiter: ";"
    encoding: latin-1
    strict: true
"""

import codecs
import json
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "delimiter": ";",
    "encoding": "utf-8",
    "skip_header": True,
    "strict": False,
    "output": "text",
}

OUTPUT_FORMATS = ("text", "json")


class ConfigError(Exception):
    """Configuration file error.

    Raised when configuration files cannot be loaded or parsed, or when
    their top-level structure is not a mapping.
    """
    pass


def load_config(path: Path) -> dict[str, Any]:
    """Load configuration from JSON or YAML file.

    Format is determined by file extension (.json, .yaml, .yml). Other
    extensions are parsed as JSON first, then as YAML.

    Args:
        path: Path to configuration file

    Returns:
        Configuration dictionary (empty if the file is empty)

    Raises:
        ConfigError: If file cannot be loaded, parsed, or is not a mapping

    Example:
        >>> config = load_config(Path("regcheck.yaml"))
        >>> config["delimiter"]
        ';'
    """
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")

        if path.suffix == ".json":
            config = json.loads(content)
        elif path.suffix in (".yaml", ".yml"):
            config = yaml.safe_load(content)
        else:
            try:
                config = json.loads(content)
            except json.JSONDecodeError:
                config = yaml.safe_load(content)

    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Configuration in {path} must be a mapping, got: {type(config).__name__}"
        )
    return config


def merge_config(base: dict[str, Any], **overrides: Any) -> dict[str, Any]:
    """Merge CLI arguments into base configuration.

    CLI arguments take precedence over config file values. Only non-None
    override values are applied, so file values (and then defaults) are used
    when an argument is not given.

    Args:
        base: Base configuration from file
        **overrides: CLI argument overrides

    Returns:
        Defaults, updated by base, updated by non-None overrides

    Example:
        >>> merge_config({"delimiter": ","}, strict=True, encoding=None)
        {'delimiter': ',', 'encoding': 'utf-8', 'skip_header': True, 'strict': True, 'output': 'text'}
    """
    merged = DEFAULT_CONFIG.copy()
    merged.update(base)

    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate configuration keys and values.

    Args:
        config: Configuration dictionary to validate

    Returns:
        List of validation error messages (empty list if valid)

    Example:
        >>> validate_config({"output": "xml", "colour": "red"})
        ["Unknown configuration key: 'colour'", "output must be one of: text, json (got 'xml')"]
    """
    errors = []

    for key in config:
        if key not in DEFAULT_CONFIG:
            errors.append(f"Unknown configuration key: {key!r}")

    if "delimiter" in config:
        delimiter = config["delimiter"]
        if not isinstance(delimiter, str) or not delimiter:
            errors.append(f"delimiter must be a non-empty string (got {delimiter!r})")

    if "encoding" in config:
        encoding = config["encoding"]
        if not isinstance(encoding, str):
            errors.append(f"encoding must be a string (got {encoding!r})")
        else:
            try:
                codecs.lookup(encoding)
            except LookupError:
                errors.append(f"Unknown encoding: {encoding!r}")

    for key in ("skip_header", "strict"):
        if key in config and not isinstance(config[key], bool):
            errors.append(f"{key} must be true or false (got {config[key]!r})")

    if "output" in config and config["output"] not in OUTPUT_FORMATS:
        errors.append(
            f"output must be one of: {', '.join(OUTPUT_FORMATS)} (got {config['output']!r})"
        )

    return errors
