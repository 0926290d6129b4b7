"""CLI interface for the regcheck record validation tool.

This package provides command-line access to the validator through commands
for checking record files, listing rules and validating configuration files.
"""
