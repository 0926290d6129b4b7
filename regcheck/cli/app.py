"""Cyclopts application and command routing for regcheck CLI.

The CLI provides the following commands:
- check: Validate every record of a delimited file
- list-rules: List the field rules in precedence order
- check-config: Validate configuration files
"""

from cyclopts import App

from regcheck import __version__
from regcheck.cli import commands

app = App(
    name="regcheck",
    help="Field format validation for delimited registration files",
    version=__version__,
)

app.command(commands.check)
app.command(commands.list_rules, name="list-rules")
app.command(commands.check_config, name="check-config")
