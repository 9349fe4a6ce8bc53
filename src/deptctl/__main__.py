"""Allow ``python -m deptctl``."""

from deptctl.cli import cli

cli()
