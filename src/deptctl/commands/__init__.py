"""Subcommand modules for deptctl.

Provides register_commands() which uses deferred imports to keep
``deptctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from deptctl.commands.departments import departments
    from deptctl.commands.repl import repl
    from deptctl.commands.run import run

    cli.add_command(repl)
    cli.add_command(run)
    cli.add_command(departments)
