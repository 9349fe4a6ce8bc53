"""Command: interactive directory session on stdin."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from deptctl.commands._base import DeptCommand

if TYPE_CHECKING:
    from deptctl.commands._context import AppContext

logger = logging.getLogger(__name__)


@click.command(
    cls=DeptCommand,
    examples="""\
  deptctl repl
  deptctl -q repl < commands.txt
  deptctl --json repl""",
)
@click.pass_obj
def repl(app: AppContext) -> None:
    """Start an interactive session. Type 'quit' to leave."""
    from deptctl.domain.types import department_names
    from deptctl.output.console import render_banner

    interp = app.new_interpreter()
    stdin = click.get_text_stream("stdin")
    show_prompt = app.interactive_chrome and stdin.isatty()

    if app.interactive_chrome and app.settings.repl.banner:
        click.echo(render_banner(interp.directory.company, department_names()))

    while not interp.terminated:
        if show_prompt:
            click.echo(app.settings.repl.prompt, nl=False)
        line = stdin.readline()
        if not line:
            logger.debug("End of input, leaving session")
            break
        app.emit(interp.execute(line))
