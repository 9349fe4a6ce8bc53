"""Command: run directory commands from a script."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from deptctl.commands._base import DeptCommand

if TYPE_CHECKING:
    from deptctl.commands._context import AppContext


@click.command(
    cls=DeptCommand,
    examples="""\
  deptctl run staff.txt
  printf 'add Sam to HR\\nlist\\n' | deptctl run
  deptctl --json run --strict staff.txt""",
)
@click.argument("script", type=click.File("r"), default="-")
@click.option("--strict", is_flag=True, help="Stop with exit code 1 at the first illegal line.")
@click.pass_obj
def run(app: AppContext, script: IO[str], strict: bool) -> None:
    """Run commands from SCRIPT (default: stdin), one per line.

    Stops at 'quit' or end of file.
    """
    interp = app.new_interpreter()
    for result in interp.run(script):
        if result.ok:
            app.emit(result)
            continue
        if app.settings.json_output:
            app.emit(result.model_copy(update={"meta": {"line": interp.lines_read}}))
        else:
            click.echo(f"line {interp.lines_read}: {result.response}", err=True)
        if strict:
            raise SystemExit(1)
