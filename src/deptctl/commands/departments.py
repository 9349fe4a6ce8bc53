"""Command: list the departments employees can be assigned to."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deptctl.commands._base import DeptCommand

if TYPE_CHECKING:
    from deptctl.commands._context import AppContext


@click.command(
    cls=DeptCommand,
    examples="""\
  deptctl departments
  deptctl --json departments""",
)
@click.pass_obj
def departments(app: AppContext) -> None:
    """Print every known department in lexicographic order."""
    from deptctl.domain.types import department_names
    from deptctl.services.result import ServiceResult

    names = department_names()
    app.emit(
        ServiceResult(
            ok=True,
            op="departments",
            data={"response": "\n".join(names), "departments": names},
        )
    )
