"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds interpreters from settings and centralizes
result emission (stdout/stderr routing).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deptctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from deptctl.config.settings import DeptSettings
    from deptctl.services.interpreter import Interpreter
    from deptctl.services.result import ServiceResult

class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: DeptSettings) -> None:
        self.settings = settings

        from deptctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def interactive_chrome(self) -> bool:
        """Whether banners and prompts may be shown."""
        return not (self.settings.quiet or self.settings.json_output)

    def new_interpreter(self) -> Interpreter:
        """An interpreter over an empty directory for the configured company."""
        from deptctl.domain.directory import Directory
        from deptctl.services.interpreter import Interpreter

        return Interpreter(Directory(company=self.settings.company.name))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult.

        * Success: writes to stdout.  In human mode an empty response (blank
          input, ``quit``, ``list`` on an empty directory) prints nothing.
        * Failure: writes to stderr.  The caller decides whether to stop.
        """
        settings = OutputSettings(json_output=self.settings.json_output)
        if not settings.json_output and result.ok and not result.response:
            return
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output, nl=not output.endswith("\n"))
        else:
            click.echo(output, err=True)
