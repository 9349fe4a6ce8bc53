"""Interpreter — owns the live directory and runs lines through parse/react.

The interpreter is the only holder of mutable state: it swaps in the
directory returned by each ``react`` call. Illegal and terminate commands
are intercepted here and never reach the reactor.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

import structlog

from deptctl.domain.commands import (
    Add,
    Command,
    Empty,
    Illegal,
    ListAll,
    ListDepartment,
    Terminate,
)
from deptctl.domain.directory import Directory
from deptctl.services.parser import parse
from deptctl.services.reactor import react
from deptctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

ILLEGAL_COMMAND = "ILLEGAL_COMMAND"


class Interpreter:
    """Line-at-a-time driver for a single directory session.

    Usage::

        interp = Interpreter()
        interp.execute("add Sam to HR")
        print(interp.execute("list").response)
    """

    def __init__(self, directory: Directory | None = None) -> None:
        self.directory = directory if directory is not None else Directory()
        self.terminated = False
        self.lines_read = 0

    def execute(self, line: str) -> ServiceResult:
        """Parse and run one line, returning its result.

        Log records emitted while the line is handled carry its 1-based
        position in the session as ``line``.
        """
        self.lines_read += 1
        with structlog.contextvars.bound_contextvars(line=self.lines_read):
            return self._execute(line)

    def _execute(self, line: str) -> ServiceResult:
        command = parse(line)

        if isinstance(command, Illegal):
            logger.debug("Rejected input %r: %s", line, command.reason)
            return ServiceResult(
                ok=False,
                op="illegal",
                error=ServiceError(
                    code=ILLEGAL_COMMAND,
                    message=command.reason,
                    detail={"input": line},
                ),
            )
        if isinstance(command, Terminate):
            self.terminated = True
            return ServiceResult(ok=True, op="quit")

        response, self.directory = react(self.directory, command)
        return ServiceResult(ok=True, op=_op_name(command), data=self._payload(command, response))

    def run(self, lines: Iterable[str]) -> Iterator[ServiceResult]:
        """Execute *lines* in order, stopping after a ``quit``."""
        for line in lines:
            yield self.execute(line)
            if self.terminated:
                return

    def _payload(self, command: Command, response: str) -> dict[str, object]:
        data: dict[str, object] = {"response": response}
        match command:
            case Add(employee=employee, department=department):
                logger.debug("Added %s to %s", employee, department)
                data["employee"] = str(employee)
                data["department"] = str(department)
            case ListDepartment(department=department):
                data["department"] = str(department)
                data["employees"] = [str(e) for e in self.directory.employees(department)]
            case ListAll():
                data["departments"] = {
                    str(department): [str(e) for e in employees]
                    for department, employees in self.directory
                }
        return data


def _op_name(command: Command) -> str:
    match command:
        case Add():
            return "add"
        case ListDepartment():
            return "list_department"
        case ListAll():
            return "list_all"
        case Empty():
            return "empty"
    return type(command).__name__.lower()
