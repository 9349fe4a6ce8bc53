"""Reactor — apply a Command to a Directory.

``react`` is pure: it takes the current directory and returns the response
text together with the next directory. Read-only commands hand back the
same directory object.

Output formats:

- ``ListAll``: per populated department, sorted by name, a header line,
  one tab-indented line per employee, then a blank line.
- ``ListDepartment``: one employee per line, no header. An unassigned
  department gets an explicit message instead of an empty string.
"""

from __future__ import annotations

from typing import NamedTuple

from deptctl.domain.commands import (
    Add,
    Command,
    Empty,
    Illegal,
    ListAll,
    ListDepartment,
    Terminate,
)
from deptctl.domain.directory import Directory, add_employee
from deptctl.domain.types import Department
from deptctl.errors import ContractViolation

NO_EMPLOYEES = "There are no employees assigned to this department."


class Reaction(NamedTuple):
    """Response text and the directory that follows the command."""

    response: str
    directory: Directory


def react(directory: Directory, command: Command) -> Reaction:
    """Execute *command* against *directory*.

    Raises:
        ContractViolation: If *command* is ``Terminate``, which the caller
            must handle before reaching the reactor.
    """
    match command:
        case Add(employee=employee, department=department):
            response = f"Successfully added {employee} into {department}."
            return Reaction(response, add_employee(directory, employee, department))
        case ListDepartment(department=department):
            return Reaction(list_department(directory, department), directory)
        case ListAll():
            return Reaction(list_all(directory), directory)
        case Illegal(reason=reason):
            return Reaction(reason, directory)
        case Empty():
            return Reaction("", directory)
        case Terminate():
            raise ContractViolation("Terminate must be handled by the caller, not the reactor")
    raise ContractViolation(f"Unexpected command: {command!r}")


def list_department(directory: Directory, department: Department) -> str:
    """Names of *department*'s employees, one per line."""
    if department not in directory:
        return NO_EMPLOYEES
    return "".join(f"{employee}\n" for employee in directory.employees(department))


def list_all(directory: Directory) -> str:
    """Every populated department with its employees."""
    lines: list[str] = []
    for department, employees in directory:
        lines.append(f"{department}\n")
        lines.extend(f"\t{employee}\n" for employee in employees)
        lines.append("\n")
    return "".join(lines)
