"""Command variants — the contract between parser and reactor.

Every parsed line becomes exactly one of these. ``Illegal`` carries the
human-readable reason the line was rejected.
"""

from __future__ import annotations

from dataclasses import dataclass

from deptctl.domain.types import Department, Employee


@dataclass(frozen=True)
class Empty:
    """Blank input."""


@dataclass(frozen=True)
class Add:
    employee: Employee
    department: Department


@dataclass(frozen=True)
class ListDepartment:
    department: Department


@dataclass(frozen=True)
class ListAll:
    pass


@dataclass(frozen=True)
class Terminate:
    pass


@dataclass(frozen=True)
class Illegal:
    reason: str


Command = Empty | Add | ListDepartment | ListAll | Terminate | Illegal
