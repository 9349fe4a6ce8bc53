"""The directory — which employees are assigned to which departments.

INVARIANT: A department key is present only while it has at least one
employee. Keys are inserted with their first employee and never removed.

INVARIANT: A Directory is never modified in place. ``add_employee`` returns
a new Directory and leaves its input untouched.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from deptctl.domain.types import Department, Employee

DEFAULT_COMPANY = "Giggle, Inc."


@dataclass(frozen=True)
class Directory:
    """Immutable mapping of department to its set of employees.

    Attributes:
        assignments: Populated departments and their employees.
        company: Display name of the company. Not part of equality.
    """

    assignments: Mapping[Department, frozenset[Employee]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    company: str = field(default=DEFAULT_COMPANY, compare=False)

    def employees(self, department: Department) -> list[Employee]:
        """Employees of *department* sorted by name (empty if unassigned)."""
        return sorted(self.assignments.get(department, frozenset()))

    def departments(self) -> list[Department]:
        """Populated departments in lexicographic order."""
        return sorted(self.assignments)

    def __contains__(self, department: object) -> bool:
        return department in self.assignments

    def __iter__(self) -> Iterator[tuple[Department, list[Employee]]]:
        for department in self.departments():
            yield department, self.employees(department)


def add_employee(directory: Directory, employee: Employee, department: Department) -> Directory:
    """Return a copy of *directory* with *employee* assigned to *department*.

    Adding an employee already present in the department is a no-op.
    """
    current = directory.assignments.get(department, frozenset())
    if employee in current:
        return directory
    updated = dict(directory.assignments)
    updated[department] = current | {employee}
    return Directory(assignments=MappingProxyType(updated), company=directory.company)
