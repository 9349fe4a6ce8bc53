"""Departments and employees.

The department set is closed. Member values equal their symbolic names, so
sorting members (which compare as strings) orders them lexicographically by
name rather than by declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Department(StrEnum):
    """Departments an employee can be assigned to."""

    ACCOUNTING = "Accounting"
    CUSTOMER_SERVICE = "CustomerService"
    MARKETING = "Marketing"
    HR = "HR"
    SALES = "Sales"
    IT = "IT"
    QA = "QA"
    FINANCE = "Finance"


_BY_NAME: dict[str, Department] = {dept.value: dept for dept in Department}


def parse_department(token: str) -> Department | None:
    """Return the department named exactly *token*, or None.

    Matching is case-sensitive.

    Examples:
        >>> parse_department("HR")
        <Department.HR: 'HR'>
        >>> parse_department("hr") is None
        True
    """
    return _BY_NAME.get(token)


def department_names() -> list[str]:
    """All department names in lexicographic order."""
    return sorted(_BY_NAME)


@dataclass(frozen=True, order=True)
class Employee:
    """An employee, identified by first name only."""

    first_name: str

    def __str__(self) -> str:
        return self.first_name
