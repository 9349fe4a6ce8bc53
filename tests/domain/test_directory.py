"""Tests for the Directory value and add_employee."""

from __future__ import annotations

from deptctl.domain.directory import DEFAULT_COMPANY, Directory, add_employee
from deptctl.domain.types import Department, Employee


class TestDirectory:
    def test_empty(self) -> None:
        d = Directory()
        assert d.departments() == []
        assert list(d) == []
        assert Department.HR not in d
        assert d.employees(Department.HR) == []
        assert d.company == DEFAULT_COMPANY

    def test_iterates_departments_sorted_with_sorted_employees(self) -> None:
        d = Directory()
        d = add_employee(d, Employee("Bobby"), Department.SALES)
        d = add_employee(d, Employee("Kyle"), Department.FINANCE)
        d = add_employee(d, Employee("Annie"), Department.FINANCE)
        assert list(d) == [
            (Department.FINANCE, [Employee("Annie"), Employee("Kyle")]),
            (Department.SALES, [Employee("Bobby")]),
        ]

    def test_company_not_part_of_equality(self) -> None:
        assert Directory(company="A") == Directory(company="B")


class TestAddEmployee:
    def test_creates_department_on_first_employee(self) -> None:
        d = add_employee(Directory(), Employee("Sam"), Department.HR)
        assert Department.HR in d
        assert d.employees(Department.HR) == [Employee("Sam")]
        assert d.departments() == [Department.HR]

    def test_does_not_modify_input(self) -> None:
        original = Directory()
        updated = add_employee(original, Employee("Sam"), Department.HR)
        assert original.departments() == []
        assert updated is not original

    def test_duplicate_is_noop(self) -> None:
        once = add_employee(Directory(), Employee("Sam"), Department.HR)
        twice = add_employee(once, Employee("Sam"), Department.HR)
        assert twice == once
        assert twice.employees(Department.HR) == [Employee("Sam")]

    def test_same_name_in_two_departments(self) -> None:
        d = add_employee(Directory(), Employee("Sam"), Department.HR)
        d = add_employee(d, Employee("Sam"), Department.IT)
        assert d.departments() == [Department.HR, Department.IT]

    def test_insertion_order_irrelevant(self) -> None:
        a = add_employee(Directory(), Employee("Kyle"), Department.FINANCE)
        a = add_employee(a, Employee("Annie"), Department.FINANCE)
        b = add_employee(Directory(), Employee("Annie"), Department.FINANCE)
        b = add_employee(b, Employee("Kyle"), Department.FINANCE)
        assert a == b
        assert list(a) == list(b)

    def test_preserves_company(self) -> None:
        d = add_employee(Directory(company="Testers, Inc."), Employee("Sam"), Department.HR)
        assert d.company == "Testers, Inc."
