"""Exception hierarchy for deptctl.

User input errors never raise: they travel as ``Illegal`` commands and
``ServiceResult(ok=False)``. Exceptions here signal programming errors.
"""

from __future__ import annotations


class DeptctlError(Exception):
    """Base class for deptctl exceptions."""


class ContractViolation(DeptctlError):
    """A component was called with input its contract rules out."""
