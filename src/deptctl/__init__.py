"""deptctl — interactive employee/department directory."""

__version__ = "0.1.0"
