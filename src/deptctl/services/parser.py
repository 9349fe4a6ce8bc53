"""Parser — raw input line to Command.

Accepted commands (tokens separated by any run of whitespace)::

    add <NAME> to <DEPT>
    list <DEPT>
    list
    quit

Keywords and department names are case-sensitive. Rejected input becomes
``Illegal(reason)``; the parser never raises and never touches state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from deptctl.domain.commands import (
    Add,
    Command,
    Empty,
    Illegal,
    ListAll,
    ListDepartment,
    Terminate,
)
from deptctl.domain.types import Employee, parse_department

logger = logging.getLogger(__name__)

ADD_KEYWORD = "add"
LIST_KEYWORD = "list"
QUIT_KEYWORD = "quit"
SEPARATOR = "to"

MISSING_NAME = "You must provide an employee name."
ADD_SYNTAX = "Add command syntax: add <NAME> to <DEPT>"
EXPECTED_SEPARATOR = "Expected 'to' separator."
MISSING_DEPARTMENT = "You must provide a department the employee belongs to."
DEPARTMENT_NOT_FOUND = "Department not found."
TOO_MANY_ADD_TOKENS = "Found too many tokens for the add command."
UNKNOWN_COMMAND = "Unknown command."


def parse(line: str) -> Command:
    """Parse one line of user input into a Command."""
    tokens = iter(line.split())
    command = _dispatch(tokens)
    logger.debug("Parsed %r as %r", line, command)
    return command


def _dispatch(tokens: Iterator[str]) -> Command:
    keyword = next(tokens, None)
    if keyword is None:
        return Empty()
    if keyword == ADD_KEYWORD:
        return _parse_add(tokens)
    if keyword == LIST_KEYWORD:
        return _parse_list(tokens)
    if keyword == QUIT_KEYWORD:
        return Terminate()
    return Illegal(UNKNOWN_COMMAND)


def _parse_list(tokens: Iterator[str]) -> Command:
    token = next(tokens, None)
    if token is None:
        return ListAll()
    # Tokens after the department are ignored.
    department = parse_department(token)
    if department is None:
        return Illegal(DEPARTMENT_NOT_FOUND)
    return ListDepartment(department)


def _parse_add(tokens: Iterator[str]) -> Command:
    """Parse ``<NAME> to <DEPT>``, reporting the first problem found.

    The token count is checked before the department name is looked up, so
    ``add Kyle to Nowhere extra`` reports too many tokens.
    """
    name = next(tokens, None)
    if name is None:
        return Illegal(MISSING_NAME)

    separator = next(tokens, None)
    if separator is None:
        return Illegal(ADD_SYNTAX)
    if separator != SEPARATOR:
        return Illegal(EXPECTED_SEPARATOR)

    token = next(tokens, None)
    if token is None:
        return Illegal(MISSING_DEPARTMENT)
    if next(tokens, None) is not None:
        return Illegal(TOO_MANY_ADD_TOKENS)

    department = parse_department(token)
    if department is None:
        return Illegal(DEPARTMENT_NOT_FOUND)
    return Add(Employee(name), department)
