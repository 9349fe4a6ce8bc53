"""ServiceResult and ServiceError — what the interpreter hands the CLI.

INVARIANT: Every interpreted line yields exactly one ServiceResult.
Illegal input is ``ok=False`` with an ``ILLEGAL_COMMAND`` error, never an
exception.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of interpreting one line.

    Attributes:
        ok: Whether the line was accepted.
        op: Name of the operation (e.g. ``"add"``, ``"list_all"``).
        data: Operation payload; ``data["response"]`` is the text to print.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (line numbers, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def response(self) -> str:
        """Text shown to the user for this result."""
        if not self.ok:
            return self.error.message if self.error else "Unknown error"
        return str(self.data.get("response", ""))
