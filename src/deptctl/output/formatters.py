"""Human/JSON output helpers.

Human mode prints the interpreter's response text exactly as produced, so
listings keep their tabs and blank lines.  JSON mode serializes the whole
ServiceResult on one line per command.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from deptctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output switches derived from the global CLI flags."""

    model_config = {"frozen": True}

    json_output: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The result to format.
        settings: Output switches; defaults to human mode.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(exclude_none=True)
    return result.response
