"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, deptctl.toml only contains
overrides. No config file is needed at all.
"""

from __future__ import annotations

from pydantic import BaseModel

from deptctl.domain.directory import DEFAULT_COMPANY


class CompanyConfig(BaseModel):
    """[company] section."""

    model_config = {"frozen": True}

    name: str = DEFAULT_COMPANY


class ReplConfig(BaseModel):
    """[repl] section."""

    model_config = {"frozen": True}

    prompt: str = "> "
    banner: bool = True

