"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, timetraveller.toml only
contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from timetraveller.domain.errors import TimeTravellerError
from timetraveller.domain.parsing import parse_week_start
from timetraveller.domain.zones import resolve_timezone

# --- timetraveller.toml sections ---


class BoundaryConfig(BaseModel):
    """[boundary] section."""

    model_config = {"frozen": True}

    timezone: str = "UTC"
    week_start: str = "sunday"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            resolve_timezone(value)
        except TimeTravellerError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("week_start", mode="before")
    @classmethod
    def _known_week_start(cls, value: object) -> str:
        try:
            return parse_week_start(value).name.lower()
        except TimeTravellerError as exc:
            raise ValueError(str(exc)) from exc
