"""Observations supplied by the host editor extension."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Iterable, Iterator, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .config import UNKNOWN

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY = "coding"


class Observation(BaseModel):
    """One editor callback: an edit/focus event or a save."""

    kind: Literal["activity", "save"] = "activity"
    entity: str = UNKNOWN
    activity_type: str = DEFAULT_ACTIVITY
    language: str = UNKNOWN
    project: Optional[str] = None
    workspace_folders: list[str] = Field(default_factory=list)
    line_count: int = Field(default=0, ge=0)
    cursor: int = Field(default=0, ge=0)
    is_write: bool = False
    timestamp: Optional[int] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("entity", "language", mode="before")
    @classmethod
    def blank_to_unknown(cls, value: object) -> object:
        if value is None:
            return UNKNOWN
        if isinstance(value, str):
            return value.strip() or UNKNOWN
        return value

    @field_validator("activity_type", mode="before")
    @classmethod
    def blank_to_coding(cls, value: object) -> object:
        if value is None:
            return DEFAULT_ACTIVITY
        if isinstance(value, str):
            return value.strip() or DEFAULT_ACTIVITY
        return value

    @model_validator(mode="after")
    def fill_project(self) -> "Observation":
        project = (self.project or "").strip()
        if not project:
            project = resolve_project(self.entity, self.workspace_folders)
        self.project = project
        if self.kind == "save":
            self.is_write = True
        return self


def resolve_project(entity: str, workspace_folders: Iterable[str]) -> str:
    """Return the innermost workspace folder containing ``entity``."""
    if entity == UNKNOWN:
        return UNKNOWN
    path = PurePath(entity)
    best: Optional[PurePath] = None
    for folder in workspace_folders:
        if not folder:
            continue
        candidate = PurePath(folder)
        if path.is_relative_to(candidate) and (
            best is None or len(candidate.parts) > len(best.parts)
        ):
            best = candidate
    return str(best) if best else UNKNOWN


def parse_observation(line: str) -> Observation:
    return Observation.model_validate_json(line)


def read_observations(lines: Iterable[str]) -> Iterator[Observation]:
    """Yield observations from JSON lines, skipping the ones that fail to parse."""
    for number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            yield parse_observation(line)
        except ValidationError as exc:
            logger.warning("Skipping invalid observation on line %d: %s", number, exc)
