# src/identity_kit/archive/config.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from identity_kit.models import Item, kind_for

from .tabs import DEFAULT_TAB_WIDTH

logger = logging.getLogger(__name__)


class ArchiveConfig(BaseModel):
    """Settings of a plain-text archive reader.

    `abbreviations` maps extra keywords to kind tags, e.g. `{"host": "system"}`.
    """

    tab_width: int = Field(default=DEFAULT_TAB_WIDTH, ge=1)
    only: list[str] | None = None
    abbreviations: dict[str, str] = Field(default_factory=dict)
    max_depth: int | None = Field(default=None, ge=1)

    class Config:
        extra = "forbid"

    def extra_kinds(self) -> dict[str, type[Item]]:
        """Resolve `abbreviations` against the known record kinds."""
        return {keyword: kind_for(tag) for keyword, tag in self.abbreviations.items()}

    @classmethod
    def from_yaml(cls, file_path: str | Path) -> "ArchiveConfig":
        logger.info("Loading archive config from %s", file_path)
        with open(file_path) as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))
