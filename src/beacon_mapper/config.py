"""Configuration schema and loader for the beacon map reconstruction."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, Field, field_validator


class ProjectMetadata(BaseModel):
    name: str = Field("beacon-map")


class LoggingConfig(BaseModel):
    level: str = Field("INFO")
    output: str = Field("stderr")

    @field_validator("level")
    @classmethod
    def ensure_known_level(cls, value: str) -> str:
        level = value.upper()
        try:
            logger.level(level)
        except ValueError as exc:
            raise ValueError(f"Unknown log level: {value}") from exc
        return level


class AlignmentConfig(BaseModel):
    min_overlap: int = Field(12, ge=1)
    shift_bound: int = Field(10_000, ge=0)
    max_workers: int = Field(8, ge=1)
    proper_rotations_only: bool = False


class PipelineConfig(BaseModel):
    project: ProjectMetadata = Field(default_factory=ProjectMetadata)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    alignment: AlignmentConfig = Field(default_factory=AlignmentConfig)


def load_config(path: str | Path) -> PipelineConfig:
    """Load configuration from YAML file."""
    with open(path, "r", encoding="utf-8") as handle:
        raw: Optional[Dict[str, object]] = yaml.safe_load(handle)
    return PipelineConfig.model_validate(raw or {})
