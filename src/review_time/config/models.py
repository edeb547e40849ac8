"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from review_time.config.constants import (
    DEFAULT_SAMPLE_SIZE,
    MAX_SAMPLE_SIZE,
    MIN_SAMPLE_SIZE,
)
from review_time.output.theme import Theme

OUTPUT_FORMATS = ("table", "json", "yaml", "csv")


class SampleRequest(BaseModel):
    """The resolved number of newest mods to analyse."""

    model_config = ConfigDict(frozen=True)

    size: int = Field(
        default=DEFAULT_SAMPLE_SIZE, ge=MIN_SAMPLE_SIZE, le=MAX_SAMPLE_SIZE,
    )


class CLIConfig(BaseModel):
    """Root configuration model."""

    sample: int = DEFAULT_SAMPLE_SIZE
    theme: Theme = Theme.DARK
    default_format: str = "table"
