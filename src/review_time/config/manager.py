"""Configuration manager: read/write TOML config, resolve the sample size."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any
from urllib.parse import parse_qs, urlsplit

import tomli_w
from pydantic import ValidationError

from review_time.client.errors import ConfigurationError
from review_time.config.constants import (
    CONFIG_FILE,
    DEFAULT_SAMPLE_SIZE,
    ENV_SAMPLE,
    MAX_SAMPLE_SIZE,
    MIN_SAMPLE_SIZE,
)
from review_time.config.models import OUTPUT_FORMATS, CLIConfig, SampleRequest
from review_time.output.theme import Theme

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_leading_int(raw: Any) -> int | None:
    """Parse the leading integer of *raw* the way a browser's ``parseInt`` does.

    ``"120abc"`` gives 120, ``"3.9"`` gives 3, ``"abc"`` gives None.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


def resolve_sample_size(raw: Any) -> SampleRequest:
    """Resolve raw user input to a sample size, falling back to the default."""
    value = parse_leading_int(raw)
    if value is None or not MIN_SAMPLE_SIZE <= value <= MAX_SAMPLE_SIZE:
        return SampleRequest(size=DEFAULT_SAMPLE_SIZE)
    return SampleRequest(size=value)


def sample_from_query(query: str) -> str | None:
    """Pull the raw ``sample`` value out of a query string or a full page URL."""
    if "://" in query:
        query = urlsplit(query).query
    values = parse_qs(query.lstrip("?"), keep_blank_values=True).get("sample")
    return values[0] if values else None


class ConfigManager:
    """Manages CLI configuration on disk."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        raw = self.config_path.read_bytes()
        try:
            data = tomllib.loads(raw.decode())
            return CLIConfig(**data)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError, ValidationError) as exc:
            raise ConfigurationError(
                f"Cannot read config file {self.config_path}: {exc}"
            ) from exc

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        data = self.config.model_dump(mode="json")
        # Remove defaults to keep config clean
        for key, value in CLIConfig().model_dump(mode="json").items():
            if data.get(key) == value:
                del data[key]
        # Atomic write: write to temp file, then rename
        temp = self.config_path.with_suffix(".tmp")
        temp.write_text(tomli_w.dumps(data))
        temp.replace(self.config_path)

    def set_sample(self, size: int) -> None:
        if not MIN_SAMPLE_SIZE <= size <= MAX_SAMPLE_SIZE:
            raise ConfigurationError(
                f"Sample size must be between {MIN_SAMPLE_SIZE} and "
                f"{MAX_SAMPLE_SIZE}, got {size}."
            )
        self.config.sample = size
        self.save()

    def set_format(self, fmt: str) -> None:
        if fmt not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown format '{fmt}'. Choose one of: {', '.join(OUTPUT_FORMATS)}."
            )
        self.config.default_format = fmt
        self.save()

    def set_theme(self, theme: Theme) -> None:
        self.config.theme = theme
        self.save()

    def resolve_sample(
        self,
        sample: str | None = None,
        query: str | None = None,
    ) -> SampleRequest:
        """Resolve the sample size once at startup.

        Precedence: --sample > --query > env var > config file > default.
        Whichever source wins, an invalid value falls back to the default.
        """
        raw: Any = sample
        if raw is None and query:
            raw = sample_from_query(query)
        if raw is None:
            raw = os.environ.get(ENV_SAMPLE)
        if raw is None:
            raw = self.config.sample
        return resolve_sample_size(raw)
