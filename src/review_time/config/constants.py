"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "review-time"
APP_AUTHOR = "review-time"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_SAMPLE = "REVIEW_TIME_SAMPLE"

# API defaults
API_BASE = "https://api.modrinth.com/v2/"
PROJECT_PAGE_BASE = "https://modrinth.com/project/"
PLACEHOLDER_ICON = "https://placehold.co/64x64/d1d5db/374151?text=Mod"
MOD_FACET = "project_type:mod"

# Sample size bounds
DEFAULT_SAMPLE_SIZE = 50
MIN_SAMPLE_SIZE = 1
MAX_SAMPLE_SIZE = 500
