"""Centralised settings for flowcanvas.

Values can be overridden via environment variables or a `.env` file in the
project root (loaded automatically when this module is imported).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _parse_log_level(raw: str) -> str:
    """Return *raw* as an upper-case level name, or ``WARNING`` if logging does not know it."""
    level = raw.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return "WARNING"


def _parse_indent(raw: str) -> str | int:
    """Turn ``FLOWCANVAS_JSON_INDENT`` into a value ``json.dumps`` accepts.

    ``"tab"`` (or an actual tab) means a tab character, digits mean that many
    spaces, anything else is used verbatim as the indent string.
    """
    if raw in ("tab", "\t", ""):
        return "\t"
    if raw.isdigit():
        return int(raw)
    return raw


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: _parse_log_level(
            os.environ.get("FLOWCANVAS_LOG_LEVEL", "WARNING")
        )
    )

    # ------------------------------------------------------------------
    # JSON output
    # ------------------------------------------------------------------
    json_indent: str | int = field(
        default_factory=lambda: _parse_indent(os.environ.get("FLOWCANVAS_JSON_INDENT", "tab"))
    )


# Module-level singleton, import this everywhere:
#   from flowcanvas.config import settings
settings = Settings()
