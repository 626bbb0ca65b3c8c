"""Environment driven settings for pdfdesk."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

OUTPUT_DIR_ENV = "PDFDESK_OUTPUT_DIR"
LOG_LEVEL_ENV = "PDFDESK_LOG_LEVEL"
COMPRESSION_LEVEL_ENV = "PDFDESK_COMPRESSION_LEVEL"

DEFAULT_OUTPUT_DIR = Path("~/Downloads")


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration shared by every operation."""

    output_dir: Path
    log_level: str = "WARNING"
    compression_level: str = "medium"

    @classmethod
    def from_env(cls) -> "Settings":
        output_dir = os.getenv(OUTPUT_DIR_ENV) or str(DEFAULT_OUTPUT_DIR)
        return cls(
            output_dir=Path(output_dir).expanduser().resolve(),
            log_level=(os.getenv(LOG_LEVEL_ENV) or "WARNING").upper(),
            compression_level=(os.getenv(COMPRESSION_LEVEL_ENV) or "medium").lower(),
        )


def get_settings() -> Settings:
    """Return settings read from the current environment.

    The environment is read on every call so that tests and long running hosts
    can change the output directory without restarting.
    """

    return Settings.from_env()


__all__ = ["Settings", "get_settings", "OUTPUT_DIR_ENV", "LOG_LEVEL_ENV", "COMPRESSION_LEVEL_ENV"]
