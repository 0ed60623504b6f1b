"""Runtime settings, read from the environment once at startup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    seed_demo_data: bool = True
    export_dir: Path = Path(".")

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            log_level=os.environ.get("PIMS_LOG_LEVEL", "WARNING").upper(),
            # Stores are in-memory only; without demo data every run starts empty
            seed_demo_data=os.environ.get("PIMS_SEED_DEMO_DATA", "1").lower() in _TRUTHY,
            export_dir=Path(os.environ.get("PIMS_EXPORT_DIR", ".")),
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
