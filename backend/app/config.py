"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    cors_origins: Tuple[str, ...]


def _split_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(part.strip() for part in raw.split(",") if part.strip())
    return origins or ("*",)


def load_settings() -> Settings:
    """
    Loads .env into the process environment, then reads:
      SIMULATOR_ENV  (default "dev")
      LOG_LEVEL      (default "INFO")
      CORS_ORIGINS   comma-separated (default "*", i.e. any origin)
    """
    load_dotenv()

    return Settings(
        env=os.getenv("SIMULATOR_ENV", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
    )
