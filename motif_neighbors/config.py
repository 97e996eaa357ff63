"""
Runtime configuration, read from the environment.

  MOTIF_DATA_DIR            directory holding the JSON inputs (./data)
  MOTIF_API_HOST            bind address (0.0.0.0)
  MOTIF_API_PORT            bind port (8080)
  MOTIF_CORS_ORIGINS        comma-separated allowed origins (*)
  MOTIF_DISTANCE_PRECISION  decimals for continuous distances (5)
  MOTIF_LOG_LEVEL           DEBUG|INFO|WARNING|ERROR (INFO)
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

VERSION = "1.0.0"


@dataclass(frozen=True)
class Settings:
    data_dir: str = "./data"
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: Tuple[str, ...] = ("*",)
    distance_precision: int = 5
    log_level: str = "INFO"

    def validate(self) -> List[str]:
        """Return configuration issues; empty when the settings are usable."""
        issues = []
        if not 0 < self.port < 65536:
            issues.append(f"MOTIF_API_PORT out of range: {self.port}")
        if self.distance_precision < 0:
            issues.append(
                f"MOTIF_DISTANCE_PRECISION must be >= 0: {self.distance_precision}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            issues.append(f"Invalid MOTIF_LOG_LEVEL: {self.log_level}")
        if not self.cors_origins:
            issues.append("MOTIF_CORS_ORIGINS must name at least one origin")
        return issues


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    origins = os.getenv("MOTIF_CORS_ORIGINS", "*")
    return Settings(
        data_dir=os.getenv("MOTIF_DATA_DIR", "./data"),
        host=os.getenv("MOTIF_API_HOST", "0.0.0.0"),
        port=_int_env("MOTIF_API_PORT", 8080),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        distance_precision=_int_env("MOTIF_DISTANCE_PRECISION", 5),
        log_level=os.getenv("MOTIF_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach one stream handler to the package logger.

    Calling it again only adjusts the level.
    """
    logger = logging.getLogger("motif_neighbors")
    logger.setLevel((level or "INFO").upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
