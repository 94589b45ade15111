import logging
import os
from dataclasses import dataclass

from rich.logging import RichHandler

DEFAULT_EXPECTED_INSERTIONS = 1000
DEFAULT_FPP = 0.03
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class BloomConfig:
    expected_insertions: int = DEFAULT_EXPECTED_INSERTIONS
    fpp: float = DEFAULT_FPP
    log_level: str = DEFAULT_LOG_LEVEL
    seed: int = 0


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ[name])
    except (KeyError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.environ[name])
    except (KeyError, ValueError):
        return default


def load_config() -> BloomConfig:
    config = BloomConfig()
    config.expected_insertions = _env_int(
        "BLOOMKIT_EXPECTED_INSERTIONS", DEFAULT_EXPECTED_INSERTIONS
    )
    config.fpp = _env_float("BLOOMKIT_FPP", DEFAULT_FPP)
    log_level = os.environ.get("BLOOMKIT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    config.log_level = log_level if log_level in LOG_LEVELS else DEFAULT_LOG_LEVEL
    config.seed = _env_int("BLOOMKIT_SEED", 0)
    return config


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    root = logging.getLogger()
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
    root.setLevel(level.upper())


CONFIG = load_config()
