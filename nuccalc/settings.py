from __future__ import annotations
from dataclasses import dataclass
import os

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    default_city: str = "London"
    max_yield_mt: float = 100.0
    clear_screen: bool = True


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from None


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


def load_settings() -> Settings:
    """Read NUCCALC_* variables from the environment (and a .env file if present)."""
    load_dotenv()
    return Settings(
        default_city=os.getenv("NUCCALC_DEFAULT_CITY", "London"),
        max_yield_mt=_float_env("NUCCALC_MAX_YIELD_MT", 100.0),
        clear_screen=_bool_env("NUCCALC_CLEAR_SCREEN", True),
    )
