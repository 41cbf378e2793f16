from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens for the admin panels.
# Colors follow the ConstructPro palette (primary/accent + status colors).
#
THEME = {
    "primary": "#211832",
    "accent": "#412B6B",
    "success": "#10b981",
    "danger": "#ef4444",
    "warning": "#f59e0b",
    "info": "#3b82f6",
    "chip_bg": "#f0f2f6",
    "border_color": "#e0e0e0",
    "text_secondary": "#666",
}

_PROJECT_ROOT = os.path.abspath(os.path.dirname(__file__))


@dataclass(frozen=True)
class AppConfig:
    data_dir: str
    log_level: str
    require_login: bool
    # Cosmetic pause before view transitions (login redirect)
    simulated_delay_seconds: float


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getbool(name: str, default: bool) -> bool:
    v = _getenv(name)
    if v is None:
        return default
    return v.lower() in {"1", "true", "yes", "on"}


def _getfloat(name: str, default: float) -> float:
    v = _getenv(name)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError:
        return default


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Falls back to `<project>/data` for storage
    """
    load_dotenv(override=False)

    return AppConfig(
        data_dir=_getenv("ADMIN_DATA_DIR") or os.path.join(_PROJECT_ROOT, "data"),
        log_level=(_getenv("ADMIN_LOG_LEVEL") or "INFO").upper(),
        require_login=_getbool("ADMIN_REQUIRE_LOGIN", True),
        simulated_delay_seconds=_getfloat("ADMIN_SIMULATED_DELAY", 1.2),
    )
