from __future__ import annotations

import os
from typing import Optional


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_opt_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y")


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


# Seed for PoissonCalculator's generator; None means OS entropy.
SEED = _env_opt_int("PDIST_SEED")

# Upper bound on unit steps taken by the ppf/isf search.
PPF_MAX_ITER = _env_int("PDIST_PPF_MAX_ITER", 100_000)

# sf convention: False -> P(X > x), True -> P(X >= x)
INCLUSIVE_SF = _env_bool("PDIST_INCLUSIVE_SF", False)

# Reproduce the historical single-argument pdf forwarding.
LEGACY_PDF = _env_bool("PDIST_LEGACY_PDF", False)

LOG_LEVEL = _env_str("PDIST_LOG_LEVEL", "INFO")
