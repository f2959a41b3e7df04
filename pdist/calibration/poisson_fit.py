from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd
from scipy import special

from pdist.calculators.base import Calculator
from pdist.distributions.poisson import Poisson
from pdist.errors import DomainError, InvalidArgument

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PoissonFitResult:
    lam: float
    lam_low: float
    lam_high: float
    method: str
    n_points: int
    total_exposure: float

    def to_distribution(self, calculator: Calculator) -> Poisson:
        return Poisson(self.lam, calculator)


def fit_poisson_rate(
    points: pd.DataFrame,
    *,
    count_col: str = "count",
    exposure_col: Optional[str] = None,
    confidence: float = 0.95,
) -> PoissonFitResult:
    """Estimate lam from observed counts.

    We assume each row is one observation window:
      N_i ~ Poisson(lam * T_i)
    with T_i = 1 when no exposure column is given. The MLE is sum(N)/sum(T);
    the interval is the Garwood (chi-square) exact interval.

    Rows with a missing count or non-positive exposure are ignored.
    """
    if not 0.0 < confidence < 1.0:
        raise InvalidArgument(f"confidence must be in (0, 1), got {confidence!r}")
    if count_col not in points.columns:
        raise InvalidArgument(f"missing count column {count_col!r}")
    if exposure_col is not None and exposure_col not in points.columns:
        raise InvalidArgument(f"missing exposure column {exposure_col!r}")

    df = points[points[count_col].notna()].copy()
    if exposure_col is not None:
        df = df[df[exposure_col] > 0].copy()
    if len(df) < 1:
        raise InvalidArgument("Need at least one observation with a count and positive exposure")

    N = df[count_col].to_numpy(dtype=float)
    if np.any(N < 0):
        raise DomainError("counts must be non-negative")
    T = df[exposure_col].to_numpy(dtype=float) if exposure_col is not None else np.ones_like(N)

    n_total = float(N.sum())
    t_total = float(T.sum())
    alpha = 1.0 - confidence

    lam_hat = n_total / t_total
    # chdtri(v, q) is the inverse of the upper chi-square tail.
    lam_low = 0.0 if n_total == 0 else float(special.chdtri(2.0 * n_total, 1.0 - alpha / 2.0)) / 2.0 / t_total
    lam_high = float(special.chdtri(2.0 * n_total + 2.0, alpha / 2.0)) / 2.0 / t_total

    log.info(
        "poisson fit lam=%.6g [%.6g, %.6g] n_points=%d exposure=%.6g",
        lam_hat, lam_low, lam_high, len(df), t_total,
    )
    return PoissonFitResult(
        lam=lam_hat,
        lam_low=lam_low,
        lam_high=lam_high,
        method="mle_garwood",
        n_points=int(len(df)),
        total_exposure=t_total,
    )
