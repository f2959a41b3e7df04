"""Numerics for the Poisson distribution.

Conventions:
  cdf(x)  = P(X <= floor(x))
  sf(x)   = P(X > x)              (inclusive_sf=False, default)
          = P(X >= x)             (inclusive_sf=True)
  ppf(p)  = smallest k >= 0 with cdf(k) >= p
  isf(p)  = smallest k >= 0 with sf(k) <= p

cdf/sf go through the regularized incomplete gamma function
(scipy.special.pdtr / pdtrc).
"""
from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Union

import numpy as np
from scipy import special

from pdist import settings
from pdist.errors import DomainError, InvalidParameter, NumericalError

log = logging.getLogger(__name__)

MOMENT_NAMES = {"m": "mean", "v": "variance", "s": "skewness", "k": "kurtosis"}

# numpy refuses lam above int64 max - 10*sqrt(int64 max).
RVS_LAM_MAX = float(np.iinfo(np.int64).max) - 10.0 * math.sqrt(float(np.iinfo(np.int64).max))


def _check_lam(lam) -> float:
    try:
        lam_f = float(lam)
    except (TypeError, ValueError) as e:
        raise InvalidParameter(f"lam must be a number, got {lam!r}") from e
    if not math.isfinite(lam_f) or lam_f <= 0.0:
        raise InvalidParameter(f"lam must be finite and > 0, got {lam!r}")
    return lam_f


def _check_x(x) -> float:
    try:
        x_f = float(x)
    except (TypeError, ValueError) as e:
        raise DomainError(f"x must be a number, got {x!r}") from e
    if math.isnan(x_f):
        raise DomainError("x must not be NaN")
    return x_f


def _check_prob(p) -> float:
    try:
        p_f = float(p)
    except (TypeError, ValueError) as e:
        raise DomainError(f"p must be a number, got {p!r}") from e
    if not (0.0 <= p_f <= 1.0):
        raise DomainError(f"p must be in [0, 1], got {p!r}")
    return p_f


def _initial_guess(z: float, lam: float) -> int:
    # Cornish-Fisher expansion of the Poisson quantile.
    return max(0, int(math.floor(lam + z * math.sqrt(lam) + (z * z - 1.0) / 6.0)))


@dataclass(eq=False)
class PoissonCalculator:
    seed: Optional[int] = field(default_factory=lambda: settings.SEED)
    inclusive_sf: bool = field(default_factory=lambda: settings.INCLUSIVE_SF)
    max_iter: int = field(default_factory=lambda: settings.PPF_MAX_ITER)

    def __post_init__(self):
        self.rng = np.random.default_rng(self.seed)
        # numpy Generators are not thread-safe.
        self._rng_lock = threading.Lock()
        log.debug("PoissonCalculator seed=%s inclusive_sf=%s", self.seed, self.inclusive_sf)

    # --- sampling -----------------------------------------------------------

    def get_rvs(self, lam: float, size: Optional[int] = None) -> Union[float, np.ndarray]:
        lam = _check_lam(lam)
        if lam > RVS_LAM_MAX:
            raise InvalidParameter(f"lam too large to sample, got {lam!r} (max {RVS_LAM_MAX:.6g})")
        with self._rng_lock:
            draws = self.rng.poisson(lam, size)
        if size is None:
            return float(draws)
        return np.asarray(draws, dtype=float)

    # --- mass / tails -------------------------------------------------------

    def get_pmf(self, x: float, lam: float) -> float:
        lam = _check_lam(lam)
        x = _check_x(x)
        if x < 0 or not x.is_integer():
            return 0.0
        try:
            return math.exp(x * math.log(lam) - lam - math.lgamma(x + 1.0))
        except OverflowError:
            # lgamma overflows near x ~ 2.5e305, far past where the mass underflows.
            return 0.0

    def get_cdf(self, x: float, lam: float) -> float:
        lam = _check_lam(lam)
        x = _check_x(x)
        if x < 0:
            return 0.0
        if math.isinf(x):
            return 1.0
        return self._cdf(math.floor(x), lam)

    def get_sf(self, x: float, lam: float) -> float:
        lam = _check_lam(lam)
        x = _check_x(x)
        if math.isinf(x):
            return 1.0 if x < 0 else 0.0
        return self._sf(x, lam)

    # --- inverses -----------------------------------------------------------

    def get_ppf(self, p: float, lam: float) -> float:
        lam = _check_lam(lam)
        p = _check_prob(p)
        if p == 0.0:
            return 0.0
        if p == 1.0:
            return math.inf
        guess = _initial_guess(float(special.ndtri(p)), lam)
        return float(self._smallest_k(lambda k: self._cdf(k, lam) >= p, guess))

    def get_isf(self, p: float, lam: float) -> float:
        lam = _check_lam(lam)
        p = _check_prob(p)
        if p == 0.0:
            return math.inf
        if p == 1.0:
            return 0.0
        guess = _initial_guess(-float(special.ndtri(p)), lam)
        return float(self._smallest_k(lambda k: self._sf(k, lam) <= p, guess))

    # --- moments ------------------------------------------------------------

    def get_stats(self, moments: str, lam: float) -> Dict[str, float]:
        lam = _check_lam(lam)
        if not isinstance(moments, str):
            raise DomainError(f"moments must be a string, got {moments!r}")
        values = {
            "mean": lam,
            "variance": lam,
            "skewness": 1.0 / math.sqrt(lam),
            "kurtosis": 1.0 / lam,  # excess
        }
        out: Dict[str, float] = {}
        for ch in moments:
            name = MOMENT_NAMES.get(ch)
            if name is None:
                raise DomainError(f"unknown moment {ch!r} in {moments!r}; use characters from 'mvsk'")
            out[name] = values[name]
        return out

    # --- internals ----------------------------------------------------------

    def _cdf(self, k: int, lam: float) -> float:
        if k < 0:
            return 0.0
        return float(special.pdtr(k, lam))

    def _sf(self, x: float, lam: float) -> float:
        if self.inclusive_sf:
            # P(X >= x) == P(X > ceil(x) - 1)
            k = math.ceil(x) - 1
        else:
            k = math.floor(x)
        if k < 0:
            return 1.0
        return float(special.pdtrc(k, lam))

    def _smallest_k(self, pred: Callable[[int], bool], guess: int) -> int:
        """Smallest k >= 0 with pred(k) True; pred must be monotone in k."""
        k = guess
        down = pred(k)
        for steps in range(self.max_iter):
            if down:
                if k == 0 or not pred(k - 1):
                    log.debug("inverse search done k=%d guess=%d steps=%d", k, guess, steps)
                    return k
                k -= 1
            else:
                if pred(k):
                    log.debug("inverse search done k=%d guess=%d steps=%d", k, guess, steps)
                    return k
                k += 1
        raise NumericalError(f"inverse search did not converge within {self.max_iter} steps (guess={guess})")
