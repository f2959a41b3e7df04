"""Poisson distribution facade.

Represents the number of independent events that occur in a fixed interval
at average rate ``lam``. All numerics live in the calculator; this class only
binds ``lam`` and forwards calls.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

import numpy as np

from pdist import settings
from pdist.calculators.base import Calculator
from pdist.errors import InvalidArgument


@dataclass(frozen=True)
class Poisson:
    lam: float
    calculator: Calculator
    # True -> pdf() calls calculator.pmf(x) with no rate, as older releases did.
    legacy_pdf: bool = field(default_factory=lambda: settings.LEGACY_PDF)

    def __post_init__(self):
        if self.calculator is None:
            raise InvalidArgument("Poisson requires a calculator")

    def rvs(self, size: Optional[int] = None) -> Union[float, np.ndarray]:
        """Random variate(s); a float when size is None."""
        return self.calculator.get_rvs(self.lam, size)

    def pmf(self, x: float) -> float:
        """P(X = x)."""
        return self.calculator.get_pmf(x, self.lam)

    def pdf(self, x: float) -> float:
        """Alias for pmf."""
        if self.legacy_pdf:
            return self.calculator.pmf(x)
        return self.calculator.get_pmf(x, self.lam)

    def cdf(self, x: float) -> float:
        """P(X <= x)."""
        return self.calculator.get_cdf(x, self.lam)

    def sf(self, x: float) -> float:
        """Survival function; the > vs >= convention belongs to the calculator."""
        return self.calculator.get_sf(x, self.lam)

    def ppf(self, p: float) -> float:
        """Percent-point function, the inverse of cdf."""
        return self.calculator.get_ppf(p, self.lam)

    def isf(self, p: float) -> float:
        """Inverse survival function, the inverse of sf."""
        return self.calculator.get_isf(p, self.lam)

    def stats(self, moments: str = "mv") -> Dict[str, float]:
        """Selected moments: m=mean, v=variance, s=skewness, k=kurtosis."""
        return self.calculator.get_stats(moments, self.lam)
