from __future__ import annotations

from typing import Dict, Optional, Protocol, Union

import numpy as np


class Calculator(Protocol):
    """Numerical backend consumed by a distribution facade.

    Every method receives the distribution parameter explicitly so a single
    calculator instance can serve any number of facades.
    """

    def get_rvs(self, lam: float, size: Optional[int] = None) -> Union[float, np.ndarray]:
        ...

    def get_pmf(self, x: float, lam: float) -> float:
        ...

    def get_cdf(self, x: float, lam: float) -> float:
        ...

    def get_sf(self, x: float, lam: float) -> float:
        ...

    def get_ppf(self, p: float, lam: float) -> float:
        ...

    def get_isf(self, p: float, lam: float) -> float:
        ...

    def get_stats(self, moments: str, lam: float) -> Dict[str, float]:
        ...
