from __future__ import annotations

from typing import Dict, Optional, Protocol, Union, runtime_checkable

import numpy as np


@runtime_checkable
class ProbabilityDistribution(Protocol):
    def rvs(self, size: Optional[int] = None) -> Union[float, np.ndarray]:
        ...

    def pmf(self, x: float) -> float:
        ...

    def pdf(self, x: float) -> float:
        ...

    def cdf(self, x: float) -> float:
        ...

    def sf(self, x: float) -> float:
        ...

    def ppf(self, p: float) -> float:
        ...

    def isf(self, p: float) -> float:
        ...

    def stats(self, moments: str = "mv") -> Dict[str, float]:
        ...
