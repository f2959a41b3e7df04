from pdist.calculators.base import Calculator
from pdist.calculators.poisson import PoissonCalculator

__all__ = ["Calculator", "PoissonCalculator"]
