"""Poisson distribution facade and calculator."""

from pdist.calculators import Calculator, PoissonCalculator
from pdist.distributions import Poisson, ProbabilityDistribution
from pdist.errors import DomainError, InvalidArgument, InvalidParameter, NumericalError, PdistError

__all__ = [
    "Calculator",
    "PoissonCalculator",
    "Poisson",
    "ProbabilityDistribution",
    "PdistError",
    "InvalidArgument",
    "InvalidParameter",
    "DomainError",
    "NumericalError",
]
