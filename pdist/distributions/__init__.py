from pdist.distributions.base import ProbabilityDistribution
from pdist.distributions.poisson import Poisson

__all__ = ["ProbabilityDistribution", "Poisson"]
