from .fold import aggregateM, all_e, all_e_par, any_e, any_e_par
from .policy import Aggregate, AllE, AnyE

__all__ = (
    # Policies
    "Aggregate",
    "AllE",
    "AnyE",
    # Plain Results
    "all_e",
    "any_e",
    # LazyCoroResult
    "all_e_par",
    "any_e_par",
    # Generic
    "aggregateM",
)
