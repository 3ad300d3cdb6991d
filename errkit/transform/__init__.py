from .lazy import bimap_except_t, fmap_rt
from .result import fmap_r, is_left, is_right, or_default, select

__all__ = (
    # Plain
    "fmap_r",
    "is_left",
    "is_right",
    "or_default",
    "select",
    # LazyCoroResult
    "bimap_except_t",
    "fmap_rt",
)
