# Core data structure
from .tree import FenwickTree, lowbit

# Debug switch lives on the module: set fenwick.utils.VERBOSE
from . import utils as utils
from .common.constants import (
    DEFAULT_SEED,
    RNG_SEEDS,
    TOL_NUM,
    seed_everywhere,
)

# Reference implementation, available under .reference.*
from . import reference as reference

__all__ = [
    "FenwickTree",
    "lowbit",
    "utils",
    "TOL_NUM",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
    "reference",
]
