# fenwick/utils.py
"""
Light-weight helpers shared by the tree and its reference implementation.
"""

from __future__ import annotations
import numbers
from fractions import Fraction
from typing import Any, List, Sequence, Union

import numpy as np

# Global debug switch
VERBOSE: bool = False

Number = Union[int, float, Fraction]


def log(*args, **kwargs) -> None:            # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)


# --------------------------------------------------------------------------- #
#  Numeric coercion                                                           #
# --------------------------------------------------------------------------- #
def as_number(value: Any) -> Number:
    """Return *value* as a plain Python number.

    numpy scalars are unwrapped so that sums are carried in arbitrary
    precision ints rather than the scalar's fixed width.  Exact rationals
    such as :class:`fractions.Fraction` are kept as they are; any other real
    becomes a float.
    """
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"expected a real number, got {type(value).__name__}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Rational):
        return value
    return float(value)


def as_values(values: Union[Sequence[Any], np.ndarray]) -> List[Number]:
    """Convert a 1-D sequence or array to a list of Python numbers."""
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValueError(f"expected a 1-D array, got shape {values.shape}")
        if values.dtype.kind not in "iuf":
            raise TypeError(f"unsupported array dtype {values.dtype}")
        return values.tolist()
    return [as_number(v) for v in values]
