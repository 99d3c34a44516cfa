"""numpy helpers for windowing data that is already in memory."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .cons import _check_size


def window_array(values: Sequence[float] | np.ndarray, size: int) -> np.ndarray:
    """Stack every contiguous window of ``values`` into a 2-D array.

    Row ``k`` holds ``values[k:k + size]``. The result is a copy, so writing to
    it leaves both ``values`` and the other rows untouched. Inputs shorter than
    ``size`` give an empty ``(0, size)`` array.
    """

    size = _check_size(size)
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise ValueError(f"window_array expects a one-dimensional input (got ndim={arr.ndim})")
    if arr.size < size:
        return np.empty((0, size), dtype=arr.dtype)
    return sliding_window_view(arr, size).copy()
