"""
Numba-accelerated element-wise conversion kernels.

Design principles:
1. All kernels compiled with @njit(cache=True)
2. Contiguous float64 arrays in, freshly allocated arrays out
3. Parallel execution via prange
4. No fastmath: results must match the scalar conversions bit for bit
"""

import numpy as np
from numba import njit, prange


@njit(cache=True, parallel=True)
def elo_to_ingo_array(elo: np.ndarray, offset: float, scale: float) -> np.ndarray:
    """Ingo ratings for an array of Elo ratings: offset - elo / scale."""
    n = len(elo)
    out = np.empty(n, dtype=np.float64)

    for i in prange(n):
        out[i] = offset - (elo[i] / scale)

    return out


@njit(cache=True, parallel=True)
def ingo_to_elo_array(ingo: np.ndarray, offset: float, scale: float) -> np.ndarray:
    """Elo ratings for an array of Ingo ratings: offset - scale * ingo."""
    n = len(ingo)
    out = np.empty(n, dtype=np.float64)

    for i in prange(n):
        out[i] = offset - scale * ingo[i]

    return out
