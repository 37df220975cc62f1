"""Rotation functions in 2D space."""

import numpy as np
from numpy.typing import NDArray


def R2D(theta: float) -> NDArray:
    """Initialize 2D rotation matrix.

    Parameters
    ----------
    theta : float
        Rotation angle in rad.

    Returns
    -------
    NDArray
        2D rotation matrix.
    """
    return np.array([[np.cos(theta), -np.sin(theta)], [np.sin(theta), np.cos(theta)]])
