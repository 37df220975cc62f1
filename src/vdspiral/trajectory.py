"""K-space trajectories and density compensation of spiral interleaves."""

import numpy as np
import numpy.linalg as nl
from joblib import Parallel, delayed
from numpy.typing import NDArray

from .maths import R2D
from .utils import GAMMA, PI, convert_gradients_to_trajectory


def _angle(vectors: NDArray) -> NDArray:
    # Vectors along the y axis, the null one included, are set to pi/2
    return np.where(
        vectors[:, 0] == 0, PI / 2, np.arctan2(vectors[:, 1], vectors[:, 0])
    )


def compute_density_weights(gradients: NDArray, positions: NDArray) -> NDArray:
    """Compute density compensation weights along a spiral arm.

    Each weight is the magnitude of the gradient component orthogonal to the
    k-space position, i.e. ``|g| * |sin(angle(g) - angle(k))|``. It
    approximates the k-space area covered by each sample.

    Parameters
    ----------
    gradients : NDArray
        Gradient waveform of shape (Ns, 2).
    positions : NDArray
        K-space positions of shape (Ns, 2) for each gradient sample.

    Returns
    -------
    NDArray
        Non-negative weights of shape (Ns,).
    """
    amplitudes = nl.norm(gradients, axis=-1)
    return amplitudes * np.abs(np.sin(_angle(gradients) - _angle(positions)))


def _rotate_shot(shot: NDArray, index: int, Nc: int) -> NDArray:
    # Rotate the base shot by 2pi * index / Nc
    rotation = (index * 2 * PI) / Nc
    return shot @ R2D(rotation)


def compute_trajectory(
    gradients: NDArray,
    Nc: int,
    grad_raster_time: float,
    krmax: float,
    *,
    gamma: float = GAMMA,
    n_jobs: int = 1,
) -> tuple[NDArray, NDArray]:
    """Compute the k-space trajectory and weights of every spiral interleave.

    The single-arm gradient waveform is integrated into k-space positions,
    then rotated by :math:`2 \\pi i / N_c` for interleave :math:`i`.

    Parameters
    ----------
    gradients : NDArray
        Single-arm gradient waveform of shape (Ns, 2) [G/cm].
    Nc : int
        Number of interleaves.
    grad_raster_time : float
        Gradient sampling period [s].
    krmax : float
        K-space radius used to normalize the trajectory in the unit disk
        [1/cm].
    gamma : float, optional
        Gyromagnetic ratio [Hz/G], by default ``GAMMA``.
    n_jobs : int, optional
        Number of jobs used to rotate interleaves, by default 1.

    Returns
    -------
    NDArray
        Trajectory of shape (Nc, Ns, 2), normalized by ``krmax``.
    NDArray
        Density compensation weights of shape (Nc, Ns).

    Raises
    ------
    ValueError
        If ``Nc`` is not positive.

    Notes
    -----
    The position of a sample only integrates the gradient up to the
    previous sample, so every interleave starts at the k-space center.
    Weights do not depend on the rotation and are repeated for all
    interleaves.
    """
    if Nc < 1:
        raise ValueError(f"The number of interleaves must be positive, got {Nc}.")
    gradients = np.asarray(gradients, dtype=float).reshape(-1, 2)
    positions = convert_gradients_to_trajectory(gradients, grad_raster_time, gamma)

    shots = Parallel(n_jobs=n_jobs)(
        delayed(_rotate_shot)(positions, i, Nc) for i in range(Nc)
    )
    trajectory = np.stack(shots) / krmax

    weights = compute_density_weights(gradients, positions)
    weights = np.tile(weights, (Nc, 1))
    return trajectory, weights
