"""Functions to initialize 2D variable density spiral trajectories."""

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from .trajectory import compute_trajectory
from .utils import GAMMA, KMAX, Hardware
from .waveform import design_waveform


def initialize_2D_vds_spiral(
    Nc: int,
    Fcoeff: Sequence[float],
    res: float,
    oversamp: int = 4,
    in_out: bool = False,
    hardware: Hardware | None = None,
    gmax: float | None = None,
    smax: float | None = None,
    raster_time: float | None = None,
    gamma: float = GAMMA,
    max_samples: int | None = None,
) -> NDArray:
    """Initialize a 2D variable density spiral trajectory.

    The spiral is designed to be as fast as the gradient amplitude and slew
    rate limits allow, while keeping the interleaves spaced according to
    the FOV polynomial :math:`F(k_r) = \\sum_i F_i k_r^i`.

    Parameters
    ----------
    Nc : int
        Number of shots
    Fcoeff : Sequence[float]
        FOV coefficients in cm, in increasing powers of the k-space
        radius in 1/cm
    res : float
        Resolution in mm, setting the maximum k-space radius
    oversamp : int, optional
        Gradient oversampling factor with respect to ``raster_time``,
        by default 4
    in_out : bool, optional
        Whether the shots go through the center or start from it,
        by default False
    hardware : Hardware, optional
        Hardware limits, by default `Hardware.default`
    gmax : float, optional
        Maximum gradient amplitude in G/cm, overriding ``hardware``
    smax : float, optional
        Maximum slew rate in G/cm/s, overriding ``hardware``
    raster_time : float, optional
        Sampling period in s of the output trajectory, overriding the
        ``hardware`` ADC dwell time
    gamma : float, optional
        Gyromagnetic ratio in Hz/G, by default ``GAMMA``
    max_samples : int, optional
        Maximum number of gradient samples, overriding ``hardware``

    Returns
    -------
    NDArray
        2D spiral trajectory of shape (Nc, Ns, 2) in [-0.5, 0.5]

    Raises
    ------
    ValueError
        If ``res`` or ``oversamp`` is not positive.
    """
    if res <= 0:
        raise ValueError(f"Resolution must be positive (res={res}).")
    if oversamp < 1:
        raise ValueError(f"Oversampling must be a positive integer ({oversamp}).")
    hardware = hardware or Hardware.default
    gmax = gmax or hardware.gmax
    smax = smax or hardware.smax
    raster_time = raster_time or hardware.adc_dwell_time
    max_samples = max_samples or hardware.max_samples

    krmax = 1 / (2 * res / 10)  # mm to cm
    grad_raster_time = raster_time / oversamp

    gradients = design_waveform(
        smax,
        gmax,
        grad_raster_time,
        raster_time,
        Nc,
        Fcoeff,
        krmax,
        max_samples,
        gamma=gamma,
    )
    trajectory, _ = compute_trajectory(
        gradients, Nc, grad_raster_time, krmax, gamma=gamma
    )

    # Back to the ADC sampling rate and NUFFT normalization
    trajectory = KMAX * trajectory[:, ::oversamp]
    if in_out:
        trajectory = np.concatenate([-trajectory[:, :0:-1], trajectory], axis=1)
    return trajectory
