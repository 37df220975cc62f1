"""Design of variable density spiral gradient waveforms.

The spiral is integrated with an explicit Euler scheme, one gradient sample
at a time, until it reaches the requested k-space radius. As the waveform
length depends on how the amplitude and slew rate limits alternate, it is
found by a first integration, and the waveform is filled by a second,
identical one.
"""

import logging
import math
import warnings
from collections.abc import Iterator, Sequence

import numpy as np
from numpy.typing import NDArray
from tqdm.auto import tqdm

from .fov import evaluate_fov
from .solver import calc_second_derivatives
from .utils import GAMMA
from ._utils import _design_docs, _fill_doc

logger = logging.getLogger(__name__)


class _SpiralIntegrator:
    """Forward Euler integration of the spiral radius and angle.

    Iterating yields the ``(kr, theta)`` state after every step, from the
    all-zero state, until ``kr`` reaches ``krmax`` or ``max_samples`` steps
    were made. Each iteration restarts from the k-space center.
    """

    def __init__(
        self,
        smax,
        gmax,
        grad_raster_time,
        adc_dwell_time,
        Nc,
        fov_coeffs,
        krmax,
        max_samples,
        gamma=GAMMA,
    ):
        self.smax = smax
        self.gmax = gmax
        self.grad_raster_time = grad_raster_time
        self.adc_dwell_time = adc_dwell_time
        self.Nc = Nc
        self.fov_coeffs = tuple(fov_coeffs)
        self.krmax = krmax
        self.max_samples = max_samples
        self.gamma = gamma
        self.kr = 0.0
        self.nb_complex_roots = 0

    def __iter__(self) -> Iterator[tuple[float, float]]:
        T = self.grad_raster_time
        kr = krdot = theta = thetadot = 0.0
        self.kr = kr
        self.nb_complex_roots = 0
        count = 0
        while kr < self.krmax and count < self.max_samples:
            step = calc_second_derivatives(
                kr,
                krdot,
                self.fov_coeffs,
                self.Nc,
                self.smax,
                self.gmax,
                T,
                self.adc_dwell_time,
                self.gamma,
            )
            self.nb_complex_roots += step.complex_root

            thetadot = thetadot + step.thetadotdot * T
            theta = theta + thetadot * T

            krdot = krdot + step.krdotdot * T
            kr = kr + krdot * T

            self.kr = kr
            count += 1
            yield kr, theta


def _check_design_parameters(Nc, fov_coeffs, grad_raster_time, adc_dwell_time):
    if Nc < 1:
        raise ValueError(f"The number of interleaves must be positive, got {Nc}.")
    if grad_raster_time <= 0 or adc_dwell_time <= 0:
        raise ValueError("Sampling periods must be positive.")
    if len(fov_coeffs) == 0:
        raise ValueError("At least one FOV coefficient is required.")
    fov, _ = evaluate_fov(0.0, fov_coeffs)
    if not fov > 0:
        raise ValueError(
            f"FOV must be positive at the k-space center, got {fov} "
            f"from coefficients {list(fov_coeffs)}."
        )


@_fill_doc(_design_docs)
def design_waveform(
    smax: float,
    gmax: float,
    grad_raster_time: float,
    adc_dwell_time: float,
    Nc: int,
    fov_coeffs: Sequence[float],
    krmax: float,
    max_samples: int,
    *,
    gamma: float = GAMMA,
    get_final_radius: bool = False,
    verbose: bool = False,
) -> NDArray | tuple[NDArray, float]:
    """Design a single-arm variable density spiral gradient waveform.

    The FOV is a polynomial of the k-space radius, and the design follows a
    constant-slew-rate model bounded by the gradient amplitude. It is highly
    recommended to oversample the gradient, i.e. to use a
    ``grad_raster_time`` shorter than ``adc_dwell_time``, for a more stable
    integration.

    Parameters
    ----------
    ${hardware_params}
    ${spiral_params}
    krmax: float
        K-space radius at which the design stops [1/cm], usually
        ``1 / (2 * resolution)``
    max_samples: int
        Maximum number of gradient samples
    ${gamma_param}
    get_final_radius: bool, optional
        Also return the k-space radius reached by the design,
        by default False
    verbose: bool, optional
        Display a progress bar while filling the waveform, by default False

    Returns
    -------
    NDArray
        Gradient waveform of shape (Ns, 2) [G/cm], with ``Ns <= max_samples``.
        Empty if ``krmax <= 0`` or ``max_samples <= 0``.
    float
        Radius reached by the design [1/cm], only if ``get_final_radius``.

    Raises
    ------
    ValueError
        If ``Nc`` or the sampling periods are not positive, or if the FOV
        is not positive at the k-space center or along the trajectory.

    Warns
    -----
    UserWarning
        If ``max_samples`` was reached before ``krmax``, the returned
        waveform is then truncated.
    """
    _check_design_parameters(Nc, fov_coeffs, grad_raster_time, adc_dwell_time)
    integrator = _SpiralIntegrator(
        smax,
        gmax,
        grad_raster_time,
        adc_dwell_time,
        Nc,
        fov_coeffs,
        krmax,
        max_samples,
        gamma=gamma,
    )

    # First only find the gradient length.
    Ns = sum(1 for _ in integrator)
    logger.debug("Allocating for %d gradient points.", Ns)

    gradients = np.zeros((Ns, 2))
    scale = 1 / gamma / grad_raster_time
    last_kx = last_ky = 0.0
    progress = tqdm(integrator, total=Ns, disable=not verbose)
    for i, (kr, theta) in enumerate(progress):
        kx = kr * math.cos(theta)
        ky = kr * math.sin(theta)
        gradients[i, 0] = scale * (kx - last_kx)
        gradients[i, 1] = scale * (ky - last_ky)
        last_kx = kx
        last_ky = ky

    final_kr = integrator.kr
    if integrator.nb_complex_roots:
        logger.debug(
            "Slew rate equation had no real root for %d of %d samples, "
            "real part used instead.",
            integrator.nb_complex_roots,
            Ns,
        )
    if Ns > 0 and final_kr < krmax:
        warnings.warn(
            f"Spiral design stopped after {Ns} samples at kr={final_kr:.4g}/cm, "
            f"before reaching krmax={krmax:.4g}/cm. The waveform is truncated."
        )

    if get_final_radius:
        return gradients, final_kr
    return gradients
