"""Second derivatives of a variable density spiral at a given state.

The spiral traces out :math:`k(t) = r(t) e^{i \\theta(t)}` and the FOV
constraint ties the angle to the radius through
:math:`dr/d\\theta = N / (2 \\pi F(r))`, which gives

.. math::

    \\dot\\theta = \\frac{2 \\pi F}{N} \\dot r, \\qquad
    \\ddot\\theta = \\frac{2 \\pi}{N} \\frac{dF}{dr} \\dot r^2
                  + \\frac{2 \\pi F}{N} \\ddot r

Substituting those in the gradient and slew rate magnitudes leaves either an
amplitude condition on :math:`\\dot r` or a quadratic equation on
:math:`\\ddot r` to solve at each step.
"""

import math
from collections.abc import Sequence
from typing import NamedTuple

from .fov import evaluate_fov
from .utils import GAMMA, PI
from ._utils import _design_docs, _fill_doc


class SpiralDerivatives(NamedTuple):
    """Second derivatives of the spiral angle and radius for one step."""

    thetadotdot: float
    krdotdot: float
    slew_limited: bool
    complex_root: bool


@_fill_doc(_design_docs)
def calc_second_derivatives(
    kr: float,
    krdot: float,
    fov_coeffs: Sequence[float],
    Nc: int,
    smax: float,
    gmax: float,
    grad_raster_time: float,
    adc_dwell_time: float,
    gamma: float = GAMMA,
) -> SpiralDerivatives:
    """Compute the second derivatives of the spiral radius and angle.

    The spiral is either limited by the gradient amplitude (hardware or FOV
    limit), in which case the radial velocity is brought back to its maximum
    over one gradient sample, or by the slew rate, in which case the radial
    acceleration solves :math:`|S(r, \\dot r, \\ddot r, F, dF/dr)| = S_{max}`.

    Parameters
    ----------
    kr: float
        Current k-space radius [1/cm]
    krdot: float
        Current first derivative of the radius [1/cm/s]
    ${spiral_params}
    ${hardware_params}
    ${gamma_param}

    Returns
    -------
    SpiralDerivatives
        ``thetadotdot`` and ``krdotdot``, with ``slew_limited`` telling which
        regime was used and ``complex_root`` whether the slew quadratic had a
        negative discriminant and only its real part was kept.

    Raises
    ------
    ValueError
        If the FOV is not positive at ``kr``, the gradient limit and
        the angular velocity are undefined there.
    """
    fov, dfov = evaluate_fov(kr, fov_coeffs)
    if not fov > 0:
        raise ValueError(
            f"FOV must be positive along the trajectory, got FOV={fov} at kr={kr}."
        )

    # FOV limit on the gradient amplitude.
    gmaxfov = 1 / gamma / fov / adc_dwell_time
    if gmax > gmaxfov:
        gmax = gmaxfov

    # Maximum dkr/dt, based on gradient amplitude.
    maxkrdot = math.sqrt((gamma * gmax) ** 2 / (1 + (2 * PI * fov * kr / Nc) ** 2))

    tpf = 2 * PI * fov / Nc
    tpfsq = tpf**2

    complex_root = False
    slew_limited = krdot <= maxkrdot
    if not slew_limited:
        krdotdot = (maxkrdot - krdot) / grad_raster_time
    else:
        qdfA = 1 + tpfsq * kr * kr
        qdfB = (
            2 * tpfsq * kr * krdot * krdot
            + 2 * tpfsq / fov * dfov * kr * kr * krdot * krdot
        )
        qdfC = (
            (tpfsq * kr * krdot * krdot) ** 2
            + 4 * tpfsq * krdot**4
            + (tpf * dfov / fov * kr * krdot * krdot) ** 2
            + 4 * tpfsq * dfov / fov * kr * krdot**4
            - (gamma * smax) ** 2
        )

        rootparta = -qdfB / (2 * qdfA)
        rootpartb = qdfB * qdfB / (4 * qdfA * qdfA) - qdfC / qdfA
        # Roots are real in theory, keep the real part otherwise.
        if rootpartb < 0:
            krdotdot = rootparta
            complex_root = True
        else:
            krdotdot = rootparta + math.sqrt(rootpartb)

    thetadotdot = tpf * dfov / fov * krdot * krdot + tpf * krdotdot
    return SpiralDerivatives(thetadotdot, krdotdot, slew_limited, complex_root)
