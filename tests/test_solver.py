"""Test the second derivatives of the spiral."""

import math

import pytest
from pytest_cases import parametrize

from vdspiral import GAMMA, PI, calc_second_derivatives

SMAX = 15000
GMAX = 4.0
T = 4e-6


def test_start_from_center():
    """Test the spiral starts slew limited with the full slew rate."""
    step = calc_second_derivatives(0.0, 0.0, [24.0], 16, SMAX, GMAX, T, T)
    assert step.slew_limited
    assert not step.complex_root
    assert step.krdotdot == pytest.approx(GAMMA * SMAX)
    assert step.thetadotdot == pytest.approx(2 * PI * 24.0 / 16 * step.krdotdot)


def test_amplitude_limited():
    """Test a too fast radial velocity is brought back in one sample."""
    kr, krdot = 2.0, 1e6
    step = calc_second_derivatives(kr, krdot, [24.0], 16, SMAX, GMAX, T, T)

    gmax = min(GMAX, 1 / GAMMA / 24.0 / T)
    maxkrdot = math.sqrt((GAMMA * gmax) ** 2 / (1 + (2 * PI * 24.0 * kr / 16) ** 2))
    assert not step.slew_limited
    assert step.krdotdot == pytest.approx((maxkrdot - krdot) / T)
    assert step.krdotdot < 0


@parametrize("gmax", [3.0, 10.0, 100.0])
def test_fov_limited_gradient(gmax):
    """Test the gradient amplitude is capped by the FOV limit."""
    # 1 / GAMMA / 24 / 4e-6 is about 2.45 G/cm
    ref = calc_second_derivatives(1.0, 5e4, [24.0], 16, SMAX, 2.5, T, T)
    step = calc_second_derivatives(1.0, 5e4, [24.0], 16, SMAX, gmax, T, T)
    assert step == ref


def test_negative_discriminant():
    """Test only the real part of the root is kept when it is complex."""
    kr, krdot, N, smax = 1.0, 100.0, 16, 1.0
    step = calc_second_derivatives(kr, krdot, [24.0], N, smax, GMAX, T, T)

    tpfsq = (2 * PI * 24.0 / N) ** 2
    qdfA = 1 + tpfsq * kr * kr
    qdfB = 2 * tpfsq * kr * krdot * krdot
    assert step.slew_limited
    assert step.complex_root
    assert step.krdotdot == pytest.approx(-qdfB / (2 * qdfA))
    assert math.isfinite(step.thetadotdot)


def test_variable_fov_angle():
    """Test the angular acceleration accounts for the FOV derivative."""
    kr, krdot, N = 1.0, 50.0, 8
    step = calc_second_derivatives(kr, krdot, [24.0, -4.0], N, SMAX, GMAX, T, T)

    fov, dfov = 20.0, -4.0
    tpf = 2 * PI * fov / N
    expected = tpf * dfov / fov * krdot**2 + tpf * step.krdotdot
    assert step.thetadotdot == pytest.approx(expected)


@parametrize("fov_coeffs", [[0.0], [], [24.0, -24.0]])
def test_non_positive_fov(fov_coeffs):
    """Test a vanishing FOV is rejected."""
    with pytest.raises(ValueError, match="FOV must be positive"):
        calc_second_derivatives(1.0, 0.0, fov_coeffs, 16, SMAX, GMAX, T, T)
