"""Test the configuration and conversion utilities."""

import numpy as np
import numpy.testing as npt
import pytest
from pytest_cases import parametrize

from vdspiral import (
    GAMMA,
    Gammas,
    Hardware,
    convert_gradients_to_slew_rates,
    convert_gradients_to_trajectory,
)


@parametrize("name", ["H", "h", "H1", "proton", "HYDROGEN"])
def test_gammas_case_insensitive(name):
    """Test hydrogen aliases all match the design constant."""
    assert Gammas[name] == GAMMA
    assert getattr(Gammas, name) == GAMMA


def test_gammas_units():
    """Test gyromagnetic ratios are expressed in Hz/G."""
    assert Gammas.Na == pytest.approx(1126.2)
    assert Gammas.C13 < Gammas.P31 < Gammas.F19 < Gammas.H


def test_hardware_default():
    """Test the default hardware matches the usual design limits."""
    hw = Hardware()
    assert hw.gmax == 4.0
    assert hw.smax == 15000
    assert hw.raster_time == hw.grad_raster_time == 4e-6


@parametrize(
    "kwargs",
    [
        dict(gmax=0),
        dict(smax=-1),
        dict(grad_raster_time=0),
        dict(adc_dwell_time=-4e-6),
        dict(max_samples=0),
    ],
)
def test_hardware_validation(kwargs):
    """Test invalid hardware limits are rejected."""
    with pytest.raises(ValueError):
        Hardware(**kwargs)


def test_hardware_context():
    """Test the default hardware is only replaced within the context."""
    old_default = Hardware.default
    with Hardware(gmax=2.0, smax=10000) as hw:
        assert Hardware.default is hw
        assert Hardware.default.gmax == 2.0
    assert Hardware.default == old_default


def test_gradients_to_trajectory():
    """Test the integration lags by one sample."""
    gradients = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    positions = convert_gradients_to_trajectory(gradients, 1e-3)
    step = GAMMA * 1e-3
    npt.assert_allclose(positions, [[0, 0], [step, 0], [step, step]])


def test_gradients_to_trajectory_default_raster():
    """Test the default hardware raster time is used when none is given."""
    gradients = np.ones((5, 2))
    with Hardware(grad_raster_time=1e-5):
        positions = convert_gradients_to_trajectory(gradients)
    npt.assert_allclose(positions[-1], 4 * GAMMA * 1e-5)


def test_slew_rates():
    """Test slew rates ramp from a null gradient."""
    gradients = np.array([[1.0, 0.0], [1.0, 2.0], [0.0, 2.0]])
    slew = convert_gradients_to_slew_rates(gradients, 0.5)
    npt.assert_allclose(slew, [[2, 0], [0, 4], [-2, 0]])
