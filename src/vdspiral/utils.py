"""Utility functions in general."""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum, EnumMeta
from typing import Any, ClassVar

import numpy as np
from numpy.typing import NDArray

#############
# CONSTANTS #
#############

# Values baked in the design formulas, kept as is for output compatibility.
GAMMA = 4258.0  # Hz/G
PI = 3.141592

KMAX = 0.5

DEFAULT_GMAX = 4.0  # G/cm
DEFAULT_SMAX = 15000.0  # G/cm/s
DEFAULT_RASTER_TIME = 4e-6  # s
DEFAULT_MAX_SAMPLES = 50000


#########
# ENUMS #
#########


class CaseInsensitiveEnumMeta(EnumMeta):
    """A case-insensitive EnumMeta."""

    def __getitem__(self, name: str) -> Enum:
        """Allow ``MyEnum['Member'] == MyEnum['MEMBER']`` ."""
        return super().__getitem__(name.upper())

    def __getattr__(self, name: str) -> Any:  # noqa ANN401
        """Allow ``MyEnum.Member == MyEnum.MEMBER`` ."""
        return super().__getattribute__(name.upper())


class FloatEnum(float, Enum, metaclass=CaseInsensitiveEnumMeta):
    """An Enum for float that is case insensitive for ist attributes."""

    pass


class Gammas(FloatEnum):
    """Enumerate gyromagnetic ratios for common nuclei in MR."""

    # Values in Hz/G
    HYDROGEN = GAMMA
    HELIUM = 3243.4
    CARBON = 1070.8
    OXYGEN = 577.2
    FLUORINE = 4007.8
    SODIUM = 1126.2
    PHOSPHOROUS = 1723.5
    XENON = 1177.7

    # Aliases
    H = H1 = PROTON = HYDROGEN
    He = He3 = HELIUM
    C = C13 = CARBON
    O = O17 = OXYGEN  # noqa: E741
    F = F19 = FLUORINE
    Na = Na23 = SODIUM
    P = P31 = PHOSPHOROUS
    X = X129 = XENON


#############################
# Hardware and Acquisition  #
#############################


class SI:
    """SI prefixes."""

    kilo = 1e3
    centi = 0.01
    milli = 0.001
    micro = 1e-6

    gauss = 1e-4  # T to Gauss conversion factor


@dataclass(frozen=True)
class Hardware:
    """
    Hardware limits used to design spiral gradient waveforms.

    Parameters
    ----------
    gmax : float
        Maximum gradient amplitude in G/cm. Defaults to 4 G/cm.
    smax : float
        Maximum slew rate in G/cm/s. Defaults to 15000 G/cm/s.
    grad_raster_time : float
        Gradient raster time in seconds. Defaults to 4 us.
    adc_dwell_time : float
        ADC dwell time in seconds. Defaults to 4 us.
    max_samples : int
        Maximum number of gradient samples of a single design.
        Defaults to 50000.

    Attributes
    ----------
    default : ClassVar[Hardware]
        The default hardware configuration used if none is specified.
        You can set it using the `set_default` method, or temporarily
        with a ``with`` block.

    Notes
    -----
    Units follow the historical spiral design conventions (Gauss, cm, s)
    rather than SI, so that waveforms match existing reconstruction
    pipelines. Use `SI.gauss` to convert from Tesla.
    """

    gmax: float = DEFAULT_GMAX
    smax: float = DEFAULT_SMAX
    grad_raster_time: float = DEFAULT_RASTER_TIME
    adc_dwell_time: float = DEFAULT_RASTER_TIME
    max_samples: int = DEFAULT_MAX_SAMPLES

    default: ClassVar[Hardware]
    _old_default: Hardware | None = field(default=None, init=False, repr=False)

    def __post_init__(self):
        """Validate parameters after initialization."""
        if self.gmax <= 0:
            raise ValueError(f"gmax must be positive, got {self.gmax}.")
        if self.smax <= 0:
            raise ValueError(f"smax must be positive, got {self.smax}.")
        if self.grad_raster_time <= 0 or self.adc_dwell_time <= 0:
            raise ValueError("grad_raster_time and adc_dwell_time must be positive.")
        if self.max_samples < 1:
            raise ValueError("max_samples must be a positive integer.")

    def set_default(self) -> Hardware:
        """Make the current hardware configuration the default."""
        Hardware.default = self
        return self

    @property
    def raster_time(self) -> float:
        """Alias of grad_raster_time."""
        return self.grad_raster_time

    # Context Manager to use temporary new default.
    def __enter__(self) -> Hardware:
        """Enter Context Manager with new default."""
        object.__setattr__(
            self, "_old_default", deepcopy(Hardware.default)
        )  # bypass frozen
        self.set_default()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """Exit Context Manager and reset default."""
        self._old_default.set_default()
        object.__setattr__(self, "_old_default", None)  # bypass frozen


# Create a default hardware.
Hardware.default = Hardware()


###############
# CONVERSIONS #
###############


def convert_gradients_to_trajectory(
    gradients: NDArray,
    raster_time: float | None = None,
    gamma: float = GAMMA,
) -> NDArray:
    """Integrate a gradient waveform over time to provide k-space positions.

    The position at sample ``j`` only accounts for gradient samples
    ``0`` to ``j-1``, so the first position is the k-space center and the
    output has as many samples as the waveform.

    Parameters
    ----------
    gradients : NDArray
        Gradient waveform of shape (Ns, Nd) in G/cm.
    raster_time : float, optional
        Gradient raster time in seconds.
        If `None`, the default hardware raster time is used.
    gamma : float, optional
        Gyromagnetic ratio in Hz/G, by default `GAMMA`.

    Returns
    -------
    NDArray
        K-space positions of shape (Ns, Nd) in 1/cm.
    """
    raster_time = raster_time or Hardware.default.raster_time
    steps = gamma * gradients[:-1] * raster_time
    trajectory = np.concatenate([np.zeros((1, gradients.shape[-1])), steps], axis=0)
    return np.cumsum(trajectory, axis=0)[: len(gradients)]


def convert_gradients_to_slew_rates(
    gradients: NDArray, raster_time: float | None = None
) -> NDArray:
    """Derive a gradient waveform over time to provide slew rates.

    The waveform is assumed to start from a null gradient.

    Parameters
    ----------
    gradients : NDArray
        Gradient waveform of shape (Ns, Nd) in G/cm.
    raster_time : float, optional
        Gradient raster time in seconds.
        If `None`, the default hardware raster time is used.

    Returns
    -------
    NDArray
        Slew rates of shape (Ns, Nd) in G/cm/s.
    """
    raster_time = raster_time or Hardware.default.raster_time
    return np.diff(gradients, axis=0, prepend=0) / raster_time
