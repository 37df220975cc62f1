"""VDSpiral.

VDSpiral designs variable density spiral gradient waveforms and k-space
trajectories under gradient amplitude and slew rate limits, along with
their density compensation weights.
"""

from .fov import evaluate_fov
from .solver import SpiralDerivatives, calc_second_derivatives
from .waveform import design_waveform
from .trajectory import compute_trajectory, compute_density_weights
from .trajectory2D import initialize_2D_vds_spiral
from .utils import (
    GAMMA,
    KMAX,
    PI,
    SI,
    Gammas,
    Hardware,
    convert_gradients_to_slew_rates,
    convert_gradients_to_trajectory,
)

__all__ = [
    # design
    "evaluate_fov",
    "SpiralDerivatives",
    "calc_second_derivatives",
    "design_waveform",
    # trajectories
    "compute_trajectory",
    "compute_density_weights",
    "initialize_2D_vds_spiral",
    # configuration
    "GAMMA",
    "KMAX",
    "PI",
    "SI",
    "Gammas",
    "Hardware",
    "convert_gradients_to_slew_rates",
    "convert_gradients_to_trajectory",
]

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    # package is not installed
    pass
