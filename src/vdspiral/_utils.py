"""General utility functions for vdspiral."""

from inspect import cleandoc
from collections.abc import Callable
from functools import wraps


def _apply_docstring_subs(func: Callable, docstring_subs: dict[str, str]) -> Callable:
    if func.__doc__:
        docstring = cleandoc(func.__doc__)
        for key, sub in docstring_subs.items():
            docstring = docstring.replace(f"${{{key}}}", sub)
        func.__doc__ = docstring
    return func


def _fill_doc(docstring_subs: dict[str, str]) -> Callable:
    """Fill in docstrings with substitutions."""

    @wraps(_fill_doc)
    def wrapper(func: Callable) -> Callable:
        return _apply_docstring_subs(func, docstring_subs)

    return wrapper


_design_docs = dict(
    hardware_params="""\
smax: float
    Maximum slew rate [G/cm/s]
gmax: float
    Maximum gradient amplitude [G/cm]
grad_raster_time: float
    Gradient sampling period [s]
adc_dwell_time: float
    Data sampling period [s], it sets the FOV-limited gradient amplitude
""",
    spiral_params="""\
Nc: int
    Number of interleaves
fov_coeffs: Sequence[float]
    FOV polynomial coefficients in increasing powers of the k-space radius,
    ``FOV(kr) = fov_coeffs[0] + fov_coeffs[1] * kr + ...`` [cm]
""",
    gamma_param="""\
gamma: float, optional
    Gyromagnetic ratio [Hz/G], by default ``GAMMA``
""",
)
