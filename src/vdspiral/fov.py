"""Field-of-view model of variable density spirals."""

from collections.abc import Sequence


def evaluate_fov(kr: float, fov_coeffs: Sequence[float]) -> tuple[float, float]:
    """Evaluate the FOV polynomial and its derivative at a k-space radius.

    Parameters
    ----------
    kr : float
        K-space radius [1/cm].
    fov_coeffs : Sequence[float]
        FOV coefficients in increasing powers of ``kr`` [cm].

    Returns
    -------
    float
        FOV at ``kr`` [cm], 0 if no coefficient is provided.
    float
        Derivative of the FOV with respect to ``kr``.
    """
    fov = 0.0
    dfov = 0.0
    for power, coeff in enumerate(fov_coeffs):
        fov = fov + coeff * kr**power
        if power > 0:
            dfov = dfov + power * coeff * kr ** (power - 1)
    return fov, dfov
