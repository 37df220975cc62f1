"""Spiral design cases we want to test."""


class CasesSpirals:
    """Spiral design cases.

    Each case returns the positional arguments of ``design_waveform``:
    ``(smax, gmax, grad_raster_time, adc_dwell_time, Nc, fov_coeffs, krmax,
    max_samples)``.
    """

    def case_uniform(self):
        """Uniform density, 16 interleaves, 1 mm resolution."""
        return 15000, 4.0, 4e-6, 4e-6, 16, [24.0], 1 / (2 * 0.1), 50000

    def case_variable(self):
        """FOV decreasing linearly with the k-space radius."""
        return 15000, 4.0, 4e-6, 4e-6, 16, [24.0, -4.0], 5.0, 50000

    def case_oversampled(self):
        """Gradient sampled four times faster than the data."""
        return 15000, 4.0, 1e-6, 4e-6, 16, [24.0], 2.5, 50000

    def case_single_interleave(self):
        """Single shot spiral with a quadratic FOV."""
        return 15000, 4.0, 4e-6, 4e-6, 1, [20.0, 0.0, 0.5], 2.5, 50000
