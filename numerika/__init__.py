"""Classic numerical methods: linear systems, interpolation, root finding, quadrature and a small command line."""

__version__ = "0.1.0"
__all__ = ["cli", "integration", "interpolation", "linear_systems", "roots"]