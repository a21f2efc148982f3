"""Navigation telemetry simulator producing CCSDS space packets."""

__version__ = "0.1.0"
__all__ = ["__version__"]