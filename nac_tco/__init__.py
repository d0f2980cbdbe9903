"""TCO/ROI comparison engine for network access control deployments."""

__version__ = "0.1.0"
