"""freightctl - promote freight through control-plane stages."""

__version__ = "0.1.0"
