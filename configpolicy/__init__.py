"""Models for configuration and operator policy resources, with duration parsing."""

__version__ = "0.1.0"
__all__ = ["duration", "groupversion", "v1", "v1beta1"]