"""Reader for COLLADA 3D asset documents: libraries, scene graphs and URL lookup."""

__version__ = "0.1.0"