"""InverseLens: image analysis with a mirror-universe twist."""

__version__ = "0.1.0"
