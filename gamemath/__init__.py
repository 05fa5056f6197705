"""Vector and matrix math, matrix stacks, Perlin noise, frame timing and small TCP helpers."""

__version__ = "0.1.0"