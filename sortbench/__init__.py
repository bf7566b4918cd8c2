"""Classic sorting algorithms, heap operations and a benchmark that times them."""

__version__ = "0.1.0"