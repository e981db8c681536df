"""Show system information in a box next to fractal ASCII art."""

__version__ = "1.0.0"
__all__ = ["__version__"]