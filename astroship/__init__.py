"""A small top-down asteroid shooter built on a minimal entity-component world."""

__version__ = "0.1.0"
__all__ = ["__version__"]