"""An arcade dodging game set in a library, with its rules and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]