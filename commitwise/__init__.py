"""Interactive helper for composing templated Git commit messages."""

__version__ = "0.0.1"
__all__ = ["__version__"]