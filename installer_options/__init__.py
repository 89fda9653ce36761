"""Configuration and validation model for an OS installer."""

from .__version__ import __version__


__all__ = ["__version__"]
