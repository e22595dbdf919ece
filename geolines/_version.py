"""
Exposes the version of geolines
"""

__version__ = 'v0.3.0'

__all__ = ["__version__"]
