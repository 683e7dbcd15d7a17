"""Geometry, SVG elements, local storage and database exchange for road intersection schemes."""

__version__ = "0.1.0"