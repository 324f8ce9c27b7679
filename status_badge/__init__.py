"""Resolve status badge inputs and render them as SVG."""

__version__ = "0.1.0"
