"""Rescisao Calc - Brazilian employment termination (rescisão) calculator."""

__version__ = "0.3.0"
