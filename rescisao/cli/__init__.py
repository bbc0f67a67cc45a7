"""Rescisao Calc command-line interface."""
