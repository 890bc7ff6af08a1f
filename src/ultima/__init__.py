"""Ultima: rules engine for the Ultima chess variant."""

__version__ = "0.1.0"
