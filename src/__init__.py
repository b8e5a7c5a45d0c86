"""Checker Framework build plugin."""

__version__ = "0.1.0"
