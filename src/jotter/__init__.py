"""jotter - post and draft management for Jekyll-style sites."""

__version__ = "0.1.0"
