"""Projected-points rankings and free-agent views for Sleeper fantasy leagues."""

__version__ = "0.1.0"
