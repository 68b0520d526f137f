"""Simulation engine for the amoebot model of programmable matter."""

__version__ = "0.1.0"