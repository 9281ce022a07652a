"""Analog and digital devices with pluggable ID generators, randomizers, status strategies and presenters."""

__version__ = "1.0.0"