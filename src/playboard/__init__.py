"""Playboard: compose, edit and save tactical diagrams."""

__version__ = "0.1.0"
