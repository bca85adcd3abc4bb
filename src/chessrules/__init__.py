"""Pseudo-legal chess rules engine with a two-player game session."""

__version__ = "0.1.0"
