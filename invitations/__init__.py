"""Invitation block configuration and rendering engine."""

__version__ = "1.0.0"
