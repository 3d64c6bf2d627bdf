"""Skin Studio: a layered pixel editor for DDNet skins."""

__version__ = "0.1.0"
