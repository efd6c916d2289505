"""Raycaster building blocks: XPM textures, colour names, text helpers and ray casting."""

__version__ = "0.1.0"
__all__ = ["__version__"]