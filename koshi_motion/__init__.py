"""Koshi Motion - motion paths and camera interpolation for 3D animation."""

__version__ = "0.1.0"
