"""Schematic documents: models, terminal geometry, catalog, presets, store."""

from panelsim.schematic.models import Component, Point, Schematic, Terminal, Wire

__all__ = ["Component", "Point", "Schematic", "Terminal", "Wire"]
