"""Bomber minigame arena generation."""

from .generator import BomberMap, BomberSpawn, BomberTile, generate_bomber_map, render_bomber_map

__all__ = ["BomberMap", "BomberSpawn", "BomberTile", "generate_bomber_map", "render_bomber_map"]
