"""Shared constants for the dungeon generation prototype."""

from __future__ import annotations

GRID_SIZE = 61
ROOM_TRIES = 10
ROOM_MIN_SIZE = (5, 5)
ROOM_MAX_SIZE = (15, 15)
RANDOM_SEED = None  # Set to a number for reproducible behavior (for debugging); set to None to produce different dungeon on every run.

# Smallest odd room side that cannot be tunnelled through by a single maze step.
MIN_ROOM_SIDE = 3

# Connectors are only searched this many cells away from the grid border.
CONNECTOR_MARGIN = 2
