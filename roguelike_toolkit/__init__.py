"""Tile maps and shadowcasting field of view for grid-based games."""

from .environment.fov import FOVAlgorithm, ShadowCastingFOV, compute_fov
from .environment.map import GameMap

__all__ = [
    "FOVAlgorithm",
    "GameMap",
    "ShadowCastingFOV",
    "compute_fov",
]
