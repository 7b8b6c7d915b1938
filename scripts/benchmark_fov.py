#!/usr/bin/env python3
"""Benchmark our shadowcasting FOV sweeps against tcod's C implementation.

Runs every implementation on identical inputs and prints a timing comparison
table, followed by an agreement check between our symmetric sweep and tcod's.

Usage:
    python scripts/benchmark_fov.py
"""

# ruff: noqa: E402  # Allow path setup before importing project modules

from __future__ import annotations

import sys
import timeit
from pathlib import Path

import numpy as np
import tcod.constants
import tcod.map

# Add the project root to Python path so running as a script works.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from roguelike_toolkit.environment.fov import FOVAlgorithm, ShadowCastingFOV
from roguelike_toolkit.environment.generators import (
    make_open_field,
    make_pillar_lattice,
    make_scattered,
)
from roguelike_toolkit.environment.map import GameMap


def _benchmark_engine(
    game_map: GameMap,
    origin: tuple[int, int],
    radius: int,
    algorithm: FOVAlgorithm,
) -> float:
    """Time one of our sweeps (clear + compute) and return average ms per call."""
    fov = ShadowCastingFOV(game_map, algorithm=algorithm)
    ox, oy = origin

    def run() -> None:
        fov.clear_fov()
        fov.compute_fov(ox, oy, radius)

    # Warm up.
    run()

    timer = timeit.Timer(run)
    # Auto-range to get a reliable measurement.
    number, total = timer.autorange()
    return (total / number) * 1000  # ms


def _benchmark_tcod(
    transparent: np.ndarray, origin: tuple[int, int], radius: int
) -> float:
    """Time tcod's C implementation and return average ms per call."""

    def run() -> None:
        tcod.map.compute_fov(
            transparent,
            origin,
            radius=radius,
            light_walls=True,
            algorithm=tcod.constants.FOV_SYMMETRIC_SHADOWCAST,
        )

    # Warm up.
    run()

    timer = timeit.Timer(run)
    number, total = timer.autorange()
    return (total / number) * 1000  # ms


def main() -> None:
    scenarios: list[tuple[str, GameMap, tuple[int, int], int]] = [
        ("Open field", make_open_field(120, 80), (60, 40), 50),
        (
            "Dungeon (~40% walls)",
            make_scattered(120, 80, 0.40, seed=42),
            (61, 41),
            50,
        ),
        ("Pillar lattice", make_pillar_lattice(120, 80), (61, 41), 50),
        ("Small radius", make_open_field(120, 80), (60, 40), 10),
    ]

    print("FOV Benchmark: tcod (C) vs symmetric vs mirrored octant")
    print("=" * 70)
    print(
        f"{'Scenario':<24} {'tcod (C)':>10} {'symmetric':>11} "
        f"{'mirrored':>10} {'ratio':>8}"
    )
    print("-" * 70)

    for name, game_map, origin, radius in scenarios:
        tcod_ms = _benchmark_tcod(game_map.transparent, origin, radius)
        sym_ms = _benchmark_engine(
            game_map, origin, radius, FOVAlgorithm.SYMMETRIC_SHADOWCAST
        )
        mir_ms = _benchmark_engine(
            game_map, origin, radius, FOVAlgorithm.MIRRORED_OCTANT
        )
        ratio = sym_ms / tcod_ms if tcod_ms > 0 else float("inf")
        print(
            f"{name:<24} {tcod_ms:>9.3f}ms {sym_ms:>9.3f}ms {mir_ms:>8.3f}ms "
            f"{ratio:>7.1f}x"
        )

    print("-" * 70)
    print("Ratio is symmetric / tcod. Lower = closer to C performance.")
    print()

    # Correctness check: verify our symmetric sweep matches tcod's.
    print("Correctness check...")
    game_map = make_scattered(120, 80, 0.40, seed=123)
    origin = (60, 40)
    radius = 50
    game_map.set_blocked(*origin, False)

    fov = ShadowCastingFOV(game_map)
    fov.compute_fov(*origin, radius)
    ours = fov.visible
    theirs = tcod.map.compute_fov(
        game_map.transparent,
        origin,
        radius=radius,
        light_walls=True,
        algorithm=tcod.constants.FOV_SYMMETRIC_SHADOWCAST,
    )

    match_count = np.sum(ours == theirs)
    total_tiles = ours.size
    mismatch_count = total_tiles - match_count
    match_pct = match_count / total_tiles * 100

    print(f"  Agreement: {match_pct:.2f}% ({match_count}/{total_tiles} tiles)")
    if mismatch_count > 0:
        print(f"  Mismatches: {mismatch_count} tiles")
        # Show a few mismatches for debugging.
        diff_coords = np.argwhere(ours != theirs)
        for coord in diff_coords[:10]:
            x, y = coord
            print(
                f"    ({x}, {y}): ours={ours[x, y]}, tcod={theirs[x, y]}, "
                f"blocked={game_map.blocked[x, y]}"
            )
    else:
        print("  Perfect match!")


if __name__ == "__main__":
    main()
