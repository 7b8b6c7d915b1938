"""Field-of-view computation by shadowcasting.

Two sweeps are available, selected with `FOVAlgorithm`:

- ``SYMMETRIC_SHADOWCAST`` implements Albert Ford's symmetric shadowcasting
  (https://www.albertford.com/shadowcasting/) with exact rational slope
  arithmetic. If tile A can see tile B, then B can see A, and opaque tiles that
  border visible space are themselves revealed.
- ``MIRRORED_OCTANT`` reproduces the toolkit's first sweep: eight octants over
  a normalized slope range, each marking a pair of mirrored branches
  (``+dx`` and ``-dx``). Its running column offset never widens past zero
  (the first slope tested is already 1), so it only reveals the origin's row
  out to ``radius``.

Both sweeps cut off at a scan depth of ``radius`` rather than at a Euclidean
distance, so the visible region is square-ish rather than circular.
"""

from __future__ import annotations

import logging
import math
from enum import Enum, auto
from fractions import Fraction
from typing import TYPE_CHECKING, NamedTuple

import numpy as np
from numpy.typing import NDArray

from roguelike_toolkit.types import FOVRadius, TileCoord, WorldTilePos

if TYPE_CHECKING:
    from roguelike_toolkit.environment.map import GameMap

logger = logging.getLogger(__name__)


class _Quadrant(NamedTuple):
    """Maps a (depth, col) position inside one quadrant to world coordinates.

    Depth runs away from the origin and col runs across it.
    """

    x_per_col: int
    x_per_depth: int
    y_per_col: int
    y_per_depth: int

    def to_world(self, origin: WorldTilePos, depth: int, col: int) -> WorldTilePos:
        ox, oy = origin
        return (
            ox + col * self.x_per_col + depth * self.x_per_depth,
            oy + col * self.y_per_col + depth * self.y_per_depth,
        )


_QUADRANTS = (
    _Quadrant(1, 0, 0, -1),  # north
    _Quadrant(0, 1, 1, 0),  # east
    _Quadrant(1, 0, 0, 1),  # south
    _Quadrant(0, -1, 1, 0),  # west
)


class _Row(NamedTuple):
    """One row of a quadrant scan, bounded by two slopes."""

    depth: int
    start_slope: Fraction
    end_slope: Fraction

    def columns(self) -> range:
        # Round ties toward the sector so tiles split by a slope line count.
        first = math.floor(self.depth * self.start_slope + Fraction(1, 2))
        last = math.ceil(self.depth * self.end_slope - Fraction(1, 2))
        return range(first, last + 1)

    def encloses(self, col: int, start_slope: Fraction) -> bool:
        """Whether the center of tile *col* lies inside the sector."""
        return self.depth * start_slope <= col <= self.depth * self.end_slope


def _near_edge_slope(depth: int, col: int) -> Fraction:
    return Fraction(2 * col - 1, 2 * depth)


# The mirrored sweep splits the normalized slope range [0, 1) into this many
# equal intervals.
_OCTANT_COUNT = 8


class FOVAlgorithm(Enum):
    """Which sweep `ShadowCastingFOV` runs."""

    SYMMETRIC_SHADOWCAST = auto()
    MIRRORED_OCTANT = auto()


def compute_fov(
    transparent: NDArray[np.bool_],
    origin: WorldTilePos,
    radius: FOVRadius,
) -> NDArray[np.bool_]:
    """Compute the set of tiles visible from *origin*.

    Args:
        transparent: Boolean array shaped ``(width, height)``.
            ``True`` means the tile is see-through.
        origin: ``(x, y)`` position of the viewer.
        radius: Maximum scan depth. Tiles deeper than this are never visible.

    Returns:
        Boolean array with the same shape as *transparent*, where ``True``
        marks a visible tile.
    """
    visible = np.zeros_like(transparent, dtype=np.bool_)
    cast_shadows(transparent, origin, radius, visible)
    return visible


def cast_shadows(
    transparent: NDArray[np.bool_],
    origin: WorldTilePos,
    radius: FOVRadius,
    visible: NDArray[np.bool_],
) -> None:
    """Mark every tile visible from *origin* as ``True`` in *visible*.

    Entries that are already ``True`` are left alone; nothing is ever reset
    to ``False`` here.
    """
    width, height = transparent.shape
    ox, oy = origin

    # The origin tile is always visible, even if it is opaque.
    if 0 <= ox < width and 0 <= oy < height:
        visible[ox, oy] = True

    for quadrant in _QUADRANTS:
        _scan_quadrant(quadrant, origin, radius, transparent, visible)


def _scan_quadrant(
    quadrant: _Quadrant,
    origin: WorldTilePos,
    radius: FOVRadius,
    transparent: NDArray[np.bool_],
    visible: NDArray[np.bool_],
) -> None:
    """Scan one quadrant outward from *origin*, one row per depth.

    Rows waiting to be scanned are kept on an explicit stack. A run of
    see-through tiles that ends against an opaque one spawns a narrower row
    one step deeper.
    """
    width, height = transparent.shape
    pending = [_Row(1, Fraction(-1), Fraction(1))]

    while pending:
        row = pending.pop()
        if row.depth > radius:
            continue

        start_slope = row.start_slope
        previous_opaque: bool | None = None

        for col in row.columns():
            x, y = quadrant.to_world(origin, row.depth, col)
            on_map = 0 <= x < width and 0 <= y < height
            opaque = not on_map or not transparent[x, y]

            # Opaque tiles show whenever the scan touches them.
            if on_map and (opaque or row.encloses(col, start_slope)):
                visible[x, y] = True

            if previous_opaque and not opaque:
                start_slope = _near_edge_slope(row.depth, col)
            elif previous_opaque is False and opaque:
                pending.append(
                    _Row(
                        row.depth + 1,
                        start_slope,
                        _near_edge_slope(row.depth, col),
                    )
                )
            previous_opaque = opaque

        if previous_opaque is False:
            pending.append(_Row(row.depth + 1, start_slope, row.end_slope))


def _sweep_mirrored_octant(
    game_map: GameMap,
    visible: NDArray[np.bool_],
    ox: int,
    oy: int,
    radius: int,
    start_slope: float,
    end_slope: float,
) -> None:
    """Sweep one octant, marking the ``+dx`` and ``-dx`` branches together.

    A blocked tile ends only the branch it was found on. Tiles already marked
    stay marked.
    """
    forward_open = True
    backward_open = True
    dy = 0

    for dx in range(1, radius + 1):
        slope = (dx - 0.5) / (dy + 0.5)

        if slope < end_slope:
            dy += 1

        # Nearer the start of the range belongs to the neighboring octant.
        if slope < start_slope:
            continue

        for i in range(-dy, dy + 1):
            y = oy + i
            if forward_open:
                forward_open = _mark_branch_tile(game_map, visible, ox + dx, y)
            if backward_open:
                backward_open = _mark_branch_tile(game_map, visible, ox - dx, y)

        if not forward_open and not backward_open:
            break


def _mark_branch_tile(
    game_map: GameMap, visible: NDArray[np.bool_], x: int, y: int
) -> bool:
    """Mark an in-bounds tile visible. Returns False when it ends its branch."""
    if not game_map.is_in_bounds(x, y):
        return True
    visible[x, y] = True
    return not game_map.is_blocked(x, y)


class ShadowCastingFOV:
    """Visibility state for one map, filled in by shadowcasting.

    The engine is bound to a single `GameMap` and allocates its visibility grid
    once, sized to the map. `compute_fov` only ever turns tiles on; call
    `clear_fov` first to drop the previous result.
    """

    def __init__(
        self,
        game_map: GameMap,
        algorithm: FOVAlgorithm = FOVAlgorithm.SYMMETRIC_SHADOWCAST,
    ) -> None:
        self.game_map = game_map
        self.algorithm = algorithm
        self._visible = np.full(
            (game_map.width, game_map.height), fill_value=False, dtype=bool, order="F"
        )
        self.needs_recompute = True

        # (origin, radius, map revision) of the last computation.
        self._last_computed: tuple[WorldTilePos, FOVRadius, int] | None = None

    @property
    def visible(self) -> NDArray[np.bool_]:
        """Read-only view of the visibility grid, shaped (width, height)."""
        view = self._visible.view()
        view.flags.writeable = False
        return view

    def clear_fov(self) -> None:
        self._visible[...] = False
        self.needs_recompute = True

    def compute_fov(
        self, origin_x: TileCoord, origin_y: TileCoord, radius: FOVRadius
    ) -> None:
        """Mark every tile visible from the origin.

        The origin itself is always marked (if it is on the map), even when the
        map reports it blocked.
        """
        match self.algorithm:
            case FOVAlgorithm.SYMMETRIC_SHADOWCAST:
                cast_shadows(
                    self.game_map.transparent,
                    (origin_x, origin_y),
                    radius,
                    self._visible,
                )
            case FOVAlgorithm.MIRRORED_OCTANT:
                if self.game_map.is_in_bounds(origin_x, origin_y):
                    self._visible[origin_x, origin_y] = True
                for octant in range(_OCTANT_COUNT):
                    _sweep_mirrored_octant(
                        self.game_map,
                        self._visible,
                        origin_x,
                        origin_y,
                        radius,
                        octant / _OCTANT_COUNT,
                        (octant + 1) / _OCTANT_COUNT,
                    )

        self._last_computed = (
            (origin_x, origin_y),
            radius,
            self.game_map.structural_revision,
        )
        self.needs_recompute = False
        logger.debug(
            f"Computed {self.algorithm.name} FOV from ({origin_x}, {origin_y}) "
            f"radius {radius}: {int(self._visible.sum())} tiles visible"
        )

    def recompute_if_needed(
        self, origin_x: TileCoord, origin_y: TileCoord, radius: FOVRadius
    ) -> bool:
        """Clear and recompute the FOV if it is stale.

        The FOV is stale after `clear_fov`, after the map has been edited, or
        when the origin or radius differ from the last computation.

        Returns:
          Whether the FOV was recomputed.
        """
        current = ((origin_x, origin_y), radius, self.game_map.structural_revision)
        if not self.needs_recompute and self._last_computed == current:
            return False

        self.clear_fov()
        self.compute_fov(origin_x, origin_y, radius)
        return True

    def is_in_fov(self, x: TileCoord, y: TileCoord) -> bool:
        if not self.game_map.is_in_bounds(x, y):
            return False
        return bool(self._visible[x, y])

    def to_text(self, visible_char: str = "*", hidden_char: str = ".") -> str:
        """Render the visibility grid as text, one line per map row."""
        return "\n".join(
            "".join(
                visible_char if self._visible[x, y] else hidden_char
                for x in range(self.game_map.width)
            )
            for y in range(self.game_map.height)
        )
