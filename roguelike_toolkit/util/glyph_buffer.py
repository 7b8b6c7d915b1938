from __future__ import annotations

import numpy as np

from roguelike_toolkit import colors

# This is the public, backend-agnostic data type for a single cell.
# It matches the layout of tcod's ``Console.rgba`` so a buffer can be copied
# straight into a console.
GLYPH_DTYPE = np.dtype(
    [
        ("ch", np.int32),  # Character code
        ("fg", "4B"),  # Foreground RGBA (4 unsigned bytes)
        ("bg", "4B"),  # Background RGBA (4 unsigned bytes)
    ]
)


class GlyphBuffer:
    """
    A backend-agnostic 2D grid of glyphs, foreground, and background colors.

    Holds what character and colors go where on screen, without any knowledge
    of how it will be drawn. Cells are stored in ``data[x, y]``, the same layout
    as the world arrays and an ``order="F"`` tcod console.
    Writes outside the buffer are ignored.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError("Width and height must be positive.")
        self.width = width
        self.height = height
        self.data: np.ndarray = np.zeros(
            (width, height), dtype=GLYPH_DTYPE, order="F"
        )
        self.clear()

    def clear(
        self,
        ch: int = ord(" "),
        fg: colors.ColorRGBA = (0, 0, 0, 0),
        bg: colors.ColorRGBA = (0, 0, 0, 0),
    ) -> None:
        """Fills the entire buffer with a single glyph."""
        self.data["ch"] = ch
        self.data["fg"] = fg
        self.data["bg"] = bg

    def put_char(
        self, x: int, y: int, ch: int, fg: colors.ColorRGBA, bg: colors.ColorRGBA
    ) -> None:
        """Places a single character at a given coordinate."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.data[x, y] = (ch, fg, bg)

    def fill_mask(
        self,
        mask: np.ndarray,
        ch: int,
        fg: colors.ColorRGBA,
        bg: colors.ColorRGBA | None = None,
    ) -> None:
        """Draws one glyph on every cell where *mask* is True.

        *mask* is indexed ``[x, y]`` like the buffer and anchored at its
        top-left corner. Parts of it that overhang the buffer are dropped.
        """
        mask_width = min(mask.shape[0], self.width)
        mask_height = min(mask.shape[1], self.height)
        region_mask = mask[:mask_width, :mask_height]
        target_slice = self.data[:mask_width, :mask_height]

        target_slice["ch"][region_mask] = ch
        target_slice["fg"][region_mask] = fg
        if bg is not None:
            target_slice["bg"][region_mask] = bg

    def print(
        self,
        x: int,
        y: int,
        text: str,
        fg: colors.ColorRGBA,
        bg: colors.ColorRGBA | None = None,
    ) -> None:
        """Draws a string of text on one row. Newlines are not interpreted."""
        if not (0 <= y < self.height and x < self.width):
            return

        # Truncate text if it goes off the left or right edge
        if x < 0:
            text = text[-x:]
            x = 0
        if x + len(text) > self.width:
            text = text[: self.width - x]

        if not text:
            return

        target_slice = self.data[x : x + len(text), y]

        char_array = np.frombuffer(text.encode("utf-32-le"), dtype=np.int32)
        target_slice["ch"] = char_array
        target_slice["fg"] = fg
        if bg is not None:
            target_slice["bg"] = bg
