# Type aliases for colors
Color = tuple[int, int, int]
ColorRGBA = tuple[int, int, int, int]

# Basic colors
WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
ORANGE: Color = (255, 165, 0)
DARK_BLUE: Color = (0, 0, 139)
BLUE_VIOLET: Color = (138, 43, 226)
AQUAMARINE: Color = (127, 255, 212)

# Map colors
LIT_WALL: Color = BLUE_VIOLET
LIT_FLOOR: Color = ORANGE
UNSEEN: Color = BLACK
BACKDROP: Color = DARK_BLUE

# Entity colors
PLAYER_COLOR: Color = AQUAMARINE


def to_rgba(color: Color, alpha: int = 255) -> ColorRGBA:
    """Extend an RGB color with an alpha channel."""
    return (color[0], color[1], color[2], alpha)
