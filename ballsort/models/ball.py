"""Ball colors."""

from enum import IntEnum


class Ball(IntEnum):
    """Ball color (closed palette)."""

    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3
    MAGENTA = 4
    CYAN = 5
    PINK = 6
    ORANGE = 7
    SLATE = 8

    def __str__(self) -> str:
        return BALL_GLYPHS[self]


# Single-character glyph shown inside a glass slot
BALL_GLYPHS: dict[Ball, str] = {
    Ball.RED: "R",
    Ball.GREEN: "G",
    Ball.BLUE: "B",
    Ball.YELLOW: "Y",
    Ball.MAGENTA: "M",
    Ball.CYAN: "C",
    Ball.PINK: "P",
    Ball.ORANGE: "O",
    Ball.SLATE: "S",
}

# Colors in the order generation draws them
PALETTE: tuple[Ball, ...] = (
    Ball.RED,
    Ball.GREEN,
    Ball.BLUE,
    Ball.YELLOW,
    Ball.MAGENTA,
    Ball.CYAN,
    Ball.PINK,
    Ball.ORANGE,
    Ball.SLATE,
)

_GLYPH_TO_BALL: dict[str, Ball] = {glyph: ball for ball, glyph in BALL_GLYPHS.items()}


def ball_from_glyph(glyph: str) -> Ball:
    """Look up a ball by its glyph.

    Args:
        glyph: Single character (case-insensitive), e.g. "R".

    Returns:
        Matching Ball.

    Raises:
        ValueError: If the glyph is not in the palette.
    """
    ball = _GLYPH_TO_BALL.get(glyph.upper())
    if ball is None:
        raise ValueError(f"Unknown ball glyph: {glyph!r}")
    return ball
