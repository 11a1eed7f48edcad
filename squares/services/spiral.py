"""
Spiral placement and color picking for new squares

The grid grows as an outward square spiral starting at the origin:

    (0,0) (1,0) (1,1) (0,1) (2,0) (2,1) (2,2) (1,2) (0,2) (3,0) ...

Each position depends only on the previous square, so the whole layout can be
rebuilt from the last element of the saved list.
"""

import random
import uuid
from typing import Iterator, Optional, Tuple

from ..models import Square

# Tailwind palette names; the front end loads Tailwind, so these render as-is
COLORS = (
    "red", "orange", "amber", "yellow", "lime", "green", "emerald", "teal",
    "cyan", "sky", "blue", "indigo", "violet", "purple", "fuchsia", "pink",
    "rose", "slate", "gray", "zinc", "neutral", "stone",
)

SHADES = ("200", "300", "400", "500", "600", "700", "800")

_random = random.Random()


def next_position(previous: Optional[Square]) -> Tuple[int, int]:
    """Return the (x, y) that follows ``previous`` on the spiral, or the origin for an empty grid."""
    if previous is None:
        return 0, 0
    x, y = previous.x, previous.y
    if x == 0:
        # start the next ring along the bottom edge
        return y + 1, 0
    if y == 0:
        return x, y + 1
    if x <= y:
        return x - 1, y
    return x, y + 1


def spiral_positions(count: int) -> Iterator[Tuple[int, int]]:
    """Yield the first ``count`` positions of the spiral."""
    previous = None
    for _ in range(count):
        x, y = next_position(previous)
        yield x, y
        previous = Square(id=uuid.uuid4(), color="", x=x, y=y)


def random_color(rng: Optional[random.Random] = None) -> str:
    """Pick a Tailwind background class such as ``bg-teal-400``."""
    rng = rng or _random
    color = rng.choice(COLORS)
    shade = rng.choice(SHADES)
    return f"bg-{color}-{shade}"


def new_square(previous: Optional[Square], rng: Optional[random.Random] = None) -> Square:
    x, y = next_position(previous)
    return Square(id=uuid.uuid4(), color=random_color(rng), x=x, y=y)
