import random
import re
import uuid

from squares.models import Square
from squares.services.spiral import COLORS, SHADES, new_square, next_position, random_color, spiral_positions

FIRST_TEN = [(0, 0), (1, 0), (1, 1), (0, 1), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2), (3, 0)]


def _square(x: int, y: int) -> Square:
    return Square(id=uuid.uuid4(), color="bg-red-500", x=x, y=y)


def test_empty_grid_starts_at_origin():
    assert next_position(None) == (0, 0)


def test_first_ten_positions():
    assert list(spiral_positions(10)) == FIRST_TEN


def test_each_rule():
    assert next_position(_square(0, 2)) == (3, 0)  # new ring
    assert next_position(_square(3, 0)) == (3, 1)  # up the right edge
    assert next_position(_square(3, 3)) == (2, 3)  # along the top
    assert next_position(_square(3, 2)) == (3, 3)


def test_next_position_is_pure():
    previous = _square(2, 2)
    assert next_position(previous) == next_position(previous)
    assert (previous.x, previous.y) == (2, 2)


def test_spiral_fills_each_ring_exactly():
    # after n*n squares the grid is the full n x n block
    positions = list(spiral_positions(25))
    assert len(set(positions)) == 25
    assert set(positions) == {(x, y) for x in range(5) for y in range(5)}


def test_random_color_format():
    rng = random.Random(7)
    for _ in range(50):
        match = re.fullmatch(r"bg-([a-z]+)-(\d{3})", random_color(rng))
        assert match
        assert match.group(1) in COLORS
        assert match.group(2) in SHADES


def test_new_square_follows_previous():
    first = new_square(None)
    second = new_square(first)
    assert (first.x, first.y) == (0, 0)
    assert (second.x, second.y) == (1, 0)
    assert first.id != second.id
