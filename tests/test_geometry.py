"""Tests for corner-relative points and areas."""

import pytest
from textual.geometry import Offset, Region, Size

from cell_paint.geometry import Area, Corner, Point, diff_or_zero

SIZES = [Size(1, 1), Size(2, 3), Size(10, 4), Size(80, 24)]


def test_diff_or_zero():
    assert diff_or_zero(5, 3) == 2
    assert diff_or_zero(3, 5) == 0
    assert diff_or_zero(4, 4) == 0


@pytest.mark.parametrize("corner", list(Corner))
@pytest.mark.parametrize("terminal_size", SIZES)
def test_resolve_stays_on_screen(corner: Corner, terminal_size: Size):
    for x in range(0, terminal_size.width + 5):
        for y in range(0, terminal_size.height + 5):
            resolved = Point(x, y, corner).resolve(terminal_size)
            assert 0 <= resolved.x <= terminal_size.width - 1
            assert 0 <= resolved.y <= terminal_size.height - 1


@pytest.mark.parametrize("corner", list(Corner))
@pytest.mark.parametrize("terminal_size", [Size(0, 24), Size(80, 0), Size(0, 0)])
def test_resolve_zero_size_terminal(corner: Corner, terminal_size: Size):
    assert Point(3, 2, corner).resolve(terminal_size) == Offset(0, 0)


def test_resolve_each_corner():
    size = Size(80, 24)
    assert Point(3, 2, Corner.top_left).resolve(size) == Offset(3, 2)
    assert Point(3, 2, Corner.top_right).resolve(size) == Offset(76, 2)
    assert Point(3, 2, Corner.bottom_left).resolve(size) == Offset(3, 21)
    assert Point(3, 2, Corner.bottom_right).resolve(size) == Offset(76, 21)


def test_resolve_clamps_instead_of_going_negative():
    assert Point(100, 100, Corner.bottom_right).resolve(Size(10, 5)) == Offset(0, 0)


def test_resolve_clamps_to_far_edge():
    size = Size(10, 5)
    assert Point(12, 7, Corner.top_left).resolve(size) == Offset(9, 4)
    assert Point(0, 9, Corner.top_right).resolve(size) == Offset(9, 4)
    assert Point(10, 0, Corner.bottom_left).resolve(size) == Offset(9, 4)
    assert Point(9, 4, Corner.top_left).resolve(size) == Offset(9, 4)


def test_area_size():
    area = Area(Point(1, 1), Point(2, 1, Corner.bottom_right))
    assert area.size(Size(20, 10)) == Size(17, 8)
    assert area.start_position(Size(20, 10)) == Offset(1, 1)
    assert area.region(Size(20, 10)) == Region(1, 1, 17, 8)


def test_single_cell_area():
    area = Area(Point(0, 0, Corner.bottom_right), Point(0, 0, Corner.bottom_right))
    assert area.size(Size(5, 5)) == Size(1, 1)
    assert area.contains(4, 4, Size(5, 5))
    assert not area.contains(3, 4, Size(5, 5))


def test_degenerate_area():
    # The border and its inner area cross over when the terminal is too small.
    area = Area(Point(5, 5), Point(5, 5, Corner.bottom_right))
    terminal_size = Size(8, 8)
    assert area.is_degenerate(terminal_size)
    assert area.size(terminal_size) == Size(0, 0)
    assert area.region(terminal_size).area == 0
    for x in range(10):
        for y in range(10):
            assert not area.contains(x, y, terminal_size)


@pytest.mark.parametrize("terminal_size", SIZES + [Size(7, 9)])
def test_size_and_contains_agree(terminal_size: Size):
    area = Area(Point(1, 2), Point(1, 0, Corner.bottom_right))
    start = area.start_position(terminal_size)
    size = area.size(terminal_size)
    for x in range(-1, terminal_size.width + 2):
        for y in range(-1, terminal_size.height + 2):
            within = start.x <= x < start.x + size.width and start.y <= y < start.y + size.height
            assert area.contains(x, y, terminal_size) == within


def test_area_is_immutable():
    area = Area(Point(0, 0), Point(1, 1))
    with pytest.raises(AttributeError):
        area.start = Point(1, 1)  # type: ignore


@pytest.mark.parametrize("terminal_size", [Size(0, 0), Size(0, 24), Size(80, 0)])
def test_area_on_zero_size_terminal(terminal_size: Size):
    area = Area(Point(1, 1), Point(7, 1, Corner.bottom_right))
    assert area.is_degenerate(terminal_size)
    assert area.size(terminal_size) == Size(0, 0)
    assert not area.contains(0, 0, terminal_size)
    assert area.region(terminal_size).area == 0
