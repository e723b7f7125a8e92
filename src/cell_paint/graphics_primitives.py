"""Drawing utilities for use with the ContentBuffer class."""

from typing import Iterator

from textual.geometry import Region

from cell_paint.content_buffer import Cell, ContentBuffer

NEIGHBOR_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))
"""Up, down, left, right."""


def bresenham_walk(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Bresenham's line algorithm"""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err = err - dy
            x0 = x0 + sx
        if e2 < dx:
            err = err + dx
            y0 = y0 + sy


def flood_fill_walk(buffer: ContentBuffer, x: int, y: int) -> Iterator[tuple[int, int]]:
    """Yields each cell of the 4-connected region matching the cell at (x, y), once.

    Uses an explicit stack rather than recursion, so large regions can't exhaust the call stack.
    Coordinates are tracked in a visited set, which is what guarantees termination,
    even if the caller paints cells with the same value as the region while iterating.
    """
    if not buffer.in_bounds(x, y):
        return
    target = buffer.cells[y][x]
    visited: set[tuple[int, int]] = set()
    stack = [(x, y)]
    while stack:
        x, y = stack.pop()
        # Neighbors are computed with plain (signed) ints,
        # so anything off the edge is rejected here rather than clamped onto the edge.
        if not buffer.in_bounds(x, y):
            continue
        if (x, y) in visited:
            continue
        if buffer.cells[y][x] != target:
            continue
        visited.add((x, y))
        yield x, y
        for dx, dy in NEIGHBOR_DIRECTIONS:
            stack.append((x + dx, y + dy))


def flood_fill(buffer: ContentBuffer, x: int, y: int, fill_cell: Cell) -> Region|None:
    """Flood fill algorithm. Returns the region affected, or None if (x, y) is outside the buffer."""

    # Track the region affected by the fill.
    min_x = x
    min_y = y
    max_x = x
    max_y = y
    filled_any = False

    for cell_x, cell_y in flood_fill_walk(buffer, x, y):
        buffer.paint(cell_x, cell_y, fill_cell)
        min_x = min(min_x, cell_x)
        min_y = min(min_y, cell_y)
        max_x = max(max_x, cell_x)
        max_y = max(max_y, cell_y)
        filled_any = True

    if not filled_any:
        return None
    return Region(min_x, min_y, max_x - min_x + 1, max_y - min_y + 1)
