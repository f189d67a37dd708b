"""Grid helpers: group finding, clearing, bombs, gravity, row shift.

The grid is ``height + 1`` rows of ``width`` integer codes. Rows ``0..height-1``
are the play field (row 0 at the top); row ``height`` is the staging row where
new tiles wait until the next upward shift. Nothing here knows about pixels,
sprites or timing.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Set, Tuple

logger = logging.getLogger(__name__)

EMPTY = 0
BOMB = -1
COLORS = (1, 2, 3)
CODES = frozenset((BOMB, EMPTY) + COLORS)

Cell = Tuple[int, int]

# up, right, down, left
NEIGHBORS = ((0, -1), (1, 0), (0, 1), (-1, 0))


class Grid:
    """Integer tile codes, addressed as ``(x, y)`` = (column, row)."""

    def __init__(self, width: int, height: int):
        if width < 2 or height < 1:
            raise ValueError(f"grid must be at least 2x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells: List[List[int]] = [[EMPTY] * width for _ in range(height + 1)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "Grid":
        """Build a grid from nested lists; the last row is the staging row."""
        rows = [list(r) for r in rows]
        if len(rows) < 2:
            raise ValueError("need at least one play row and the staging row")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("rows must all have the same length")
        grid = cls(width, len(rows) - 1)
        for y, row in enumerate(rows):
            for x, code in enumerate(row):
                grid.set(x, y, code)
        return grid

    def to_rows(self) -> List[List[int]]:
        return [row[:] for row in self.cells]

    @property
    def staging(self) -> List[int]:
        return self.cells[self.height]

    def inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y <= self.height

    def in_play(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        if not self.inside(x, y):
            raise IndexError(f"cell ({x}, {y}) out of bounds")
        return self.cells[y][x]

    def set(self, x: int, y: int, code: int) -> None:
        if not self.inside(x, y):
            raise IndexError(f"cell ({x}, {y}) out of bounds")
        if code not in CODES:
            raise ValueError(f"invalid tile code {code!r}")
        self.cells[y][x] = code

    def is_empty(self) -> bool:
        return all(v == EMPTY for row in self.cells for v in row)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, {self.cells!r})"


# ---------- groups ----------

def find_group(grid: Grid, x: int, y: int) -> Set[Cell]:
    """Cells 4-connected to ``(x, y)`` sharing its color.

    Only play rows are searched. Empty cells and bombs never form a group, so
    those start cells give an empty set.
    """
    if not grid.in_play(x, y):
        return set()
    color = grid.cells[y][x]
    if color <= EMPTY:
        return set()
    seen = {(x, y)}
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        # reversed so cells pop in up, right, down, left order
        for dx, dy in reversed(NEIGHBORS):
            nx, ny = cx + dx, cy + dy
            if (nx, ny) in seen or not grid.in_play(nx, ny):
                continue
            if grid.cells[ny][nx] == color:
                seen.add((nx, ny))
                stack.append((nx, ny))
    return seen


def count_group(grid: Grid, x: int, y: int) -> int:
    return len(find_group(grid, x, y))


def clear_group(grid: Grid, x: int, y: int, min_group: int = 3) -> int:
    """Zero the group at ``(x, y)`` if it has at least ``min_group`` cells.

    Returns the number of cells cleared (0 when the group is too small).
    """
    group = find_group(grid, x, y)
    if len(group) < min_group:
        return 0
    for gx, gy in group:
        grid.cells[gy][gx] = EMPTY
    logger.debug("cleared group of %d at (%d, %d)", len(group), x, y)
    return len(group)


def has_matches(grid: Grid, min_group: int = 3) -> bool:
    """True if any play cell belongs to a clearable group."""
    seen: Set[Cell] = set()
    for y in range(grid.height - 1, -1, -1):
        for x in range(grid.width):
            if (x, y) in seen or grid.cells[y][x] <= EMPTY:
                continue
            group = find_group(grid, x, y)
            if len(group) >= min_group:
                return True
            seen |= group
    return False


# ---------- bombs ----------

def blast_area(grid: Grid, x: int, y: int, radius: int) -> Tuple[range, range]:
    """Columns and rows within ``radius`` of ``(x, y)``, clamped to play bounds."""
    cols = range(max(0, x - radius), min(grid.width - 1, x + radius) + 1)
    rows = range(max(0, y - radius), min(grid.height - 1, y + radius) + 1)
    return cols, rows


def blast(grid: Grid, x: int, y: int, radius: int = 3) -> int:
    """Clear the square around ``(x, y)``; returns the number of colored tiles hit."""
    if not grid.in_play(x, y):
        return 0
    cols, rows = blast_area(grid, x, y, radius)
    points = 0
    for bx in cols:
        for by in rows:
            if grid.cells[by][bx] > EMPTY:
                points += 1
            grid.cells[by][bx] = EMPTY
    logger.debug("blast at (%d, %d) r=%d hit %d tiles", x, y, radius, points)
    return points


# ---------- gravity ----------

def fall_step(grid: Grid) -> bool:
    """Drop every unsupported play cell by one row. True if nothing moved."""
    settled = True
    cells = grid.cells
    for y in range(grid.height - 2, -1, -1):
        for x in range(grid.width):
            if cells[y][x] != EMPTY and cells[y + 1][x] == EMPTY:
                cells[y + 1][x] = cells[y][x]
                cells[y][x] = EMPTY
                settled = False
    return settled


def drain_step(grid: Grid) -> int:
    """Slide cells one column toward the middle; returns the number of moves.

    A cell moves only when the bottom play cell of the target column is empty,
    i.e. it drains into columns that have emptied out entirely. Cells never
    cross the center line.
    """
    cells = grid.cells
    bottom = grid.height - 1
    moves = 0
    for x in range(grid.width):
        left = 2 * x < grid.width
        nx = x + 1 if left else x - 1
        if (2 * nx < grid.width) != left:
            continue
        if cells[bottom][nx] != EMPTY:
            continue
        for y in range(grid.height):
            if cells[y][x] != EMPTY and cells[y][nx] == EMPTY:
                cells[y][nx] = cells[y][x]
                cells[y][x] = EMPTY
                moves += 1
    return moves


def gravity_step(grid: Grid) -> bool:
    """One gravity tick: vertical fall, then horizontal drain once settled.

    Returns True when neither phase moved anything.
    """
    if not fall_step(grid):
        return False
    return drain_step(grid) == 0


def settle(grid: Grid) -> int:
    """Run gravity ticks until nothing moves; returns the number of ticks."""
    steps = 0
    while not gravity_step(grid):
        steps += 1
    return steps


# ---------- lines ----------

def inject(grid: Grid, x: int, code: int) -> None:
    grid.set(x, grid.height, code)


def row_blocked(grid: Grid) -> bool:
    return any(v != EMPTY for v in grid.cells[0])


def shift_up(grid: Grid) -> bool:
    """Move every row up one and clear the staging row.

    Returns False, leaving the grid untouched, when row 0 is occupied.
    """
    if row_blocked(grid):
        return False
    del grid.cells[0]
    grid.cells.append([EMPTY] * grid.width)
    return True
