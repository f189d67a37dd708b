# collapse_layout.py
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from collapse_config import CONFIG


@dataclass
class Dims:
    tile: int
    gap: int
    margin: int
    panel_w: int
    cols: int
    rows: int  # includes the staging row
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int

    @property
    def pitch(self) -> int:
        return self.tile + self.gap


def compute_dims(config: Mapping = CONFIG) -> Dims:
    tile = int(config["TILE_SIZE"])
    gap = int(config["GAP"])
    margin = int(config["MARGIN"])
    panel_w = int(config["PANEL_W"])
    cols = int(config["WIDTH"])
    rows = int(config["HEIGHT"]) + 1

    board_w = cols * (tile + gap)
    board_h = rows * (tile + gap)

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    return Dims(
        tile=tile, gap=gap, margin=margin, panel_w=panel_w,
        cols=cols, rows=rows,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y
    )


def cell_origin(dims: Dims, x: int, y: int) -> Tuple[int, int]:
    return dims.board_x + x * dims.pitch, dims.board_y + y * dims.pitch


def cell_at(dims: Dims, px: int, py: int) -> Optional[Tuple[int, int]]:
    """Grid cell under a pointer position, or None outside the board."""
    dx, dy = px - dims.board_x, py - dims.board_y
    if dx < 0 or dy < 0:
        return None
    x, y = dx // dims.pitch, dy // dims.pitch
    if x >= dims.cols or y >= dims.rows:
        return None
    return int(x), int(y)
