# pds_engine/algorithms/sampling/grid.py
from __future__ import annotations
import math
from typing import Iterator, List, Optional, Tuple

from ...core.constants import NEIGHBOUR_WINDOW, SQRT2


class BackgroundGrid:
    """Uniform acceleration grid over [0, width) x [0, height).

    Cell side is ``min_radius / sqrt(2)``, so a cell can hold at most one
    accepted point. A cell is either empty (``None``) or stores the index of
    that point in the accepted list.
    """

    def __init__(self, width: float, height: float, min_radius: float):
        self.width = float(width)
        self.height = float(height)
        self.cell_size = float(min_radius) / SQRT2
        self.cols = max(1, int(math.ceil(self.width / self.cell_size)))
        self.rows = max(1, int(math.ceil(self.height / self.cell_size)))
        self._cells: List[List[Optional[int]]] = [
            [None] * self.rows for _ in range(self.cols)
        ]

    def contains(self, x: float, y: float) -> bool:
        return 0.0 <= x < self.width and 0.0 <= y < self.height

    def cell_of(self, x: float, y: float) -> Tuple[int, int]:
        # x < width can still round up to cols when width / cell is integral
        cx = min(int(x / self.cell_size), self.cols - 1)
        cy = min(int(y / self.cell_size), self.rows - 1)
        return cx, cy

    def get(self, cx: int, cy: int) -> Optional[int]:
        return self._cells[cx][cy]

    def put(self, x: float, y: float, index: int) -> None:
        cx, cy = self.cell_of(x, y)
        self._cells[cx][cy] = index

    def neighbours(self, x: float, y: float) -> Iterator[int]:
        """Indices stored in the 5x5 window around the cell of (x, y)."""
        cx, cy = self.cell_of(x, y)
        x0 = max(0, cx - NEIGHBOUR_WINDOW)
        x1 = min(cx + NEIGHBOUR_WINDOW, self.cols - 1)
        y0 = max(0, cy - NEIGHBOUR_WINDOW)
        y1 = min(cy + NEIGHBOUR_WINDOW, self.rows - 1)
        for gx in range(x0, x1 + 1):
            column = self._cells[gx]
            for gy in range(y0, y1 + 1):
                idx = column[gy]
                if idx is not None:
                    yield idx
