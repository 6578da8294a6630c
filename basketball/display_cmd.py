"""
Character-grid rendering of a trajectory for the terminal.

The grid covers ``rows_meters`` x ``cols_meters`` of physical space with
``num_rows`` x ``num_cols`` cells. Row 0 is ground level and is printed last,
so the text reads like a side view of the throw.
"""

from typing import Iterable, List, Tuple

import numpy as np

from .trajectory_simulator import Sample

TRACE_CHAR = 'O'
ENTRY_CHAR = '*'
ENTRY_RUN_CHAR = '='
BLANK_CHAR = ' '


class DisplayCMD:
    """Fixed-size character surface addressed in cells or in meters."""

    def __init__(self, num_rows: int, num_cols: int, rows_meters: float, cols_meters: float):
        if num_rows < 2 or num_cols < 2:
            raise ValueError(f"grid needs at least 2x2 cells, got {num_rows}x{num_cols}")
        if not rows_meters > 0 or not cols_meters > 0:
            raise ValueError(
                f"grid must cover a positive area, got {rows_meters} x {cols_meters} m"
            )
        self.num_rows = num_rows
        self.num_cols = num_cols
        self.rows_meters = rows_meters
        self.cols_meters = cols_meters
        self.buf: List[str] = [BLANK_CHAR] * (num_rows * num_cols)

    def clear(self):
        self.buf = [BLANK_CHAR] * (self.num_rows * self.num_cols)

    def _check_cell(self, row: int, col: int):
        if not 0 <= row < self.num_rows:
            raise ValueError(f"row {row} outside the grid (0..{self.num_rows - 1})")
        if not 0 <= col < self.num_cols:
            raise ValueError(f"col {col} outside the grid (0..{self.num_cols - 1})")

    def set_pixel(self, ch: str, row: int, col: int):
        self._check_cell(row, col)
        self.buf[row * self.num_cols + col] = ch

    def get_pixel(self, row: int, col: int) -> str:
        self._check_cell(row, col)
        return self.buf[row * self.num_cols + col]

    def meters_to_cell(self, row_meters: float, col_meters: float) -> Tuple[int, int]:
        """
        Project a physical (height, distance) pair onto a (row, col) cell.

        Raises:
            ValueError: if the point lies outside the area covered by the grid
        """
        if row_meters > self.rows_meters or row_meters < 0:
            raise ValueError(
                f"height {row_meters:.3f} m outside the grid (0..{self.rows_meters} m)"
            )
        if col_meters > self.cols_meters or col_meters < 0:
            raise ValueError(
                f"distance {col_meters:.3f} m outside the grid (0..{self.cols_meters} m)"
            )
        # Half-way cells round up, coordinates are never negative here.
        row = np.floor(row_meters * (self.num_rows - 1) / self.rows_meters + 0.5)
        col = np.floor(col_meters * (self.num_cols - 1) / self.cols_meters + 0.5)
        return int(row), int(col)

    def set_pixel_meters(self, ch: str, row_meters: float, col_meters: float,
                         flag_enter_instant: bool = False):
        """Plot one point; an entry point is drawn as ``==*==``."""
        row, col = self.meters_to_cell(row_meters, col_meters)
        if flag_enter_instant:
            # The whole marker must fit before any cell is written.
            self._check_cell(row, col - 2)
            self._check_cell(row, col + 2)
            for offset in (-2, -1, 1, 2):
                self.set_pixel(ENTRY_RUN_CHAR, row, col + offset)
            ch = ENTRY_CHAR
        self.set_pixel(ch, row, col)

    def plot_samples(self, samples: Iterable[Sample], ch: str = TRACE_CHAR):
        for sample in samples:
            self.set_pixel_meters(ch, sample.y, sample.x, sample.entered)

    def rows(self) -> List[str]:
        """Grid lines from the highest row down to row 0."""
        return [
            ''.join(self.buf[row * self.num_cols:(row + 1) * self.num_cols])
            for row in reversed(range(self.num_rows))
        ]

    def render(self) -> str:
        return '\n'.join(self.rows()) + '\n'
