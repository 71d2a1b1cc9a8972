import re

import numpy as np


def parse_matrix(text):
    """
    Parses a compact text form such as "1101,1101,0101" into a list of rows.
    Rows may be separated by commas, semicolons or whitespace.
    """
    rows = []
    for chunk in re.split(r'[,;\s]+', text.strip()):
        if not chunk:
            continue
        row = []
        for ch in chunk:
            if ch not in '01':
                raise ValueError(f"Invalid entry '{ch}' in row '{chunk}' (expected 0 or 1)")
            row.append(int(ch))
        rows.append(row)
    return rows


class BinaryMatrix:
    """
    Read-only view over a rectangular grid of 0/1 entries.

    Regions are given either as inclusive index ranges (i..j rows, k..l cols)
    or as sets of row and column indices. An empty region never contains a zero.
    """

    def __init__(self, rows):
        if isinstance(rows, BinaryMatrix):
            data = rows.data
        else:
            data = self._validate(rows)
        self.data = data
        self.num_rows, self.num_cols = data.shape

    @staticmethod
    def _validate(rows):
        if isinstance(rows, np.ndarray):
            if rows.ndim != 2:
                if rows.size == 0:
                    return np.zeros((0, 0), dtype=np.int8)
                raise ValueError(f"Matrix must be 2-dimensional, got shape {rows.shape}")
            grid = rows
        else:
            rows = list(rows)
            for r, row in enumerate(rows):
                if not isinstance(row, (list, tuple, np.ndarray)):
                    raise ValueError(f"Row {r} is {row!r}, expected a sequence of entries")
            if not rows:
                return np.zeros((0, 0), dtype=np.int8)
            width = len(rows[0])
            for r, row in enumerate(rows):
                if len(row) != width:
                    raise ValueError(f"Row {r} has {len(row)} entries, expected {width}")
            grid = np.array(rows)
            if grid.ndim != 2:
                raise ValueError(f"Matrix must be 2-dimensional, got shape {grid.shape}")

        bad = ~np.isin(grid, (0, 1))
        if bad.any():
            r, c = np.argwhere(bad)[0]
            raise ValueError(f"Entry at ({r}, {c}) is {grid[r, c]!r}, expected 0 or 1")

        data = np.array(grid, dtype=np.int8)
        data.flags.writeable = False
        return data

    @property
    def shape(self):
        return self.num_rows, self.num_cols

    def tolist(self):
        return self.data.tolist()

    def all_rows(self):
        return frozenset(range(self.num_rows))

    def all_cols(self):
        return frozenset(range(self.num_cols))

    def has_zero_in_range(self, i, j, k, l):
        # checks if rows i..j and columns k..l (inclusive) contain a zero
        if i > j or k > l:
            return False
        return not self.data[i:j + 1, k:l + 1].all()

    def zero_position(self, rows, cols):
        """
        Returns (row, col) of the first zero in the submatrix defined by
        rows and cols, scanning rows in ascending order and, within a row,
        columns in ascending order. Returns None if there is no zero.
        """
        if not rows or not cols:
            return None
        row_idx = sorted(rows)
        col_idx = sorted(cols)
        zeros = np.argwhere(self.data[np.ix_(row_idx, col_idx)] == 0)
        if len(zeros) == 0:
            return None
        x, y = zeros[0]
        return row_idx[x], col_idx[y]

    def has_zero(self, rows, cols):
        return self.zero_position(rows, cols) is not None
