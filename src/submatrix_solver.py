from collections import namedtuple

from binary_matrix import BinaryMatrix
from lookup import Lookup, subset_key


class Submatrix(namedtuple('Submatrix', ['rows', 'cols'])):
    """Selected row indices and column indices, both frozensets."""

    __slots__ = ()

    @property
    def area(self):
        return len(self.rows) * len(self.cols)


# returned when every row or every column has been eliminated
NO_SUBMATRIX = Submatrix(frozenset(), frozenset())


def make_smaller(indices, index):
    # a new set without index; the original is left untouched
    return frozenset(indices) - {index}


class SubmatrixSolver:
    """
    Recursively removes zeros to find the largest all-ones submatrix, where
    rows and columns need not be contiguous.

    Each step finds the first zero of the current selection and branches on
    removing either its row or its column. Subproblems are all possible
    submatrices, so the search stays exponential even with memoization;
    memoize=True only avoids repeating selections reached by removing the same
    zeros in a different order, at the cost of exponential memory.
    """

    PROGRESS_INTERVAL = 10000

    def __init__(self, memoize=True):
        self.memoize = memoize
        self.lookup = None
        self.evaluated = 0

    def solve(self, matrix, progress_callback=None):
        matrix = BinaryMatrix(matrix)
        self.lookup = Lookup() if self.memoize else None
        self.evaluated = 0
        self._matrix = matrix
        self._progress = progress_callback

        result = self._remove_zeros(matrix.all_rows(), matrix.all_cols())

        if progress_callback:
            progress_callback(self.stats())
        return result

    def stats(self):
        msg = f"Evaluated {self.evaluated} subproblems"
        if self.lookup is not None:
            msg += f" - Stored {len(self.lookup)}, Hits {self.lookup.hits}"
        return msg

    def _remove_zeros(self, rows, cols):
        if not rows or not cols:
            return NO_SUBMATRIX

        key = subset_key(rows, cols)
        if self.lookup is not None:
            cached = self.lookup.get(key)
            if cached is not None:
                return cached

        self.evaluated += 1
        if self._progress and self.evaluated % self.PROGRESS_INTERVAL == 0:
            self._progress(self.stats())

        first_zero = self._matrix.zero_position(rows, cols)
        if first_zero is None:
            return self._store(key, Submatrix(rows, cols))

        zero_row, zero_col = first_zero
        results = [
            self._remove_zeros(make_smaller(rows, zero_row), cols),
            self._remove_zeros(rows, make_smaller(cols, zero_col)),
        ]
        best = max(results, key=lambda sub: sub.area)
        return self._store(key, best)

    def _store(self, key, result):
        if self.lookup is not None:
            self.lookup.store(key, result)
        return result


def find_largest_submatrix(matrix, memoize=True):
    """
    Returns (rows, cols), the frozensets of row and column indices of the
    largest submatrix containing only ones. Its area is len(rows) * len(cols);
    a matrix without ones gives two empty sets.
    """
    return SubmatrixSolver(memoize=memoize).solve(matrix)
