from collections import namedtuple

from binary_matrix import BinaryMatrix
from lookup import Lookup, block_key

# area, then the inclusive row range and column range of the block
Block = namedtuple('Block', ['area', 'row_start', 'row_end', 'col_start', 'col_end'])


class BlockSolver:
    """
    Finds the largest contiguous block of ones by shrinking the current
    row/column ranges one edge at a time.

    Subproblem: for a range of rows i..j and a range of columns k..l,
    find the largest block of ones inside it. With memoize=True each of the
    O(N^2) ranges is computed once and, as every range costs an O(N) zero scan,
    the whole search is O(N^3) for N = rows * cols. Without memoization the
    recursion is exponential but needs no extra memory.
    """

    PROGRESS_INTERVAL = 10000  # evaluated subproblems between progress reports

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

        result = self._largest_block(0, matrix.num_rows - 1, 0, matrix.num_cols - 1)

        if progress_callback:
            progress_callback(self.stats())
        return result

    def stats(self):
        msg = f"Evaluated {self.evaluated} subproblems"
        if self.lookup is not None:
            msg += f" - Stored {len(self.lookup)}, Hits {self.lookup.hits}"
        return msg

    def _largest_block(self, i, j, k, l):
        key = block_key(i, j, k, l)
        if self.lookup is not None:
            cached = self.lookup.get(key)
            if cached is not None:
                return cached

        self.evaluated += 1
        if self._progress and self.evaluated % self.PROGRESS_INTERVAL == 0:
            self._progress(self.stats())

        if not self._matrix.has_zero_in_range(i, j, k, l):
            # empty ranges land here too, with area 0
            area = max(j - i + 1, 0) * max(l - k + 1, 0)
            return self._store(key, Block(area, i, j, k, l))

        # try removing the top or bottom row, then the left or right column
        results = [
            self._largest_block(i + 1, j, k, l),
            self._largest_block(i, j - 1, k, l),
            self._largest_block(i, j, k + 1, l),
            self._largest_block(i, j, k, l - 1),
        ]
        best = max(results, key=lambda block: block.area)
        return self._store(key, best)

    def _store(self, key, result):
        if self.lookup is not None:
            self.lookup.store(key, result)
        return result


def find_largest_block(matrix, memoize=True):
    """
    Returns (area, row_start, row_end, col_start, col_end) of the largest
    block of ones. Rows row_start..row_end and columns col_start..col_end are
    inclusive. A matrix without ones gives area 0.
    """
    return BlockSolver(memoize=memoize).solve(matrix)
