import time

from block_solver import find_largest_block
from submatrix_solver import find_largest_submatrix

SEARCHES = {
    'block': find_largest_block,
    'submatrix': find_largest_submatrix,
}


def time_search(search, matrix, memoize, repeat=1):
    # best wall-clock time in seconds over repeat runs
    best = None
    for _ in range(repeat):
        start = time.perf_counter()
        search(matrix, memoize=memoize)
        elapsed = time.perf_counter() - start
        if best is None or elapsed < best:
            best = elapsed
    return best


def compare_memoization(matrix, algorithm='block', repeat=1):
    """
    Times the given algorithm with and without memoization.
    Returns a list of (label, seconds) rows.
    """
    if algorithm not in SEARCHES:
        raise ValueError(f"Unknown algorithm '{algorithm}', expected one of {sorted(SEARCHES)}")
    search = SEARCHES[algorithm]
    return [
        ('memoize=true', time_search(search, matrix, True, repeat)),
        ('memoize=false', time_search(search, matrix, False, repeat)),
    ]


def format_timings(rows):
    lines = [f"{'':15}{'seconds':>12}"]
    for label, seconds in rows:
        lines.append(f"{label:15}{seconds:12.6f}")
    return '\n'.join(lines)
