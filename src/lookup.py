def block_key(i, j, k, l):
    return (i, j, k, l)


def subset_key(rows, cols):
    # frozensets hash by content, so set-equal selections share a key
    # whatever order they were built in
    return (frozenset(rows), frozenset(cols))


class Lookup:
    """
    Stores computed subproblems for a single top-level search.
    Each key is written once; hits are counted for reporting.
    """

    def __init__(self):
        self._table = {}
        self.hits = 0

    def get(self, key):
        result = self._table.get(key)
        if result is not None:
            self.hits += 1
        return result

    def store(self, key, result):
        if key in self._table:
            raise KeyError(f"Subproblem {key!r} already stored")
        self._table[key] = result
        return result

    def __len__(self):
        return len(self._table)
