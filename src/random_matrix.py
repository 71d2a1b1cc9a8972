import numpy as np


def random_binary_matrix(num_rows, num_cols, p_zero, seed=None):
    """
    Creates a random binary matrix as a list of rows.
    Each entry is 0 with probability p_zero and 1 otherwise.
    """
    if num_rows < 0 or num_cols < 0:
        raise ValueError(f"Matrix size must be non-negative, got {num_rows}x{num_cols}")
    if not 0.0 <= p_zero <= 1.0:
        raise ValueError(f"p_zero must be between 0 and 1, got {p_zero}")

    rng = np.random.default_rng(seed)
    zeros = rng.random((num_rows, num_cols)) < p_zero
    return np.where(zeros, 0, 1).tolist()
