import unittest
import sys
import os

# Add src to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from random_matrix import random_binary_matrix
from render import GREEN, RED, format_matrix, format_block, format_submatrix, render_selection_image
from benchmark import compare_memoization, format_timings, time_search
from block_solver import find_largest_block

EXAMPLE = [[1, 1, 0, 1], [1, 1, 0, 1], [0, 1, 0, 1]]


class TestRandomMatrix(unittest.TestCase):
    def test_shape_and_values(self):
        matrix = random_binary_matrix(5, 8, 0.3, seed=1)
        self.assertEqual(len(matrix), 5)
        self.assertTrue(all(len(row) == 8 for row in matrix))
        self.assertTrue(all(val in (0, 1) for row in matrix for val in row))

    def test_seed_is_reproducible(self):
        self.assertEqual(random_binary_matrix(4, 4, 0.5, seed=7), random_binary_matrix(4, 4, 0.5, seed=7))

    def test_extreme_probabilities(self):
        self.assertEqual(random_binary_matrix(2, 3, 0.0), [[1, 1, 1], [1, 1, 1]])
        self.assertEqual(random_binary_matrix(2, 3, 1.0), [[0, 0, 0], [0, 0, 0]])
        self.assertEqual(random_binary_matrix(0, 3, 0.5), [])

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            random_binary_matrix(2, 2, 1.5)
        with self.assertRaises(ValueError):
            random_binary_matrix(-1, 2, 0.5)


class TestRender(unittest.TestCase):
    def test_format_matrix(self):
        self.assertEqual(format_matrix(EXAMPLE), "1101\n1101\n0101")

    def test_format_block_plain(self):
        text = format_block(EXAMPLE, 0, 1, 0, 1, color=False)
        self.assertEqual(text.splitlines()[0], "[1][1] 0  1 ")
        self.assertEqual(text.splitlines()[2], " 0  1  0  1 ")

    def test_format_block_color(self):
        text = format_block(EXAMPLE, 0, 1, 0, 1)
        self.assertEqual(text.count(GREEN), 4)
        self.assertNotIn(RED, text)

    def test_format_submatrix_color(self):
        text = format_submatrix(EXAMPLE, {0, 1}, {0, 1, 3})
        self.assertEqual(text.count(GREEN), 6)
        self.assertEqual(text.count(RED), 6)

    def test_render_image(self):
        img = render_selection_image(EXAMPLE, {0, 1}, {0, 1}, cell_size=10)
        self.assertEqual(img.size, (40, 30))
        self.assertEqual(img.getpixel((1, 1)), (60, 179, 113))
        self.assertEqual(img.getpixel((21, 1)), (211, 211, 211))

    def test_render_empty_matrix(self):
        img = render_selection_image([], frozenset(), frozenset())
        self.assertEqual(img.size, (1, 1))


class TestBenchmark(unittest.TestCase):
    def test_time_search(self):
        self.assertGreaterEqual(time_search(find_largest_block, EXAMPLE, True, repeat=2), 0.0)

    def test_compare_memoization(self):
        rows = compare_memoization(EXAMPLE, 'submatrix')
        self.assertEqual([label for label, _ in rows], ['memoize=true', 'memoize=false'])
        self.assertIn('memoize=false', format_timings(rows))

    def test_unknown_algorithm(self):
        with self.assertRaises(ValueError):
            compare_memoization(EXAMPLE, 'diagonal')


if __name__ == '__main__':
    unittest.main()
