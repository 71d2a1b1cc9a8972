import sys
import os
import argparse

# Add src to path when run from another directory
sys.path.append(os.path.dirname(__file__))

from binary_matrix import BinaryMatrix, parse_matrix
from block_solver import BlockSolver
from submatrix_solver import SubmatrixSolver
from random_matrix import random_binary_matrix
from render import format_matrix, format_block, format_submatrix, render_selection_image
from benchmark import compare_memoization, format_timings


def build_parser():
    parser = argparse.ArgumentParser(description='Find the largest area of ones in a binary matrix.')
    parser.add_argument('--algorithm', choices=['block', 'submatrix'], default='block',
                        help='block: contiguous rows and columns, submatrix: any rows and columns')
    parser.add_argument('--matrix', type=str, help='Matrix rows as text, e.g. "1101,1101,0101"')
    parser.add_argument('--rows', type=int, default=5, help='Rows of the random matrix')
    parser.add_argument('--cols', type=int, default=8, help='Columns of the random matrix')
    parser.add_argument('--p-zero', type=float, default=0.1, help='Probability of an entry being 0')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the random matrix')
    parser.add_argument('--no-memoize', action='store_true', help='Disable memoization (slow)')
    parser.add_argument('--no-color', action='store_true', help='Mark the result with brackets instead of colors')
    parser.add_argument('--benchmark', action='store_true', help='Time the search with and without memoization')
    parser.add_argument('--save-image', type=str, help='Save a picture of the result to this path')
    parser.add_argument('--verbose', action='store_true', help='Print solver progress')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        if args.matrix is not None:
            matrix = BinaryMatrix(parse_matrix(args.matrix))
        else:
            matrix = BinaryMatrix(random_binary_matrix(args.rows, args.cols, args.p_zero, seed=args.seed))
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(format_matrix(matrix))
    print()

    memoize = not args.no_memoize
    color = not args.no_color
    progress = print if args.verbose else None

    if args.algorithm == 'block':
        result = BlockSolver(memoize=memoize).solve(matrix, progress_callback=progress)
        rows = range(result.row_start, result.row_end + 1)
        cols = range(result.col_start, result.col_end + 1)
        print(format_block(matrix, result.row_start, result.row_end,
                           result.col_start, result.col_end, color=color))
        print()
        print(f"the largest block has {result.area} 1s")
    else:
        result = SubmatrixSolver(memoize=memoize).solve(matrix, progress_callback=progress)
        rows, cols = result
        print(format_submatrix(matrix, rows, cols, color=color))
        print()
        print(f"largest submatrix size: {result.area}")
        print(f"rows: {sorted(rows)} cols: {sorted(cols)}")

    if args.save_image:
        try:
            render_selection_image(matrix, rows, cols).save(args.save_image)
        except (OSError, ValueError) as e:
            print(f"Error saving image: {e}")
            return 1
        print(f"Saved image to {args.save_image}")

    if args.benchmark:
        print()
        print(format_timings(compare_memoization(matrix, args.algorithm)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
