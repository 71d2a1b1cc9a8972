from PIL import Image, ImageDraw, ImageFont

from binary_matrix import BinaryMatrix

GREEN = '\033[32m'
RED = '\033[31m'
RESET = '\033[0m'


def _paint(text, color):
    return f"{color}{text}{RESET}"


def format_matrix(matrix):
    matrix = BinaryMatrix(matrix)
    return '\n'.join(''.join(str(val) for val in row) for row in matrix.tolist())


def format_selection(matrix, rows, cols, color=True, outside=None):
    """
    Formats the matrix with entries in the selected rows and cols highlighted.
    With color, selected entries are green and the rest use the outside color
    (plain if None). Without color, selected entries are wrapped in brackets.
    """
    matrix = BinaryMatrix(matrix)
    lines = []
    for x, row in enumerate(matrix.tolist()):
        line = ''
        for y, val in enumerate(row):
            selected = x in rows and y in cols
            if not color:
                line += f"[{val}]" if selected else f" {val} "
            elif selected:
                line += _paint(val, GREEN)
            elif outside:
                line += _paint(val, outside)
            else:
                line += str(val)
        lines.append(line)
    return '\n'.join(lines)


def format_block(matrix, row_start, row_end, col_start, col_end, color=True):
    # entries inside the block appear in green
    rows = range(row_start, row_end + 1)
    cols = range(col_start, col_end + 1)
    return format_selection(matrix, rows, cols, color=color)


def format_submatrix(matrix, rows, cols, color=True):
    # entries in the submatrix appear in green, all others in red
    return format_selection(matrix, rows, cols, color=color, outside=RED)


def render_selection_image(matrix, rows, cols, cell_size=32):
    """
    Draws the matrix as a grid image. Selected cells are filled green,
    other cells light gray, and each cell shows its digit.
    """
    matrix = BinaryMatrix(matrix)
    width = max(matrix.num_cols * cell_size, 1)
    height = max(matrix.num_rows * cell_size, 1)
    img = Image.new('RGB', (width, height), 'white')
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    for x, row in enumerate(matrix.tolist()):
        for y, val in enumerate(row):
            left, top = y * cell_size, x * cell_size
            fill = '#3CB371' if (x in rows and y in cols) else '#D3D3D3'
            draw.rectangle([left, top, left + cell_size - 1, top + cell_size - 1],
                           fill=fill, outline='gray')
            draw.text((left + cell_size // 3, top + cell_size // 4), str(val),
                      fill='#00008B', font=font)
    return img
