"""Drills on two-dimensional grids: matrix product and tic-tac-toe."""

from collections.abc import Sequence
from numbers import Real

from primer.domain.errors import DrillInputError, InvalidBoardError, MatrixShapeError

Matrix = Sequence[Sequence[float]]
Board = Sequence[Sequence[str | None]]

BOARD_SIZE = 3
PLAYERS = frozenset({"X", "0"})


def _shape(matrix: Matrix) -> tuple[int, int]:
    if not all(isinstance(row, Sequence) for row in matrix):
        raise DrillInputError("A matrix must be a sequence of rows")
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise DrillInputError("Matrix rows must all have the same length")
    for row in matrix:
        for cell in row:
            # bool is an int subclass but not a matrix entry
            if isinstance(cell, bool) or not isinstance(cell, Real):
                raise DrillInputError(f"Matrix cells must be numbers, got {cell!r}")
    return rows, cols


def matrix_product(m1: Matrix, m2: Matrix) -> list[list[float]]:
    """Return the product ``m1 x m2``.

    Args:
        m1: An n x m matrix given as a sequence of rows.
        m2: An m x p matrix.

    Returns:
        The n x p product as a list of rows.

    Raises:
        DrillInputError: If either matrix is ragged or holds a cell that is
            not a number (booleans included).
        MatrixShapeError: If the column count of ``m1`` differs from the row
            count of ``m2``.
    """
    left, right = _shape(m1), _shape(m2)
    if left[1] != right[0]:
        raise MatrixShapeError(left, right)
    columns = list(zip(*m2))
    return [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in m1]


def _lines(position: Board) -> list[list[str | None]]:
    rows = [list(row) for row in position]
    cols = [list(col) for col in zip(*position)]
    diagonals = [
        [position[i][i] for i in range(BOARD_SIZE)],
        [position[i][BOARD_SIZE - 1 - i] for i in range(BOARD_SIZE)],
    ]
    return rows + cols + diagonals


def evaluate_tic_tac_toe(position: Board) -> str | None:
    """Return the winner of a tic-tac-toe position.

    Args:
        position: 3x3 board whose cells hold "X", "0" or None.

    Returns:
        "X" or "0" when that player has three in a row, column or diagonal,
        otherwise None.

    Raises:
        InvalidBoardError: If ``position`` is not 3x3.
    """
    if len(position) != BOARD_SIZE or any(
        not isinstance(row, Sequence) or len(row) != BOARD_SIZE for row in position
    ):
        raise InvalidBoardError("A tic-tac-toe position must be a 3x3 board")
    for line in _lines(position):
        if line[0] in PLAYERS and line.count(line[0]) == BOARD_SIZE:
            return line[0]
    return None
