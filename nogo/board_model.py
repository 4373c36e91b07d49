# board_model.py
from typing import Iterator, List, Optional, Sequence, Tuple

MIN_DIMENSION = 4
MAX_DIMENSION = 1000

EMPTY = '.'
TOKEN_A = 'O'
TOKEN_B = 'X'

Point = Tuple[int, int]


# Exceptions
class NogoError(Exception):
    """Base error. `exit_status` is what the command line exits with."""
    exit_status = 1
    message = ""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class UsageError(NogoError):
    exit_status = 1
    message = "Usage: nogo p1type p2type [height width | filename]"


class InvalidPlayerType(NogoError):
    exit_status = 2
    message = "Invalid player type"


class InvalidDimension(NogoError):
    exit_status = 3
    message = "Invalid board dimension"


class UnableToOpenFile(NogoError):
    exit_status = 4
    message = "Unable to open file"


class IncorrectFileContents(NogoError):
    exit_status = 5
    message = "Incorrect file contents"


class EndOfInput(NogoError):
    exit_status = 6
    message = "End of input from user"


class IllegalMove(NogoError):
    message = "Illegal move"


class OccupiedPoint(IllegalMove):
    message = "Point occupied"


def valid_dimension(value: int) -> bool:
    return MIN_DIMENSION <= value <= MAX_DIMENSION


class Board:
    def __init__(self, height: int, width: int, cells: Optional[Sequence[Sequence[str]]] = None,
                 empty: str = EMPTY, tokens: Tuple[str, str] = (TOKEN_A, TOKEN_B)):
        if not valid_dimension(height) or not valid_dimension(width):
            raise InvalidDimension()
        self.height = height
        self.width = width
        self.empty = empty
        self.tokens = tuple(tokens)
        if cells is None:
            self._board = [[empty] * width for _ in range(height)]
        else:
            if len(cells) != height or any(len(row) != width for row in cells):
                raise ValueError("cells do not match board dimensions")
            allowed = {empty, *self.tokens}
            if any(ch not in allowed for row in cells for ch in row):
                raise ValueError("cells hold characters other than tokens and empty")
            self._board = [list(row) for row in cells]

    # --- helpers ---
    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.height and 0 <= c < self.width

    def is_empty_and_in_bounds(self, r: int, c: int) -> bool:
        """The one validation gate for any placement; total over all integers."""
        if not self.in_bounds(r, c):
            return False
        return self._board[r][c] == self.empty

    def token_at(self, r: int, c: int) -> str:
        return self._board[r][c]

    def neighbors(self, r: int, c: int) -> Iterator[Point]:
        # 3x3 offset window, |i - j| == 1 keeps up/left/right/down only
        for i in (-1, 0, 1):
            for j in (-1, 0, 1):
                if abs(i - j) != 1:
                    continue
                nr, nc = r + i, c + j
                if 0 <= nr < self.height and 0 <= nc < self.width:
                    yield nr, nc

    def points(self) -> Iterator[Point]:
        for r in range(self.height):
            for c in range(self.width):
                yield r, c

    def count(self, token: str) -> int:
        return sum(row.count(token) for row in self._board)

    # --- main API ---
    def place(self, r: int, c: int, token: str) -> None:
        """Put `token` on an empty in-bounds point. Callers validate first."""
        if not self.in_bounds(r, c):
            raise IllegalMove(f"Out of bounds: ({r}, {c})")
        if self._board[r][c] != self.empty:
            raise OccupiedPoint(f"Point occupied: ({r}, {c})")
        self._board[r][c] = token

    def rows(self) -> List[str]:
        return [''.join(row) for row in self._board]

    def copy(self) -> 'Board':
        return Board(self.height, self.width, self._board, empty=self.empty, tokens=self.tokens)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self.height, self.width, self._board) == (other.height, other.width, other._board)
