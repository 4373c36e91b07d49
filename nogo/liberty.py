# liberty.py
# Liberty analysis for strings (4-connected groups of one token).
#
# All searches use an explicit stack and a visited grid shaped like the board,
# so long snakes or rings on a 1000x1000 board never hit the recursion limit
# and no point is expanded twice.
from typing import List, Optional, Set

from nogo.board_model import Board, Point


def _visited_grid(board: Board, fill=False) -> List[list]:
    return [[fill] * board.width for _ in range(board.height)]


def has_liberty(board: Board, row: int, col: int) -> bool:
    """
    Return True if the string containing (row, col) touches at least one empty point.
    (row, col) must hold a token. Stops at the first liberty found.
    """
    token = board.token_at(row, col)
    visited = _visited_grid(board)
    visited[row][col] = True
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        for nr, nc in board.neighbors(r, c):
            v = board.token_at(nr, nc)
            if v == board.empty:
                return True
            if v == token and not visited[nr][nc]:
                visited[nr][nc] = True
                stack.append((nr, nc))
    return False


def group_of(board: Board, row: int, col: int) -> Set[Point]:
    """Return the full set of points in the string containing (row, col)."""
    token = board.token_at(row, col)
    if token == board.empty:
        return set()
    group = {(row, col)}
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        for nr, nc in board.neighbors(r, c):
            if board.token_at(nr, nc) == token and (nr, nc) not in group:
                group.add((nr, nc))
                stack.append((nr, nc))
    return group


def find_dead_point(board: Board, token: str) -> Optional[Point]:
    """
    Scan the whole board row by row and return the first point of `token`
    whose string has no liberty, or None if every string of `token` breathes.

    Probes share one marker grid: a cell marked by an earlier probe belongs to
    a string already known to have a liberty (a dead one would have ended the
    scan), so it is skipped, and reaching it from a later probe proves that
    string alive too.
    """
    marks = _visited_grid(board, fill=0)
    probe = 0
    for r, c in board.points():
        if board.token_at(r, c) != token or marks[r][c]:
            continue
        probe += 1
        if not _probe_alive(board, r, c, token, marks, probe):
            return r, c
    return None


def _probe_alive(board: Board, row: int, col: int, token: str, marks: List[list], probe: int) -> bool:
    marks[row][col] = probe
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        for nr, nc in board.neighbors(r, c):
            v = board.token_at(nr, nc)
            if v == board.empty:
                return True
            if v != token:
                continue
            mark = marks[nr][nc]
            if mark == 0:
                marks[nr][nc] = probe
                stack.append((nr, nc))
            elif mark != probe:
                # joined a string cleared by an earlier probe
                return True
    return False
