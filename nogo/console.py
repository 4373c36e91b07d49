# console.py
# Line based terminal I/O: board rendering and the human move source.
import re
import sys
from typing import Optional, TextIO

from nogo import config
from nogo.board_model import Board, EndOfInput, Point
from nogo.config import NogoConfig

# two integers at the start of the line, as scanf("%d %d") reads them
_MOVE_RE = re.compile(r'^\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)', re.ASCII)


def render(board: Board) -> str:
    border = '-' * board.width
    lines = ['/' + border + '\\']
    lines.extend('|' + row + '|' for row in board.rows())
    lines.append('\\' + border + '/')
    return '\n'.join(lines)


def parse_move(line: str) -> Optional[Point]:
    m = _MOVE_RE.match(line)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2))


class ConsoleInput:
    """
    Human move source reading one move per line.
    - `r c` plays at row r, column c (re-prompts until the point is empty and on the board)
    - `w<path>` saves the game to <path> and re-prompts, the turn is not used up
    - end of input raises EndOfInput
    """

    def __init__(self, stream: Optional[TextIO] = None, output: Optional[TextIO] = None,
                 cfg: Optional[NogoConfig] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.cfg = cfg or NogoConfig()

    def read_line(self) -> str:
        line = self.stream.readline()
        if line == "":
            raise EndOfInput()
        return line

    def save_path(self, line: str) -> str:
        # the path ends at the newline or a NUL, whichever comes first
        path = re.split(r"[\n\0]", line[len(self.cfg.save_prefix):], maxsplit=1)[0]
        return path[:self.cfg.max_line - 1]

    def request_move(self, engine, player) -> Point:
        while True:
            print(f"Player {player.token}> ", end="", file=self.output, flush=True)
            line = self.read_line()
            # over-long lines, and a last line missing its newline, are dropped whole
            if not line.endswith("\n") or len(line) > self.cfg.max_line + 1:
                config.debug("Console", "discarded line of length", len(line))
                continue
            if line.startswith(self.cfg.save_prefix):
                engine.save(self.save_path(line))
                continue
            move = parse_move(line)
            if move is None:
                continue
            if engine.board.is_empty_and_in_bounds(*move):
                return move
