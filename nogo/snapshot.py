# snapshot.py
# Plain text save files.
#
# Format:
#   height width active rowO colO movesO rowX colX movesX
#   <height lines of width characters from '.', 'O', 'X'>
#
# rowP colP is the generator candidate of player P and movesP its step count;
# active is the index of the player to move. Move counts are not stored, they
# are recounted from the tokens on the grid.
import re
from typing import List, Sequence, Tuple

from nogo import config
from nogo.board_model import Board, IncorrectFileContents, UnableToOpenFile, valid_dimension
from nogo.config import NogoConfig
from nogo.game_engine import Player, PlayerKind, make_players

HEADER_FIELDS = 9

# %d as scanf reads it: leading whitespace (newlines too) then an optionally signed integer
_INT_RE = re.compile(r'\s*([+-]?\d+)', re.ASCII)


def dumps(engine) -> str:
    board = engine.board
    header = [board.height, board.width, engine.active_player().index]
    for p in engine.players:
        gen = p.generator
        header += [gen.candidate_row, gen.candidate_col, gen.moves_generated]
    lines = [' '.join(str(v) for v in header)]
    lines.extend(board.rows())
    return '\n'.join(lines) + '\n'


def save(engine, path: str) -> None:
    """Write the snapshot to `path`; OSError propagates to the caller."""
    text = dumps(engine)
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(text)
    config.debug("Snapshot", "saved", path)


def _parse_header(text: str) -> Tuple[List[int], int]:
    values: List[int] = []
    pos = 0
    for _ in range(HEADER_FIELDS):
        m = _INT_RE.match(text, pos)
        if not m:
            raise IncorrectFileContents()
        values.append(int(m.group(1)))
        pos = m.end()
    if text[pos:pos + 1] != '\n':
        raise IncorrectFileContents()
    return values, pos + 1


def _parse_grid(text: str, pos: int, height: int, width: int, allowed: str) -> List[str]:
    rows: List[str] = []
    for _ in range(height):
        row = text[pos:pos + width]
        if len(row) != width or any(ch not in allowed for ch in row):
            raise IncorrectFileContents()
        pos += width
        if text[pos:pos + 1] != '\n':
            raise IncorrectFileContents()
        pos += 1
        rows.append(row)
    return rows


def loads(text: str, kinds: Sequence[PlayerKind], cfg: NogoConfig = None) -> Tuple[Board, List[Player]]:
    """Parse snapshot text into a board and two players ready to continue the game."""
    cfg = cfg or NogoConfig()
    header, pos = _parse_header(text)
    height, width, active = header[:3]
    if not valid_dimension(height) or not valid_dimension(width):
        raise IncorrectFileContents()
    if active not in (0, 1):
        raise IncorrectFileContents()
    rows = _parse_grid(text, pos, height, width, cfg.empty + ''.join(cfg.tokens))

    board = Board(height, width, rows, empty=cfg.empty, tokens=cfg.tokens)
    players = make_players(kinds, height, width, cfg)
    for p, (row, col, moves) in zip(players, (header[3:6], header[6:9])):
        p.generator.restore(row, col, moves)
        p.move_count = board.count(p.token)

    a, b = players
    implied = 1 if b.move_count < a.move_count else 0
    if implied != active:
        config.debug("Snapshot", "token counts disagree with active player", active)
        a.move_count = b.move_count + active
    return board, players


def load(path: str, kinds: Sequence[PlayerKind], cfg: NogoConfig = None) -> Tuple[Board, List[Player]]:
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            text = f.read()
    except UnicodeDecodeError:
        raise IncorrectFileContents()
    except OSError:
        raise UnableToOpenFile()
    config.debug("Snapshot", "loaded", path)
    return loads(text, kinds, cfg)
