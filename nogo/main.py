#!/usr/bin/env python3
# main.py
# Command line entry: nogo p1type p2type [height width | filename]
import re
import sys
from typing import List, Optional

from nogo import config, snapshot
from nogo.board_model import Board, InvalidDimension, NogoError, UsageError, valid_dimension
from nogo.config import load_config
from nogo.console import ConsoleInput
from nogo.game_engine import GameEngine, PlayerKind, make_players


_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def _dimension(text: str) -> int:
    # atoi semantics: leading integer, anything unparsable counts as 0
    m = _LEADING_INT_RE.match(text)
    value = int(m.group(1)) if m else 0
    if not valid_dimension(value):
        raise InvalidDimension()
    return value


def build_engine(args: List[str], stdin=None, stdout=None, cfg=None) -> GameEngine:
    """Validate the arguments (without the program name) and set up a game."""
    cfg = cfg or load_config()
    if len(args) not in (3, 4):
        raise UsageError()
    kinds = [PlayerKind.parse(args[0]), PlayerKind.parse(args[1])]
    if len(args) == 4:
        height, width = _dimension(args[2]), _dimension(args[3])
        board = Board(height, width, empty=cfg.empty, tokens=cfg.tokens)
        players = make_players(kinds, height, width, cfg)
    else:
        board, players = snapshot.load(args[2], kinds, cfg)
    human_input = ConsoleInput(stdin, stdout, cfg)
    return GameEngine(board, players, human_input=human_input, output=stdout)


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    cfg = load_config()
    config.DEBUG = cfg.debug
    try:
        engine = build_engine(argv, cfg=cfg)
        winner = engine.run()
    except NogoError as e:
        print(e, file=sys.stderr)
        return e.exit_status
    except KeyboardInterrupt:
        print("\nGame interrupted by user", file=sys.stderr)
        return 130
    print(f"Player {winner.token} wins")
    return 0


if __name__ == "__main__":
    sys.exit(main())
