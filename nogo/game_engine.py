# game_engine.py
# Turn scheduler: picks the player to move, asks the right move source,
# applies the move and watches for strings that ran out of liberties.
import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, TextIO

from nogo import config
from nogo.board_model import Board, InvalidPlayerType, Point
from nogo.config import NogoConfig
from nogo.console import render
from nogo.liberty import find_dead_point
from nogo.move_generator import MoveGenerator


class PlayerKind(Enum):
    HUMAN = 'h'
    COMPUTER = 'c'

    @classmethod
    def parse(cls, text: str) -> "PlayerKind":
        for kind in cls:
            if kind.value == text:
                return kind
        raise InvalidPlayerType()


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    OVER = "over"


@dataclass
class Player:
    index: int
    token: str
    kind: PlayerKind
    generator: MoveGenerator
    move_count: int = 0

    @property
    def is_computer(self) -> bool:
        return self.kind is PlayerKind.COMPUTER


def make_players(kinds: Sequence[PlayerKind], height: int, width: int,
                 cfg: Optional[NogoConfig] = None) -> List[Player]:
    cfg = cfg or NogoConfig()
    return [
        Player(index=i, token=cfg.tokens[i], kind=kinds[i],
               generator=MoveGenerator.for_player(i, height, width))
        for i in range(2)
    ]


class GameEngine:
    def __init__(self, board: Board, players: Sequence[Player], human_input=None,
                 output: Optional[TextIO] = None):
        if len(players) != 2:
            raise ValueError("exactly two players are required")
        if human_input is None and not all(p.is_computer for p in players):
            raise ValueError("a human player needs an input source")
        self.board = board
        self.players = list(players)
        self.human_input = human_input
        self.output = output if output is not None else sys.stdout
        self.state = GameState.IN_PROGRESS
        self.winner: Optional[Player] = None

    # --- turn order ---
    def active_player(self) -> Player:
        """Fewer moves goes next; on a tie player A (index 0) does."""
        a, b = self.players
        if b.move_count < a.move_count:
            return b
        return a

    def opponent(self, player: Player) -> Player:
        return self.players[1 - player.index]

    # --- game over ---
    def check_game_over(self) -> Optional[Player]:
        """
        Look for a string without liberties anywhere on the board. The player
        to move is checked first, then the one who just moved, so a move that
        takes the last liberty of both sides wins for the player who made it.
        Returns the winner, or None while the game goes on.
        """
        if self.state is GameState.OVER:
            return self.winner
        to_move = self.active_player()
        for loser in (to_move, self.opponent(to_move)):
            dead = find_dead_point(self.board, loser.token)
            if dead is not None:
                config.debug("GameEngine", "no liberties for", loser.token, "at", dead)
                self.winner = self.opponent(loser)
                self.state = GameState.OVER
                return self.winner
        return None

    # --- move sources ---
    def computer_move(self, player: Player) -> Point:
        gen = player.generator
        while not self.board.is_empty_and_in_bounds(*gen.candidate):
            gen.step()
        move = gen.candidate
        # keep the generator one step ahead for the next turn
        gen.step()
        config.debug("GameEngine", "generator for", player.token, "at step", gen.moves_generated)
        return move

    def human_move(self, player: Player) -> Point:
        return self.human_input.request_move(self, player)

    def save(self, path: str) -> bool:
        """Write a snapshot. A failed save is reported and the game carries on."""
        from nogo import snapshot
        try:
            snapshot.save(self, path)
        except (OSError, ValueError) as e:
            config.debug("GameEngine", "save failed:", path, e)
            print("Unable to save game", file=sys.stderr)
            return False
        return True

    # --- main loop ---
    def play_turn(self) -> GameState:
        if self.state is GameState.OVER:
            return self.state
        print(render(self.board), file=self.output)
        if self.check_game_over() is not None:
            return self.state

        player = self.active_player()
        if player.is_computer:
            r, c = self.computer_move(player)
            print(f"Player {player.token}: {r} {c}", file=self.output)
        else:
            r, c = self.human_move(player)
        self.board.place(r, c, player.token)
        player.move_count += 1
        return self.state

    def run(self) -> Player:
        while self.play_turn() is GameState.IN_PROGRESS:
            pass
        return self.winner
