# move_generator.py
# Deterministic computer move stream.
#
# Every fifth step re-seeds the cursor from an affine recurrence over the
# player's base point, the steps in between nudge it by a fixed offset table.
# Only the published candidate is reduced modulo the board size; the cursor
# itself keeps growing until the next re-seed.
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from nogo.board_model import Point

MODULUS = 1000003
CYCLE = 5

# movesGenerated % 5 -> (row offset, col offset); 0 re-seeds instead
OFFSETS: Dict[int, Tuple[int, int]] = {
    1: (1, 1),
    2: (2, 1),
    3: (1, 0),
    4: (0, 1),
}


@dataclass(frozen=True)
class Seed:
    initial_row: int
    initial_col: int
    factor: int


# player index -> seed (0 is player A / 'O', 1 is player B / 'X')
SEEDS: Dict[int, Seed] = {
    0: Seed(initial_row=1, initial_col=4, factor=29),
    1: Seed(initial_row=2, initial_col=10, factor=17),
}


@dataclass
class MoveGenerator:
    seed: Seed
    height: int
    width: int
    moves_generated: int = 0
    row: int = field(init=False)
    col: int = field(init=False)
    base: int = field(init=False)
    candidate_row: int = field(init=False)
    candidate_col: int = field(init=False)

    def __post_init__(self):
        self.base = self.seed.initial_row * self.width + self.seed.initial_col
        self.row = self.seed.initial_row
        self.col = self.seed.initial_col
        self._publish()

    @classmethod
    def for_player(cls, index: int, height: int, width: int) -> "MoveGenerator":
        return cls(SEEDS[index], height, width)

    @property
    def candidate(self) -> Point:
        return self.candidate_row, self.candidate_col

    def restore(self, row: int, col: int, moves_generated: int) -> None:
        """Continue from saved values. The cursor is taken as-is, base stays seed-derived."""
        self.row = row
        self.col = col
        self.moves_generated = moves_generated
        self._publish()

    def step(self) -> Point:
        """Advance one generator step and return the new candidate."""
        self.moves_generated += 1
        m = self.moves_generated
        n = (self.base + m // CYCLE * self.seed.factor) % MODULUS
        phase = m % CYCLE
        if phase == 0:
            self.row = n // self.width
            self.col = n % self.width
        else:
            dr, dc = OFFSETS[phase]
            self.row += dr
            self.col += dc
        self._publish()
        return self.candidate

    def _publish(self):
        self.candidate_row = self.row % self.height
        self.candidate_col = self.col % self.width

    def __iter__(self) -> Iterator[Point]:
        return self

    def __next__(self) -> Point:
        return self.step()
