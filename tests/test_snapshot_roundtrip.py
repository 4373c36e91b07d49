# tests/test_snapshot_roundtrip.py
import io

import pytest
from nogo import snapshot
from nogo.board_model import Board, IncorrectFileContents, UnableToOpenFile
from nogo.game_engine import GameEngine, PlayerKind, make_players

C, H = PlayerKind.COMPUTER, PlayerKind.HUMAN

GRID_4 = "....\n....\n....\n....\n"


def computer_game(size):
    return GameEngine(Board(size, size), make_players([C, C], size, size), output=io.StringIO())


def test_dumps_after_six_moves():
    e = computer_game(6)
    for _ in range(6):
        e.play_turn()
    text = snapshot.dumps(e)
    assert text.splitlines() == [
        "6 6 0 5 0 3 0 0 3",
        "......",
        "....O.",
        "....XO",
        ".....X",
        "O.....",
        "X.....",
    ]


def test_roundtrip_continues_identically(tmp_path):
    e = computer_game(6)
    for _ in range(6):
        e.play_turn()
    path = tmp_path / "save.txt"
    snapshot.save(e, str(path))
    board, players = snapshot.load(str(path), [C, C])
    assert board == e.board
    assert [p.move_count for p in players] == [p.move_count for p in e.players]
    assert [p.generator.candidate for p in players] == [p.generator.candidate for p in e.players]

    resumed = GameEngine(board, players, output=io.StringIO())
    for _ in range(12):
        e.play_turn()
        resumed.play_turn()
    assert resumed.board == e.board
    assert resumed.state is e.state
    for a, b in zip(resumed.players, e.players):
        assert [a.generator.step() for _ in range(20)] == [b.generator.step() for _ in range(20)]


def test_move_counts_recounted_from_grid():
    text = "4 4 1 0 0 0 0 0 0\nO...\n.X..\n..O.\n....\n"
    board, (a, b) = snapshot.loads(text, [H, H])
    assert (a.move_count, b.move_count) == (2, 1)
    assert board.token_at(1, 1) == 'X'


def test_active_index_wins_over_token_counts():
    text = "4 4 0 0 0 0 0 0 0\nO...\n.X..\n..O.\n....\n"
    _, (a, b) = snapshot.loads(text, [H, H])
    assert a.move_count == b.move_count


def test_generator_state_restored():
    text = "4 5 0 3 4 17 1 2 9\n" + ".....\n" * 4
    _, (a, b) = snapshot.loads(text, [C, C])
    assert (a.generator.candidate, a.generator.moves_generated) == ((3, 4), 17)
    assert (b.generator.candidate, b.generator.moves_generated) == ((1, 2), 9)
    assert a.generator.base == 1 * 5 + 4


def test_header_may_span_lines():
    board, _ = snapshot.loads("4 4\n0 1 0 0\n2 2 0\n" + GRID_4, [C, C])
    assert board.rows() == ["...."] * 4


@pytest.mark.parametrize("text", [
    "",
    "4 4 0 1 0 0 2 2\n" + GRID_4,
    "4 4 0 1 0 0 2 2 0 \n" + GRID_4,
    "4 4 0 1 0 0 2 2 x\n" + GRID_4,
    "4 4 0 1 0 0 2 2 \u0660\n" + GRID_4,
    "\u0664 4 0 1 0 0 2 2 0\n" + GRID_4,
    "3 4 0 1 0 0 2 2 0\n" + "....\n" * 3,
    "4 1001 0 1 0 0 2 2 0\n" + GRID_4,
    "4 4 2 1 0 0 2 2 0\n" + GRID_4,
    "4 4 -1 1 0 0 2 2 0\n" + GRID_4,
    "4 4 0 1 0 0 2 2 0\n" + "....\n" * 3,
    "4 4 0 1 0 0 2 2 0\n" + "....\n...\n....\n....\n",
    "4 4 0 1 0 0 2 2 0\n" + "....\n.....\n....\n....\n",
    "4 4 0 1 0 0 2 2 0\n" + "....\n..#.\n....\n....\n",
    "4 4 0 1 0 0 2 2 0\n" + "....\r\n....\n....\n....\n",
    "4 4 0 1 0 0 2 2 0\n" + "....\n....\n....\n....",
])
def test_bad_contents(text):
    with pytest.raises(IncorrectFileContents):
        snapshot.loads(text, [C, C])


def test_missing_file(tmp_path):
    with pytest.raises(UnableToOpenFile):
        snapshot.load(str(tmp_path / "nope.txt"), [C, C])
