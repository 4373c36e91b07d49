# tests/test_cli.py
import io
import re

import pytest
from nogo import config
from nogo.main import main


@pytest.fixture(autouse=True)
def in_tmp(monkeypatch, tmp_path):
    monkeypatch.delenv("NOGO_CONFIG", raising=False)
    monkeypatch.delenv("NOGO_DEBUG", raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    config.DEBUG = False


@pytest.mark.parametrize("argv,status,message", [
    ([], 1, "Usage: nogo p1type p2type [height width | filename]"),
    (["h", "c"], 1, "Usage: nogo p1type p2type [height width | filename]"),
    (["h", "c", "4", "4", "4"], 1, "Usage: nogo p1type p2type [height width | filename]"),
    (["h", "x", "4", "4"], 2, "Invalid player type"),
    (["human", "c", "4", "4"], 2, "Invalid player type"),
    (["h", "c", "3", "4"], 3, "Invalid board dimension"),
    (["c", "c", "abc", "5"], 3, "Invalid board dimension"),
    (["c", "c", "5", "1001"], 3, "Invalid board dimension"),
    (["c", "c", "\u0665", "5"], 3, "Invalid board dimension"),
    (["c", "c", "no-such-file"], 4, "Unable to open file"),
])
def test_startup_errors(capsys, argv, status, message):
    assert main(argv) == status
    assert capsys.readouterr().err == message + "\n"


def test_bad_file_contents(tmp_path, capsys):
    (tmp_path / "bad.txt").write_text("4 4 0\n")
    assert main(["c", "c", "bad.txt"]) == 5
    assert capsys.readouterr().err == "Incorrect file contents\n"


def test_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0\n"))
    assert main(["h", "c", "4", "4"]) == 6
    captured = capsys.readouterr()
    assert captured.err == "End of input from user\n"
    assert "Player X: 2 2\n" in captured.out


def test_computer_game_prints_winner(capsys):
    assert main(["c", "c", "5", "5"]) == 0
    out = capsys.readouterr().out
    assert re.search(r"Player [OX] wins\n$", out)


def test_resume_from_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("wsaved.txt\n"))
    assert main(["h", "c", "4", "4"]) == 6
    assert (tmp_path / "saved.txt").read_text().startswith("4 4 0 1 0 0 2 2 0\n")
    capsys.readouterr()
    assert main(["c", "c", "saved.txt"]) == 0
    assert re.search(r"Player [OX] wins\n$", capsys.readouterr().out)
