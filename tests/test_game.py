import io
import random
from collections import Counter

import pytest

from pokematch.board import Board, Point
from pokematch.game import GameSession, main, run
from pokematch.leaderboard import PlayerRecord, load_leaderboard, save_leaderboard
from pokematch.matching import can_match, has_moves


def make_session(names, keys=(), level=1, seed=1):
    rows = len(names)
    cols = len(names[0])
    board = Board(rows, cols, names)
    stream = io.StringIO()
    from pokematch.screen import Terminal

    terminal = Terminal(stream, keys)
    return GameSession(board, terminal, level, random.Random(seed)), stream


@pytest.fixture(autouse=True)
def _work_in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_rejects_unknown_level():
    with pytest.raises(ValueError):
        make_session([["A", "A"]], level=4)


def test_draw_shows_tile_letters():
    session, stream = make_session([["A", "A"], ["B", "B"]])
    session.draw()
    output = stream.getvalue()
    assert "|   A   |" in output
    assert "|   B   |" in output


def test_cursor_moves_and_stops_at_edges():
    session, _ = make_session([["A", "A"], ["B", "B"]])
    assert session.move_cursor("d") is True
    assert session.cursor == Point(1, 0)
    assert session.move_cursor("d") is False
    assert session.cursor == Point(1, 0)
    assert session.move_cursor("w") is False
    assert session.cursor == Point(1, 0)
    assert session.move_cursor("s") is True
    assert session.cursor == Point(1, 1)
    assert session.move_cursor("x") is False
    assert session.cursor == Point(1, 1)


def test_select_matching_pair_clears_it():
    session, _ = make_session([["A", "A"], ["B", "B"]])
    assert session.select() is False
    assert session.selected == Point(0, 0)
    session.move_cursor("d")
    assert session.select() is True
    assert session.board.name_at(0, 0) == ""
    assert session.board.name_at(0, 1) == ""
    assert session.board.name_at(1, 0) == "B"
    assert session.selected is None


def test_select_different_letters_keeps_tiles():
    session, _ = make_session([["A", "B"], ["B", "A"]])
    session.select()
    session.move_cursor("d")
    assert session.select() is False
    assert session.board.name_at(0, 0) == "A"
    assert session.board.name_at(0, 1) == "B"
    assert session.selected is None


def test_select_same_tile_twice_does_nothing():
    session, _ = make_session([["A", "A"], ["B", "B"]])
    session.select()
    assert session.select() is False
    assert session.board.name_at(0, 0) == "A"


def test_hint_gives_matchable_pair_three_times_only():
    session, _ = make_session([["A", "A"], ["B", "B"]])
    for _ in range(3):
        pair = session.hint()
        first, second = pair
        assert session.board[first].name == session.board[second].name
        assert can_match(session.board, first, second)
    assert session.hint() is None
    assert session.hints_used == 3


def test_quit_key_ends_without_clearing():
    session, _ = make_session([["A", "A"], ["B", "B"]])
    assert session.handle_key("p") is False
    assert session.finished is False
    assert session.board.name_at(0, 0) == "A"


def test_play_to_the_end():
    keys = [" ", "d", " ", "s", " ", "a", " "]
    session, stream = make_session([["A", "A"], ["B", "B"]], keys)
    assert session.play() is True
    assert session.board.is_cleared()
    assert stream.getvalue().endswith("END GAME!!")


def test_play_quit_returns_false():
    session, _ = make_session([["A", "A"], ["B", "B"]], ["d", "p"])
    assert session.play() is False
    assert not session.board.is_cleared()


def test_play_shuffles_a_stuck_board():
    names = [["A", "B"], ["B", "A"]]
    session, _ = make_session(names, ["p"])
    assert not has_moves(session.board)
    session.play()
    assert has_moves(session.board)
    letters = Counter(p for p in (session.board[pt].name for pt in session.board.occupied()))
    assert letters == Counter({"A": 2, "B": 2})


def test_running_out_of_keys_raises():
    session, _ = make_session([["A", "A"], ["B", "B"]], ["d"])
    with pytest.raises(EOFError):
        session.play()


def _terminal(keys):
    from pokematch.screen import Terminal

    return Terminal(io.StringIO(), keys)


def test_run_exit_from_menu(tmp_path):
    path = tmp_path / "Leaderboard.txt"
    records = [PlayerRecord(name="Bo", rank=1, level=1, time=30)]
    save_leaderboard(path, records)
    before = path.read_text()
    result = run(_terminal(["A", "\r", "s", "s", " "]), path, random.Random(3))
    assert result is None
    assert path.read_text() == before


def test_run_quit_game_records_player_without_saving(tmp_path):
    path = tmp_path / "Leaderboard.txt"
    records = [
        PlayerRecord(name="Bo", rank=1, level=1, time=30),
        PlayerRecord(name="Cy", rank=2, level=2, time=45),
    ]
    save_leaderboard(path, records)
    keys = list("Ann") + ["\r", " ", " ", "p", "x"]
    result = run(_terminal(keys), path, random.Random(5))
    assert result.name == "Ann"
    assert result.level == 1
    assert result.rank == 3
    assert result.time >= 0
    assert load_leaderboard(path) == records


def test_run_without_leaderboard_file(tmp_path):
    path = tmp_path / "missing.txt"
    keys = list("Zed") + ["\r", " ", "s", " ", "p", "x"]
    result = run(_terminal(keys), path, random.Random(7))
    assert result.rank == 1
    assert result.level == 2
    assert not path.exists()


def test_name_entry_handles_backspace(tmp_path):
    path = tmp_path / "missing.txt"
    keys = ["A", "x", "\x7f", "l", "\n", " ", " ", "p", "x"]
    result = run(_terminal(keys), path, random.Random(2))
    assert result.name == "Al"


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2