import io

import pytest

from pokematch.leaderboard import PlayerRecord
from pokematch.menu import (
    choose_level,
    draw_button,
    print_background,
    print_banner,
    print_end_banner,
    select,
)
from pokematch.screen import Terminal


def make_terminal(keys=()):
    stream = io.StringIO()
    return Terminal(stream, keys), stream


def cursor_text(x, y):
    terminal, stream = make_terminal()
    terminal.goto(x, y)
    return stream.getvalue()


def test_print_banner_draws_title_art():
    terminal, stream = make_terminal()
    print_banner(terminal)
    text = stream.getvalue()
    assert text.startswith("\n" * 8)
    assert "|_|" in text
    assert text.count("\t" * 10) == 6


def test_print_end_banner_draws_all_rows():
    terminal, stream = make_terminal()
    print_end_banner(terminal)
    text = stream.getvalue()
    assert "(" in text and "_" in text
    assert text.count("\t" * 10) == 6


def test_print_background_draws_file_lines(tmp_path):
    (tmp_path / "Background2.txt").write_text("first row\nsecond row\n", encoding="utf-8")
    terminal, stream = make_terminal()
    print_background(terminal, 2, tmp_path)
    text = stream.getvalue()
    assert "first row" in text
    assert "second row" in text
    assert cursor_text(10, 10) in text
    assert cursor_text(10, 11) in text


def test_print_background_unknown_level(tmp_path):
    terminal, _ = make_terminal()
    with pytest.raises(ValueError):
        print_background(terminal, 4, tmp_path)


def test_print_background_missing_file(tmp_path):
    terminal, _ = make_terminal()
    with pytest.raises(FileNotFoundError):
        print_background(terminal, 1, tmp_path)


def test_draw_button_places_label_inside_box():
    terminal, stream = make_terminal()
    draw_button(terminal, "MODE", 1)
    text = stream.getvalue()
    assert text.endswith("MODE" + _reset_colour())
    assert cursor_text(102, 27) in text
    assert cursor_text(88, 25) in text


def _reset_colour():
    from pokematch.screen import Color

    terminal, stream = make_terminal()
    terminal.set_color(Color.BLACK, Color.WHITE)
    return stream.getvalue()


def test_draw_button_rejects_negative_slot():
    terminal, _ = make_terminal()
    with pytest.raises(ValueError):
        draw_button(terminal, "MODE", -1)


@pytest.mark.parametrize(
    "keys, expected",
    [
        ([" "], 0),
        (["s", " "], 1),
        (["w", " "], 0),
        (["s", "s", "s", "s", " "], 2),
        (["s", "s", "w", " "], 1),
        (["x", "s", "q", " "], 1),
    ],
)
def test_select_follows_keys(keys, expected):
    terminal, _ = make_terminal(keys)
    assert select(terminal, ["A", "B", "C"]) == expected


def test_select_beeps_on_choice():
    terminal, stream = make_terminal([" "])
    select(terminal, ["ONLY"])
    assert "\a" in stream.getvalue()


def test_select_requires_entries():
    terminal, _ = make_terminal([" "])
    with pytest.raises(ValueError):
        select(terminal, [])


def test_select_runs_out_of_keys():
    terminal, _ = make_terminal(["s"])
    with pytest.raises(EOFError):
        select(terminal, ["A", "B"])


def test_choose_level_picks_level_two():
    terminal, _ = make_terminal([" ", "s", " "])
    assert choose_level(terminal, []) == 2


def test_choose_level_exit_returns_none():
    terminal, _ = make_terminal(["s", "s", " "])
    assert choose_level(terminal, []) is None


def test_choose_level_return_goes_back_to_main_menu():
    terminal, _ = make_terminal([" ", "s", "s", "s", " ", " ", "s", "s", " "])
    assert choose_level(terminal, []) == 3


def test_choose_level_shows_leaderboard_then_continues():
    records = [PlayerRecord(name="Ann", rank=1, level=1, time=30)]
    terminal, stream = make_terminal(["s", " ", "x", " ", " "])
    assert choose_level(terminal, records) == 1
    text = stream.getvalue()
    assert "Ann" in text
    assert "RETURN" in text