import datetime as dt
from unittest import mock

import pytest

from termwordle.game import (
    Color,
    Game,
    GameInfo,
    Letter,
    Row,
    fetch_game_info,
    load_word_list,
)

WORDS = frozenset({"crane", "slate", "abbey", "babes", "hello", "lllll"})


def make_game(word="crane"):
    return Game.from_info(GameInfo(number=42, word=word, date_string="2022-08-01"))


def play(game, guess):
    for char in guess:
        game.add_char(char)
    game.submit(WORDS)


def colors_for(word, guess):
    row = Row([Letter(c) for c in guess])
    row.set_colors(word)
    return [letter.color for letter in row.letters]


def test_exact_guess_is_all_green():
    assert colors_for("crane", "CRANE") == [Color.GREEN] * 5


def test_repeated_letters_are_yellow_once_each():
    assert colors_for("abbey", "BABES") == [
        Color.YELLOW,
        Color.YELLOW,
        Color.GREEN,
        Color.GREEN,
        Color.GRAY,
    ]


def test_extra_copies_are_gray():
    assert colors_for("hello", "LLLLL") == [
        Color.GRAY,
        Color.GRAY,
        Color.GREEN,
        Color.GREEN,
        Color.GRAY,
    ]


def test_colouring_ignores_case():
    assert colors_for("CRANE", "crane") == [Color.GREEN] * 5


def test_color_order():
    colors = colors_for("abbey", "BABES")
    assert max(colors) == Color.GREEN
    assert min(colors) == Color.GRAY
    assert sorted(colors) == [
        Color.GRAY,
        Color.YELLOW,
        Color.YELLOW,
        Color.GREEN,
        Color.GREEN,
    ]


def test_new_game_is_empty():
    game = make_game()
    assert game.index == (0, 0)
    assert all(l.char == " " and l.color is None for r in game.grid for l in r.letters)
    assert not game.has_finished()
    assert game.won_in() is None


def test_add_char_stops_at_five():
    game = make_game()
    for char in "CRANES":
        game.add_char(char)
    assert game.index == (0, 5)
    assert "".join(l.char for l in game.grid[0].letters) == "CRANE"


def test_add_char_rejects_multiple_characters():
    with pytest.raises(ValueError):
        make_game().add_char("AB")


def test_backspace():
    game = make_game()
    game.add_char("C")
    game.add_char("R")
    game.backspace()
    assert game.index == (0, 1)
    assert game.grid[0].letters[1].char == " "
    game.backspace()
    game.backspace()
    assert game.index == (0, 0)


def test_submit_incomplete_row_does_nothing():
    game = make_game()
    for char in "CRA":
        game.add_char(char)
    game.submit(WORDS)
    assert game.index == (0, 3)
    assert all(l.color is None for l in game.grid[0].letters)


def test_submit_unknown_word_does_nothing():
    game = make_game()
    play(game, "ZZZZZ")
    assert game.index == (0, 5)
    assert all(l.color is None for l in game.grid[0].letters)


def test_submit_valid_word_scores_row():
    game = make_game()
    play(game, "SLATE")
    assert game.index == (1, 0)
    assert [l.color for l in game.grid[0].letters] == [
        Color.GRAY,
        Color.GRAY,
        Color.GREEN,
        Color.GRAY,
        Color.GREEN,
    ]
    assert not game.has_finished()


def test_winning_finishes_game():
    game = make_game()
    play(game, "CRANE")
    assert game.won_in() == 1
    assert game.has_finished()
    game.add_char("X")
    game.backspace()
    assert game.index == (1, 0)
    assert game.grid[1].letters[0].char == " "


def test_won_in_third_guess():
    game = make_game()
    play(game, "SLATE")
    play(game, "SLATE")
    play(game, "CRANE")
    assert game.won_in() == 3


def test_six_misses_lose():
    game = make_game()
    for _ in range(6):
        play(game, "SLATE")
    assert game.has_finished()
    assert game.won_in() is None
    assert game.index == (6, 0)


def test_json_round_trip():
    game = make_game()
    play(game, "SLATE")
    game.add_char("C")
    assert Game.from_json(game.to_json()) == game


def test_from_json_rejects_bad_grid():
    data = make_game().to_json()
    data["grid"] = data["grid"][:3]
    with pytest.raises(ValueError):
        Game.from_json(data)


def test_copy_is_independent():
    game = make_game()
    clone = game.copy()
    clone.add_char("X")
    assert game.index == (0, 0)
    assert game.grid[0].letters[0].char == " "
    assert clone.index == (0, 1)


def test_game_info_from_service_json():
    info = GameInfo.from_json(
        {"id": 1, "solution": "crane", "print_date": "2022-08-01", "days_since_launch": 408}
    )
    assert info == GameInfo(number=408, word="crane", date_string="2022-08-01")
    assert GameInfo.from_json(info.to_json()) == info


def test_game_info_number_defaults_to_zero():
    info = GameInfo.from_json({"solution": "crane", "print_date": "2022-08-01"})
    assert info.number == 0


def test_game_info_missing_solution():
    with pytest.raises(ValueError):
        GameInfo.from_json({"print_date": "2022-08-01"})


def test_load_word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("crane\r\nslate\n", encoding="utf-8")
    words = load_word_list(path)
    assert words == frozenset({"crane", "slate"})


def test_fetch_game_info_builds_url():
    with mock.patch("termwordle.game.requests.get") as get:
        get.return_value.json.return_value = {
            "solution": "crane",
            "print_date": "2022-08-01",
            "days_since_launch": 408,
        }
        info = fetch_game_info(dt.date(2022, 8, 1))
    assert get.call_args.args[0].endswith("/2022-08-01.json")
    assert info.word == "crane"
    assert info.number == 408