import pytest

from termwordle.game import Game, GameInfo
from termwordle.save import SaveData, default_save_path
from termwordle.stats import compute_stats

WORDS = frozenset({"crane", "slate"})


def make_game(number, guesses=()):
    game = Game.from_info(GameInfo(number=number, word="crane", date_string="2022-08-01"))
    for guess in guesses:
        for char in guess:
            game.add_char(char)
        game.submit(WORDS)
    return game


def test_save_and_load():
    data = SaveData()
    game = make_game(7, ["SLATE"])
    data.save(game)
    assert data.load(7) == game


def test_load_missing_is_none():
    assert SaveData().load(3) is None


def test_save_stores_a_copy():
    data = SaveData()
    game = make_game(7)
    data.save(game)
    game.add_char("C")
    assert data.load(7).index == (0, 0)


def test_save_replaces_same_number():
    data = SaveData()
    data.save(make_game(7))
    data.save(make_game(7, ["SLATE"]))
    assert len(list(data.games())) == 1
    assert data.load(7).index == (1, 0)


def test_file_round_trip(tmp_path):
    path = tmp_path / "nested" / "save.dat"
    data = SaveData({1: make_game(1, ["CRANE"]), 2: make_game(2, ["SLATE"])})
    data.save_to_file(path)
    loaded = SaveData.from_file(path)
    assert loaded.load(1) == data.load(1)
    assert loaded.load(2) == data.load(2)
    assert loaded.path == path


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        SaveData.from_file(tmp_path / "absent.dat")


def test_from_file_corrupt(tmp_path):
    path = tmp_path / "save.dat"
    path.write_bytes(b"\x00\x01garbage")
    with pytest.raises(ValueError):
        SaveData.from_file(path)


def test_from_file_wrong_structure(tmp_path):
    path = tmp_path / "save.dat"
    path.write_text('{"games": {"1": {"grid": []}}}', encoding="utf-8")
    with pytest.raises(ValueError):
        SaveData.from_file(path)


def test_context_manager_saves_on_exit(tmp_path):
    path = tmp_path / "save.dat"
    SaveData().save_to_file(path)
    with SaveData.from_file(path) as data:
        data.save(make_game(5, ["CRANE"]))
    assert SaveData.from_file(path).load(5).won_in() == 1


def test_stats_match_games():
    data = SaveData({1: make_game(1, ["CRANE"]), 2: make_game(2, ["SLATE"])})
    assert data.stats() == compute_stats(data.games())
    assert data.stats().attempted == 1


def test_default_save_path_file_name():
    assert default_save_path().name == "save.dat"