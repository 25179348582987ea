import pytest

from gameboy.player import Player


def test_round_trip(tmp_path):
    path = tmp_path / "player.txt"
    Player("Ada Lovelace", 42).save(path)
    assert Player.load(path) == Player("Ada Lovelace", 42)


def test_file_layout(tmp_path):
    path = tmp_path / "player.txt"
    Player("alice", 15).save(path)
    assert path.read_text() == "alice\n15\n"


def test_default_score():
    assert Player("bob").score == 0


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Player.load(tmp_path / "absent.txt")


def test_load_bad_score_is_zero(tmp_path):
    path = tmp_path / "player.txt"
    path.write_text("carol\nlots\n")
    assert Player.load(path) == Player("carol", 0)


def test_load_name_only(tmp_path):
    path = tmp_path / "player.txt"
    path.write_text("dave\n")
    loaded = Player.load(path)
    assert loaded.name == "dave"
    assert loaded.score == 0