import pytest

from gameboy.scores import (
    MAX_PLAYERS,
    ScoreEntry,
    ScoreKeeper,
    highest_score,
    leaderboard,
    read_scores,
    save_score,
)


@pytest.fixture
def table(tmp_path):
    return tmp_path / "scores.txt"


def test_keeper_increase_and_bonus():
    keeper = ScoreKeeper()
    keeper.increase()
    assert keeper.value == 10
    keeper.add_bonus()
    assert keeper.value == 40


def test_keeper_reset():
    keeper = ScoreKeeper(70)
    keeper.reset()
    assert keeper.value == ScoreKeeper().value


def test_read_scores_skips_malformed_lines(table):
    table.write_text("alice 50\n\nbroken\nbob notanumber\ncarol 7\n")
    assert read_scores(table) == [ScoreEntry("alice", 50), ScoreEntry("carol", 7)]


def test_read_scores_missing_file(table):
    with pytest.raises(FileNotFoundError):
        read_scores(table)


def test_read_scores_limit(table):
    table.write_text("".join(f"p{i} {i}\n" for i in range(MAX_PLAYERS + 5)))
    entries = read_scores(table)
    assert len(entries) == MAX_PLAYERS
    assert entries[-1] == ScoreEntry(f"p{MAX_PLAYERS - 1}", MAX_PLAYERS - 1)


def test_highest_score(table):
    table.write_text("alice 50\nbob 70\nalice 90\n")
    assert highest_score(table, "alice") == 90
    assert highest_score(table, "bob") == 70
    assert highest_score(table, "nobody") == 0


def test_highest_score_missing_file(table):
    assert highest_score(table, "alice") == 0


def test_save_score_creates_file(table):
    save_score(table, "alice", 40)
    assert table.read_text() == "alice 40\n"


def test_save_score_keeps_only_higher(table):
    table.write_text("alice 50\nbob 70\n")
    save_score(table, "alice", 20)
    assert read_scores(table) == [ScoreEntry("alice", 50), ScoreEntry("bob", 70)]
    save_score(table, "bob", 80)
    assert read_scores(table) == [ScoreEntry("alice", 50), ScoreEntry("bob", 80)]


def test_save_score_appends_new_player(table):
    table.write_text("alice 50\n")
    save_score(table, "dave", 30)
    assert [e.name for e in read_scores(table)] == ["alice", "dave"]


def test_save_score_full_table_drops_new_player(table):
    table.write_text("".join(f"p{i} {i}\n" for i in range(MAX_PLAYERS)))
    save_score(table, "late", 1000)
    names = [e.name for e in read_scores(table)]
    assert "late" not in names
    assert len(names) == MAX_PLAYERS


def test_leaderboard_merges_and_sorts(table):
    table.write_text("alice 50\nbob 70\nalice 90\ncarol 70\n")
    ranked = leaderboard(table)
    assert ranked == [
        ScoreEntry("alice", 90),
        ScoreEntry("bob", 70),
        ScoreEntry("carol", 70),
    ]
    scores = [entry.score for entry in ranked]
    assert scores == sorted(scores, reverse=True)


def test_leaderboard_missing_file(table):
    with pytest.raises(FileNotFoundError):
        leaderboard(table)