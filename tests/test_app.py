import pygame
import pytest

from gameboy.app import GameBoy, main
from gameboy.player import Player
from gameboy.scores import ScoreEntry, highest_score, read_scores


@pytest.fixture
def screen(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.display.init()
    pygame.font.init()
    surface = pygame.display.set_mode((200, 200))
    pygame.event.clear()
    yield surface
    pygame.display.quit()


def test_update_highest_score_keeps_maximum(tmp_path):
    console = GameBoy(tmp_path / "scores.txt")
    console.update_highest_score(5)
    console.update_highest_score(3)
    assert console.highest_score == 5
    console.update_highest_score(9)
    assert console.highest_score == 9


def test_new_console_starts_without_player(tmp_path):
    console = GameBoy(tmp_path / "scores.txt")
    assert console.player is None
    assert console.highest_score == 0
    assert console.scores.value == 0


def test_game_over_reports_scores(tmp_path, capsys):
    console = GameBoy(tmp_path / "scores.txt")
    console.game_over(40)
    out = capsys.readouterr().out
    assert "Game Over! Your score: 40" in out
    assert "Highest score: 40" in out


def test_game_over_without_player_writes_nothing(tmp_path):
    path = tmp_path / "scores.txt"
    console = GameBoy(path)
    console.game_over(20)
    assert not path.exists()


def test_game_over_records_player_score(tmp_path):
    path = tmp_path / "scores.txt"
    console = GameBoy(path)
    console.player = Player("ann", 0)
    console.game_over(40)
    assert read_scores(path) == [ScoreEntry("ann", 40)]


def test_game_over_keeps_higher_recorded_score(tmp_path):
    path = tmp_path / "scores.txt"
    path.write_text("ann 70\n", encoding="utf-8")
    console = GameBoy(path)
    console.player = Player("ann", 0)
    console.game_over(40)
    assert highest_score(path, "ann") == 70
    assert console.highest_score == 40


def test_ask_player_name_builds_and_saves_profile(tmp_path, monkeypatch, screen):
    monkeypatch.chdir(tmp_path)
    for char in "abc":
        pygame.event.post(pygame.event.Event(pygame.TEXTINPUT, text=char))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKSPACE))
    pygame.event.post(pygame.event.Event(pygame.TEXTINPUT, text="x"))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))

    console = GameBoy(tmp_path / "scores.txt")
    player = console.ask_player_name(screen)

    assert player == Player("abx", 0)
    assert console.player == player
    assert Player.load(tmp_path / "player.txt") == Player("abx", 0)


def test_ask_player_name_returns_none_when_closed(tmp_path, monkeypatch, screen):
    monkeypatch.chdir(tmp_path)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    console = GameBoy(tmp_path / "scores.txt")
    assert console.ask_player_name(screen) is None
    assert console.player is None
    assert not (tmp_path / "player.txt").exists()


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0