"""The console: ask for the player's name, then run the chosen game."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from gameboy.hangman import Hangman
from gameboy.menu import Menu, show_instructions, show_leaderboard
from gameboy.player import Player
from gameboy.scores import ScoreKeeper, save_score
from gameboy.snake import SnakeGame
from gameboy.sound import SoundTrack
from gameboy.wordle import Wordle

__all__ = ["GameBoy", "main"]

log = logging.getLogger(__name__)

WINDOW_SIZE = (800, 800)
ARIAL_FONT_FILE = "Arial.ttf"
TNR_FONT_FILE = "TNR.ttf"
NAME_IMAGE = "namer.jpg"
MENU_IMAGE = "nintendo.jpg"
MENU_MUSIC = "menu.mp3"
PLAYER_FILE = "player.txt"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
MAGENTA = (255, 0, 255)
YELLOW = (255, 255, 0)

_ENTER_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def _font_file(name: str) -> Optional[Path]:
    path = Path(name)
    if path.is_file():
        return path
    log.warning("Failed to load %s!", name)
    return None


def _font(source: Optional[Path], size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None if source is None else str(source), size)


def _load_image(name: str) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(name)
    except (pygame.error, FileNotFoundError, OSError) as exc:
        log.warning("Failed to load %s: %s", name, exc)
        return None


class GameBoy:
    """The main console holding the player, the session score and the menu."""

    def __init__(self, scores_path: Union[str, Path]) -> None:
        self.scores_path = Path(scores_path)
        self.scores = ScoreKeeper()
        self.menu = Menu()
        self.highest_score = 0
        self.player: Optional[Player] = None
        self.arial_font = _font_file(ARIAL_FONT_FILE)
        self.tnr_font = _font_file(TNR_FONT_FILE)

    def update_highest_score(self, score: int) -> None:
        """Remember ``score`` if it beats the best of this session."""
        if score > self.highest_score:
            self.highest_score = score

    def game_over(self, score: int) -> None:
        """Report the score of a finished game and record it for the player."""
        print(f"Game Over! Your score: {score}")
        self.update_highest_score(score)
        print(f"Highest score: {self.highest_score}")
        if self.player is not None:
            save_score(self.scores_path, self.player.name, score)

    def ask_player_name(self, screen: pygame.Surface) -> Optional[Player]:
        """Let the player type a name and confirm it with Enter.

        The new profile is saved to ``player.txt`` and returned. Returns
        None when the window is closed first.
        """
        background = _load_image(NAME_IMAGE)
        prompt = _font(self.tnr_font, 32).render("Enter your name: ", True, BLACK)
        name_font = _font(self.tnr_font, 28)
        pygame.key.start_text_input()
        name = ""
        clock = pygame.time.Clock()

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return None
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_BACKSPACE:
                        name = name[:-1]
                    elif event.key in _ENTER_KEYS:
                        self.player = Player(name, 0)
                        try:
                            self.player.save(PLAYER_FILE)
                        except OSError as exc:
                            log.error("Unable to open file for writing: %s: %s", PLAYER_FILE, exc)
                        return self.player
                elif event.type == pygame.TEXTINPUT:
                    name += "".join(char for char in event.text if ord(char) < 128)

            screen.fill(WHITE)
            if background is not None:
                screen.blit(background, (0, 0))
            screen.blit(prompt, (50, 50))
            screen.blit(name_font.render(name, True, BLACK), (50, 100))
            pygame.display.flip()
            clock.tick(60)

    def _open_window(self) -> pygame.Surface:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Main Menu")
        return screen

    def _play(self, selection: int) -> None:
        games = {0: Hangman, 1: SnakeGame, 2: Wordle}
        games[selection](self.scores).start()
        self.game_over(self.scores.value)

    def start(self) -> None:
        """Run the main menu until Exit is chosen or the window closes."""
        pygame.init()
        screen = self._open_window()

        music = SoundTrack(MENU_MUSIC, True)
        music.play()

        if self.ask_player_name(screen) is None:
            music.stop()
            return

        background = _load_image(MENU_IMAGE)
        if background is None:
            music.stop()
            return

        welcome = _font(self.tnr_font, 30).render("Welcome to the GAME BOY!", True, MAGENTA)
        question = _font(self.tnr_font, 20).render("Which game do you want to play?", True, MAGENTA)
        option_font = _font(self.tnr_font, 25)
        clock = pygame.time.Clock()

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    music.stop()
                    return
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_UP:
                    self.menu.navigate(-1)
                elif event.key == pygame.K_DOWN:
                    self.menu.navigate(1)
                elif event.key in _ENTER_KEYS:
                    selection = self.menu.selected
                    if selection in (0, 1, 2):
                        music.stop()
                        self._play(selection)
                        screen = self._open_window()
                    elif selection == 3:
                        if not show_instructions(screen, self.tnr_font, self.arial_font):
                            music.stop()
                            return
                    elif selection == 4:
                        if not show_leaderboard(screen, self.tnr_font, self.scores_path):
                            music.stop()
                            return
                    elif selection == 5:
                        print("Exiting")
                        music.stop()
                        return

            screen.fill(BLACK)
            music.resume()
            screen.blit(background, (0, 0))
            screen.blit(welcome, (50, 50))
            screen.blit(question, (50, 100))
            for index, text in enumerate(Menu.OPTIONS):
                colour = YELLOW if index == self.menu.selected else WHITE
                screen.blit(option_font.render(text, True, colour), (100, 200 + index * 50))
            pygame.display.flip()
            clock.tick(60)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the console."""
    parser = argparse.ArgumentParser(prog="gameboy", description="A console of small games.")
    parser.add_argument("--scores", default="scores.txt", help="the score table file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    try:
        GameBoy(args.scores).start()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())