"""Hangman: guess a hidden word one letter at a time."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

import pygame

from gameboy.scores import ScoreKeeper
from gameboy.sound import SoundTrack

__all__ = [
    "WordEntry",
    "ENTRIES",
    "FIGURE_IMAGES",
    "MAX_MISSES",
    "random_entry",
    "HangmanRound",
    "Hangman",
]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordEntry:
    """A word to guess and the category shown as a hint."""

    word: str
    category: str


_WORDS = (
    "apple", "banana", "orange", "grape", "strawberry",
    "cat", "dog", "elephant", "lion", "tiger",
    "house", "car", "tree", "flower", "sun",
    "happy", "sad", "angry", "laugh", "red",
    "blue", "green", "yellow", "purple", "two",
    "three", "four", "five", "ocean", "river",
    "mountain", "desert", "forest", "computer", "phone",
    "keyboard", "mouse", "screen", "book", "pen",
    "pencil", "paper", "notebook", "music", "dance",
    "sing", "paint", "draw", "pizza", "burger",
    "pasta", "cake", "icecream", "school", "teacher",
    "student", "class", "homework", "friend", "family",
    "winter", "summer", "spring", "fall", "season",
    "watch", "clock", "time", "hour", "minute",
    "run", "jump", "swim", "walk", "crawl",
    "sleep", "eat", "drink", "play", "work",
    "star", "moon", "planet", "space", "rocket",
    "fish", "bird", "turtle", "snake", "elephant",
    "hat", "shoe", "shirt", "pants", "socks",
    "happy", "sad", "angry", "laugh", "cry",
)

_CATEGORIES = (
    "Fruits", "Fruits", "Fruits", "Fruits", "Fruits",
    "Animals", "Animals", "Animals", "Animals", "Animals",
    "Household/Places", "Household/Places", "Household/Places", "Household/Places", "Nature",
    "Emotions", "Emotions", "Emotions", "Emotions", "Colors",
    "Colors", "Colors", "Colors", "Colors", "Numbers",
    "Numbers", "Numbers", "Numbers", "Nature", "Nature",
    "Nature", "Nature", "Technology", "Technology", "Technology",
    "Technology", "Technology", "Stationery", "Stationery", "Stationery",
    "Stationery", "Stationery", "Art", "Art", "Art",
    "Art", "Art", "Food", "Food", "Food",
    "Food", "Food", "School", "School", "School",
    "School", "Family", "Family", "Seasons", "Seasons",
    "Seasons", "Seasons", "Seasons", "Time", "Time",
    "Time", "Time", "Time", "Actions", "Actions",
    "Actions", "Actions", "Actions", "Actions", "Actions",
    "Actions", "Actions", "Actions", "Actions", "Space",
    "Space", "Space", "Space", "Space", "Animals",
    "Animals", "Animals", "Animals", "Animals", "Clothing",
    "Clothing", "Clothing", "Clothing", "Clothing", "Emotions",
    "Emotions", "Emotions", "Emotions", "Emotions", "Emotions",
)

ENTRIES: tuple[WordEntry, ...] = tuple(
    WordEntry(word, category) for word, category in zip(_WORDS, _CATEGORIES)
)

START_IMAGE = "man1.png"
WIN_IMAGE = "man9.png"
LOSS_IMAGE = "man8.png"
FIGURE_IMAGES = (
    "man2.png", "man2.png", "man3.png", "man4.png",
    "man5.png", "man6.png", "man7.png", "man8.png",
)

MAX_MISSES = 6
_ATTEMPT_CAP = 7


def random_entry(rng: Optional[random.Random] = None) -> WordEntry:
    """Pick one of the hundred words at random."""
    chooser = rng if rng is not None else random
    return ENTRIES[chooser.randrange(len(ENTRIES))]


@dataclass
class HangmanRound:
    """The state of guessing one word."""

    word: str
    category: str
    guessed: str = field(default="", init=False)
    attempts: int = field(default=0, init=False)
    _revealed: list[bool] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self._revealed = [False] * len(self.word)

    @classmethod
    def from_entry(cls, entry: WordEntry) -> "HangmanRound":
        return cls(entry.word, entry.category)

    @property
    def masked(self) -> str:
        """The word with unguessed letters shown as underscores."""
        return "".join(c if shown else "_" for c, shown in zip(self.word, self._revealed))

    @property
    def attempts_left(self) -> int:
        return MAX_MISSES - self.attempts

    @property
    def won(self) -> bool:
        return self.masked == self.word

    @property
    def lost(self) -> bool:
        return not self.won and self.attempts >= MAX_MISSES

    @property
    def over(self) -> bool:
        return self.won or self.lost

    def guess(self, letter: str) -> bool:
        """Guess one letter and return whether the word contains it.

        Case is ignored. A repeated guess changes nothing; a guess after
        the round is over changes nothing and returns False. Anything but
        a single ASCII letter raises ``ValueError``.
        """
        if len(letter) != 1 or not ("a" <= letter.lower() <= "z"):
            raise ValueError(f"not a letter: {letter!r}")
        letter = letter.lower()
        if self.over:
            return False
        if letter in self.guessed:
            return letter in self.word
        self.guessed += letter
        hit = False
        for index, char in enumerate(self.word):
            if char == letter and not self._revealed[index]:
                self._revealed[index] = True
                hit = True
        if not hit and self.attempts < _ATTEMPT_CAP:
            self.attempts += 1
        return hit

    def figure_image(self) -> str:
        """The image file showing the gallows for the current state."""
        if self.won:
            return WIN_IMAGE
        if self.lost:
            return LOSS_IMAGE
        if self.attempts == 0:
            return START_IMAGE
        return FIGURE_IMAGES[self.attempts]


WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
MAGENTA = (255, 0, 255)

FONT_FILE = "Arial.ttf"
FIGURE_POSITION = (400, 100)


class Hangman:
    """The Hangman game window."""

    WINDOW_SIZE = (950, 800)

    def __init__(self, scores: ScoreKeeper) -> None:
        self.scores = scores
        self._rng = random.Random()
        self._images: dict[str, pygame.Surface] = {}
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}

    def _image(self, name: str) -> Optional[pygame.Surface]:
        if name not in self._images:
            try:
                self._images[name] = pygame.image.load(name)
            except (pygame.error, FileNotFoundError, OSError) as exc:
                log.warning("Failed to load %s: %s", name, exc)
                return None
        return self._images[name]

    def _font(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            font = pygame.font.Font(FONT_FILE, size)
            font.set_bold(bold)
            self._fonts[key] = font
        return self._fonts[key]

    def _text(self, text: str, size: int, colour, bold: bool = False) -> pygame.Surface:
        return self._font(size, bold).render(text, True, colour)

    def _new_round(self) -> HangmanRound:
        current = HangmanRound.from_entry(random_entry(self._rng))
        log.debug("Hangman word: %s", current.word)
        return current

    def start(self) -> None:
        """Run the game until Backspace is pressed or the window closes."""
        pygame.init()
        screen = pygame.display.set_mode(self.WINDOW_SIZE)
        pygame.display.set_caption("Hangman Game")

        music = SoundTrack("Hangman Music.ogg", True)
        music.play()
        hanged = SoundTrack("Hanged.ogg", False)
        won_sound = SoundTrack("manwon.ogg", False)

        try:
            self._font(30)
        except (pygame.error, FileNotFoundError, OSError) as exc:
            log.warning("Failed to load %s: %s", FONT_FILE, exc)
            return
        if self._image(START_IMAGE) is None:
            return

        current = self._new_round()
        paused = False
        clock = pygame.time.Clock()

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    music.stop()
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        paused = not paused
                    elif current.over and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        music.play()
                        current = self._new_round()
                        if self._image(START_IMAGE) is None:
                            return
                    if event.key == pygame.K_BACKSPACE:
                        screen.fill(WHITE)
                        screen.blit(self._text("Exiting Hangman", 30, RED), (50, 500))
                        screen.blit(self._text(f"Score: {self.scores.value}", 30, GREEN), (50, 400))
                        pygame.display.flip()
                        pygame.time.wait(2000)
                        music.stop()
                        return
                elif event.type == pygame.TEXTINPUT and not paused and not current.over:
                    for char in event.text:
                        if not ("a" <= char.lower() <= "z"):
                            continue
                        current.guess(char)
                        if self._image(current.figure_image()) is None:
                            return
                        if current.won:
                            music.stop()
                            won_sound.play()
                            self.scores.increase()
                        elif current.lost:
                            music.stop()
                            hanged.play()
                        if current.over:
                            break

            screen.fill(WHITE)
            if paused:
                screen.blit(self._text("Game Paused. Press 'Esc' to resume.", 50, BLUE), (50, 400))
            else:
                screen.blit(self._text("Welcome to Hangman!", 30, MAGENTA, bold=True), (50, 50))
                screen.blit(self._text("Guess the word or", 20, MAGENTA), (50, 100))
                screen.blit(self._text("Get ready to be HANGED!", 20, RED), (50, 150))
                screen.blit(self._text(f"Word: {current.masked}", 40, BLACK), (50, 200))
                screen.blit(self._text(f"Hint: {current.category}", 30, BLUE), (50, 450))
                screen.blit(self._text(f"Attempts left: {current.attempts_left}", 30, BLUE), (50, 300))
                screen.blit(self._text(f"Guessed letters: {current.guessed}", 30, BLUE), (50, 350))
                screen.blit(self._text("Press Esc to pause", 20, BLUE), (50, 650))
                figure = self._image(current.figure_image())
                if figure is not None:
                    screen.blit(figure, FIGURE_POSITION)
                screen.blit(self._text(f"Score: {self.scores.value}", 30, GREEN), (50, 400))
            if current.over:
                if current.won:
                    result = "Congratulations, you guessed the word!"
                else:
                    result = f"You lost! The word was: {current.word}"
                screen.blit(self._text(result, 30, RED), (50, 500))
                screen.blit(self._text("Press Enter to play again", 20, GREEN), (50, 550))
            pygame.display.flip()
            clock.tick(60)