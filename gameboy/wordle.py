"""Wordle: guess a five-letter word in six tries."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import pygame

from gameboy.scores import ScoreKeeper
from gameboy.sound import SoundTrack

__all__ = [
    "WORDS",
    "ROWS",
    "COLUMNS",
    "KEYBOARD_ROWS",
    "LetterState",
    "random_word",
    "score_guess",
    "WordleRound",
    "Wordle",
]

log = logging.getLogger(__name__)

WORDS = (
    "apple", "grape", "berry", "lemon", "peach", "mango", "melon", "plums", "guava", "cherry",
    "toast", "bread", "pizza", "pasta", "tacos",
    "chair", "table", "couch", "stool", "shelf", "cloud", "storm", "sunny", "windy", "snowy",
    "brush", "paint", "craft", "write", "draws",
    "brick", "steel", "glass", "stone", "paper", "horse", "zebra", "snake", "mouse", "tiger",
    "apple", "peach", "melon", "guava", "plums",
    "swims", "jumps", "dance", "plays", "sings", "sharp", "round", "blunt", "quick", "smart",
    "earth", "space", "alien", "orbit", "comet",
    "start", "begin", "smile", "happy", "laugh", "shine", "glows", "twist", "picks", "throw",
    "trust", "brave", "clean", "great", "proud",
    "plane", "truck", "train", "coach", "scoot", "build", "house", "shack", "lodge", "tower",
    "robot", "tools", "wires", "chips", "board",
)

ROWS = 6
COLUMNS = 5
KEYBOARD_ROWS = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")


class LetterState(Enum):
    """How a guessed letter compares with the answer."""

    ABSENT = "absent"
    PRESENT = "present"
    CORRECT = "correct"


def random_word(rng: Optional[random.Random] = None) -> str:
    """Pick one of the hundred dictionary words at random."""
    chooser = rng if rng is not None else random
    return WORDS[chooser.randrange(len(WORDS))]


def score_guess(guess: str, answer: str) -> tuple[LetterState, ...]:
    """Colour each letter of ``guess`` against ``answer``.

    A letter in its place is correct. Otherwise it is present when it
    stands at another position of the answer, within the guess's length,
    that has not already been matched by an earlier letter of the guess.
    Letters are compared exactly, case included.
    """
    if len(answer) < len(guess):
        raise ValueError(f"answer {answer!r} is shorter than guess {guess!r}")
    width = len(guess)
    matched = [False] * width
    states: list[LetterState] = []
    for index, letter in enumerate(guess):
        if letter == answer[index] and not matched[index]:
            matched[index] = True
            states.append(LetterState.CORRECT)
            continue
        found = any(
            letter == answer[other] and other != index and not matched[other]
            for other in range(width)
        )
        states.append(LetterState.PRESENT if found and not matched[index] else LetterState.ABSENT)
    return tuple(states)


@dataclass
class WordleRound:
    """The state of guessing one word."""

    answer: str
    guesses: list[str] = field(default_factory=lambda: [""] * ROWS, init=False)
    results: list[Optional[tuple[LetterState, ...]]] = field(
        default_factory=lambda: [None] * ROWS, init=False)
    row: int = field(default=0, init=False)
    won: bool = field(default=False, init=False)
    over: bool = field(default=False, init=False)
    used_keys: set[str] = field(default_factory=set, init=False)

    def type_letter(self, letter: str) -> Optional[tuple[LetterState, ...]]:
        """Add a letter to the current row.

        When the row fills up it is scored and the states are returned;
        otherwise None. Letters typed after the round is over are ignored.
        Anything but a single ASCII letter raises ``ValueError``.
        """
        if len(letter) != 1 or not ("a" <= letter.lower() <= "z"):
            raise ValueError(f"not a letter: {letter!r}")
        if self.over:
            return None
        self.guesses[self.row] += letter
        if len(self.guesses[self.row]) != COLUMNS:
            return None
        result = score_guess(self.guesses[self.row], self.answer)
        self.results[self.row] = result
        if all(state is LetterState.CORRECT for state in result):
            self.won = True
            self.over = True
        elif self.row == ROWS - 1:
            self.over = True
        else:
            self.row += 1
        return result

    def mark_key(self, key: str) -> bool:
        """Light up the on-screen key for ``key``; return whether one exists."""
        if len(key) != 1:
            raise ValueError(f"not a single character: {key!r}")
        upper = key.upper()
        if any(upper in keys for keys in KEYBOARD_ROWS):
            self.used_keys.add(upper)
            return True
        return False


WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
BLUE = (0, 0, 255)
RED = (255, 0, 0)

FONT_FILE = "arial.ttf"
BACKGROUND_IMAGE = "wbg.jpg"

SQUARE_SIZE = 70
SPACING = 10
GRID_ORIGIN = (250, 100)
KEY_SIZE = 60
KEY_START_X = (150, 180, 240)
KEY_START_Y = 600

_STATE_COLOURS = {
    LetterState.ABSENT: WHITE,
    LetterState.PRESENT: YELLOW,
    LetterState.CORRECT: GREEN,
}


class Wordle:
    """The Wordle game window."""

    WINDOW_SIZE = (950, 800)

    def __init__(self, scores: ScoreKeeper) -> None:
        self.scores = scores
        self._rng = random.Random()

    def _new_round(self) -> WordleRound:
        answer = random_word(self._rng)
        log.debug("Wordle word: %s", answer)
        return WordleRound(answer)

    def start(self) -> None:
        """Run the game until Backspace is pressed or the window closes."""
        pygame.init()
        current = self._new_round()
        screen = pygame.display.set_mode(self.WINDOW_SIZE)
        pygame.display.set_caption("Wordle Game")

        try:
            background = pygame.image.load(BACKGROUND_IMAGE)
        except (pygame.error, FileNotFoundError, OSError) as exc:
            log.warning("failed to load %s: %s", BACKGROUND_IMAGE, exc)
            return
        try:
            font20 = pygame.font.Font(FONT_FILE, 20)
            font24 = pygame.font.Font(FONT_FILE, 24)
            font25 = pygame.font.Font(FONT_FILE, 25)
            font30 = pygame.font.Font(FONT_FILE, 30)
            font50 = pygame.font.Font(FONT_FILE, 50)
            title_font = pygame.font.Font(FONT_FILE, 70)
        except (pygame.error, FileNotFoundError, OSError) as exc:
            log.warning("failed to load %s: %s", FONT_FILE, exc)
            return
        title_font.set_bold(True)
        title_font.set_underline(True)

        title = title_font.render("Wordle", True, WHITE)
        paused_text = font30.render("Game Paused. Press 'Esc' to resume.", True, BLUE)
        lost_text = font20.render("GAME OVER Press Enter to restart ", True, WHITE)
        won_text = font25.render("You Won! Press Enter to restart", True, WHITE)

        music = SoundTrack("wordleback.mp3", True)
        music.play()
        lost_sound = SoundTrack("gameover2.wav", False)
        won_sound = SoundTrack("wordle win.wav", False)

        keys = [
            (letter, pygame.Rect(KEY_START_X[row] + col * (KEY_SIZE + SPACING),
                                 KEY_START_Y + row * (KEY_SIZE + SPACING),
                                 KEY_SIZE, KEY_SIZE))
            for row, letters in enumerate(KEYBOARD_ROWS)
            for col, letter in enumerate(letters)
        ]
        key_labels = {letter: font24.render(letter, True, BLACK) for letter in set("".join(KEYBOARD_ROWS))}

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
                    if event.key == pygame.K_BACKSPACE:
                        screen.fill(WHITE)
                        screen.blit(font30.render("Exiting Wordle", True, RED), (50, 500))
                        screen.blit(font30.render(f"Score: {self.scores.value}", True, GREEN), (50, 400))
                        pygame.display.flip()
                        pygame.time.wait(2000)
                        music.stop()
                        return
                    if current.over and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        current = self._new_round()
                elif event.type == pygame.TEXTINPUT:
                    for char in event.text:
                        current.mark_key(char)
                        if paused or current.over or not ("a" <= char.lower() <= "z"):
                            continue
                        current.type_letter(char)
                        if current.won:
                            self.scores.increase()
                            won_sound.play()
                        elif current.over:
                            lost_sound.play()

            screen.fill(BLACK)
            screen.blit(background, (0, 0))
            for row in range(ROWS):
                result = current.results[row]
                for col in range(COLUMNS):
                    colour = WHITE if result is None or col >= len(result) else _STATE_COLOURS[result[col]]
                    cell = pygame.Rect(col * (SQUARE_SIZE + SPACING) + GRID_ORIGIN[0],
                                       row * (SQUARE_SIZE + SPACING) + GRID_ORIGIN[1],
                                       SQUARE_SIZE, SQUARE_SIZE)
                    pygame.draw.rect(screen, colour, cell)
            for row in range(current.row + 1):
                for col, letter in enumerate(current.guesses[row]):
                    screen.blit(font50.render(letter, True, BLACK),
                                (col * (SQUARE_SIZE + SPACING) + GRID_ORIGIN[0],
                                 row * (SQUARE_SIZE + SPACING) + GRID_ORIGIN[1]))
            screen.blit(title, (330, 10))
            screen.blit(font30.render(f"Score: {self.scores.value}", True, WHITE), (10, 10))

            if paused:
                screen.fill(WHITE)
                screen.blit(paused_text, (50, 400))
            if current.over:
                screen.blit(won_text if current.won else lost_text, (520, 10))

            for letter, rect in keys:
                colour = GREEN if letter in current.used_keys else WHITE
                pygame.draw.rect(screen, colour, rect)
                pygame.draw.rect(screen, BLACK, rect, 2)
                screen.blit(key_labels[letter], (rect.x + KEY_SIZE // 4, rect.y + KEY_SIZE // 4))

            pygame.display.flip()
            clock.tick(60)