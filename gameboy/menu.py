"""The main menu and its instruction and leaderboard screens."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import pygame

from gameboy.scores import leaderboard

__all__ = ["Menu", "show_instructions", "show_leaderboard"]

log = logging.getLogger(__name__)

FontSource = Union[str, Path, None]

BACKGROUND_IMAGE = "gamer3.jpg"
CROWN_IMAGE = "king.png"
CROWN_SCALE = 0.01

BLACK = (0, 0, 0)
RED = (255, 0, 0)


class Menu:
    """The list of menu options and the one currently selected."""

    OPTIONS = (
        "Hangman",
        "Snake game",
        "Wordle",
        "Instructions",
        "Leaderboard",
        "Exit",
    )

    def __init__(self) -> None:
        self.selected = 0

    def navigate(self, direction: int) -> None:
        """Move the selection by ``direction``, wrapping around."""
        self.selected = (self.selected + direction) % len(self.OPTIONS)

    def option_text(self, index: int) -> str:
        if not 0 <= index < len(self.OPTIONS):
            raise IndexError(f"menu option {index} out of range")
        return self.OPTIONS[index]


def _font(source: FontSource, size: int, *, bold: bool = False,
          underline: bool = False) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(None if source is None else str(source), size)
    font.set_bold(bold)
    font.set_underline(underline)
    return font


def _load_image(name: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(name)
    except (pygame.error, FileNotFoundError, OSError) as exc:
        log.warning("Failed to load %s: %s", name, exc)
        return None


def _wait_for_enter() -> bool | None:
    """Return True on Enter, False when the window closes, else None."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            return True
    return None


def show_instructions(screen: pygame.Surface, heading_font: FontSource,
                      body_font: FontSource) -> bool:
    """Show the instructions until Enter is pressed.

    The fonts are font files (None for the default font). Returns False
    when the window was closed.
    """
    background = _load_image(BACKGROUND_IMAGE)
    if background is None:
        return True

    back = _font(heading_font, 20).render(
        "Press Enter to go back to the main menu.", True, RED)
    title = _font(heading_font, 30, bold=True, underline=True).render(
        "INSTRUCTIONS", True, BLACK)
    body = _font(body_font, 20, bold=True)
    lines = [
        (body.render("Hangman: Guess the word by entering letters.", True, BLACK), (50, 150)),
        (body.render("Snake: Use arrow keys to move the snake and eat food.", True, BLACK), (50, 200)),
        (body.render("Wordle: Guess the word in 6 tries.", True, BLACK), (50, 250)),
    ]

    clock = pygame.time.Clock()
    while True:
        outcome = _wait_for_enter()
        if outcome is not None:
            return outcome
        screen.fill(BLACK)
        screen.blit(background, (0, 0))
        screen.blit(title, (50, 50))
        for surface, position in lines:
            screen.blit(surface, position)
        screen.blit(back, (50, 350))
        pygame.display.flip()
        clock.tick(60)


def show_leaderboard(screen: pygame.Surface, font: FontSource,
                     scores_path: Union[str, Path]) -> bool:
    """Show every player's best score until Enter is pressed.

    The three leaders get a crown. Returns False when the window was closed.
    """
    background = _load_image(BACKGROUND_IMAGE)
    if background is None:
        return True

    back = _font(font, 20).render("Press Enter to go back to the main menu.", True, RED)
    title = _font(font, 40, bold=True, underline=True).render("LEADERBOARD", True, BLACK)

    crown = _load_image(CROWN_IMAGE)
    if crown is not None:
        width, height = crown.get_size()
        crown = pygame.transform.smoothscale(
            crown,
            (max(1, int(width * CROWN_SCALE)), max(1, int(height * CROWN_SCALE))),
        )

    try:
        ranked = leaderboard(scores_path)
    except FileNotFoundError:
        log.error("Unable to open file for reading: %s", scores_path)
        ranked = []

    entry_font = _font(font, 24)
    rows = []
    for rank, entry in enumerate(ranked):
        y = 100 + rank * 50
        rows.append((entry_font.render(entry.name, True, BLACK), (200, y)))
        rows.append((entry_font.render(str(entry.score), True, RED), (500, y)))
        if rank < 3 and crown is not None:
            rows.append((crown, (100, y)))

    clock = pygame.time.Clock()
    while True:
        outcome = _wait_for_enter()
        if outcome is not None:
            return outcome
        screen.fill(BLACK)
        screen.blit(background, (0, 0))
        screen.blit(title, (208, 30))
        screen.blit(back, (10, 600))
        for surface, position in rows:
            screen.blit(surface, position)
        pygame.display.flip()
        clock.tick(60)