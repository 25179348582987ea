"""Snake: steer a growing snake to food and easter eggs."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Callable, Optional

import pygame

from gameboy.scores import ScoreKeeper
from gameboy.sound import SoundTrack

__all__ = [
    "BOARD_SIZE",
    "MAX_SNAKE_LENGTH",
    "START_BODY",
    "START_LIVES",
    "Cell",
    "Direction",
    "Snake",
    "Food",
    "EasterEgg",
    "SnakeGame",
]

log = logging.getLogger(__name__)

Cell = tuple[int, int]

BOARD_SIZE = (800, 600)
MAX_SNAKE_LENGTH = 100
START_BODY: tuple[Cell, ...] = ((5, 7), (5, 6), (5, 5))
START_LIVES = 3
DEFAULT_BLOCK_SIZE = 20


class Direction(Enum):
    """The way the snake's head is heading."""

    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Cell:
        return self.value


def _grid(block_size: int) -> Cell:
    if block_size <= 0:
        raise ValueError(f"block size must be positive: {block_size}")
    return BOARD_SIZE[0] // block_size, BOARD_SIZE[1] // block_size


class Snake:
    """The snake on a grid of ``block_size`` pixel cells.

    ``on_lose`` is called whenever the snake loses a life.
    """

    def __init__(self, scores: ScoreKeeper, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        self.scores = scores
        self.block_size = block_size
        self.columns, self.rows = _grid(block_size)
        self.lives = START_LIVES
        self.on_lose: Optional[Callable[[], None]] = None
        self.body: list[Cell] = []
        self.direction = Direction.NONE
        self.lost = False
        self.reset()

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)

    @property
    def score(self) -> int:
        return self.scores.value

    def reset(self) -> None:
        """Put a fresh three-cell snake back at the start, standing still."""
        self.body = list(START_BODY)
        self.direction = Direction.NONE
        self.lost = False

    def lose(self) -> None:
        """Mark the snake as crashed and take away a life."""
        self.lost = True
        self.lives -= 1
        if self.on_lose is not None:
            self.on_lose()

    def toggle_lost(self) -> None:
        self.lost = not self.lost

    def extend(self) -> None:
        """Grow by one cell at the tail, up to ``MAX_SNAKE_LENGTH``."""
        if 0 < len(self.body) < MAX_SNAKE_LENGTH:
            self.body.append(self.body[-1])

    def _inside(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.columns and 0 <= y < self.rows

    def move(self) -> None:
        """Advance one cell; leaving the board or biting itself loses a life."""
        dx, dy = self.direction.delta
        x, y = self.head
        target = (x + dx, y + dy)
        if not self._inside(target):
            self.lose()
            return
        self.body = [target, *self.body[:-1]]
        self._check_self_collision()

    def _check_self_collision(self) -> None:
        if len(self.body) < 5:
            return
        if self.head in self.body[1:]:
            self.lose()

    def tick(self) -> None:
        """Move once, unless the snake is empty or standing still."""
        if not self.body or self.direction is Direction.NONE:
            return
        self.move()

    def check_food_collision(self, position: Cell) -> bool:
        """Eat the food at ``position`` if the head is on it."""
        if self.head == tuple(position):
            self.extend()
            self.scores.increase()
            return True
        return False

    def check_egg_collision(self, position: Cell) -> bool:
        """Eat the easter egg at ``position`` if the head is on it."""
        if self.head == tuple(position):
            self.extend()
            self.scores.add_bonus()
            return True
        return False


class Food:
    """A piece of food at a random cell."""

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE,
                 rng: Optional[random.Random] = None) -> None:
        self.block_size = block_size
        self.columns, self.rows = _grid(block_size)
        self._rng = rng if rng is not None else random.Random()
        self.position: Cell = (0, 0)
        self.respawn()

    def respawn(self) -> None:
        """Move to a new random cell of the board."""
        self.position = (self._rng.randrange(self.columns), self._rng.randrange(self.rows))

    @property
    def pixel_position(self) -> Cell:
        x, y = self.position
        return x * self.block_size, y * self.block_size


class EasterEgg(Food):
    """A bonus egg at a random cell."""

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE,
                 rng: Optional[random.Random] = None) -> None:
        super().__init__(block_size, rng)

    def respawn(self) -> None:
        """Move the egg to a new random cell of the board."""
        super().respawn()


WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)

FONT_FILE = "arial.ttf"
BACKGROUND_IMAGE = "Snake Back.jpg"
BODY_IMAGE = "Snake Body.png"
FOOD_IMAGE = "apple2.png"
EGG_IMAGE = "easter.png"

STEP_SECONDS = 0.1
EGG_DELAY_SECONDS = 3.0


def _load_image(name: str, size: Optional[int] = None) -> Optional[pygame.Surface]:
    try:
        image = pygame.image.load(name)
    except (pygame.error, FileNotFoundError, OSError) as exc:
        log.error("Error loading %s: %s", name, exc)
        return None
    if size is not None:
        image = pygame.transform.scale(image, (size, size))
    return image


class SnakeGame:
    """The Snake game window."""

    BLOCK_SIZE = DEFAULT_BLOCK_SIZE

    def __init__(self, scores: ScoreKeeper) -> None:
        self.scores = scores
        self._rng = random.Random()

    def start(self) -> None:
        """Run the game until Backspace is pressed, lives run out or the window closes."""
        pygame.init()
        screen = pygame.display.set_mode(BOARD_SIZE)
        pygame.display.set_caption("Snake Game")

        background = _load_image(BACKGROUND_IMAGE)
        if background is None:
            return
        try:
            font24 = pygame.font.Font(FONT_FILE, 24)
            font30 = pygame.font.Font(FONT_FILE, 30)
            font48 = pygame.font.Font(FONT_FILE, 48)
        except (pygame.error, FileNotFoundError, OSError) as exc:
            log.error("Error loading %s: %s", FONT_FILE, exc)
            return

        egg_sound = SoundTrack("easter.wav", False)
        food_sound = SoundTrack("food.wav", False)
        music = SoundTrack("Mr Bean.mp3", True)
        music.play()
        game_over_sound = SoundTrack("gameover.wav", False)
        if not game_over_sound.loaded:
            music.stop()
            return

        size = self.BLOCK_SIZE
        body_image = _load_image(BODY_IMAGE, size)
        food_image = _load_image(FOOD_IMAGE, size)
        egg_image = _load_image(EGG_IMAGE, size)

        snake = Snake(self.scores, size)
        snake.on_lose = game_over_sound.play
        food = Food(size, self._rng)
        egg = EasterEgg(size, self._rng)

        game_over_lines = [
            font48.render("Game Over!", True, RED),
            font48.render("Press Enter to Restart", True, RED),
        ]
        paused_text = font30.render("Game Paused. Press 'Esc' to resume.", True, BLUE)

        keys = {
            pygame.K_UP: Direction.UP,
            pygame.K_DOWN: Direction.DOWN,
            pygame.K_LEFT: Direction.LEFT,
            pygame.K_RIGHT: Direction.RIGHT,
        }
        enter_keys = (pygame.K_RETURN, pygame.K_KP_ENTER)

        clock = pygame.time.Clock()
        elapsed = 0.0
        egg_clock = pygame.time.get_ticks()
        paused = False

        def restart() -> None:
            snake.reset()
            food.respawn()

        def leave() -> None:
            screen.fill(WHITE)
            screen.blit(font30.render("Exiting Snake", True, RED), (200, 300))
            screen.blit(font30.render(f"Score: {snake.score}", True, GREEN), (50, 400))
            pygame.display.flip()
            pygame.time.wait(2000)
            music.stop()

        def draw_board() -> None:
            screen.fill(BLACK)
            screen.blit(background, (0, 0))
            if body_image is not None:
                for x, y in snake.body:
                    screen.blit(body_image, (x * size, y * size))
            if food_image is not None:
                for life in range(snake.lives):
                    screen.blit(food_image, (715 + life * 28, 10))
                screen.blit(food_image, food.pixel_position)
            if egg_image is not None:
                screen.blit(egg_image, egg.pixel_position)
            screen.blit(font24.render(f"Score: {snake.score}", True, WHITE), (10, 10))

        while True:
            egg_eaten = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    music.stop()
                    return
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_ESCAPE:
                    paused = not paused
                elif event.key in keys:
                    snake.direction = keys[event.key]
                elif event.key in enter_keys and snake.lost and snake.lives > 0:
                    restart()
                elif event.key == pygame.K_BACKSPACE or snake.lives == 0:
                    leave()
                    return

            if snake.check_egg_collision(egg.position):
                egg_eaten = True
                egg.respawn()
                egg_sound.play()

            if paused:
                clock.tick(60)
                screen.fill(WHITE)
                screen.blit(paused_text, (30, 300))
                pygame.display.flip()
                continue

            elapsed += clock.tick(60) / 1000.0
            if elapsed >= STEP_SECONDS:
                if not snake.lost:
                    snake.tick()
                    if snake.check_food_collision(food.position):
                        food.respawn()
                        food_sound.play()
                    if egg_eaten:
                        egg_clock = pygame.time.get_ticks()
                elapsed = 0.0

            if (pygame.time.get_ticks() - egg_clock) / 1000.0 >= EGG_DELAY_SECONDS:
                egg.respawn()
                egg_clock = pygame.time.get_ticks()

            draw_board()
            if not snake.lost:
                pygame.display.flip()
                continue

            for line, surface in enumerate(game_over_lines):
                screen.blit(surface, (200, 250 + line * font48.get_linesize()))
            pygame.display.flip()
            while snake.lost and snake.lives > 0:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        music.stop()
                        return
                    if event.type == pygame.KEYDOWN and event.key in enter_keys:
                        restart()
                        egg.respawn()
                clock.tick(60)