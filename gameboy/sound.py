"""Background music and sound effects."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import pygame

__all__ = ["SoundTrack"]

log = logging.getLogger(__name__)


class SoundTrack:
    """A sound file played once or in a loop at half volume.

    A file that cannot be loaded leaves the track silent.
    """

    VOLUME = 0.5

    def __init__(self, path: Union[str, Path], loop: bool) -> None:
        self.path = Path(path)
        self.loop = bool(loop)
        self._sound: pygame.mixer.Sound | None = None
        self._channel: pygame.mixer.Channel | None = None
        if not self.path.is_file():
            log.warning("Failed to load %s!", self.path)
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            self._sound = pygame.mixer.Sound(str(self.path))
        except (pygame.error, NotImplementedError, OSError) as exc:
            log.warning("Failed to load %s: %s", self.path, exc)
            self._sound = None
            return
        self._sound.set_volume(self.VOLUME)

    @property
    def loaded(self) -> bool:
        return self._sound is not None

    @property
    def playing(self) -> bool:
        return self._channel is not None and self._channel.get_busy()

    def play(self) -> None:
        """Start the track from the beginning."""
        if self._sound is None:
            return
        if self._channel is not None:
            self._channel.stop()
        self._channel = self._sound.play(loops=-1 if self.loop else 0)

    def stop(self) -> None:
        if self._channel is not None:
            self._channel.stop()
            self._channel = None

    def resume(self) -> None:
        """Start the track again if it is not playing."""
        if not self.playing:
            self.play()