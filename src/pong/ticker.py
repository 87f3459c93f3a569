"""
Sources of fixed-rate ticks that drive the game loop
"""

from abc import ABC, abstractmethod
from typing import Callable
import pygame


class TickSource(ABC):
    """
    Calls a callback repeatedly until stopped
    """

    def __init__(self):
        self.running = False

    @abstractmethod
    def run(self, callback: Callable[[], None]):
        """Invoke callback once per tick until stop() is called."""

    def stop(self):
        """Stop after the current tick."""
        self.running = False


class ClockTickSource(TickSource):
    """
    Ticks at a fixed frame rate using the pygame clock. A tick that runs
    over its budget simply delays the next one.
    """

    def __init__(self, fps: int):
        super().__init__()
        self.fps = fps
        self.clock = pygame.time.Clock()

    def run(self, callback: Callable[[], None]):
        self.running = True
        while self.running:
            callback()
            self.clock.tick(self.fps)


class ManualTickSource(TickSource):
    """
    Runs a fixed number of ticks as fast as possible, without waiting
    """

    def __init__(self, ticks: int):
        super().__init__()
        self.ticks = ticks
        self.count = 0

    def run(self, callback: Callable[[], None]):
        self.running = True
        while self.running and self.count < self.ticks:
            callback()
            self.count += 1
        self.running = False
