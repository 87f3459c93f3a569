"""
Common methods implemented by Pong games
"""

from abc import ABC, abstractmethod


class BasePongGame(ABC):
    """
    Interface implemented by Pong games
    """

    @abstractmethod
    def handle_events(self) -> bool:
        """Feed pending window and keyboard events into the game."""

    @abstractmethod
    def update(self):
        """Advance the game state by one tick."""

    @abstractmethod
    def render(self):
        """Render the current game state."""

    @abstractmethod
    def tick(self):
        """One iteration of the game loop."""

    @abstractmethod
    def close(self):
        """Close the Pygame window."""

    @abstractmethod
    def run(self):
        """Main game loop for human play"""
