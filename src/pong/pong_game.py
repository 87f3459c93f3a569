# pylint: disable=no-member
"""
Functionality for combining the various parts of the Pong game:
one human paddle on the left against a bot paddle on the right
"""
import os
import random
from typing import Optional
import pygame
from src.logger.logger import logger
from src.models.pong import GameOptions
from src.pong.base_game import BasePongGame
from src.pong.game_state import GameState
from src.pong.input_latch import InputLatch
from src.pong.renderer import Renderer
from src.pong.simulation import simulate
from src.pong.ticker import ClockTickSource, TickSource


class PongGame(BasePongGame):
    """
    Pong game driver: every tick simulates one step and then renders it
    """

    def __init__(
        self,
        options: Optional[GameOptions] = None,
        headless: bool = False,
        tick_source: Optional[TickSource] = None,
        rng: Optional[random.Random] = None,
    ):
        self.options = options or GameOptions()
        self.headless = headless
        if headless:
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        pygame.init()
        if not headless:
            self.screen = pygame.display.set_mode(
                (self.options.width, self.options.height)
            )
            pygame.display.set_caption(self.options.caption)
        else:
            # Off-screen surface, nothing is shown
            self.screen = pygame.Surface((self.options.width, self.options.height))

        self.tick_source = tick_source or ClockTickSource(self.options.fps)
        self.state = GameState.new(self.options, rng)
        self.latch = InputLatch()
        self.renderer = Renderer(self.screen)
        self.closed = False

    def handle_events(self) -> bool:
        """
        Feed pending window and keyboard events into the game.
        Returns False once the window has been closed.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Window closed")
                self.tick_source.stop()
                return False
            if event.type == pygame.KEYDOWN:
                self.latch.on_key_down(
                    event.key, getattr(event, "default_prevented", False)
                )
            elif event.type == pygame.KEYUP:
                self.latch.on_key_up(event.key)
        return True

    def update(self):
        """Advance the game state by one tick."""
        simulate(self.state, self.latch.direction)

    def render(self):
        """Render the current game state."""
        self.renderer.render(self.state)
        if not self.headless:
            pygame.display.flip()

    def tick(self):
        """One iteration of the game loop."""
        if not self.handle_events():
            return
        self.update()
        self.render()

    def close(self):
        """Close the Pygame window."""
        if self.closed:
            return
        self.closed = True
        pygame.quit()

    def run(self):
        """Main game loop for human play."""
        if self.closed:
            raise RuntimeError("Cannot run a game that has been closed")

        logger.info(
            f"Starting Pong at {self.options.width}x{self.options.height}, "
            f"{self.options.fps} fps"
        )
        try:
            self.tick_source.run(self.tick)
        finally:
            logger.info(
                f"Final score: {self.state.player.score} - {self.state.bot.score}"
            )
            self.close()
