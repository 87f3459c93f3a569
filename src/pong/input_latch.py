"""
Holds the direction key currently held by the player
"""

from typing import Optional
from src.logger.logger import logger
from src.models.pong import Direction
from src.pong import constants


class InputLatch:
    """
    Single slot holding the most recently pressed direction.

    Key events write the slot and the tick reads it. Both happen on the
    pygame main thread, and the slot is a single attribute assignment, so
    the last write before a tick is the one the tick sees.
    """

    def __init__(self):
        self.direction = Direction.NONE

    def on_key_down(self, key: int, default_prevented: bool = False):
        """
        Latch up or down for a bound key. Events already handled
        elsewhere and unbound keys are ignored.
        """
        if default_prevented:
            return

        if key in constants.KEYS_UP:
            self._set(Direction.UP)
        elif key in constants.KEYS_DOWN:
            self._set(Direction.DOWN)

    def on_key_up(self, key: Optional[int] = None):
        """
        Releasing any key, bound or not, stops the paddle
        """
        self._set(Direction.NONE)

    def _set(self, direction: Direction):
        if direction != self.direction:
            logger.debug(f"input: {self.direction.value} -> {direction.value}")
        self.direction = direction
