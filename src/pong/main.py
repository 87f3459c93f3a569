"""
Starting point of the Pong game when it is played by a human
"""

import sys
from pydantic import ValidationError
from src.logger.logger import logger
from src.models.pong import GameOptions
from src.pong.pong_game import PongGame


def main():
    """
    Starting point of Pong game
    """
    try:
        options = GameOptions()
    except ValidationError as err:
        logger.error(f"Invalid game options:\n{err}")
        sys.exit(1)

    game = PongGame(options)
    game.run()


if __name__ == "__main__":
    main()
