"""
The single mutable game state shared by the simulation and the renderer
"""

import random
from typing import Optional
from src.models.pong import GameOptions
from src.pong import constants
from src.pong.game_object import Ball, Paddle


class GameState:
    """
    Player paddle (left, human), bot paddle (right), ball and round counter
    """

    def __init__(
        self,
        options: GameOptions,
        player: Paddle,
        bot: Paddle,
        ball: Ball,
        rng: random.Random,
        round_number: int = constants.INITIAL_ROUND,
    ):
        self.options = options
        self.player = player
        self.bot = bot
        self.ball = ball
        self.rng = rng
        # Displayed only, nothing advances it
        self.round_number = round_number

    @staticmethod
    def new(
        options: Optional[GameOptions] = None, rng: Optional[random.Random] = None
    ) -> "GameState":
        """
        Create the starting state: paddles centered vertically near each
        side and the ball served from the center
        """
        options = options or GameOptions()
        rng = rng or random.Random()
        paddle_y = options.height * 0.5 - options.paddle_height * 0.5

        player = Paddle(
            options.width * constants.PLAYER_X_RATIO,
            paddle_y,
            options.paddle_width,
            options.paddle_height,
            options.paddle_color,
            options.paddle_speed,
        )
        bot = Paddle(
            options.width * constants.BOT_X_RATIO - options.paddle_width,
            paddle_y,
            options.paddle_width,
            options.paddle_height,
            options.paddle_color,
            options.paddle_speed,
        )
        ball = Ball(0, 0, options.ball_size, options.ball_color, options.ball_velocity)

        state = GameState(options, player, bot, ball, rng)
        state.reset_ball()
        return state

    def reset_ball(self):
        """
        Serve the ball again from the center of the field
        """
        self.ball.reset(self.options.width, self.options.height, self.rng)

    def copy(self) -> "GameState":
        """
        Independent copy of the state. The random generator is shared.
        """
        return GameState(
            self.options,
            self.player.copy(),
            self.bot.copy(),
            self.ball.copy(),
            self.rng,
            self.round_number,
        )
