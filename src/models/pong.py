# pylint: disable=missing-class-docstring
"""
Models related to the Pong game
"""
from enum import Enum
from typing import Literal, Tuple, Union
import pygame
from pydantic import BaseModel, Field, field_validator, model_validator
from src.pong import constants


class Position(BaseModel):

    x: float
    y: float


class Orientation(BaseModel):
    """
    Direction of travel of the ball on each axis
    """

    x: Literal[-1, 0, 1] = 0
    y: Literal[-1, 0, 1] = 0


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    NONE = "none"


Color = Union[str, Tuple[int, int, int]]


class GameOptions(BaseModel):
    """
    Startup configuration of the game. Validated once, before anything
    is created, so that a bad constant aborts the program immediately.
    """

    width: int = Field(default=constants.SCREEN_WIDTH, gt=0)
    height: int = Field(default=constants.SCREEN_HEIGHT, gt=0)
    fps: int = Field(default=constants.FPS, gt=0)
    background_color: Color = constants.BACKGROUND_COLOR
    caption: str = constants.SCREEN_CAPTION
    paddle_width: int = Field(default=constants.PADDLE_WIDTH, gt=0)
    paddle_height: int = Field(default=constants.PADDLE_HEIGHT, gt=0)
    paddle_speed: float = Field(default=constants.PADDLE_SPEED, gt=0)
    paddle_color: Color = constants.WHITE
    ball_size: int = Field(default=constants.BALL_SIZE, gt=0)
    ball_color: Color = constants.WHITE
    ball_velocity: float = Field(default=constants.BALL_INITIAL_VELOCITY, ge=0)
    speed_difficulty_factor: float = Field(
        default=constants.SPEED_DIFFICULTY_FACTOR, ge=0
    )
    score_step: int = Field(default=constants.DIFFICULTY_SCORE_STEP, gt=0)
    bot_lerp_factor: float = Field(default=constants.BOT_LERP_FACTOR, gt=0, le=1)

    @field_validator("background_color", "paddle_color", "ball_color")
    @classmethod
    def check_color(cls, value: Color) -> Color:
        """
        Colors must be understood by pygame
        """
        try:
            pygame.Color(value)
        except (ValueError, TypeError) as err:
            raise ValueError(f"invalid color: {value!r}") from err
        return value

    @model_validator(mode="after")
    def check_paddle_fits(self) -> "GameOptions":
        """
        A paddle taller than the field could never be clamped inside it
        """
        if self.paddle_height > self.height:
            raise ValueError(
                f"paddle height {self.paddle_height} exceeds field height {self.height}"
            )
        return self
