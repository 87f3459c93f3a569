"""
Functionality related to various game objects.
Positions are kept as floats, the renderer truncates them when drawing.
"""

import random
from abc import ABC, abstractmethod
from src.models.pong import Color, Direction, Orientation, Position
from src.utils.utils import lerp, random_orientation


class GameObject(ABC):
    """
    Abstract class with methods to be implemented by various game objects.
    """

    def __init__(self, x: float, y: float, width: float, height: float, color: Color):
        self.width = width
        self.height = height
        self.color = color
        self.position = Position(x=x, y=y)

    @abstractmethod
    def copy(self) -> "GameObject":
        """
        Create a copy of the current game object
        """


class Paddle(GameObject):
    """
    Represents a paddle that moves vertically near one side of the field.
    The x position never changes after creation.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: int,
        height: int,
        color: Color,
        velocity: float,
    ):
        super().__init__(x, y, width, height, color)
        self.velocity = velocity
        self.score = 0

    def move(self, direction: Direction, field_height: float):
        """
        Moves the paddle one step in the held direction. The bound is
        checked before the move, so the paddle may overshoot an edge by
        less than one step.
        """
        if direction == Direction.UP and self.position.y >= 0:
            self.position.y -= self.velocity
        elif (
            direction == Direction.DOWN
            and self.position.y + self.height <= field_height
        ):
            self.position.y += self.velocity

    def track(self, target_y: float, factor: float, field_height: float):
        """
        Moves the paddle part of the way towards target_y and keeps it
        fully inside the field
        """
        self.position.y = lerp(self.position.y - self.height * 0.5, target_y, factor)

        if self.position.y + self.height >= field_height:
            self.position.y = field_height - self.height
        elif self.position.y <= 0:
            self.position.y = 0

    def copy(self) -> "Paddle":
        new_paddle = Paddle(
            self.position.x,
            self.position.y,
            self.width,
            self.height,
            self.color,
            self.velocity,
        )
        new_paddle.score = self.score
        return new_paddle


class Ball(GameObject):
    """
    Represents the ball. It travels diagonally, one orientation per axis,
    at a speed of the difficulty factor plus its own velocity.
    """

    def __init__(
        self, x: float, y: float, size: int, color: Color, velocity: float = 0
    ):
        super().__init__(x, y, size, size, color)
        self.orientation = Orientation()
        self.velocity = velocity

    def reset(self, field_width: float, field_height: float, rng: random.Random):
        """
        Puts the ball back at the center of the field with a random
        diagonal orientation. Velocity is kept.
        """
        self.position.x = field_width * 0.5
        self.position.y = field_height * 0.5
        self.orientation = Orientation(
            x=random_orientation(rng), y=random_orientation(rng)
        )

    def bounce_off_walls(self, field_height: float):
        """
        Reverses the vertical orientation when the ball touches the top
        or bottom wall
        """
        if self.position.y + self.height >= field_height or self.position.y <= 0:
            self.orientation.y *= -1

    def has_hit_left_paddle(self, paddle: Paddle) -> bool:
        """
        Check if the ball's top left corner is inside the left paddle
        """
        return (
            paddle.position.x <= self.position.x <= paddle.position.x + paddle.width
            and paddle.position.y
            <= self.position.y
            <= paddle.position.y + paddle.height
        )

    def has_hit_right_paddle(self, paddle: Paddle) -> bool:
        """
        Check if the ball's leading edge has reached the right paddle's face
        """
        return (
            self.position.x + self.width >= paddle.position.x
            and self.position.x <= paddle.position.x
            and paddle.position.y
            <= self.position.y
            <= paddle.position.y + paddle.height
        )

    def update(self, base_speed: float):
        """
        Advances the ball along its orientation
        """
        speed = base_speed + self.velocity
        self.position.x += speed * self.orientation.x
        self.position.y += speed * self.orientation.y

    def copy(self) -> "Ball":
        new_ball = Ball(
            self.position.x, self.position.y, self.width, self.color, self.velocity
        )
        new_ball.orientation = Orientation(
            x=self.orientation.x, y=self.orientation.y
        )
        return new_ball
