# pylint: disable=no-member
"""
Draws the game state onto a pygame surface
"""

import math
from typing import Dict, Optional, Tuple
import pygame
from src.models.pong import Color
from src.pong import constants
from src.pong.game_state import GameState


class Renderer:
    """
    Read-only view of the game state. Holds nothing but the target
    surface and the fonts it has loaded.
    """

    def __init__(self, surface: pygame.Surface, font_name: str = constants.GAME_FONT):
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self.font_name = font_name
        self._fonts: Dict[Tuple[str, int], pygame.font.Font] = {}

    def font(self, font_name: str, size: int) -> pygame.font.Font:
        """
        Load a system font once per name and size. pygame falls back to
        its default font when the family is not installed.
        """
        key = (font_name, size)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont(font_name, size)
        return self._fonts[key]

    def draw_rect(
        self, x: float, y: float, w: float, h: float, color: Color = constants.WHITE
    ):
        """Fill a rectangle."""
        self.surface.fill(
            pygame.Color(color), pygame.Rect(int(x), int(y), int(w), int(h))
        )

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color = constants.WHITE,
        font_size: int = constants.GAME_FONT_SIZE,
        font_name: Optional[str] = None,
    ):
        """
        Draw text horizontally centered on x, with its baseline at y
        """
        font = self.font(font_name or self.font_name, font_size)
        text_surface = font.render(str(text), True, pygame.Color(color))
        width = text_surface.get_width()
        self.surface.blit(text_surface, (x - width * 0.5, y - font.get_ascent()))

    def render(self, state: GameState):
        """
        Draw one frame: background, ball, paddles, scores, round and
        the dashed center line
        """
        options = state.options

        self.draw_rect(0, 0, options.width, options.height, options.background_color)

        for game_object in (state.ball, state.player, state.bot):
            self.draw_rect(
                game_object.position.x,
                game_object.position.y,
                game_object.width,
                game_object.height,
                game_object.color,
            )

        self.draw_text(
            state.player.score,
            math.floor(options.width * constants.LEFT_SCORE_X_RATIO),
            constants.SCORE_TEXT_Y,
        )
        self.draw_text(
            state.bot.score,
            math.floor(options.width * constants.RIGHT_SCORE_X_RATIO),
            constants.SCORE_TEXT_Y,
        )

        self.draw_text(
            f"Round {state.round_number}",
            options.width * 0.5 + constants.ROUND_TEXT_X_OFFSET,
            constants.ROUND_TEXT_Y,
            font_size=constants.ROUND_FONT_SIZE,
        )

        for i in range(constants.DIVIDER_SEGMENTS):
            self.draw_rect(
                options.width * 0.5,
                options.height * constants.DIVIDER_TOP_RATIO
                + i * constants.DIVIDER_PITCH,
                constants.DIVIDER_SEGMENT_SIZE,
                constants.DIVIDER_SEGMENT_SIZE,
            )
