"""
Constants related to the Pong game
"""

import pygame

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 600
SCREEN_CAPTION = "Pong"
FPS = 60

BACKGROUND_COLOR = "#141719"
WHITE = "#ffffff"
BLACK = "#000000"

PADDLE_WIDTH = 10
PADDLE_HEIGHT = 100
PADDLE_SPEED = 5
PLAYER_X_RATIO = 0.05
BOT_X_RATIO = 0.95

BALL_SIZE = 10
BALL_INITIAL_VELOCITY = 0

# Added to the ball every tick, and to its velocity every DIFFICULTY_SCORE_STEP
# points scored by the player
SPEED_DIFFICULTY_FACTOR = 3
DIFFICULTY_SCORE_STEP = 5

BOT_LERP_FACTOR = 0.5

INITIAL_ROUND = 1

GAME_FONT = "opensans"
GAME_FONT_SIZE = 48
ROUND_FONT_SIZE = 24
SCORE_TEXT_Y = 100
LEFT_SCORE_X_RATIO = 0.25
RIGHT_SCORE_X_RATIO = 0.75
ROUND_TEXT_X_OFFSET = 10
ROUND_TEXT_Y = 30

DIVIDER_SEGMENTS = 25
DIVIDER_SEGMENT_SIZE = 10
DIVIDER_PITCH = 20
DIVIDER_TOP_RATIO = 0.12

KEYS_UP = (pygame.K_w, pygame.K_UP)
KEYS_DOWN = (pygame.K_s, pygame.K_DOWN)
