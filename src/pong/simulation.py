"""
One fixed step of the game simulation.

The steps run in a fixed order every tick: player movement and wall
bounce, paddle collisions, scoring, ball advance and finally the bot.
Collision tests sample a single corner of the ball, so a fast ball can
pass through a paddle.
"""

from src.logger.logger import logger
from src.models.pong import Direction
from src.pong.game_state import GameState


def move_player(state: GameState, direction: Direction):
    """Move the player paddle and bounce the ball off the top/bottom walls."""
    state.player.move(direction, state.options.height)
    state.ball.bounce_off_walls(state.options.height)


def collide_ball_with_paddles(state: GameState):
    """
    Send the ball right when it touches the player and left when it
    touches the bot. The orientation is forced, never toggled.
    """
    if state.ball.has_hit_left_paddle(state.player):
        state.ball.orientation.x = 1

    if state.ball.has_hit_right_paddle(state.bot):
        state.ball.orientation.x = -1


def score(state: GameState) -> bool:
    """
    Award a point when the ball leaves the field and serve it again.
    Every score_step points by the player makes the ball permanently faster.
    Returns whether a point was scored.
    """
    ball = state.ball
    options = state.options

    if ball.position.x <= 0:
        state.bot.score += 1
        logger.debug(f"bot scores: {state.player.score} - {state.bot.score}")
        state.reset_ball()
        return True

    if ball.position.x >= options.width:
        state.player.score += 1
        logger.debug(f"player scores: {state.player.score} - {state.bot.score}")
        if state.player.score % options.score_step == 0:
            ball.velocity += options.speed_difficulty_factor
            logger.debug(f"ball velocity increased to {ball.velocity}")
        state.reset_ball()
        return True

    return False


def advance_ball(state: GameState):
    """Move the ball, including on the tick it was served."""
    state.ball.update(state.options.speed_difficulty_factor)


def move_bot(state: GameState):
    """Bot follows the ball vertically, covering part of the gap each tick."""
    state.bot.track(
        state.ball.position.y, state.options.bot_lerp_factor, state.options.height
    )


def simulate(state: GameState, direction: Direction) -> GameState:
    """
    Advance the state by one tick for the given held direction.
    The state is updated in place and returned.
    """
    move_player(state, direction)
    collide_ball_with_paddles(state)
    score(state)
    advance_ball(state)
    move_bot(state)
    return state
