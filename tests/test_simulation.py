import pytest
from src.models.pong import Direction
from src.pong.simulation import (
    advance_ball,
    collide_ball_with_paddles,
    move_bot,
    move_player,
    score,
    simulate,
)


def place_ball(state, x, y, orientation_x=1, orientation_y=1):
    state.ball.position.x = x
    state.ball.position.y = y
    state.ball.orientation.x = orientation_x
    state.ball.orientation.y = orientation_y


class TestPlayerMovement:
    def test_up(self, state):
        move_player(state, Direction.UP)
        assert state.player.position.y == 245

    def test_down(self, state):
        move_player(state, Direction.DOWN)
        assert state.player.position.y == 255

    def test_none(self, state):
        move_player(state, Direction.NONE)
        assert state.player.position.y == 250

    def test_up_overshoots_top_once(self, state):
        state.player.position.y = 0
        move_player(state, Direction.UP)
        assert state.player.position.y == -5
        move_player(state, Direction.UP)
        assert state.player.position.y == -5

    def test_up_stops_above_top(self, state):
        state.player.position.y = -1
        move_player(state, Direction.UP)
        assert state.player.position.y == -1

    def test_down_overshoots_bottom_once(self, state):
        state.player.position.y = 500
        move_player(state, Direction.DOWN)
        assert state.player.position.y == 505
        move_player(state, Direction.DOWN)
        assert state.player.position.y == 505

    def test_bot_is_not_moved_by_input(self, state):
        move_player(state, Direction.UP)
        assert state.bot.position.y == 250


class TestWallBounce:
    def test_top_wall(self, state):
        place_ball(state, 500, 0, orientation_y=-1)
        move_player(state, Direction.NONE)
        assert state.ball.orientation.y == 1

    def test_bottom_wall(self, state):
        place_ball(state, 500, 590, orientation_y=1)
        move_player(state, Direction.NONE)
        assert state.ball.orientation.y == -1

    def test_open_field(self, state):
        place_ball(state, 500, 300, orientation_y=1)
        move_player(state, Direction.UP)
        assert state.ball.orientation.y == 1


class TestPaddleCollision:
    def test_left_paddle_sends_ball_right(self, state):
        place_ball(state, 55, 260, orientation_x=-1)
        collide_ball_with_paddles(state)
        assert state.ball.orientation.x == 1

    def test_left_paddle_forces_not_toggles(self, state):
        place_ball(state, 55, 260, orientation_x=1)
        collide_ball_with_paddles(state)
        assert state.ball.orientation.x == 1

    @pytest.mark.parametrize("x,hit", [(49, False), (50, True), (60, True), (61, False)])
    def test_left_paddle_horizontal_span(self, state, x, hit):
        place_ball(state, x, 300, orientation_x=-1)
        collide_ball_with_paddles(state)
        assert state.ball.orientation.x == (1 if hit else -1)

    @pytest.mark.parametrize("y,hit", [(249, False), (250, True), (350, True), (351, False)])
    def test_left_paddle_vertical_span(self, state, y, hit):
        place_ball(state, 55, y, orientation_x=-1)
        collide_ball_with_paddles(state)
        assert state.ball.orientation.x == (1 if hit else -1)

    def test_right_paddle_sends_ball_left(self, state):
        place_ball(state, 935, 260, orientation_x=1)
        collide_ball_with_paddles(state)
        assert state.ball.orientation.x == -1

    @pytest.mark.parametrize("x,hit", [(929, False), (930, True), (940, True), (941, False)])
    def test_right_paddle_horizontal_span(self, state, x, hit):
        place_ball(state, x, 300, orientation_x=1)
        collide_ball_with_paddles(state)
        assert state.ball.orientation.x == (-1 if hit else 1)

    def test_ball_below_right_paddle_passes(self, state):
        place_ball(state, 935, 360, orientation_x=1)
        collide_ball_with_paddles(state)
        assert state.ball.orientation.x == 1


class TestScore:
    def test_bot_scores_on_left_edge(self, state):
        place_ball(state, 0, 123, orientation_x=-1)
        assert score(state)
        assert state.bot.score == 1
        assert state.player.score == 0
        assert (state.ball.position.x, state.ball.position.y) == (500, 300)

    def test_player_scores_on_right_edge(self, state):
        place_ball(state, 1000, 123)
        assert score(state)
        assert state.player.score == 1
        assert state.bot.score == 0
        assert (state.ball.position.x, state.ball.position.y) == (500, 300)

    def test_no_score_inside_field(self, state):
        place_ball(state, 1, 123)
        assert not score(state)
        assert state.player.score == 0
        assert state.bot.score == 0
        assert state.ball.position.x == 1

    def test_difficulty_increases_every_five_player_points(self, state):
        velocities = []
        for _ in range(15):
            state.ball.position.x = 1000
            score(state)
            velocities.append(state.ball.velocity)
        assert state.player.score == 15
        assert velocities[3] == 0
        assert velocities[4] == 3
        assert velocities[8] == 3
        assert velocities[9] == 6
        assert velocities[14] == 9

    def test_bot_points_do_not_increase_difficulty(self, state):
        for _ in range(10):
            state.ball.position.x = 0
            score(state)
        assert state.bot.score == 10
        assert state.ball.velocity == 0


class TestBallAdvance:
    def test_base_speed(self, state):
        place_ball(state, 500, 300, orientation_x=1, orientation_y=-1)
        advance_ball(state)
        assert (state.ball.position.x, state.ball.position.y) == (503, 297)

    def test_with_velocity(self, state):
        place_ball(state, 500, 300, orientation_x=-1, orientation_y=1)
        state.ball.velocity = 3
        advance_ball(state)
        assert (state.ball.position.x, state.ball.position.y) == (494, 306)


class TestBot:
    def test_moves_halfway(self, state):
        state.ball.position.y = 400
        move_bot(state)
        # lerp(250 - 50, 400, 0.5)
        assert state.bot.position.y == 300

    def test_ignores_ball_x(self, state):
        state.ball.position.y = 400
        state.ball.position.x = 10
        move_bot(state)
        assert state.bot.position.y == 300
        assert state.bot.position.x == 940

    @pytest.mark.parametrize("ball_y", [-5000, -10, 0, 1, 123.4, 300, 599, 600, 5000])
    def test_stays_inside_field(self, state, ball_y):
        for _ in range(20):
            state.ball.position.y = ball_y
            move_bot(state)
            assert 0 <= state.bot.position.y <= 600 - 100


class TestSimulate:
    def test_first_tick_with_up_held(self, state):
        before = state.copy()
        simulate(state, Direction.UP)
        assert state.player.position.y == before.player.position.y - 5
        assert state.player.position.x == before.player.position.x
        assert state.bot.position.x == before.bot.position.x
        assert state.player.score == 0
        assert state.bot.score == 0
        assert state.ball.velocity == 0

    def test_ball_served_and_moved_in_scoring_tick(self, state):
        place_ball(state, 0, 300, orientation_x=-1)
        simulate(state, Direction.NONE)
        assert state.bot.score == 1
        assert state.player.score == 0
        assert abs(state.ball.position.x - 500) == 3
        assert abs(state.ball.position.y - 300) == 3

    def test_returns_same_state(self, state):
        assert simulate(state, Direction.NONE) is state

    def test_round_never_changes(self, state):
        for _ in range(2000):
            simulate(state, Direction.DOWN)
        assert state.round_number == 1

    def test_bot_inside_field_over_long_play(self, state):
        for tick in range(3000):
            simulate(state, Direction.UP if tick % 200 < 100 else Direction.DOWN)
            assert 0 <= state.bot.position.y <= 500
            assert state.ball.orientation.x in (-1, 1)
