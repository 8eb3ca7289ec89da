import pytest

from arcadebox.geometry import Rect
from arcadebox.pong import BOUNCE, POINT, START_SPEED, Pong


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def make(value=0.0):
    return Pong(rng=_FixedRng(value))


def test_ball_past_left_edge_scores_for_computer():
    pong = make()
    pong.ball = (-1.0, 200.0)
    events = pong.step(0.0)
    assert pong.score2 == 1
    assert pong.score1 == 0
    assert POINT in events
    assert pong.velocity == (START_SPEED, -START_SPEED)
    assert pong.ball == (320.0, 470.0)


def test_ball_past_right_edge_scores_for_player():
    pong = make()
    pong.ball = (635.0, 200.0)
    events = pong.step(0.0)
    assert pong.score1 == 1
    assert POINT in events
    assert pong.velocity == (-START_SPEED, START_SPEED)
    assert pong.ball == (0.0, 320.0)


def test_ball_bounces_off_top():
    pong = make()
    pong.ball = (300.0, -1.0)
    pong.velocity = (-START_SPEED, -START_SPEED)
    events = pong.step(0.0)
    assert pong.velocity == (-START_SPEED, START_SPEED)
    assert BOUNCE in events


def test_ball_bounces_off_bottom():
    pong = make()
    pong.ball = (300.0, 475.0)
    pong.velocity = (START_SPEED, START_SPEED)
    pong.step(0.0)
    assert pong.velocity == (START_SPEED, -START_SPEED)


def test_ball_bounces_off_player_paddle():
    pong = make()
    pong.ball = (55.0, 250.0)
    events = pong.step(0.0)
    assert pong.velocity[0] == START_SPEED
    assert BOUNCE in events


def test_ball_bounces_off_ai_paddle():
    pong = make()
    pong.ai = Rect(590, 200, 12, 40)
    pong.ball = (582.0, 210.0)
    pong.velocity = (START_SPEED, START_SPEED)
    pong.step(0.0)
    assert pong.velocity[0] == -START_SPEED


def test_player_moves_symmetrically():
    up, down = make(), make()
    start = up.player.y
    up.step(0.05, up=True)
    down.step(0.05, down=True)
    assert up.player.y < start < down.player.y
    assert start - up.player.y == pytest.approx(down.player.y - start)


def test_player_clamped_to_screen():
    pong = make()
    pong.player = Rect(50, -10, 12, 40)
    pong.step(0.0)
    assert pong.player.y == 0
    pong.player = Rect(50, 470, 12, 40)
    pong.step(0.0)
    assert pong.player.y == 440


def test_ai_follows_ball_down():
    pong = make(0.5)
    pong.ball = (300.0, 400.0)
    pong.ai_move()
    assert pong.ai_down is True
    assert pong.ai_up is False


def test_ai_follows_ball_up():
    pong = make(0.5)
    pong.ball = (300.0, 10.0)
    pong.ai_move()
    assert pong.ai_up is True
    assert pong.ai_down is False


def test_ai_hesitates():
    pong = make(0.1)
    pong.ball = (300.0, 400.0)
    pong.ai_move()
    assert (pong.ai_up, pong.ai_down) == (False, False)


def test_ai_paddle_moves_toward_ball_during_step():
    pong = make(0.5)
    pong.ball = (300.0, 400.0)
    start = pong.ai.y
    pong.step(0.01)
    assert pong.ai.y > start