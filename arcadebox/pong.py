"""Two-paddle ball game against a computer opponent."""

from __future__ import annotations

import random

from .geometry import SCREEN_HEIGHT, SCREEN_WIDTH, Rect

PADDLE_WIDTH, PADDLE_HEIGHT = 12, 40
BALL_SIZE = 10
PLAYER_SPEED = 800.0
AI_SPEED = 800.0
START_SPEED = 600.0
AI_HESITATION = 0.2
SERVE_POSITIONS = (
    (0.0, SCREEN_WIDTH / 2),
    (SCREEN_WIDTH / 2, float(SCREEN_HEIGHT - BALL_SIZE)),
)

BOUNCE = "bounce"
POINT = "point"

Vector = tuple[float, float]


class Pong:
    """Paddles, ball and scores.

    ``score1`` belongs to the player on the left, ``score2`` to the
    computer on the right.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = random.Random() if rng is None else rng
        self.player = Rect(50, SCREEN_HEIGHT / 2, PADDLE_WIDTH, PADDLE_HEIGHT)
        self.ai = Rect(SCREEN_WIDTH - 50, SCREEN_HEIGHT / 2 - 100, PADDLE_WIDTH, PADDLE_HEIGHT)
        self.ball: Vector = (0.0, 0.0)
        self._ball_pos: Vector = (SCREEN_WIDTH / 2, 0.0)
        self._prev: Vector = (0.0, 0.0)
        self.velocity: Vector = (-START_SPEED, START_SPEED)
        self.score1 = 0
        self.score2 = 0
        self.ai_up = False
        self.ai_down = False

    @property
    def ball_rect(self) -> Rect:
        return Rect(self.ball[0], self.ball[1], BALL_SIZE, BALL_SIZE)

    def ai_move(self) -> None:
        """Decide where the computer paddle heads, sometimes hesitating."""
        chance = self.rng.random()
        target = self.ball[1] - BALL_SIZE / 2
        if target > self.ai.y and chance > AI_HESITATION:
            self.ai_down, self.ai_up = True, False
        elif target < self.ai.y and chance > AI_HESITATION:
            self.ai_up, self.ai_down = True, False
        else:
            self.ai_up = self.ai_down = False

    def step(self, delta: float, up: bool = False, down: bool = False) -> list[str]:
        """Advance by ``delta`` seconds; return the events that happened."""
        events: list[str] = []

        if up:
            player_dy = -PLAYER_SPEED * delta
        elif down:
            player_dy = PLAYER_SPEED * delta
        else:
            player_dy = 0.0

        self.ai_move()
        if self.ai_up:
            ai_dy = -AI_SPEED * delta
        elif self.ai_down:
            ai_dy = AI_SPEED * delta
        else:
            ai_dy = 0.0

        bx, by = self.ball
        left_edge = Rect(bx, by + 1, 1, BALL_SIZE - 2)
        right_edge = Rect(bx + BALL_SIZE - 1, by + 1, 1, BALL_SIZE - 2)
        vx, vy = self.velocity

        if left_edge.intersects(self.player) or right_edge.intersects(self.ai):
            vx = -vx
            player_dy = 0.0
            self.ball = self._prev
            events.append(BOUNCE)

        bx, by = self.ball
        if by < 0:
            vy = -vy
            events.append(BOUNCE)
        if by + BALL_SIZE > SCREEN_HEIGHT:
            vy = -vy
            events.append(BOUNCE)

        if bx < 0:
            self._ball_pos = SERVE_POSITIONS[1]
            vx, vy = START_SPEED, -START_SPEED
            self.score2 += 1
            events.append(POINT)
        elif bx + BALL_SIZE > SCREEN_WIDTH:
            self._ball_pos = SERVE_POSITIONS[0]
            vx, vy = -START_SPEED, START_SPEED
            self.score1 += 1
            events.append(POINT)

        self._prev = self.ball
        px, py = self._ball_pos
        self._ball_pos = (px + vx * delta, py + vy * delta)
        self.ball = self._ball_pos
        self.velocity = (vx, vy)

        self.player = _clamp(self.player).moved(0, player_dy)
        self.ai = _clamp(self.ai).moved(0, ai_dy)
        return events


def _clamp(paddle: Rect) -> Rect:
    if paddle.y < 0:
        return paddle.moved(0, -paddle.y)
    if paddle.y + paddle.height > SCREEN_HEIGHT:
        return paddle.moved(0, SCREEN_HEIGHT - paddle.height - paddle.y)
    return paddle