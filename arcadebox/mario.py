"""The platform hero: walking, jumping, growing and dying."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .geometry import SCREEN_HEIGHT, SCREEN_WIDTH, Rect

TILE = (16.0, 16.0)
WALK_SPEED = 200.0
SPRINT_FACTOR = 1.6
GRAVITY = 400.0
JUMP = GRAVITY
SHOOT_DELAY = 0.4
INVINCIBLE_TIME = 3.5
JUMP_TIME = 0.3
MIN_JUMP_TIME = 0.12
JUMP_COOLDOWN = 0.2
ANIMATION_DELAY = 0.1

SMALL, BIG, SHINY = "small", "big", "shiny"

Vector = tuple[float, float]


@dataclass
class _Animation:
    row: int = 0
    swap: int = 0
    max_swap: int = 0
    cycle: bool = True
    delay: float = ANIMATION_DELAY


class Mario:
    """Player physics and animation state.

    ``contacts`` passed to :meth:`update` tells which of the four hit
    boxes (top, bottom, left, right) touch solid blocks.
    """

    def __init__(self, x: float, y: float, tile: Vector = TILE) -> None:
        self.tile = tile
        self.x, self.y = x, y
        self._prev: Vector = (x, y)
        self.box_x, self.box_y = x, y
        self.width, self.height = tile
        self._inset = 2
        self.appearance = SMALL
        self.animation = _Animation()

        self.speed = WALK_SPEED
        self.sprint_speed = SPRINT_FACTOR
        self.show_hitbox = False
        self.big = False
        self.shiny = False
        self.can_shoot = False
        self.facing_right = True
        self.alive = True
        self.invincible = False
        self.ground_touch = False

        self._invincible_timer = 0.0
        self._jumping = False
        self._can_left = True
        self._can_right = True
        self._check_big = False
        self._check_shiny = False
        self._shoot_timer = 0.0
        self._jump_timer = 0.0
        self._cooldown_timer = 0.0
        self._no_delay = True
        self._prev_right = False
        self._prev_up = False
        self._prev_left = False

    @property
    def rect(self) -> Rect:
        return Rect(self.box_x, self.box_y, self.width, self.height)

    def hitboxes(self) -> list[Rect]:
        """Thin boxes along the top, bottom, left and right edges."""
        x, y, w, h = self.box_x, self.box_y, self.width, self.height
        across = w - self._inset
        down = h - 3
        return [
            Rect(x + 1, y, across, 1),
            Rect(x + 1, y + h, across, 1),
            Rect(x - 1, y + 1, 1, down),
            Rect(x + w + 1, y + 1, 1, down),
        ]

    def _place_box(self) -> None:
        self.box_x, self.box_y = self.x, self.y

    def _change_form(self, elapsed: float) -> None:
        tile_w, tile_h = self.tile
        if self.big and self.shiny and not self._check_shiny:
            self._check_shiny = True
            self.appearance = SHINY
            self.width, self.height = tile_w, tile_h * 2
            self._prev = (self.x, self.y)
        if self.big and not self._check_big:
            self._check_big = True
            self._check_shiny = False
            self.appearance = BIG
            self.width, self.height = tile_w, tile_h * 2
            self._inset = 3
            self.y -= tile_h
            self._prev = (self.x, self.y)
            self._place_box()
        if not self.big and self._check_big:
            self._check_big = False
            self._check_shiny = False
            self.appearance = SMALL
            self.width, self.height = tile_w, tile_h
            self._inset = 3

        if self.invincible:
            self._invincible_timer += elapsed
            if self._invincible_timer > INVINCIBLE_TIME:
                self.invincible = False
                self._invincible_timer = 0.0

        if self.shiny:
            self._shoot_timer += elapsed
            if self._shoot_timer > SHOOT_DELAY:
                self.can_shoot = True
                self._shoot_timer = 0.0
            else:
                self.can_shoot = False

    def _animate(self, left: bool, right: bool, up: bool) -> None:
        anim = self.animation
        if right and (not self._prev_right or not self._prev_up):
            anim.cycle, anim.max_swap, anim.row = True, 3, 0
        elif left and (not self._prev_left or self._prev_up):
            anim.cycle, anim.max_swap, anim.row = True, 3, 1
        elif not left and not right and not up:
            if self._prev_right or not self._prev_up:
                anim.cycle, anim.row, anim.swap = False, 0, 0
            elif self._prev_left or self._prev_up:
                anim.cycle, anim.row, anim.swap = False, 1, 0

        if up:
            anim.cycle, anim.swap = False, 4
            if self._prev_right:
                anim.row = 0
                self._prev_up = True
            elif self._prev_left:
                anim.row = 1
                self._prev_up = False

        if right:
            self._prev_right, self._prev_left, self._prev_up = True, False, False
            self.facing_right = True
        elif left:
            self._prev_left, self._prev_right, self._prev_up = True, False, True
            self.facing_right = False
        elif not up:
            self._prev_left = self._prev_right = False

    def update(
        self,
        left: bool = False,
        right: bool = False,
        up: bool = False,
        contacts: Sequence[bool] = (False, False, False, False),
        delta: float = 0.0,
        sprint: bool = False,
    ) -> bool:
        """Advance by ``delta`` seconds.

        Returns True when the player walks right past the middle of the
        screen, meaning the world should scroll instead.
        """
        self._change_form(delta)

        top, bottom, side_left, side_right = (bool(c) for c in contacts)
        self._can_left = self._can_right = True
        self.ground_touch = False
        if top:
            self._jumping = False
            self.y = self._prev[1]
        if bottom:
            self.ground_touch = True
            self.y = self._prev[1]
        if side_left:
            self._can_left = False
            self.x = self._prev[0]
        if side_right:
            self._can_right = False
            self.x = self._prev[0]

        scroll = False
        if self.x <= SCREEN_WIDTH // 2 or left:
            if left and self._can_left:
                self.x -= self.speed * delta
            elif right and self._can_right:
                self.x += self.speed * delta
        elif right and self._can_right:
            scroll = True
        self.x = max(self.x, 0.0)

        if not self._jumping and not self.ground_touch:
            self.y += GRAVITY * delta
        if self.y + self.height > SCREEN_HEIGHT:
            self.alive = False

        if not self._jumping:
            self._cooldown_timer += delta
            if self._cooldown_timer > JUMP_COOLDOWN:
                self._no_delay = True
                self._cooldown_timer = 0.0
            else:
                self._no_delay = False
        else:
            self._cooldown_timer = 0.0

        if up and self.ground_touch and self._no_delay:
            self._jumping = True

        if self._jumping:
            if not up and self._jump_timer > MIN_JUMP_TIME:
                self._jumping = False
                self._jump_timer = 0.0
            self._jump_timer += delta
            if self._jump_timer > JUMP_TIME:
                self._jumping = False
                self._jump_timer = 0.0
            else:
                self.y -= JUMP * delta

        self._prev = (self.x, self.y)
        self._place_box()
        self._animate(left, right, up)
        return scroll

    def death_step(self, elapsed: float) -> bool:
        """Play the death hop; return True once the player has dropped off screen."""
        self._jump_timer += elapsed
        done = False
        if self._jump_timer < JUMP_TIME / 2:
            self.y -= JUMP / 2
        else:
            self.y += JUMP / 2
            done = self.y > SCREEN_HEIGHT + self.height
        self.animation.cycle = False
        self.animation.row = 2
        self.animation.swap = 0
        self._place_box()
        return done