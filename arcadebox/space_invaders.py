"""Cannon, marching invaders, crumbling shields and bullets."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .geometry import SCREEN_HEIGHT, SCREEN_WIDTH, Rect
from .scores import HighScore
from .shield import Shield

SCALE = 3.0
COLUMNS, ROWS = 10, 6
OFFSET = (30.0, 50.0)
CANNON_SIZE = (13.0, 8.0)
BULLET_SIZE = (1.0, 4.0)
CANNON_SPEED = 300.0
BULLET_SPEED = -700.0
INVADER_SPEED = 50.0
LIVES = 3
SHOOT_DELAY = 0.3
ALIEN_DELAY = 0.3
DEATH_DELAY = 1.0
EXPLOSION_DELAY = 0.2
SHIELD_POSITIONS = ((64, 350), (208, 350), (352, 350), (492, 350))
DEAD_POSITION = (50.0, -50.0)

# (sprite size, spacing) for each pair of rows, top to bottom
_ROW_STYLES = (
    ((8.0, 8.0), (17.0, 5.0)),
    ((11.0, 8.0), (8.0, 5.0)),
    ((12.0, 8.0), (5.0, 5.0)),
)
_ROW_POINTS = (30, 30, 20, 20, 10, 10)

Vector = tuple[float, float]


@dataclass
class Projectile:
    """A bullet travelling vertically; negative speed goes up."""

    x: float
    y: float
    speed: float = BULLET_SPEED

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, BULLET_SIZE[0] * SCALE, BULLET_SIZE[1] * SCALE)

    def update(self, delta: float) -> None:
        """Move by the speed over ``delta`` seconds."""
        self.y += self.speed * delta


@dataclass
class Invader:
    """One alien in the formation."""

    x: float
    y: float
    width: float
    height: float
    speedx: float = INVADER_SPEED
    alive: bool = True

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass
class _Explosion:
    x: float
    y: float
    kind: str
    age: float = 0.0


def _make_invader(column: int, row: int) -> Invader:
    (width, height), (space_x, space_y) = _ROW_STYLES[row // 2]
    return Invader(
        x=column * (width * SCALE + space_x) + OFFSET[0],
        y=row * (height * SCALE + space_y) + OFFSET[1],
        width=width * SCALE,
        height=height * SCALE,
    )


class SpaceInvaders:
    """Whole game state; ``invaders[column][row]`` holds the formation."""

    def __init__(self, rng: random.Random | None = None, highscore: HighScore | None = None) -> None:
        self.rng = random.Random() if rng is None else rng
        self.highscore = HighScore() if highscore is None else highscore
        self.score = 0
        self.lives = LIVES
        self.game_over = False
        self.transition = False
        self.cannon: Vector = (SCREEN_WIDTH / 2, float(SCREEN_HEIGHT // 12 * 11))
        self.death_position: Vector = self.cannon
        self.bullets: list[Projectile] = []
        self.alien_bullets: list[Projectile] = []
        self.explosions: list[_Explosion] = []
        self.shoot_timer = 0.0
        self.alien_timer = 0.0
        self.death_timer = 0.0
        self.shields = self._make_shields()
        self.invaders: list[list[Invader]] = []
        self.alien_index: list[int] = []
        self.in_there = True
        self.new_wave()

    def _make_shields(self) -> list[Shield]:
        return [Shield(x, y, self.rng) for x, y in SHIELD_POSITIONS]

    @property
    def cannon_rect(self) -> Rect:
        return Rect(self.cannon[0], self.cannon[1], CANNON_SIZE[0] * SCALE, CANNON_SIZE[1] * SCALE)

    def new_wave(self) -> None:
        """Put a fresh formation of invaders on the field."""
        self.invaders = [[_make_invader(x, y) for y in range(ROWS)] for x in range(COLUMNS)]
        self.alien_index = [ROWS - 1] * COLUMNS
        self.in_there = True

    def restart(self) -> None:
        """Start a new game after a game over."""
        self.game_over = False
        self.lives = LIVES
        self.score = 0
        self.shields = self._make_shields()
        self.new_wave()

    def _move_cannon(self, delta: float, left: bool, right: bool) -> None:
        dx = 0.0
        if left:
            dx = -CANNON_SPEED * delta
        if right:
            dx = CANNON_SPEED * delta
        width = CANNON_SIZE[0] * SCALE
        x = min(max(self.cannon[0] + dx, 0.0), SCREEN_WIDTH - width)
        self.cannon = (x, self.cannon[1])

    def _fire_alien(self) -> None:
        columns = [c for c, index in enumerate(self.alien_index) if index >= 0]
        if not columns:
            return
        column = self.rng.choice(columns)
        shooter = self.invaders[column][self.alien_index[column]]
        self.alien_bullets.append(
            Projectile(
                shooter.x + BULLET_SIZE[0] / 2,
                shooter.y + BULLET_SIZE[1] + 1,
                -BULLET_SPEED,
            )
        )

    def _hit_invader(self, bullet: Projectile) -> bool:
        for column, invaders in enumerate(self.invaders):
            for row, invader in enumerate(invaders):
                if not invader.alive or not bullet.rect.intersects(invader.rect):
                    continue
                self.explosions.append(_Explosion(invader.x, invader.y, "invader"))
                invader.speedx = 0.0
                invader.x, invader.y = DEAD_POSITION
                invader.alive = False
                self.score += _ROW_POINTS[row]
                self.in_there = any(inv.y > 0 for col in self.invaders for inv in col)
                self.alien_index[column] -= 1
                return True
        return False

    def _hit_shield(self, bullet: Projectile) -> bool:
        size = (BULLET_SIZE[0] * SCALE, BULLET_SIZE[1] * SCALE)
        rect = bullet.rect
        for shield in self.shields:
            if not rect.intersects(shield.rect):
                continue
            for part in shield.parts:
                if part.rect.intersects(rect) and part.hit((bullet.x, bullet.y), size):
                    return True
        return False

    def _collide_bullets(self) -> None:
        survivors = []
        for bullet in self.bullets:
            target = next(
                (alien for alien in self.alien_bullets if bullet.rect.intersects(alien.rect)),
                None,
            )
            if target is None:
                survivors.append(bullet)
                continue
            self.explosions.append(_Explosion(target.x, target.y, "bullet"))
            self.alien_bullets.remove(target)
        self.bullets = survivors

    def _cannon_hit(self) -> None:
        cannon = self.cannon_rect
        for alien in list(self.alien_bullets):
            if not cannon.intersects(alien.rect):
                continue
            self.bullets.clear()
            self.alien_bullets.clear()
            self.transition = True
            self.death_timer = 0.0
            self.death_position = self.cannon
            self.lives -= 1
            if self.lives <= 0:
                self.game_over = True

    def _turn_formation(self) -> None:
        reversed_speed = None
        for column in self.invaders:
            for invader in column:
                if invader.x < 0 or invader.x + invader.width > SCREEN_WIDTH:
                    reversed_speed = -invader.speedx
                    break
            if reversed_speed is not None:
                break
        if reversed_speed is None:
            return
        for column in self.invaders:
            for invader in column:
                if invader.alive:
                    invader.speedx = reversed_speed

    def step(self, delta: float, left: bool = False, right: bool = False, shoot: bool = False) -> None:
        """Advance the game by ``delta`` seconds with the given input."""
        self.highscore.update(self.score)
        self.shoot_timer += delta

        if not self.game_over:
            if not self.transition:
                self.death_timer = 0.0
                if shoot and self.shoot_timer > SHOOT_DELAY:
                    x, y = self.cannon
                    self.bullets.append(
                        Projectile(
                            x + (CANNON_SIZE[0] / 2 - 0.5) * SCALE,
                            y - BULLET_SIZE[1] * SCALE,
                        )
                    )
                    self.shoot_timer = 0.0
                self._move_cannon(delta, left, right)

                for explosion in self.explosions:
                    explosion.age += delta
                self.explosions = [e for e in self.explosions if e.age <= EXPLOSION_DELAY]

                self.alien_timer += delta
                if self.alien_timer > ALIEN_DELAY:
                    self.alien_timer = 0.0
                    self._fire_alien()

                self.bullets = [b for b in self.bullets if not self._hit_invader(b)]
                self._collide_bullets()
                self._cannon_hit()
                self.alien_bullets = [b for b in self.alien_bullets if not self._hit_shield(b)]
                self.bullets = [b for b in self.bullets if not self._hit_shield(b)]
                self.bullets = [b for b in self.bullets if -30 <= b.y <= SCREEN_HEIGHT]

                self._turn_formation()
                for bullet in (*self.bullets, *self.alien_bullets):
                    bullet.update(delta)
                for column in self.invaders:
                    for invader in column:
                        invader.x += invader.speedx * delta
            else:
                self.death_timer += delta
                if self.death_timer > DEATH_DELAY:
                    self.transition = False

        if not self.in_there:
            self.new_wave()