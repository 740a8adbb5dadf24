"""Bullets and the magazine that keeps them flying."""

from __future__ import annotations

from collections.abc import Iterator

import pygame

from mutiny.collision import FloatRect

BULLET_SPEED = 400.0
BULLET_SIZE = (10.0, 5.0)
BULLET_COLOR = (255, 255, 255)
FIELD_WIDTH = 800
FIELD_HEIGHT = 600


class Bullet:
    """A small rectangle travelling in a fixed direction."""

    def __init__(self, position=(0.0, 0.0)) -> None:
        self.position = pygame.Vector2(position)
        self.direction = pygame.Vector2(0.0, 0.0)
        self.speed = BULLET_SPEED

    @property
    def rect(self) -> FloatRect:
        return FloatRect(self.position.x, self.position.y, *BULLET_SIZE)

    def aim_at(self, target) -> None:
        """Point the bullet at target with a unit direction; a target on the bullet leaves it still."""
        offset = pygame.Vector2(target) - self.position
        self.direction = offset.normalize() if offset.length() > 0 else pygame.Vector2(0.0, 0.0)

    def move(self, delta_time: float) -> None:
        self.position += self.direction * self.speed * delta_time

    def draw(self, surface: pygame.Surface) -> None:
        width, height = BULLET_SIZE
        pygame.draw.rect(
            surface,
            BULLET_COLOR,
            pygame.Rect(round(self.position.x), round(self.position.y), int(width), int(height)),
        )


def _out_of_field(bullet: Bullet) -> bool:
    x, y = bullet.position
    return x < 0 or x > FIELD_WIDTH or y < 0 or y > FIELD_HEIGHT


class Mag:
    """The bullets a shooter has in flight."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.bullets: list[Bullet] = []

    def try_add_bullet(self, bullet: Bullet) -> bool:
        """Add a bullet; the capacity is not enforced, so this always succeeds."""
        self.bullets.append(bullet)
        return True

    def update_bullets(self, delta_time: float) -> None:
        """Drop bullets that left the field, then move the rest."""
        self.bullets = [b for b in self.bullets if not _out_of_field(b)]
        for bullet in self.bullets:
            bullet.move(delta_time)

    def draw(self, surface: pygame.Surface) -> None:
        for bullet in self.bullets:
            bullet.draw(surface)

    def __len__(self) -> int:
        return len(self.bullets)

    def __iter__(self) -> Iterator[Bullet]:
        return iter(self.bullets)