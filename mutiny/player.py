"""The player: movement, shooting and crew roles."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame

from mutiny.bullet import Bullet, Mag
from mutiny.collision import FloatRect
from mutiny.npc import NPC, SPRITE_SCALE, SPRITE_SIZE, _draw_outline, _load_frame

PLAYER_SPEED = 120.0
MAG_CAPACITY = 10
STARTING_PISTOLS = 3


class DutyBase(ABC):
    """A role a player can hold on board."""

    title = "crew"

    @abstractmethod
    def perform_action(self, player: Player) -> None:
        """Carry out the role's action for player."""


class CaptainRole(DutyBase):
    """The captain's role."""

    title = "captain"

    def perform_action(self, player: Player) -> None:
        """Record that the player acted as captain."""
        player.duties_performed.append(self.title)


class NavigatorRole(DutyBase):
    """The navigator's role."""

    title = "navigator"

    def perform_action(self, player: Player) -> None:
        """Record that the player acted as navigator."""
        player.duties_performed.append(self.title)


class Player:
    """A keyboard-driven character that fires bullets at an enemy."""

    def __init__(self, sprite_path, x_index: int, y_index: int) -> None:
        self.scale = SPRITE_SCALE
        self.image = _load_frame(sprite_path, x_index, y_index, self.scale)
        self.position = pygame.Vector2(0.0, 0.0)
        size = SPRITE_SIZE * self.scale
        self.bounding_rect = FloatRect(0.0, 0.0, size, size)
        self.mag = Mag(MAG_CAPACITY)
        self.speed = PLAYER_SPEED
        self.pistols = STARTING_PISTOLS
        self.role: DutyBase | None = None
        self.duties_performed: list[str] = []

    def _sync_bounds(self) -> None:
        self.bounding_rect = FloatRect(
            self.position.x, self.position.y, self.bounding_rect.width, self.bounding_rect.height
        )

    def handle_movement(self, keys, delta_time: float) -> None:
        """Move with W/A/S/D; keys is indexed by pygame key codes."""
        step = self.speed * delta_time
        if keys[pygame.K_w]:
            self.position.y -= step
        if keys[pygame.K_a]:
            self.position.x -= step
        if keys[pygame.K_s]:
            self.position.y += step
        if keys[pygame.K_d]:
            self.position.x += step
        self._sync_bounds()

    def handle_shooting(self, enemy: NPC, keys, can_shoot: bool, delta_time: float) -> None:
        """Fire at enemy while space is held and shooting is allowed, then advance bullets."""
        if keys[pygame.K_SPACE] and can_shoot:
            bullet = Bullet(self.position)
            bullet.aim_at(enemy.position)
            self.mag.try_add_bullet(bullet)
        self.mag.update_bullets(delta_time)

    def draw(self, surface: pygame.Surface) -> None:
        if self.image is not None:
            surface.blit(self.image, (round(self.position.x), round(self.position.y)))
        _draw_outline(surface, self.bounding_rect)

    def perform_role_action(self) -> None:
        if self.role is not None:
            self.role.perform_action(self)