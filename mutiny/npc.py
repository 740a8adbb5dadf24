"""A non-player character drawn from a sprite sheet."""

from __future__ import annotations

import pygame

from mutiny.collision import FloatRect

SPRITE_SIZE = 64
SPRITE_SCALE = 1.0
OUTLINE_COLOR = (255, 0, 0)
OUTLINE_THICKNESS = 2


def _load_frame(sprite_path, x_index: int, y_index: int, scale: float) -> pygame.Surface | None:
    """Cut one cell out of a sprite sheet, or return None if the sheet cannot be read."""
    try:
        sheet = pygame.image.load(str(sprite_path))
    except (pygame.error, OSError):
        print("Player image failed to load")
        return None
    print("Player Images Loaded")
    cell = pygame.Rect(SPRITE_SIZE * x_index, SPRITE_SIZE * y_index, SPRITE_SIZE, SPRITE_SIZE)
    frame = sheet.subsurface(cell.clip(sheet.get_rect())).copy()
    if scale != 1.0:
        size = (round(frame.get_width() * scale), round(frame.get_height() * scale))
        frame = pygame.transform.scale(frame, size)
    return frame


def _draw_outline(surface: pygame.Surface, bounds: FloatRect) -> None:
    rect = pygame.Rect(round(bounds.left), round(bounds.top), round(bounds.width), round(bounds.height))
    pygame.draw.rect(
        surface,
        OUTLINE_COLOR,
        rect.inflate(2 * OUTLINE_THICKNESS, 2 * OUTLINE_THICKNESS),
        OUTLINE_THICKNESS,
    )


class NPC:
    """A stationary character with a red bounding box."""

    def __init__(self, sprite_path, x_index: int, y_index: int) -> None:
        self.scale = SPRITE_SCALE
        self.image = _load_frame(sprite_path, x_index, y_index, self.scale)
        self.position = pygame.Vector2(0.0, 0.0)
        size = SPRITE_SIZE * self.scale
        self.bounding_rect = FloatRect(0.0, 0.0, size, size)

    def handle_movement(self) -> None:
        """Bring the bounding box to the sprite's position."""
        self.bounding_rect = FloatRect(
            self.position.x, self.position.y, self.bounding_rect.width, self.bounding_rect.height
        )

    def draw(self, surface: pygame.Surface) -> None:
        if self.image is not None:
            surface.blit(self.image, (round(self.position.x), round(self.position.y)))
        _draw_outline(surface, self.bounding_rect)