"""The main game: one player shooting at one enemy in an 800x600 window."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from mutiny.npc import NPC
from mutiny.player import Player

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "window"
BACKGROUND_COLOR = (0, 0, 0)
DEFAULT_SPRITE_PATH = "assets/player/textures/spritesheet.png"
PLAYER_CELL = (0, 0)
ENEMY_CELL = (4, 2)


class Game:
    """The state of one game: the player, the enemy and whether shooting is allowed."""

    def __init__(self, sprite_path=DEFAULT_SPRITE_PATH) -> None:
        self.player = Player(sprite_path, *PLAYER_CELL)
        self.enemy = NPC(sprite_path, *ENEMY_CELL)
        self.can_shoot = True
        self.running = True

    def handle_events(self, events: Iterable[pygame.event.Event]) -> bool:
        """React to window events; return whether the game is still running."""
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            if event.type == pygame.KEYUP and event.key == pygame.K_SPACE:
                self.can_shoot = True
        return self.running

    def update(self, keys, delta_time: float) -> None:
        """Advance the player and its bullets by delta_time seconds."""
        self.player.handle_movement(keys, delta_time)
        self.player.handle_shooting(self.enemy, keys, self.can_shoot, delta_time)

    def draw(self, surface: pygame.Surface) -> None:
        """Clear the surface and draw the player, its bullets and the enemy."""
        surface.fill(BACKGROUND_COLOR)
        self.player.draw(surface)
        self.player.mag.draw(surface)
        self.enemy.draw(surface)


def play_game(sprite_path=DEFAULT_SPRITE_PATH) -> Game:
    """Open the window and run the game loop until it is closed; return the final game."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        game = Game(sprite_path)
        clock = pygame.time.Clock()
        while game.running:
            delta_time = clock.tick() / 1000.0
            if not game.handle_events(pygame.event.get()):
                break
            game.update(pygame.key.get_pressed(), delta_time)
            game.draw(screen)
            pygame.display.flip()
        return game
    finally:
        pygame.quit()