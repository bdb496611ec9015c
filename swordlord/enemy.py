"""Base class for enemies: health, hitbox, tile collision and drawing helpers."""

from abc import ABC, abstractmethod

import pygame

from swordlord.tiles import Rect

_HEALTH_BAR_BORDER_COLOR = (0, 0, 0)
_HEALTH_BAR_COLOR = (255, 0, 0)


class Enemy(ABC):
    """An enemy placed in a level that reacts to the player."""

    def __init__(self, window, floor_rect=None):
        self.renderer = window.surface
        self.floor_rect = floor_rect if floor_rect is not None else Rect()
        self.sprite = None
        self.enemy_rect = Rect()
        self.health_bar = Rect()
        self.health_bar_border = Rect()
        self.health = 0
        self.damage = 0
        self.speed = 0
        self.attack_done = False
        self.is_dead_and_gone = False
        self.is_falling = False
        self.tiles = None
        self.camera_x = 0
        self.camera_y = 0
        self.flip = False
        self._box = Rect()

    @staticmethod
    def _load_sprite(path):
        try:
            return pygame.image.load(path)
        except (pygame.error, OSError):
            return None

    def take_damage(self, amount):
        """Subtract amount from the enemy's health."""
        self.health -= amount

    def is_alive(self):
        return self.health > 0

    @property
    def rect(self):
        """A copy of the enemy's spawn rectangle."""
        return Rect(self.enemy_rect.x, self.enemy_rect.y, self.enemy_rect.w, self.enemy_rect.h)

    def set_tiles(self, tiles):
        self.tiles = tiles

    def set_position(self, x, y):
        """Place the enemy's hitbox at a world position."""
        self._box.x = float(x)
        self._box.y = float(y)

    def set_camera_offset(self, x, y):
        """Set the camera; coordinates are truncated to whole pixels."""
        self.camera_x = int(x)
        self.camera_y = int(y)

    def collision_box(self):
        """A copy of the enemy's hitbox."""
        return Rect(self._box.x, self._box.y, self._box.w, self._box.h)

    def _solid_tiles(self):
        return (tile for tile in (self.tiles or ()) if tile.solid)

    def _sweep_x(self, future, velocity):
        """Push future out of solid tiles horizontally; return (velocity, hit)."""
        hit = False
        for tile in self._solid_tiles():
            if future.intersects(tile.rect):
                if velocity > 0:
                    future.x = tile.rect.x - future.w
                elif velocity < 0:
                    future.x = tile.rect.x + tile.rect.w
                velocity = 0
                hit = True
        return velocity, hit

    def _sweep_y(self, future, velocity):
        """Push future out of solid tiles vertically; return (velocity, hit)."""
        hit = False
        for tile in self._solid_tiles():
            if future.intersects(tile.rect):
                if velocity > 0:
                    future.y = tile.rect.y - future.h
                    self.is_falling = False
                elif velocity < 0:
                    future.y = tile.rect.y + tile.rect.h
                velocity = 0
                hit = True
        return velocity, hit

    def _blit_frame(self, src, dest, flip):
        if self.renderer is None or self.sprite is None or src.w <= 0 or src.h <= 0:
            return
        frame = pygame.Surface(src.size, pygame.SRCALPHA)
        frame.blit(self.sprite, (0, 0), src)
        frame = pygame.transform.scale(frame, (int(dest.w), int(dest.h)))
        if flip:
            frame = pygame.transform.flip(frame, True, False)
        self.renderer.blit(frame, (round(dest.x), round(dest.y)))

    def _draw_health_bar(self):
        if self.renderer is None:
            return
        for bar, color in (
            (self.health_bar_border, _HEALTH_BAR_BORDER_COLOR),
            (self.health_bar, _HEALTH_BAR_COLOR),
        ):
            rect = pygame.Rect(
                round(bar.x - self.camera_x),
                round(bar.y - self.camera_y),
                round(bar.w),
                round(bar.h),
            )
            pygame.draw.rect(self.renderer, color, rect)

    @abstractmethod
    def update(self, player, player_box, player_attack_boxes, delta_time):
        """Advance one frame given the player and its hitboxes."""

    @abstractmethod
    def render(self):
        """Draw the enemy relative to the camera."""