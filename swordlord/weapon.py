"""Base class for weapons, which also drive the player's sprite animation."""

from abc import ABC, abstractmethod
from enum import Enum

import pygame

from swordlord.states import PlayerState
from swordlord.tiles import Rect

MAX_PLAYER_ATTACKS = 100

_SHEET_GAP = 16
_DRAW_OFFSET_X = 1090.0
_DRAW_OFFSET_X_FLIPPED = 1152.0
_DRAW_OFFSET_Y = 905.0
_RENDER_SCALE = 3


class WeaponType(Enum):
    NO_ITEM = 0
    SWORD = 1
    BOW = 2
    WAND = 3


class Swords(Enum):
    DEFAULT_SWORD = 0
    SAMURAI_SWORD = 1


class Weapon(ABC):
    """A weapon with its sprite sheet, animation state and attack hitboxes."""

    def __init__(self, renderer):
        self.renderer = renderer
        self.sprite = None
        self.weapon_type = WeaponType.NO_ITEM
        self.base_damage = 0.0
        self.rarity = 0.0
        self.frame_width = 0
        self.frame_height = 0
        self.current_frame = 0
        self.animation_time = 0.0
        self.animation_speed = 100.0
        self.attacking = False
        self.attack_animation_done = True
        self.frame_counts = {}
        self.animation_state = self.assign_animation_state(PlayerState.IDLE)
        self.src_rect = pygame.Rect(0, 0, 0, 0)
        self.dest_rect = Rect()
        self.collision_box = Rect()
        self.attack_hitboxes = [Rect() for _ in range(MAX_PLAYER_ATTACKS)]

    @staticmethod
    def _load_sprite(path):
        try:
            return pygame.image.load(path)
        except (pygame.error, OSError):
            return None

    @abstractmethod
    def assign_animation_state(self, player_state):
        """Map a player state to this weapon's sprite-sheet row."""

    def animate(self, delta_time, player_state):
        """Advance the animation; a finished attack resets to frame 0."""
        if not isinstance(player_state, PlayerState):
            raise TypeError(f"invalid animation state: {player_state!r}")
        state = self.assign_animation_state(player_state)
        self.animation_state = state
        self.animation_time += delta_time * 1000.0
        if self.animation_time < self.animation_speed:
            return
        max_frames = self.frame_counts[state]
        self.current_frame += 1
        attack_state = self.assign_animation_state(PlayerState.ATTACK_LMB)
        if state == attack_state and self.current_frame >= max_frames:
            self.attacking = False
            self.attack_animation_done = True
            self.current_frame = 0
        else:
            self.current_frame %= max_frames
        self.animation_time = 0.0

    def update(self, delta_time):
        """Weapons keep no per-frame state beyond their animation."""

    def render(self, flip):
        """Draw the current frame; flip mirrors it horizontally."""
        fw, fh = self.frame_width, self.frame_height
        self.src_rect = pygame.Rect(
            self.current_frame * (fw + _SHEET_GAP), self.animation_state.value * fh, fw, fh
        )
        offset_x = _DRAW_OFFSET_X_FLIPPED if flip else _DRAW_OFFSET_X
        self.dest_rect = Rect(
            self.collision_box.x + offset_x,
            self.collision_box.y + _DRAW_OFFSET_Y,
            fw * _RENDER_SCALE,
            fh * _RENDER_SCALE,
        )
        if self.sprite is None or self.renderer is None or fw <= 0 or fh <= 0:
            return
        frame = pygame.Surface(self.src_rect.size, pygame.SRCALPHA)
        frame.blit(self.sprite, (0, 0), self.src_rect)
        frame = pygame.transform.scale(frame, (int(self.dest_rect.w), int(self.dest_rect.h)))
        if flip:
            frame = pygame.transform.flip(frame, True, False)
        self.renderer.blit(frame, (round(self.dest_rect.x), round(self.dest_rect.y)))

    def attack_collision_boxes(self):
        """Copies of the attack hitboxes."""
        return [Rect(b.x, b.y, b.w, b.h) for b in self.attack_hitboxes]