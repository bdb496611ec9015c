"""Mr Professor Wurst, a stationary enemy that turns to face the player."""

from enum import Enum

import pygame

from swordlord.enemy import Enemy
from swordlord.tiles import Rect

SPRITE_PATH = "assets/enemies/MrProfessorWurst.png"

_FACING_THRESHOLD = 48
_RENDER_SCALE = 3


class EnemyStateMrProfessorWurst(Enum):
    """Animation rows of the Mr Professor Wurst sprite sheet."""

    IDLE = 0
    WALK = 1
    ATTACK = 2


class MrProfessorWurst(Enemy):
    """An enemy that idles in place and looks towards the player."""

    def __init__(self, window, x, y, floor_rect=None, sprite_path=SPRITE_PATH):
        super().__init__(window, floor_rect)
        self.frame_width = 32
        self.frame_height = 32
        self.velocity_x = 0
        self.velocity_y = 0
        self.health = 0
        self.damage = 0
        self.speed = 0
        self.is_attacking = False
        self.animation_speed = 25
        self.animation_timer = 0
        self.current_frame = 0
        self.attack_done = False
        self.animation_state = EnemyStateMrProfessorWurst.IDLE
        self.sprite = self._load_sprite(sprite_path)

        self.enemy_rect = Rect(float(x), float(y), 64.0, 64.0)
        self._box = Rect(float(x), float(y), 64.0, 64.0)

        self.frame_counts = {EnemyStateMrProfessorWurst.IDLE: 8}
        self.src_rect = pygame.Rect(0, 0, 0, 0)
        self.dest_rect = Rect()

    def animate(self):
        """Advance one frame every animation_speed updates."""
        self.animation_timer += 1
        if self.animation_timer >= self.animation_speed:
            self.current_frame = (self.current_frame + 1) % self.frame_counts[self.animation_state]
            self.animation_timer = 0

    def update(self, player, player_box, player_attack_boxes, delta_time):
        if self.is_attacking:
            self.animation_state = EnemyStateMrProfessorWurst.ATTACK
        else:
            self.velocity_x = 0
            self.animation_state = EnemyStateMrProfessorWurst.IDLE
            self.flip = not (player_box.x - self._box.x < _FACING_THRESHOLD)
        self.animate()

        future_x = self._box.moved(self.velocity_x, 0.0)
        self.velocity_x, _ = self._sweep_x(future_x, self.velocity_x)

        future_y = self._box.moved(0.0, self.velocity_y)
        self.velocity_y, _ = self._sweep_y(future_y, self.velocity_y)

        self._box.x = future_x.x
        self._box.y = future_y.y

    def render(self):
        fw, fh = self.frame_width, self.frame_height
        self.src_rect = pygame.Rect(
            self.current_frame * fw, self.animation_state.value * fh, fw, fh
        )
        offset_x = -32 if self.flip else 0
        self.dest_rect = Rect(
            self._box.x - self.camera_x + offset_x,
            self._box.y - self.camera_y,
            fw * _RENDER_SCALE,
            fh * _RENDER_SCALE,
        )
        self._blit_frame(self.src_rect, self.dest_rect, self.flip)