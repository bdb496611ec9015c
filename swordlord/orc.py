"""The Orc, a slow enemy that walks towards the player and can be slain."""

from enum import Enum

import pygame

from swordlord.enemy import Enemy
from swordlord.tiles import Rect

SPRITE_PATH = "assets/enemies/Orc.png"

_DETECTION_RANGE = 200
_SHEET_GAP = 36
_RENDER_SCALE = 3
_HITS_TO_EMPTY_BAR = 5
_HEALTH_BAR_RAISE = 5


class OrcEnemyState(Enum):
    """Animation rows of the Orc sprite sheet."""

    IDLE = 0
    WALKING = 1
    BASIC_ATTACK = 2
    HEAVY_ATTACK = 3
    IS_HIT = 4
    IS_DEAD = 5


# Extra source-row offset and vertical draw offset per state; the sheet is irregular.
_STATE_LAYOUT = {
    OrcEnemyState.IDLE: (0, -110),
    OrcEnemyState.WALKING: (32, -120),
    OrcEnemyState.BASIC_ATTACK: (32, -128),
    OrcEnemyState.HEAVY_ATTACK: (64, -80),
    OrcEnemyState.IS_HIT: (64, -128),
    OrcEnemyState.IS_DEAD: (64, -128),
}


class Orc(Enemy):
    """A melee enemy that walks slowly towards the player until it is close."""

    ENEMY_SPEED = 80.0

    def __init__(self, window, x, y, floor_rect=None, sprite_path=SPRITE_PATH):
        super().__init__(window, floor_rect)
        self.frame_width = 64
        self.frame_height = 64
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.health = 3
        self.damage = 15
        self.speed = 1
        self.is_attacking = False
        self.animation_speed = 20
        self.animation_timer = 0
        self.current_frame = 0
        self.move_x = 0.0
        self.move_y = 0.0
        self.attack_done = False
        self.animation_state = OrcEnemyState.IDLE
        self.sprite = self._load_sprite(sprite_path)

        self.enemy_rect = Rect(float(x), float(y), 64.0, 64.0)
        self._box = Rect(float(x), float(y), 64.0, 64.0)
        self.health_bar = Rect(float(x), float(y), 54.0, 8.0)
        self.health_bar_full_size = self.health_bar.w
        self.health_bar_border = Rect(float(x), float(y), 56.0, 10.0)

        self.frame_counts = {
            OrcEnemyState.IDLE: 6,
            OrcEnemyState.WALKING: 8,
            OrcEnemyState.BASIC_ATTACK: 6,
            OrcEnemyState.HEAVY_ATTACK: 6,
            OrcEnemyState.IS_HIT: 4,
            OrcEnemyState.IS_DEAD: 4,
        }
        self.src_rect = pygame.Rect(0, 0, 0, 0)
        self.dest_rect = Rect()

    def animate(self, delta_time):
        """Advance one frame every animation_speed updates."""
        self.animation_timer += 1
        if self.animation_timer >= self.animation_speed:
            self.current_frame = (self.current_frame + 1) % self.frame_counts[self.animation_state]
            self.animation_timer = 0

    def update(self, player, player_box, player_attack_boxes, delta_time):
        if self.health <= 0:
            self.animation_state = OrcEnemyState.IS_DEAD

        if self.animation_state is OrcEnemyState.IS_DEAD:
            if self.current_frame >= self.frame_counts[OrcEnemyState.IS_DEAD] - 1:
                self.is_dead_and_gone = True

        distance_to_player = int(player_box.x - self._box.x)

        if self.animation_state is not OrcEnemyState.IS_DEAD:
            if abs(distance_to_player) < _DETECTION_RANGE:
                self.animation_state = OrcEnemyState.IDLE
                self.velocity_x = 0.0
                self.flip = distance_to_player < 0
            else:
                self.animation_state = OrcEnemyState.WALKING
                self.velocity_x = self.ENEMY_SPEED if distance_to_player > 0 else -self.ENEMY_SPEED
                self.move_x = self.velocity_x * delta_time

        self.animate(delta_time)

        future_x = self._box.moved(self.move_x, 0.0)
        self.velocity_x, hit = self._sweep_x(future_x, self.velocity_x)
        if hit:
            self.move_x = 0.0

        self._box.x += self.move_x

        future_y = self._box.moved(0.0, self.velocity_y)
        self.velocity_y, hit = self._sweep_y(future_y, self.velocity_y)
        if hit:
            self.move_y = 0.0

        if player.is_attacking() and self.attack_done:
            self.attack_done = False
            if future_x.intersects(player_attack_boxes[0]):
                self.health -= 1
                self.health_bar.w = max(
                    0.0, self.health_bar.w - self.health_bar_full_size / _HITS_TO_EMPTY_BAR
                )

        if player.is_attack_done():
            self.attack_done = True

        self._box.y = future_y.y

        self.health_bar.x = self._box.x
        self.health_bar.y = self._box.y - _HEALTH_BAR_RAISE
        self.health_bar_border.x = self.health_bar.x - 1
        self.health_bar_border.y = self.health_bar.y - 1

    def render(self):
        fw, fh = self.frame_width, self.frame_height
        row_extra, dest_offset_y = _STATE_LAYOUT[self.animation_state]
        self.src_rect = pygame.Rect(
            self.current_frame * (fw + _SHEET_GAP),
            self.animation_state.value * fh + row_extra,
            fw,
            fh,
        )
        offset_x = -10 if self.flip else -120
        self.dest_rect = Rect(
            self._box.x - self.camera_x + offset_x,
            self._box.y - self.camera_y + dest_offset_y,
            fw * _RENDER_SCALE,
            fh * _RENDER_SCALE,
        )
        self._blit_frame(self.src_rect, self.dest_rect, self.flip)
        self._draw_health_bar()