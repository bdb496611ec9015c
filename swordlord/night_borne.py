"""The NightBorne warrior, which walks towards the player and can be slain."""

from enum import Enum

import pygame

from swordlord.enemy import Enemy
from swordlord.tiles import Rect

SPRITE_PATH = "assets/enemies/NightBorne.png"

_DETECTION_RANGE = 200
_SHEET_GAP = 16
_RENDER_SCALE = 3
_HITS_TO_EMPTY_BAR = 5


class EnemyState(Enum):
    """Animation rows of the NightBorne sprite sheet."""

    IDLE = 0
    WALKING = 1
    ATTACK = 2
    IS_HIT = 3
    IS_DEAD = 4


# Extra source-row offset and vertical draw offset per state; the sheet is irregular.
_STATE_LAYOUT = {
    EnemyState.IDLE: (0, -128),
    EnemyState.WALKING: (32, -80),
    EnemyState.ATTACK: (32, -128),
    EnemyState.IS_HIT: (64, -80),
    EnemyState.IS_DEAD: (64, -128),
}


class NightBorne(Enemy):
    """A melee enemy that walks towards the player until it is close."""

    ENEMY_SPEED = 150.0

    def __init__(self, window, x, y, floor_rect=None, sprite_path=SPRITE_PATH):
        super().__init__(window, floor_rect)
        self.frame_width = 64
        self.frame_height = 64
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.damage = 15
        self.speed = 1
        self.is_attacking = False
        self.animation_speed = 20
        self.animation_timer = 0
        self.current_frame = 0
        self.move_x = 0.0
        self.move_y = 0.0
        self.health = 5
        self.attack_done = True
        self.animation_state = EnemyState.IDLE
        self.sprite = self._load_sprite(sprite_path)

        self.enemy_rect = Rect(float(x), float(y), 64.0, 64.0)
        self._box = Rect(float(x), float(y), 64.0, 64.0)
        self.health_bar = Rect(float(x), float(y), 54.0, 8.0)
        self.health_bar_border = Rect(float(x), float(y), 56.0, 10.0)
        self.health_bar_full_size = self.health_bar.w

        self.frame_counts = {
            EnemyState.IDLE: 9,
            EnemyState.WALKING: 6,
            EnemyState.ATTACK: 12,
            EnemyState.IS_HIT: 5,
            EnemyState.IS_DEAD: 23,
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
            self.animation_state = EnemyState.IS_DEAD

        if self.animation_state is EnemyState.IS_DEAD:
            if self.current_frame >= self.frame_counts[EnemyState.IS_DEAD] - 1:
                self.is_dead_and_gone = True

        distance_to_player = int(player_box.x - self._box.x)

        if self.animation_state is not EnemyState.IS_DEAD:
            if abs(distance_to_player) < _DETECTION_RANGE:
                self.animation_state = EnemyState.IDLE
                self.velocity_x = 0.0
                self.flip = distance_to_player < 0
            else:
                self.animation_state = EnemyState.WALKING
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
        self.health_bar.y = self._box.y - 35
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
        offset_x = -32 if self.flip else -96
        self.dest_rect = Rect(
            self._box.x - self.camera_x + offset_x,
            self._box.y - self.camera_y + dest_offset_y,
            fw * _RENDER_SCALE,
            fh * _RENDER_SCALE,
        )
        self._blit_frame(self.src_rect, self.dest_rect, self.flip)
        self._draw_health_bar()