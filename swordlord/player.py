"""The player character: input, physics against tiles, and attack hitboxes."""

import pygame

from swordlord.default_sword import DefaultSword
from swordlord.no_sword import NoSword
from swordlord.states import OverlayState, PlayerState
from swordlord.tiles import Rect
from swordlord.weapon import MAX_PLAYER_ATTACKS

SPRITE_SHEET_PATH = "assets/WarriorMan-Sheet.png"

_PLAYER_SPEED = 400.0
_FALL_MULTIPLIER = 2.5
_LOW_JUMP_MULTIPLIER = 3.0
_CAMERA_SMOOTHING = 0.1
_ATTACK_OFFSET_RIGHT = 60.0
_ATTACK_OFFSET_LEFT = -38.0


class Player:
    """The player, who moves through the level and swings the current weapon."""

    def __init__(self, window, context):
        self.renderer = window.surface
        self.context = context
        self.screen_width = window.screen_width
        self.screen_height = window.screen_height
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.gravity = 750.0
        self.jump_strength = -550.0
        self.is_jumping = False
        self.frame_width = 64
        self.frame_height = 64
        self.animation_speed = 100
        self.flip = False
        self.move_x = 0.0
        self.weapon_switched = False
        self.camera_x = 0.0
        self.camera_y = 0.0
        self.tiles = None
        self.animation_state = PlayerState.IDLE

        start_y = self.screen_height - self.frame_height - self.screen_height // 6
        self.position = (0.0, float(start_y))
        self._box = Rect(0.0, float(start_y), self.frame_width, self.frame_height)
        self._attack_boxes = [Rect() for _ in range(MAX_PLAYER_ATTACKS)]

        try:
            self.sprite_sheet = pygame.image.load(SPRITE_SHEET_PATH)
        except (pygame.error, OSError):
            self.sprite_sheet = None

        self.weapon = DefaultSword(self.renderer)

    def handle_input(self, event):
        """React to a key press or mouse click."""
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE and not self.is_jumping:
                self.velocity_y = self.jump_strength
                self.is_jumping = True
            elif event.key == pygame.K_g:
                if not self.weapon_switched:
                    self.weapon = NoSword(self.renderer)
                    self.weapon_switched = True
                else:
                    self.weapon = DefaultSword(self.renderer)
                    self.weapon_switched = False
            elif event.key == pygame.K_i:
                self.context.overlay_state = OverlayState.INVENTORY
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.weapon.attack_animation_done:
                self.weapon.attacking = True
                self.weapon.attack_animation_done = False
                self.animation_state = PlayerState.ATTACK_LMB
                self.weapon.current_frame = 0
                self.weapon.animation_time = 0.0

    def is_attacking(self):
        return self.weapon.attacking

    def is_attack_done(self):
        return self.weapon.attack_animation_done

    def set_tiles(self, tiles):
        self.tiles = tiles

    def animate(self, delta_time):
        self.weapon.animate(delta_time, self.animation_state)

    def set_position(self, x, y):
        """Place the player at a world position."""
        self.position = (float(x), float(y))
        self._box.x = float(x)
        self._box.y = float(y)

    def _solid_tiles(self):
        return (tile for tile in (self.tiles or ()) if tile.solid)

    def update(self, delta_time, keys=None):
        """Advance one frame; keys maps key codes to pressed flags."""
        if keys is None:
            keys = pygame.key.get_pressed()

        if self.weapon.attacking:
            self.animation_state = PlayerState.ATTACK_LMB
            self.velocity_x = 0.0
            self.move_x = 0.0
        elif keys[pygame.K_d]:
            self.flip = False
            self.velocity_x = _PLAYER_SPEED
            self.move_x = self.velocity_x * delta_time
            self.animation_state = PlayerState.WALK
        elif keys[pygame.K_a]:
            self.flip = True
            self.velocity_x = -_PLAYER_SPEED
            self.move_x = self.velocity_x * delta_time
            self.animation_state = PlayerState.WALK
        elif self.is_jumping:
            self.animation_state = PlayerState.JUMPING
        else:
            self.velocity_x = 0.0
            self.move_x = 0.0
            self.animation_state = PlayerState.IDLE
        self.animate(delta_time)

        space_held = bool(keys[pygame.K_SPACE])
        if self.velocity_y > 0:
            self.velocity_y += self.gravity * _FALL_MULTIPLIER * delta_time
        elif self.velocity_y < 0 and not space_held:
            self.velocity_y += self.gravity * _LOW_JUMP_MULTIPLIER * delta_time
        else:
            self.velocity_y += self.gravity * delta_time
        move_y = self.velocity_y * delta_time

        future_x = self._box.moved(self.move_x, 0.0)
        for tile in self._solid_tiles():
            if future_x.intersects(tile.rect):
                if self.move_x >= 0:
                    future_x.x = tile.rect.x - future_x.w
                else:
                    future_x.x = tile.rect.x + tile.rect.w
                self.velocity_x = 0.0
                self.move_x = 0.0

        future_y = self._box.moved(0.0, move_y)
        for tile in self._solid_tiles():
            if future_y.intersects(tile.rect):
                if move_y >= 0:
                    future_y.y = tile.rect.y - future_y.h
                    self.is_jumping = False
                else:
                    future_y.y = tile.rect.y + tile.rect.h
                self.velocity_y = 0.0
                move_y = 0.0

        self._box.x = future_x.x
        self._box.y = future_y.y
        self.position = (self._box.x, self._box.y)

        attack_offset = 0.0
        if self.weapon.attacking:
            attack_offset = _ATTACK_OFFSET_LEFT if self.flip else _ATTACK_OFFSET_RIGHT

        world_x, world_y = self.position
        self.camera_x += (world_x - self.camera_x - self.screen_width / 2.0) * _CAMERA_SMOOTHING
        self.camera_y += (world_y - self.camera_y - self.screen_height / 2.0) * _CAMERA_SMOOTHING

        self._attack_boxes[0].x = world_x + attack_offset
        self._attack_boxes[0].y = world_y

    def collision_box(self):
        """A copy of the player's hitbox."""
        return Rect(self._box.x, self._box.y, self._box.w, self._box.h)

    def attack_collision_boxes(self):
        """The weapon's attack hitboxes, the first placed at the player's swing."""
        boxes = self.weapon.attack_collision_boxes()
        boxes[0].x = self._attack_boxes[0].x
        boxes[0].y = self._attack_boxes[0].y
        return boxes

    def set_camera_offset(self, x, y):
        """Set the camera; coordinates are truncated to whole pixels."""
        self.camera_x = int(x)
        self.camera_y = int(y)

    @property
    def camera_offset(self):
        return int(self.camera_x), int(self.camera_y)

    def render(self):
        self.weapon.render(self.flip)