"""The level being played: the player, enemies, tiles and the camera."""

import collections

import pygame

from swordlord.level_builder import LEVELS_DIR, LevelBuilder
from swordlord.player import Player
from swordlord.scene import Scene
from swordlord.states import GameState
from swordlord.utils import render_scale_texture

_SPRITE_HALF_WIDTH = 64.0 * 3.0 / 2.0
_HITBOX_COLOR = (255, 0, 0)


def _current_keys():
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        return pygame.key.get_pressed()
    return collections.defaultdict(bool)


class GameScene(Scene):
    """Plays one level."""

    def __init__(self, window, context, level_id=1, levels_dir=LEVELS_DIR):
        self.renderer = window.surface
        self.context = context
        self.screen_width = window.screen_width
        self.screen_height = window.screen_height
        self.camera = (0.0, 0.0)
        self.player = Player(window, context)

        builder = LevelBuilder(window, self.screen_width, self.screen_height, None, levels_dir)
        self.level = builder.load_level(level_id)
        self.player.set_tiles(self.level.tiles)

        for enemy, (x, y) in zip(self.level.enemies, self.level.enemy_spawns):
            enemy.set_tiles(self.level.tiles)
            enemy.set_position(x, y)

        self.player.set_position(*self.level.player_spawn)

    def _draw_outline(self, rect, offset_x, offset_y):
        box = pygame.Rect(
            round(rect.x - offset_x), round(rect.y - offset_y), round(rect.w), round(rect.h)
        )
        pygame.draw.rect(self.renderer, _HITBOX_COLOR, box, 1)

    def render(self):
        if pygame.display.get_init():
            pygame.mouse.set_visible(False)

        player_x, player_y = self.player.position
        camera_x = player_x - (self.screen_width / 2.0 - _SPRITE_HALF_WIDTH)
        camera_y = player_y - (self.screen_height * 3.0 / 4.0 - _SPRITE_HALF_WIDTH)
        self.camera = (camera_x, camera_y)
        self.player.set_camera_offset(camera_x, camera_y)

        if self.renderer is None:
            for enemy in self.level.enemies:
                enemy.set_camera_offset(camera_x, camera_y)
            return

        for background in self.level.backgrounds:
            render_scale_texture(self.renderer, background, self.screen_width, self.screen_height)

        rounded_x, rounded_y = round(camera_x), round(camera_y)
        for tile in self.level.tiles:
            if tile.texture is None:
                continue
            size = (int(tile.rect.w), int(tile.rect.h))
            texture = tile.texture
            if texture.get_size() != size:
                texture = pygame.transform.scale(texture, size)
            self.renderer.blit(texture, (tile.rect.x - rounded_x, tile.rect.y - rounded_y))

        for enemy in self.level.enemies:
            enemy.set_camera_offset(camera_x, camera_y)
            enemy.render()
            self._draw_outline(enemy.collision_box(), camera_x, camera_y)

        offset_x, offset_y = self.player.camera_offset
        self._draw_outline(self.player.collision_box(), offset_x, offset_y)
        self._draw_outline(self.player.attack_collision_boxes()[0], offset_x, offset_y)

        self.player.render()

    def handle_event(self, event):
        self.player.handle_input(event)
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.context.game_state = GameState.MENU

    def update(self, delta_time):
        self.player.update(delta_time, _current_keys())
        player_box = self.player.collision_box()
        attack_boxes = self.player.attack_collision_boxes()
        for enemy in self.level.enemies:
            enemy.update(self.player, player_box, attack_boxes, delta_time)
        self.level.enemies[:] = [e for e in self.level.enemies if not e.is_dead_and_gone]