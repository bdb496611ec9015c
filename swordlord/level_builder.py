"""Loading levels from JSON files: spawns, backgrounds, tiles and enemies."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from swordlord.mr_professor_wurst import MrProfessorWurst
from swordlord.night_borne import NightBorne
from swordlord.orc import Orc
from swordlord.tiles import Rect, Tile

LEVELS_DIR = "configs/levels"
TILE_SIZE = 32.0

_log = logging.getLogger(__name__)

_ENEMY_TYPES = {
    "NightBorne": NightBorne,
    "MrProfessorWurst": MrProfessorWurst,
    "Orc": Orc,
}


@dataclass
class LevelData:
    """Everything a loaded level consists of."""

    player_spawn: tuple = (0, 0)
    enemy_spawns: list = field(default_factory=list)
    enemies: list = field(default_factory=list)
    tiles: list = field(default_factory=list)
    backgrounds: list = field(default_factory=list)


def _load_image(path):
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError):
        return None


class LevelBuilder:
    """Builds LevelData from the level files in a directory."""

    def __init__(self, window, screen_width, screen_height, floor_rect=None, levels_dir=LEVELS_DIR):
        self.window = window
        self.renderer = window.surface
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.floor_rect = floor_rect if floor_rect is not None else Rect()
        self.levels_dir = Path(levels_dir)

    def load_level(self, level_id):
        """Load level_<level_id>.json; a missing file yields an empty level."""
        level = LevelData()
        path = self.levels_dir / f"level_{level_id}.json"
        try:
            with path.open(encoding="utf-8") as handle:
                data = json.load(handle)
        except OSError:
            _log.error("Failed to load level file: %s", path)
            return level

        spawn = data["player_spawn"]
        level.player_spawn = (spawn["x"], spawn["y"])

        for background_path in data.get("backgrounds", []):
            image = _load_image(background_path)
            if image is not None:
                level.backgrounds.append(image)

        tileset = {}
        for symbol, tile_data in data.get("tileset", {}).items():
            image = _load_image(tile_data["path"])
            if image is None:
                _log.error("Failed to load tile image: %s", tile_data["path"])
                continue
            tileset[symbol[0]] = (image, bool(tile_data["solid"]))

        for y, row in enumerate(data.get("tilemap", [])):
            for x, char in enumerate(row):
                if char in tileset:
                    texture, solid = tileset[char]
                    rect = Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
                    level.tiles.append(Tile(texture, rect, solid))

        for enemy_data in data.get("enemies", []):
            x, y = int(enemy_data["x"]), int(enemy_data["y"])
            level.enemy_spawns.append((x, y))
            enemy_class = _ENEMY_TYPES.get(enemy_data["type"])
            if enemy_class is None:
                continue
            enemy = enemy_class(self.window, x, y, self.floor_rect)
            enemy.set_position(x, y)
            level.enemies.append(enemy)

        return level