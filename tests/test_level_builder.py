import json
from types import SimpleNamespace

import pygame
import pytest

from swordlord.level_builder import TILE_SIZE, LevelBuilder, LevelData
from swordlord.mr_professor_wurst import MrProfessorWurst
from swordlord.night_borne import NightBorne
from swordlord.orc import Orc


@pytest.fixture
def window():
    return SimpleNamespace(surface=None, screen_width=800, screen_height=600)


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "tile.bmp"
    surface = pygame.Surface((32, 32))
    surface.fill((10, 20, 30))
    pygame.image.save(surface, str(path))
    return str(path)


def write_level(directory, level_id, data):
    (directory / f"level_{level_id}.json").write_text(json.dumps(data), encoding="utf-8")


def test_missing_file_gives_empty_level(tmp_path, window):
    builder = LevelBuilder(window, 800, 600, levels_dir=tmp_path)
    level = builder.load_level(7)
    assert level == LevelData()
    assert level.tiles == []


def test_player_spawn_and_tiles(tmp_path, window, image_path):
    write_level(tmp_path, 1, {
        "player_spawn": {"x": 40, "y": 60},
        "backgrounds": [],
        "tileset": {"#": {"path": image_path, "solid": True}, "~": {"path": image_path, "solid": False}},
        "tilemap": ["#.", ".~"],
        "enemies": [],
    })
    level = LevelBuilder(window, 800, 600, levels_dir=tmp_path).load_level(1)
    assert level.player_spawn == (40, 60)
    assert len(level.tiles) == 2
    first, second = level.tiles
    assert (first.rect.x, first.rect.y) == (0.0, 0.0)
    assert (second.rect.x, second.rect.y) == (TILE_SIZE, TILE_SIZE)
    assert first.rect.w == TILE_SIZE
    assert first.solid is True
    assert second.solid is False
    assert first.texture.get_size() == (32, 32)


def test_missing_tile_image_is_skipped(tmp_path, window, image_path):
    write_level(tmp_path, 1, {
        "player_spawn": {"x": 0, "y": 0},
        "tileset": {"#": {"path": image_path, "solid": True},
                    "X": {"path": str(tmp_path / "absent.bmp"), "solid": True}},
        "tilemap": ["#X#"],
    })
    level = LevelBuilder(window, 800, 600, levels_dir=tmp_path).load_level(1)
    assert [tile.rect.x for tile in level.tiles] == [0.0, 2 * TILE_SIZE]


def test_backgrounds_skip_missing(tmp_path, window, image_path):
    write_level(tmp_path, 2, {
        "player_spawn": {"x": 0, "y": 0},
        "backgrounds": [image_path, str(tmp_path / "absent.bmp")],
    })
    level = LevelBuilder(window, 800, 600, levels_dir=tmp_path).load_level(2)
    assert len(level.backgrounds) == 1


def test_enemies_created_by_type(tmp_path, window):
    write_level(tmp_path, 1, {
        "player_spawn": {"x": 0, "y": 0},
        "enemies": [
            {"type": "NightBorne", "x": 100, "y": 50},
            {"type": "MrProfessorWurst", "x": 200, "y": 60},
            {"type": "Orc", "x": 300, "y": 70},
            {"type": "Dragon", "x": 400, "y": 80},
        ],
    })
    level = LevelBuilder(window, 800, 600, levels_dir=tmp_path).load_level(1)
    assert [type(e) for e in level.enemies] == [NightBorne, MrProfessorWurst, Orc]
    assert level.enemy_spawns == [(100, 50), (200, 60), (300, 70), (400, 80)]
    for enemy, (x, y) in zip(level.enemies, level.enemy_spawns):
        box = enemy.collision_box()
        assert (box.x, box.y) == (x, y)


def test_missing_player_spawn_raises(tmp_path, window):
    write_level(tmp_path, 3, {"tilemap": []})
    with pytest.raises(KeyError):
        LevelBuilder(window, 800, 600, levels_dir=tmp_path).load_level(3)