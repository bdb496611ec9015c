import pytest

from swordlord.mr_professor_wurst import EnemyStateMrProfessorWurst, MrProfessorWurst
from swordlord.player import Player
from swordlord.states import GameContext
from swordlord.tiles import Rect, Tile
from swordlord.window import Window


@pytest.fixture
def window():
    return Window()


@pytest.fixture
def player(window):
    return Player(window, GameContext())


def make(window, x=100, y=50):
    return MrProfessorWurst(window, x, y, sprite_path="missing/MrProfessorWurst.png")


def test_initial_state(window):
    wurst = make(window)
    assert wurst.health == 0
    assert not wurst.is_alive()
    assert wurst.frame_width == 32
    assert wurst.collision_box() == Rect(100.0, 50.0, 64.0, 64.0)
    assert wurst.rect == Rect(100.0, 50.0, 64.0, 64.0)


def test_faces_player_on_right(window, player):
    wurst = make(window)
    wurst.update(player, Rect(400, 50, 64, 64), [Rect()], 0.01)
    assert wurst.flip is True
    assert wurst.animation_state is EnemyStateMrProfessorWurst.IDLE


def test_faces_player_nearby_or_left(window, player):
    wurst = make(window)
    wurst.update(player, Rect(120, 50, 64, 64), [Rect()], 0.01)
    assert wurst.flip is False
    wurst.update(player, Rect(0, 50, 64, 64), [Rect()], 0.01)
    assert wurst.flip is False


def test_stays_in_place(window, player):
    wurst = make(window)
    wurst.set_tiles([Tile(None, Rect(0, 114, 400, 32), True)])
    for _ in range(10):
        wurst.update(player, Rect(400, 50, 64, 64), [Rect()], 0.01)
    assert wurst.collision_box() == Rect(100.0, 50.0, 64.0, 64.0)


def test_never_removed(window, player):
    wurst = make(window)
    for _ in range(300):
        wurst.update(player, Rect(400, 50, 64, 64), [Rect()], 0.01)
    assert wurst.is_dead_and_gone is False


def test_animate_advances_and_wraps(window):
    wurst = make(window)
    for _ in range(wurst.animation_speed):
        wurst.animate()
    assert wurst.current_frame == 1
    for _ in range(wurst.animation_speed * (wurst.frame_counts[EnemyStateMrProfessorWurst.IDLE] - 1)):
        wurst.animate()
    assert wurst.current_frame == 0


def test_set_position(window):
    wurst = make(window)
    wurst.set_position(7, 9)
    assert (wurst.collision_box().x, wurst.collision_box().y) == (7.0, 9.0)


def test_render_without_surface_computes_rects(window):
    wurst = make(window)
    wurst.set_camera_offset(10, 20)
    wurst.render()
    assert wurst.dest_rect.x == 100.0 - 10
    assert wurst.dest_rect.y == 50.0 - 20
    assert wurst.dest_rect.w == wurst.frame_width * 3
    assert wurst.src_rect.y == 0
    wurst.flip = True
    wurst.render()
    assert wurst.dest_rect.x == 100.0 - 10 - 32