from enum import Enum

import pytest

from swordlord.states import PlayerState
from swordlord.weapon import MAX_PLAYER_ATTACKS, Weapon


class _Pose(Enum):
    STAND = 0
    SWING = 1


class _Club(Weapon):
    def __init__(self):
        super().__init__(None)
        self.frame_width = self.frame_height = 8
        self.frame_counts = {_Pose.STAND: 3, _Pose.SWING: 2}

    def assign_animation_state(self, player_state):
        return _Pose.SWING if player_state is PlayerState.ATTACK_LMB else _Pose.STAND


def test_weapon_is_abstract():
    with pytest.raises(TypeError):
        Weapon(None)


def test_initial_state_is_idle_mapping():
    club = _Club()
    boxes = Weapon.attack_collision_boxes(club)
    assert boxes[0].w == 0
    assert club.animation_state is _Pose.STAND
    assert club.current_frame == 0


def test_short_step_accumulates_time_only():
    club = _Club()
    Weapon.animate(club, 0.05, PlayerState.IDLE)
    assert club.current_frame == 0
    assert club.animation_time == pytest.approx(50.0)


def test_full_step_advances_frame_and_resets_timer():
    club = _Club()
    Weapon.animate(club, 0.1, PlayerState.WALK)
    assert club.current_frame == 1
    assert club.animation_time == 0.0


def test_looping_animation_wraps():
    club = _Club()
    for _ in range(3):
        Weapon.animate(club, 0.1, PlayerState.IDLE)
    assert club.current_frame == 0


def test_attack_animation_finishes():
    club = _Club()
    club.attacking = True
    club.attack_animation_done = False
    Weapon.animate(club, 0.1, PlayerState.ATTACK_LMB)
    assert club.attacking and not club.attack_animation_done
    Weapon.animate(club, 0.1, PlayerState.ATTACK_LMB)
    assert not club.attacking
    assert club.attack_animation_done
    assert club.current_frame == 0
    assert club.animation_state is _Pose.SWING


def test_invalid_animation_state_raises():
    club = _Club()
    with pytest.raises(TypeError):
        Weapon.animate(club, 0.1, "idle")


def test_attack_boxes_are_copies():
    club = _Club()
    boxes = Weapon.attack_collision_boxes(club)
    assert len(boxes) == MAX_PLAYER_ATTACKS
    boxes[0].x = 500
    assert Weapon.attack_collision_boxes(club)[0].x == 0


def test_render_flipped_draws_further_right():
    club = _Club()
    Weapon.render(club, False)
    plain = club.dest_rect.x
    Weapon.render(club, True)
    assert club.dest_rect.x > plain
    assert club.src_rect.w == 8