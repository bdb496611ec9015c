"""The default sword and its sprite sheet layout."""

from enum import Enum

from swordlord.states import PlayerState
from swordlord.weapon import Weapon, WeaponType


class AnimationStateFramesDefaultSword(Enum):
    """Sprite-sheet rows of the default sword."""

    IDLE = 0
    WALK = 3
    JUMP = 4
    ATTACK_LMB = 14


_STATE_ROWS = {
    PlayerState.IDLE: AnimationStateFramesDefaultSword.IDLE,
    PlayerState.WALK: AnimationStateFramesDefaultSword.WALK,
    PlayerState.JUMPING: AnimationStateFramesDefaultSword.JUMP,
    PlayerState.ATTACK_LMB: AnimationStateFramesDefaultSword.ATTACK_LMB,
}


class DefaultSword(Weapon):
    """The sword the player starts with."""

    SPRITE_PATH = "assets/player/swords/default_sword.png"

    def __init__(self, renderer, sprite_path=SPRITE_PATH):
        super().__init__(renderer)
        self.weapon_type = WeaponType.SWORD
        self.base_damage = 1.0
        self.rarity = 0.6
        self.frame_width = 64
        self.frame_height = 64
        self.attack_animation_done = True
        self.frame_counts = {
            AnimationStateFramesDefaultSword.IDLE: 8,
            AnimationStateFramesDefaultSword.WALK: 8,
            AnimationStateFramesDefaultSword.JUMP: 11,
            AnimationStateFramesDefaultSword.ATTACK_LMB: 5,
        }
        self.sprite = self._load_sprite(sprite_path)
        self.attack_hitboxes[0].w = (self.frame_width // 3) * 2
        self.attack_hitboxes[0].h = (self.frame_height // 3) * 2

    def assign_animation_state(self, player_state):
        return _STATE_ROWS.get(player_state, AnimationStateFramesDefaultSword.IDLE)