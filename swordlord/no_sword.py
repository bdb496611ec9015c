"""The bare-handed player, modelled as a weapon with its own sprite sheet."""

from enum import Enum

from swordlord.states import PlayerState
from swordlord.weapon import Weapon, WeaponType


class AnimationStateNoSword(Enum):
    """Sprite-sheet rows of the unarmed player."""

    IDLE = 0
    WALK = 2
    JUMP = 4
    ATTACK_LMB = 8


_STATE_ROWS = {
    PlayerState.IDLE: AnimationStateNoSword.IDLE,
    PlayerState.WALK: AnimationStateNoSword.WALK,
    PlayerState.JUMPING: AnimationStateNoSword.JUMP,
    PlayerState.ATTACK_LMB: AnimationStateNoSword.ATTACK_LMB,
}


class NoSword(Weapon):
    """The player without any item in hand."""

    SPRITE_PATH = "assets/player/swords/player_no_items.png"

    def __init__(self, renderer, sprite_path=SPRITE_PATH):
        super().__init__(renderer)
        self.weapon_type = WeaponType.SWORD
        self.base_damage = 1.0
        self.rarity = 0.6
        self.frame_width = 64
        self.frame_height = 64
        self.attack_animation_done = True
        self.frame_counts = {
            AnimationStateNoSword.IDLE: 8,
            AnimationStateNoSword.WALK: 8,
            AnimationStateNoSword.JUMP: 11,
            AnimationStateNoSword.ATTACK_LMB: 5,
        }
        self.sprite = self._load_sprite(sprite_path)
        self.attack_hitboxes[0].w = (self.frame_width // 3) * 2
        self.attack_hitboxes[0].h = (self.frame_height // 3) * 2

    def assign_animation_state(self, player_state):
        return _STATE_ROWS.get(player_state, AnimationStateNoSword.IDLE)