from .modifiers import (
    ATTACK_MODIFIERS,
    TURN_MODIFIERS,
    apply_modifier,
    apply_to_turn,
    favored_foe,
    hunters_mark,
    sharpshooter,
)

__all__ = [
    "ATTACK_MODIFIERS",
    "TURN_MODIFIERS",
    "apply_modifier",
    "apply_to_turn",
    "favored_foe",
    "hunters_mark",
    "sharpshooter",
]
