"""
Build repository for the calculator.

Loads attacks and turns from a JSON file, resolves the references between
them and applies the named modifiers, so that the command line tool only
deals with ready to evaluate Turn values.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_critical, log_warning
from pydantic import BaseModel, Field

from dpr.combat.attack import Attack
from dpr.combat.damage import DamageValue
from dpr.combat.turn import Turn
from dpr.core.constants import ModifierKind
from dpr.core.logging import log_debug
from dpr.core.utils import Singleton
from dpr.effects.modifiers import ATTACK_MODIFIERS, apply_modifier


class AttackEntry(BaseModel):
    """A reference to a named attack, repeated `count` times."""

    attack: str = Field(
        description="Name of the attack in the attacks section.",
    )
    count: int = Field(
        default=1,
        description="How many times the attack is taken.",
    )
    modifiers: list[ModifierKind] = Field(
        default_factory=list,
        description="Attack modifiers applied to this entry only.",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if self.count < 0:
            raise ValueError("count must be a non-negative integer")
        for kind in self.modifiers:
            if kind not in ATTACK_MODIFIERS:
                raise ValueError(f"{kind} is not an attack modifier")


class TurnEntry(BaseModel):
    """The JSON description of a turn."""

    description: str = Field(
        default="",
        description="A short description of the build.",
    )
    primary_attacks: list[AttackEntry] = Field(
        default_factory=list,
        description="Attacks of the primary action.",
    )
    secondary_attacks: list[AttackEntry] = Field(
        default_factory=list,
        description="Attacks of the secondary action.",
    )
    once_per_turn: Any = Field(
        default=None,
        description="Once per turn damage, as expression or mapping.",
    )
    modifiers: list[ModifierKind] = Field(
        default_factory=list,
        description="Modifiers applied to the whole turn, in order.",
    )


class BuildRepository(metaclass=Singleton):
    """
    Registry of the attacks and turns declared in a build file.
    """

    attacks: dict[str, Attack]
    turns: dict[str, Turn]
    descriptions: dict[str, str]

    def __init__(self, data_file: Path | None = None) -> None:
        """
        Initialize the BuildRepository.

        Args:
            data_file (Path | None):
                The JSON file containing the builds to load.

        """
        if data_file:
            self.reload(data_file)
            self.loaded = True
        elif not hasattr(self, "loaded"):
            raise ValueError(
                "BuildRepository must be initialized with a valid data_file on first use."
            )

    def reload(self, data_file: Path) -> None:
        """
        (Re)load every attack and turn from disk.

        Args:
            data_file (Path):
                The JSON file containing the builds to load.

        """
        _load_json_file(data_file, self.load_data, "builds")

    def load_data(self, data: dict[str, Any]) -> None:
        """
        Loads builds from an already parsed mapping.

        Args:
            data (dict[str, Any]):
                Mapping with an `attacks` and a `turns` section.

        """
        self.attacks = {}
        self.turns = {}
        self.descriptions = {}
        for name, attack_data in data.get("attacks", {}).items():
            try:
                self.attacks[name] = Attack.model_validate(attack_data)
            except ValueError as e:
                log_critical(
                    f"Invalid attack '{name}': {e}",
                    {"attack": name, "data": attack_data},
                )
                raise ValueError(f"Invalid attack '{name}'") from e
        for name, turn_data in data.get("turns", {}).items():
            try:
                entry = TurnEntry.model_validate(turn_data)
            except ValueError as e:
                log_critical(
                    f"Invalid turn '{name}': {e}",
                    {"turn": name},
                )
                raise ValueError(f"Invalid turn '{name}'") from e
            turn = self._build_turn(name, entry)
            if turn is not None:
                self.turns[name] = turn
                self.descriptions[name] = entry.description
        log_debug(
            "Loaded builds",
            {"attacks": len(self.attacks), "turns": len(self.turns)},
        )

    def _expand_entries(
        self, turn_name: str, entries: list[AttackEntry]
    ) -> list[Attack] | None:
        attacks: list[Attack] = []
        for entry in entries:
            attack = self.attacks.get(entry.attack)
            if attack is None:
                log_warning(
                    f"Turn '{turn_name}' references unknown attack '{entry.attack}'",
                    {"turn": turn_name, "attack": entry.attack},
                )
                return None
            for kind in entry.modifiers:
                attack = ATTACK_MODIFIERS[kind](attack)
            attacks.extend([attack] * entry.count)
        return attacks

    def _build_turn(self, name: str, entry: TurnEntry) -> Turn | None:
        primary = self._expand_entries(name, entry.primary_attacks)
        secondary = self._expand_entries(name, entry.secondary_attacks)
        if primary is None or secondary is None:
            return None
        turn = Turn(
            primary_attacks=tuple(primary),
            secondary_attacks=tuple(secondary),
            once_per_turn=(
                DamageValue()
                if entry.once_per_turn is None
                else DamageValue.coerce(entry.once_per_turn)
            ),
        )
        for kind in entry.modifiers:
            turn = apply_modifier(turn, kind)
        return turn

    def get_attack(self, name: str) -> Attack | None:
        """
        Get an attack by name.

        Args:
            name (str): Name of the attack.

        Returns:
            Attack | None: The attack, or None if not found.

        """
        attack = self.attacks.get(name)
        if attack is None:
            log_warning(f"Attack '{name}' not found", {"attack": name})
        return attack

    def get_turn(self, name: str) -> Turn | None:
        """
        Get a turn by name.

        Args:
            name (str): Name of the turn.

        Returns:
            Turn | None: The turn, or None if not found.

        """
        turn = self.turns.get(name)
        if turn is None:
            log_warning(f"Turn '{name}' not found", {"turn": name})
        return turn

    def with_modifier(self, name: str, kind: ModifierKind) -> Turn | None:
        """Returns a registered turn with one more modifier applied."""
        turn = self.get_turn(name)
        if turn is None:
            return None
        return apply_modifier(turn, kind)


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[dict[str, Any]], Any],
    asset_type: str,
) -> Any:
    """
    Load a JSON file and process it with the given loader function.

    Args:
        filepath (Path): The path to the JSON file.
        loader_func (Callable): Function to process the loaded data.
        asset_type (str): A description of the asset type for logging.

    Returns:
        Any: The result of the loader function.

    Raises:
        ValueError: If the file is missing or is not valid JSON.

    """
    if not filepath.exists():
        log_critical(
            f"Cannot find {asset_type} file: {filepath}",
            {"filepath": str(filepath)},
        )
        raise ValueError(f"Missing {asset_type} file: {filepath}")
    try:
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        log_critical(
            f"Invalid JSON in {asset_type} file: {filepath}",
            {"filepath": str(filepath), "error": str(e)},
        )
        raise ValueError(f"Invalid {asset_type} file: {filepath}") from e
    if not isinstance(data, dict):
        raise ValueError(f"The {asset_type} file must contain a JSON object")
    return loader_func(data)
