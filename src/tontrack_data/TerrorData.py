"""
Resolves killer ids to display metadata. Lookups are pure: the tables are
static and the optional ability file is read once on construction.
"""
from dataclasses import dataclass, field
from enum import Enum
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from tontrack_data.terrors import (
    TerrorEntry,
    TERRORS,
    ALTERNATES,
    MOONS,
    SPECIALS,
    EVENTS,
    UNBOUND,
    ROUND_TYPE_TO_ENGLISH,
)


class TerrorGroup(Enum):
    TERRORS = 0
    ALTERNATES = 1
    EIGHT_PAGES = 2
    UNBOUND = 3
    MOONS = 4
    SPECIALS = 5
    EVENTS = 6


GROUP_TABLES: Dict[TerrorGroup, Dict[int, TerrorEntry]] = {
    TerrorGroup.TERRORS: TERRORS,
    TerrorGroup.ALTERNATES: ALTERNATES,
    # 8 Pages has no table of its own
    TerrorGroup.EIGHT_PAGES: TERRORS,
    TerrorGroup.UNBOUND: UNBOUND,
    TerrorGroup.MOONS: MOONS,
    TerrorGroup.SPECIALS: SPECIALS,
    TerrorGroup.EVENTS: EVENTS,
}

ROUND_TYPE_GROUPS: Dict[str, TerrorGroup] = {
    "Alternate": TerrorGroup.ALTERNATES,
    "Fog_Alternate": TerrorGroup.ALTERNATES,
    "Fog Alternate": TerrorGroup.ALTERNATES,
    "Ghost_Alternate": TerrorGroup.ALTERNATES,
    "Ghost Alternate": TerrorGroup.ALTERNATES,
    "Mystic_Moon": TerrorGroup.MOONS,
    "Blood_Moon": TerrorGroup.MOONS,
    "Twilight": TerrorGroup.MOONS,
    "Solstice": TerrorGroup.MOONS,
    "RUN": TerrorGroup.SPECIALS,
    "Eight_Pages": TerrorGroup.EIGHT_PAGES,
    "Cold_Night": TerrorGroup.EVENTS,
    "GIGABYTE": TerrorGroup.EVENTS,
    "Unbound": TerrorGroup.UNBOUND,
}


@dataclass
class TerrorAbility:
    label: str
    value: str


@dataclass
class TerrorInfo:
    name: str
    color: Optional[str] = None
    abilities: List[TerrorAbility] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "color": self.color,
            "abilities": [
                {"label": ability.label, "value": ability.value}
                for ability in self.abilities
            ],
        }


def translate_round_type(round_type: str) -> str:
    """Translate a (possibly Japanese) round type to its English label."""
    return ROUND_TYPE_TO_ENGLISH.get(round_type, round_type)


def group_for_round_type(round_type: str) -> TerrorGroup:
    english = translate_round_type(round_type)
    group = ROUND_TYPE_GROUPS.get(english)
    if group is not None:
        return group

    # Midnight only swaps its third killer, which is left to the caller
    if "Alternate" in english or "Alternate" in round_type:
        return TerrorGroup.ALTERNATES

    return TerrorGroup.TERRORS


class TerrorData:
    def __init__(self, abilities_path: Optional[str] = None) -> None:
        self.abilities: Dict[str, List[Dict[str, str]]] = {}
        if abilities_path:
            self.abilities = self._load_abilities(Path(abilities_path))

    def _load_abilities(self, path: Path) -> Dict[str, List[Dict[str, str]]]:
        try:
            with path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logging.warning(f"Failed to load terror abilities from {path}: {e}")
            return {}

        if not isinstance(raw, dict):
            logging.warning(f"Ignoring terror abilities in {path}: expected an object")
            return {}

        return raw

    def lookup(self, killer_id: int, round_type: str) -> TerrorInfo:
        table = GROUP_TABLES[group_for_round_type(round_type)]
        entry = table.get(killer_id)
        if entry is None:
            return TerrorInfo(name=f"Unknown (#{killer_id})")

        name, color = entry
        return TerrorInfo(name=name, color=color, abilities=self.find_abilities(name))

    def lookup_many(self, killer_ids: List[int], round_type: str) -> List[TerrorInfo]:
        return [self.lookup(killer_id, round_type) for killer_id in killer_ids]

    def translate_round_type(self, round_type: str) -> str:
        return translate_round_type(round_type)

    def find_abilities(self, name: str) -> List[TerrorAbility]:
        raw = self._match_abilities(name)
        if not raw:
            return []

        abilities = []
        for ability in raw:
            if not isinstance(ability, dict) or not ability:
                continue

            label, value = next(iter(ability.items()))
            if label:
                abilities.append(TerrorAbility(label=str(label), value=str(value)))

        return abilities

    def _match_abilities(self, name: str) -> Optional[List[Dict[str, str]]]:
        if not self.abilities:
            return None

        variations = [
            name,
            name.replace("_", " "),
            name.replace("-", " "),
            name.replace("&", "and"),
        ]
        for variant in variations:
            if variant in self.abilities:
                return self.abilities[variant]

        lower_name = name.lower()
        for key, value in self.abilities.items():
            if key.lower() == lower_name:
                return value

        if not lower_name.strip():
            return None

        for key, value in self.abilities.items():
            lower_key = key.lower()
            if lower_key and (lower_key in lower_name or lower_name in lower_key):
                return value

        return None
