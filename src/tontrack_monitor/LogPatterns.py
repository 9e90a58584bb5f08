"""
Matchers for the log lines the Terrors of Nowhere world writes. Every
matcher looks at a single line; a line may match several of them.
"""
from dataclasses import dataclass
import re
from typing import List, Optional

WORLD_ID = "wrld_a61cdabe-1218-4287-9ffc-2a4d1414e5bd"


@dataclass(frozen=True)
class RoundStart:
    map_name: str
    round_type: str


@dataclass(frozen=True)
class Killers:
    ids: List[int]
    round_type: Optional[str] = None

    @property
    def active(self) -> List[int]:
        """Killer ids with the empty slots (0) removed."""
        return [killer for killer in self.ids if killer != 0]


@dataclass(frozen=True)
class CodeMatch:
    code: str
    timestamp: str


class LogPatterns:
    CODE = re.compile(r"\[START\]([0-9_,]+)\[END\]")
    ROUND_START = re.compile(r"This round is taking place at (.+?) and the round type is (.+)$")
    # "Killers have been set - X X X // Round type is Y"
    KILLERS = re.compile(r"Killers have been set - (\d+) (\d+) (\d+)(?: // Round type is (.+))?")
    DEATH = re.compile(r"You died\.")
    REBORN = re.compile(r"LOL JK, REBORN!")
    SURVIVAL = re.compile(r"Lived in round\.")
    RESPAWN = re.compile(r"Respawned\? Coward\.")
    ROUND_END = re.compile(r"Verified Round End")

    def round_start(self, line: str) -> Optional[RoundStart]:
        match = self.ROUND_START.search(line)
        if not match:
            return None

        return RoundStart(
            map_name=match.group(1).strip(),
            round_type=match.group(2).strip(),
        )

    def killers(self, line: str) -> Optional[Killers]:
        match = self.KILLERS.search(line)
        if not match:
            return None

        round_type = match.group(4)
        return Killers(
            ids=[int(match.group(i)) for i in (1, 2, 3)],
            round_type=round_type.strip() if round_type is not None else None,
        )

    def death(self, line: str) -> bool:
        return self.DEATH.search(line) is not None

    def reborn(self, line: str) -> bool:
        return self.REBORN.search(line) is not None

    def survival(self, line: str) -> bool:
        return self.SURVIVAL.search(line) is not None

    def respawn(self, line: str) -> bool:
        return self.RESPAWN.search(line) is not None

    def round_end(self, line: str) -> bool:
        return self.ROUND_END.search(line) is not None

    def code(self, line: str) -> Optional[CodeMatch]:
        match = self.CODE.search(line)
        if not match:
            return None

        # VRChat prefixes every line with "YYYY.MM.DD HH:MM:SS"
        parts = line.split()
        timestamp = ""
        if len(parts) >= 2:
            timestamp = f"{parts[0]} {parts[1]}"

        return CodeMatch(code=match.group(1), timestamp=timestamp)

    def world_marker(self, line: str) -> bool:
        return WORLD_ID in line
