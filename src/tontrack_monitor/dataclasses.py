"""Core dataclasses for tontrack_monitor."""
from dataclasses import dataclass, field, asdict
import copy
from pathlib import Path
from typing import Any, Dict, List, Optional

MAX_HISTORY = 10


@dataclass(frozen=True)
class CodeEntry:
    """Save code found in the log, never mutated once recorded."""
    code: str
    timestamp: str
    round_type: Optional[str] = None
    terror_names: Optional[List[str]] = None
    round_type_english: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CodeEntry':
        terror_names = data.get("terror_names")
        return cls(
            code=str(data["code"]),
            timestamp=str(data.get("timestamp", "")),
            round_type=data.get("round_type"),
            terror_names=list(terror_names) if terror_names is not None else None,
            round_type_english=data.get("round_type_english"),
        )


@dataclass
class RoundTypeStats:
    survivals: int = 0
    deaths: int = 0


@dataclass
class RoundStats:
    total_rounds: int = 0
    survivals: int = 0
    deaths: int = 0
    round_types: Dict[str, RoundTypeStats] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RoundStats':
        return cls(
            total_rounds=int(data.get("total_rounds", 0)),
            survivals=int(data.get("survivals", 0)),
            deaths=int(data.get("deaths", 0)),
            round_types={
                name: RoundTypeStats(
                    survivals=int(stats.get("survivals", 0)),
                    deaths=int(stats.get("deaths", 0)),
                )
                for name, stats in data.get("round_types", {}).items()
            },
        )


@dataclass
class AppData:
    """Durable snapshot: code history and round statistics."""
    history: List[CodeEntry] = field(default_factory=list)
    stats: RoundStats = field(default_factory=RoundStats)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppData':
        return cls(
            history=[CodeEntry.from_dict(entry) for entry in data.get("history", [])],
            stats=RoundStats.from_dict(data.get("stats", {})),
        )


@dataclass
class CurrentRoundInfo:
    """In-progress round, rebuilt from live log activity only."""
    is_active: bool = False
    map_name: Optional[str] = None
    round_type: Optional[str] = None
    killers: List[int] = field(default_factory=list)
    is_dead: bool = False
    save_code: Optional[str] = None


@dataclass
class RuntimeState:
    """Process-lifetime tailing state, never persisted."""
    last_log_path: Optional[Path] = None
    last_offset: int = 0
    last_copied_code: Optional[str] = None
    # Round type as seen at round start, survives a reset of CurrentRoundInfo
    current_round_type: Optional[str] = None
    # Unterminated tail of the last read, completed on the next poll
    pending: bytes = b""


@dataclass
class AppSnapshot:
    settings: Dict[str, Any]
    history: List[CodeEntry]
    latest_code: Optional[CodeEntry]
    stats: RoundStats
    survivals: int
    current_round: CurrentRoundInfo

    def to_dict(self) -> Dict[str, Any]:
        return {
            "settings": copy.deepcopy(self.settings),
            "history": [asdict(entry) for entry in self.history],
            "latest_code": asdict(self.latest_code) if self.latest_code else None,
            "stats": asdict(self.stats),
            "survivals": self.survivals,
            "current_round": asdict(self.current_round),
        }


@dataclass
class LineResult:
    """What a processed line (or a whole poll) changed."""
    changed: bool = False
    round_started: bool = False
    round_ended: bool = False
    killers_changed: bool = False

    def __or__(self, other: 'LineResult') -> 'LineResult':
        return LineResult(
            changed=self.changed or other.changed,
            round_started=self.round_started or other.round_started,
            round_ended=self.round_ended or other.round_ended,
            killers_changed=self.killers_changed or other.killers_changed,
        )
