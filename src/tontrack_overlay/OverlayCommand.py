"""
Commands sent to the VR overlay over its standard input.

One command per line: "b64:" followed by the base64 encoded JSON object.
The JSON object carries its variant in the "type" field, the remaining
fields depend on the variant. An encoded command never contains a line
break, whatever the terror names contain.
"""

import abc
import base64
import binascii
import json
from typing import Any, Dict, List

from tontrack_data import TerrorInfo
from tontrack_helper import OverlayPosition

PREFIX = "b64:"


class OverlayCommand(abc.ABC):
    """Abstract Base Class for all overlay commands."""

    TYPE: str = ""
    _registry: Dict[str, Any] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Register subclasses by their wire type."""
        super().__init_subclass__(**kwargs)
        OverlayCommand._registry[cls.TYPE] = cls

    def payload(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.TYPE, **self.payload()}

    def __eq__(self, other: object) -> bool:
        return isinstance(other, OverlayCommand) and self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.payload()})"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OverlayCommand":
        command_type = data.get("type")
        if command_type not in cls._registry:
            raise ValueError(f"Unknown command type: {command_type}")

        fields = {k: v for k, v in data.items() if k != "type"}
        return cls._registry[command_type]._from_fields(fields)

    @classmethod
    def _from_fields(cls, fields: Dict[str, Any]) -> "OverlayCommand":
        return cls()


class UpdateTerrors(OverlayCommand):
    TYPE = "update_terrors"

    def __init__(self, terrors: List[Dict[str, Any]], round_type: str) -> None:
        self.terrors = terrors
        self.round_type = round_type

    @classmethod
    def from_terror_info(cls, terrors: List[TerrorInfo], round_type: str) -> "UpdateTerrors":
        return cls([terror.to_dict() for terror in terrors], round_type)

    def payload(self) -> Dict[str, Any]:
        return {"terrors": self.terrors, "round_type": self.round_type}

    @classmethod
    def _from_fields(cls, fields: Dict[str, Any]) -> "OverlayCommand":
        return cls(terrors=list(fields["terrors"]), round_type=str(fields["round_type"]))


class SetPosition(OverlayCommand):
    TYPE = "set_position"

    def __init__(self, position: OverlayPosition) -> None:
        self.position = position

    def payload(self) -> Dict[str, Any]:
        return {"position": self.position.value}

    @classmethod
    def _from_fields(cls, fields: Dict[str, Any]) -> "OverlayCommand":
        return cls(OverlayPosition.parse(str(fields["position"])))


class Clear(OverlayCommand):
    TYPE = "clear"


class Quit(OverlayCommand):
    TYPE = "quit"


def encode(command: OverlayCommand) -> str:
    """Encode a command as a single line, without the line terminator."""
    raw = json.dumps(command.to_dict(), ensure_ascii=False).encode("utf-8")
    return PREFIX + base64.b64encode(raw).decode("ascii")


def decode(line: str) -> OverlayCommand:
    """Inverse of encode(), the overlay does the same on its side."""
    text = line.strip()
    if not text.lower().startswith(PREFIX):
        raise ValueError("Missing command prefix")

    try:
        raw = base64.b64decode(text[len(PREFIX):], validate=True)
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise ValueError("Malformed command payload") from e

    if not isinstance(data, dict):
        raise ValueError("Malformed command payload")

    return OverlayCommand.from_dict(data)
