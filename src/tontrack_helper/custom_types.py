from enum import Enum


class OverlayPosition(Enum):
    RIGHT_HAND = "RightHand"
    LEFT_HAND = "LeftHand"
    ABOVE = "Above"

    @classmethod
    def parse(cls, value: str) -> 'OverlayPosition':
        """Unknown names fall back to the right hand."""
        for position in cls:
            if position.value == value:
                return position

        return cls.RIGHT_HAND

    @property
    def argument(self) -> str:
        """Value passed to the overlay's --position flag."""
        return {
            OverlayPosition.RIGHT_HAND: "right",
            OverlayPosition.LEFT_HAND: "left",
            OverlayPosition.ABOVE: "above",
        }[self]
