# core/pin.py
from dataclasses import dataclass
from enum import Enum


class PinSide(Enum):
    """Which edge of the component body a pin label is drawn on."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Pin:
    """
    Represents a physical connection point on a component.
    Pins are generated from the per-kind layout table and never change afterwards.
    """
    id: str
    label: str
    rel_x: float = 0
    rel_y: float = 0
    side: PinSide = PinSide.LEFT
