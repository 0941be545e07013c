# core/component.py
import logging
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from core.pin import Pin, PinSide

logger = logging.getLogger(__name__)

ANALOG_MIN = 0
ANALOG_MAX = 1023
PWM_MAX = 255

ANODE_PIN = "anode"
CATHODE_PIN = "cathode"
SIGNAL_PIN = "signal"


class ComponentKind(Enum):
    """The closed catalog of placeable parts."""
    CONTROLLER = "controller"
    LED = "led"
    RESISTOR = "resistor"
    POTENTIOMETER = "potentiometer"


@dataclass(frozen=True)
class ControllerConfig:
    """The NodeMCU board carries no tunable parameters."""
    pass


@dataclass(frozen=True)
class LedConfig:
    color: str = "#ff0000"


@dataclass(frozen=True)
class ResistorConfig:
    value: int = 220  # ohms


@dataclass(frozen=True)
class PotentiometerConfig:
    value: int = 512  # raw analog reading

    def __post_init__(self):
        # Readings outside the ADC range are clamped rather than rejected
        clamped = max(ANALOG_MIN, min(ANALOG_MAX, int(round(self.value))))
        object.__setattr__(self, "value", clamped)


ComponentConfig = Union[ControllerConfig, LedConfig, ResistorConfig, PotentiometerConfig]

CONFIG_TYPES = {
    ComponentKind.CONTROLLER: ControllerConfig,
    ComponentKind.LED: LedConfig,
    ComponentKind.RESISTOR: ResistorConfig,
    ComponentKind.POTENTIOMETER: PotentiometerConfig,
}


# NodeMCU header rows: (pin id, printed label). Duplicate labels get a
# column suffix in the id so every id stays unique on the board.
CONTROLLER_LEFT_PINS: List[Tuple[str, str]] = [
    ("A0", "A0"), ("RST", "RST"), ("EN", "EN"), ("3V3_L", "3V3"),
    ("GND_L1", "GND"), ("CLK", "CLK"), ("SD0", "SD0"), ("CMD", "CMD"),
    ("SD1", "SD1"), ("SD2", "SD2"), ("SD3", "SD3"), ("RX_L", "RX"),
    ("TX_L", "TX"), ("GND_L2", "GND"), ("3V3_L2", "3V3"),
]

CONTROLLER_RIGHT_PINS: List[Tuple[str, str]] = [
    ("D0", "D0"), ("D1", "D1"), ("D2", "D2"), ("D3", "D3"), ("D4", "D4"),
    ("D5", "D5"), ("D6", "D6"), ("D7", "D7"), ("D8", "D8"),
    ("3V3_R", "3V3"), ("GND_R1", "GND"), ("RX_R", "RX"), ("TX_R", "TX"),
    ("GND_R2", "GND"), ("VIN", "VIN"),
]

CONTROLLER_WIDTH = 120
CONTROLLER_PIN_PITCH = 20


def _controller_pins() -> Tuple[Pin, ...]:
    pins = []
    for offset, (pin_id, label) in enumerate(CONTROLLER_LEFT_PINS):
        pins.append(Pin(pin_id, label, 0, offset * CONTROLLER_PIN_PITCH + 10, PinSide.LEFT))
    for offset, (pin_id, label) in enumerate(CONTROLLER_RIGHT_PINS):
        pins.append(Pin(pin_id, label, CONTROLLER_WIDTH, offset * CONTROLLER_PIN_PITCH + 10, PinSide.RIGHT))
    return tuple(pins)


PIN_LAYOUTS: Dict[ComponentKind, Tuple[Pin, ...]] = {
    ComponentKind.CONTROLLER: _controller_pins(),
    ComponentKind.LED: (
        Pin(ANODE_PIN, "+", 20, 0, PinSide.LEFT),
        Pin(CATHODE_PIN, "-", 20, 50, PinSide.LEFT),
    ),
    ComponentKind.RESISTOR: (
        Pin("pin1", "1", 0, 15, PinSide.LEFT),
        Pin("pin2", "2", 80, 15, PinSide.RIGHT),
    ),
    ComponentKind.POTENTIOMETER: (
        Pin("vcc", "VCC", 10, 65, PinSide.LEFT),
        Pin(SIGNAL_PIN, "SIG", 35, 65, PinSide.LEFT),
        Pin("gnd", "GND", 60, 65, PinSide.RIGHT),
    ),
}


class Component:
    """
    Represents a part placed on the workbench.
    Stores its kind, position, kind-specific config and the fixed pin layout.
    """

    def __init__(self, component_id: str, kind: ComponentKind, x: float = 100, y: float = 100,
                 config: Optional[ComponentConfig] = None):
        self.id = component_id
        self.kind = kind
        self.x = x
        self.y = y
        self.config: ComponentConfig = config if config is not None else CONFIG_TYPES[kind]()
        self.pins: Tuple[Pin, ...] = PIN_LAYOUTS[kind]

    def __repr__(self) -> str:
        return f"Component({self.id!r}, {self.kind.value}, x={self.x}, y={self.y})"

    def get_pin(self, pin_id: str) -> Optional[Pin]:
        """Return the pin with the given id, or None."""
        for pin in self.pins:
            if pin.id == pin_id:
                return pin
        return None

    def has_pin(self, pin_id: str) -> bool:
        return self.get_pin(pin_id) is not None

    def with_config(self, patch: Dict[str, Any]) -> ComponentConfig:
        """
        Build a new config value from a partial patch.
        Keys the config type does not define are dropped with a warning.
        """
        known = {f.name for f in fields(self.config)}
        accepted = {}
        for key, value in patch.items():
            if key in known:
                accepted[key] = value
            else:
                logger.warning("Ignoring unknown %s config key %r on %s", self.kind.value, key, self.id)
        return replace(self.config, **accepted)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "x": self.x,
            "y": self.y,
            "config": {f.name: getattr(self.config, f.name) for f in fields(self.config)},
            "pins": [{"id": p.id, "label": p.label, "x": p.rel_x, "y": p.rel_y, "side": p.side.value}
                     for p in self.pins],
        }
