# core/connection.py
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Endpoint:
    """One end of a wire: a pin on a specific component."""
    component_id: str
    pin_id: str


@dataclass(frozen=True)
class Connection:
    """
    A wire between two pins.

    `from_end` / `to_end` only record the order the pins were clicked in;
    the wire itself has no direction, so every lookup goes through
    `link_to` which checks both orientations.
    """
    id: str
    from_end: Endpoint
    to_end: Endpoint

    @property
    def endpoints(self) -> Tuple[Endpoint, Endpoint]:
        return (self.from_end, self.to_end)

    def touches(self, component_id: str) -> bool:
        """True if either end sits on the given component."""
        return self.from_end.component_id == component_id or self.to_end.component_id == component_id

    def link_to(self, component_id: str, other_component_id: str,
                pin_id: Optional[str] = None) -> Optional[Endpoint]:
        """
        Match this wire against `(component_id, pin_id) <-> (other_component_id, any pin)`.

        Returns the endpoint on `other_component_id` when the wire matches in
        either orientation, otherwise None. A `pin_id` of None accepts any
        pin on the first component.
        """
        for near, far in ((self.from_end, self.to_end), (self.to_end, self.from_end)):
            if near.component_id != component_id or far.component_id != other_component_id:
                continue
            if pin_id is None or near.pin_id == pin_id:
                return far
        return None
