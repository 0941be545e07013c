# synthesis/role_resolver.py
"""
Role Resolver — Classifies LEDs and potentiometers by how they are wired
to the controller board.

A part is "bound" when its designated pin (LED anode, potentiometer signal)
shares a wire with any controller pin. Wires are undirected, so both
orientations of a connection are matched.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from core.circuit_graph import CircuitGraph
from core.component import ANODE_PIN, SIGNAL_PIN, Component, ComponentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundRole:
    """A part wired to a controller pin (by its logical name, e.g. "D1")."""
    component_id: str
    controller_pin: str


@dataclass(frozen=True)
class RoleBindings:
    """Resolution result; both sequences follow component creation order."""
    controller_id: Optional[str] = None
    leds: Tuple[BoundRole, ...] = ()
    potentiometers: Tuple[BoundRole, ...] = ()

    @property
    def has_controller(self) -> bool:
        return self.controller_id is not None


def normalize_pin_name(pin_id: str) -> str:
    """
    Maps a physical controller pin id to its logical name.

    Duplicated header labels carry a column suffix ("GND_L1", "3V3_R"); the
    logical name is everything before the first underscore.
    """
    return pin_id.split("_", 1)[0]


class RoleResolver:
    """Derives bound roles from a CircuitGraph snapshot."""

    # Designated pin that must carry the wire for each bindable kind
    BINDING_PINS = {
        ComponentKind.LED: ANODE_PIN,
        ComponentKind.POTENTIOMETER: SIGNAL_PIN,
    }

    def resolve(self, graph: CircuitGraph) -> RoleBindings:
        """
        Returns the bound LEDs and potentiometers of the graph.

        With no controller placed the result is empty, which callers treat as
        "not initialised" rather than an error.
        """
        controller = graph.controller
        if controller is None:
            return RoleBindings()

        leds = []
        potentiometers = []
        for component in graph.components.values():
            if component.kind not in self.BINDING_PINS:
                continue
            controller_pin = self._find_controller_pin(graph, component, controller)
            if controller_pin is None:
                continue
            role = BoundRole(component.id, normalize_pin_name(controller_pin))
            if component.kind == ComponentKind.LED:
                leds.append(role)
            else:
                potentiometers.append(role)

        return RoleBindings(controller.id, tuple(leds), tuple(potentiometers))

    def _find_controller_pin(self, graph: CircuitGraph, component: Component,
                             controller: Component) -> Optional[str]:
        """First wire (in drawing order) from the designated pin to the board wins."""
        pin_id = self.BINDING_PINS[component.kind]
        for conn in graph.live_connections():
            far = conn.link_to(component.id, controller.id, pin_id)
            if far is None:
                continue
            if not controller.has_pin(far.pin_id):
                logger.debug("Connection %s names unknown controller pin %r", conn.id, far.pin_id)
                continue
            return far.pin_id
        return None
