# synthesis/led_simulator.py
"""
LED Simulator — Derives per-LED brightness for visual feedback while running.

Brightness is computed straight from the CircuitGraph rather than from the
generated sketch text. Which LEDs count as "driven" is selected by a
BindingRule; the default matches the sketch generator exactly.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from core.circuit_graph import CircuitGraph
from core.component import ANALOG_MAX, ComponentKind
from synthesis.role_resolver import RoleResolver

logger = logging.getLogger(__name__)


class BindingRule(Enum):
    """How an LED / potentiometer is recognised as wired to the board."""
    ROLE = "role"  # anode / signal pin only, same as the sketch generator
    ANY_PIN = "any_pin"  # any pin touching the board


@dataclass(frozen=True)
class SimulationState:
    """Run/stop flag handed to the simulator on every derivation."""
    running: bool = False


class LedSimulator:
    """
    Computes a brightness in [0, 1] for each LED that is lit.
    LEDs that are not driven have no entry; a stopped simulation yields {}.
    """

    def __init__(self, rule: BindingRule = BindingRule.ROLE, resolver: Optional[RoleResolver] = None):
        self.rule = rule
        self.resolver = resolver or RoleResolver()

    def derive(self, graph: CircuitGraph, state: SimulationState) -> Dict[str, float]:
        """Returns LED id -> brightness for the given graph snapshot."""
        if not state.running or graph.controller is None:
            return {}
        if self.rule == BindingRule.ROLE:
            return self._derive_from_roles(graph)
        return self._derive_any_pin(graph)

    def _derive_from_roles(self, graph: CircuitGraph) -> Dict[str, float]:
        bindings = self.resolver.resolve(graph)
        level = 1.0
        if bindings.potentiometers:
            # Mirrors the sketch: the last pot read sets the shared level
            pot = graph.get_component(bindings.potentiometers[-1].component_id)
            level = pot.config.value / ANALOG_MAX
        return {role.component_id: level for role in bindings.leds}

    def _derive_any_pin(self, graph: CircuitGraph) -> Dict[str, float]:
        controller = graph.controller
        connections = list(graph.live_connections())

        pot_value = None
        for conn in connections:
            for end in conn.endpoints:
                component = graph.get_component(end.component_id)
                if component.kind == ComponentKind.POTENTIOMETER and conn.touches(controller.id):
                    pot_value = component.config.value
        level = 1.0 if pot_value is None else pot_value / ANALOG_MAX

        states = {}
        for led in graph.components_of_kind(ComponentKind.LED):
            if any(conn.link_to(led.id, controller.id) is not None for conn in connections):
                states[led.id] = level
            else:
                logger.debug("LED %s is not wired to the controller", led.id)
        return states
