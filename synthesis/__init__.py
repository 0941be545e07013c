# synthesis/__init__.py
"""
Synthesis package for the NodeMCU Workbench.

This package turns the circuit graph into bound roles, generated Arduino
sketch text and simulated LED brightness.
"""

from synthesis.role_resolver import (
    BoundRole,
    RoleBindings,
    RoleResolver,
    normalize_pin_name
)

from synthesis.sketch_generator import (
    SketchGenerator,
    SketchSettings,
    PLACEHOLDER,
    drive_level
)

from synthesis.led_simulator import (
    LedSimulator,
    BindingRule,
    SimulationState
)

from synthesis.workbench import Workbench, SKETCH_FILENAME

__all__ = [
    # Role Resolver
    "BoundRole",
    "RoleBindings",
    "RoleResolver",
    "normalize_pin_name",
    # Sketch Generator
    "SketchGenerator",
    "SketchSettings",
    "PLACEHOLDER",
    "drive_level",
    # LED Simulator
    "LedSimulator",
    "BindingRule",
    "SimulationState",
    # Workbench
    "Workbench",
    "SKETCH_FILENAME"
]
