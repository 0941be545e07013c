# app/__init__.py
"""
Application package for the NodeMCU Workbench.

This package contains the main application window and supporting panels.
"""

from app.app_window import AppWindow
from app.component_palette import ComponentPalette
from app.parameter_inspector import ParameterInspector
from app.simulation_panel import SimulationPanel

__all__ = [
    "AppWindow",
    "ComponentPalette",
    "ParameterInspector",
    "SimulationPanel"
]
