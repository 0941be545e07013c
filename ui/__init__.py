# ui/__init__.py
"""
UI package for the NodeMCU Workbench.

This package contains the breadboard drawing surface, its component, pin
and wire items, the wiring gesture and the sketch syntax highlighter.
"""

from ui.pin_connector import PinConnector

__all__ = [
    "PinConnector"
]
