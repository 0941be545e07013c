# core package
# Expose main classes for convenience

from .pin import Pin, PinSide
from .component import (
    Component,
    ComponentKind,
    ControllerConfig,
    LedConfig,
    ResistorConfig,
    PotentiometerConfig,
)
from .connection import Connection, Endpoint
from .circuit_graph import CircuitGraph, CircuitError, DuplicateControllerError
