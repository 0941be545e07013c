# synthesis/workbench.py
"""
Workbench — The owning context that keeps derived state in step with the graph.

After every CircuitGraph mutation the workbench resolves roles, regenerates
the sketch and re-derives LED brightness, all synchronously, then notifies
its own subscribers (the GUI).
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from core.circuit_graph import CircuitGraph
from synthesis.led_simulator import LedSimulator, SimulationState
from synthesis.role_resolver import RoleBindings, RoleResolver
from synthesis.sketch_generator import SketchGenerator

logger = logging.getLogger(__name__)

SKETCH_FILENAME = "sketch.ino"

WorkbenchListener = Callable[["Workbench"], None]


class Workbench:
    """
    Exposes the reactive "current sketch" and "current LED brightness" views.

    Attributes:
        graph: The single CircuitGraph; mutate it directly.
        bindings: Roles resolved on the last recomputation.
        code: Current sketch text (may hold a manual edit until the next change).
        brightness: LED id -> level in [0, 1]; empty while stopped.
    """

    def __init__(self, graph: Optional[CircuitGraph] = None,
                 generator: Optional[SketchGenerator] = None,
                 simulator: Optional[LedSimulator] = None):
        self.graph = graph or CircuitGraph()
        self.resolver = RoleResolver()
        self.generator = generator or SketchGenerator()
        self.simulator = simulator or LedSimulator(resolver=self.resolver)

        self.state = SimulationState(running=False)
        self.bindings = RoleBindings()
        self.code = ""
        self.brightness: Dict[str, float] = {}
        self._listeners: List[WorkbenchListener] = []

        self.graph.subscribe(self._on_graph_changed)
        self.recompute()

    @property
    def running(self) -> bool:
        return self.state.running

    def subscribe(self, listener: WorkbenchListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: WorkbenchListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _on_graph_changed(self, graph: CircuitGraph) -> None:
        self.recompute()

    def recompute(self) -> None:
        """Rebuilds bindings, sketch text and brightness from the current graph."""
        self.bindings = self.resolver.resolve(self.graph)
        self.code = self.generator.generate(self.bindings)
        self.brightness = self.simulator.derive(self.graph, self.state)
        logger.debug("Recomputed: %d LED(s) bound, %d pot(s) bound, %d lit",
                     len(self.bindings.leds), len(self.bindings.potentiometers), len(self.brightness))
        for listener in list(self._listeners):
            listener(self)

    def set_running(self, running: bool) -> None:
        """Starts or stops the simulation; brightness is re-derived immediately."""
        self.state = SimulationState(running=running)
        self.brightness = self.simulator.derive(self.graph, self.state)
        for listener in list(self._listeners):
            listener(self)

    def toggle_running(self) -> bool:
        self.set_running(not self.state.running)
        return self.state.running

    def edit_code(self, text: str) -> None:
        """
        Records a manual edit of the sketch text.
        The edit is discarded by the next graph change.
        """
        self.code = text

    def export_sketch(self, target: Union[str, Path]) -> Path:
        """
        Writes the current sketch text verbatim as UTF-8.

        Args:
            target: A file path, or a directory that receives `sketch.ino`.

        Returns:
            Path: The file written.
        """
        path = Path(target)
        if path.is_dir():
            path = path / SKETCH_FILENAME
        path.write_text(self.code, encoding="utf-8")
        logger.info("Exported sketch to %s", path)
        return path
