# core/circuit_graph.py
"""
Circuit Graph — the single store of placed components and wires.

Every mutator runs synchronously and finishes by notifying subscribers, so
anything derived from the graph (bound roles, sketch text, LED state) is
recomputed before the next user interaction is processed.
"""

import itertools
import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from core.component import Component, ComponentKind
from core.connection import Connection, Endpoint

logger = logging.getLogger(__name__)

ChangeListener = Callable[["CircuitGraph"], None]


class CircuitError(Exception):
    """Base exception for circuit graph errors."""
    pass


class DuplicateControllerError(CircuitError):
    """Raised when a second controller board is added to the graph."""

    def __init__(self, existing_id: str):
        self.existing_id = existing_id
        super().__init__(f"A controller is already placed: {existing_id}")


class CircuitGraph:
    """
    Holds components (in creation order) and undirected connections.

    Attributes:
        components: component id -> Component, insertion ordered.
        connections: wires in the order they were drawn.
    """

    DEFAULT_POSITION = (100, 100)

    def __init__(self):
        self.components: Dict[str, Component] = {}
        self.connections: List[Connection] = []
        self._listeners: List[ChangeListener] = []
        self._component_counter = itertools.count(1)
        self._connection_counter = itertools.count(1)

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: ChangeListener) -> None:
        """Registers a callback invoked after every mutation."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def controller(self) -> Optional[Component]:
        """The controller board, if one has been placed."""
        for component in self.components.values():
            if component.kind == ComponentKind.CONTROLLER:
                return component
        return None

    def get_component(self, component_id: str) -> Optional[Component]:
        return self.components.get(component_id)

    def components_of_kind(self, kind: ComponentKind) -> List[Component]:
        """Returns components of one kind in creation order."""
        return [c for c in self.components.values() if c.kind == kind]

    def can_add(self, kind: ComponentKind) -> bool:
        """False only for a second controller."""
        return kind != ComponentKind.CONTROLLER or self.controller is None

    def live_connections(self) -> Iterator[Connection]:
        """
        Yields connections whose endpoints both refer to present components.
        Stale wires are skipped and logged, never raised.
        """
        for conn in self.connections:
            if all(end.component_id in self.components for end in conn.endpoints):
                yield conn
            else:
                logger.debug("Skipping stale connection %s", conn.id)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_component(self, kind: ComponentKind, x: Optional[float] = None,
                      y: Optional[float] = None) -> Component:
        """
        Creates a component with the default config and pin layout for its kind.

        Raises:
            DuplicateControllerError: If a controller already exists.
        """
        if not self.can_add(kind):
            raise DuplicateControllerError(self.controller.id)

        default_x, default_y = self.DEFAULT_POSITION
        component_id = f"{kind.value}_{next(self._component_counter)}"
        component = Component(component_id, kind,
                              x=default_x if x is None else x,
                              y=default_y if y is None else y)
        self.components[component_id] = component
        logger.debug("Added %r", component)
        self._notify()
        return component

    def remove_component(self, component_id: str) -> None:
        """Removes a component together with every wire touching it."""
        if component_id not in self.components:
            logger.debug("remove_component: unknown id %s", component_id)
            return
        del self.components[component_id]
        before = len(self.connections)
        self.connections = [c for c in self.connections if not c.touches(component_id)]
        logger.debug("Removed %s and %d connection(s)", component_id, before - len(self.connections))
        self._notify()

    def update_component_position(self, component_id: str, x: float, y: float) -> None:
        component = self.components.get(component_id)
        if component is None:
            logger.debug("update_component_position: unknown id %s", component_id)
            return
        component.x = x
        component.y = y
        self._notify()

    def update_component_config(self, component_id: str, patch: Dict[str, Any]) -> None:
        """Replaces the component's config with a copy carrying the patched fields."""
        component = self.components.get(component_id)
        if component is None:
            logger.debug("update_component_config: unknown id %s", component_id)
            return
        component.config = component.with_config(patch)
        logger.debug("Config of %s is now %s", component_id, component.config)
        self._notify()

    def add_connection(self, from_component: str, from_pin: str,
                       to_component: str, to_pin: str) -> Optional[Connection]:
        """
        Wires two pins together.

        Returns:
            The new Connection, or None when the wire is rejected (both ends on
            the same component, or an end that names an unknown component/pin).
        """
        if from_component == to_component:
            logger.debug("Rejected self-connection on %s", from_component)
            return None

        for component_id, pin_id in ((from_component, from_pin), (to_component, to_pin)):
            component = self.components.get(component_id)
            if component is None:
                logger.debug("add_connection: unknown component %s", component_id)
                return None
            if not component.has_pin(pin_id):
                logger.warning("add_connection: %s has no pin %r", component_id, pin_id)
                return None

        connection = Connection(
            id=f"conn_{next(self._connection_counter)}",
            from_end=Endpoint(from_component, from_pin),
            to_end=Endpoint(to_component, to_pin),
        )
        self.connections.append(connection)
        logger.debug("Connected %s.%s <-> %s.%s", from_component, from_pin, to_component, to_pin)
        self._notify()
        return connection

    def clear_connections(self) -> None:
        """Removes every wire; components stay where they are."""
        self.connections = []
        logger.debug("Cleared all connections")
        self._notify()
