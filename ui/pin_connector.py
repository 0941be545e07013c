# ui/pin_connector.py
"""
Two-click wiring protocol used by the breadboard view.

The first pin click arms a pending endpoint; a click on a pin of a
different component completes the wire. Clicking another pin of the same
component leaves the pending endpoint armed.
"""

from typing import Optional

from core.circuit_graph import CircuitGraph
from core.connection import Connection, Endpoint


class PinConnector:
    """Holds the pending endpoint of a wire being drawn."""

    def __init__(self, graph: CircuitGraph):
        self.graph = graph
        self.pending: Optional[Endpoint] = None

    @property
    def is_armed(self) -> bool:
        return self.pending is not None

    def drop_stale(self) -> bool:
        """
        Forgets a pending endpoint whose component has left the graph.

        Returns:
            True if a pending endpoint was dropped.
        """
        if self.pending is not None and self.pending.component_id not in self.graph.components:
            self.pending = None
            return True
        return False

    def click(self, component_id: str, pin_id: str) -> Optional[Connection]:
        """
        Feeds one pin click into the protocol.

        Returns:
            The Connection created by a completing click, otherwise None.
        """
        self.drop_stale()
        if self.pending is None:
            self.pending = Endpoint(component_id, pin_id)
            return None

        if self.pending.component_id == component_id:
            return None

        start = self.pending
        self.pending = None
        return self.graph.add_connection(start.component_id, start.pin_id, component_id, pin_id)

    def cancel(self) -> None:
        """Drops the pending endpoint, if any."""
        self.pending = None
