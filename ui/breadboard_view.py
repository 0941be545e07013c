# ui/breadboard_view.py
from typing import Dict, Optional
from PySide6.QtWidgets import QGraphicsView, QGraphicsScene
from PySide6.QtCore import Qt, QPointF, Signal
from PySide6.QtGui import QPainter, QColor, QWheelEvent

from core.connection import Connection
from synthesis.workbench import Workbench
from ui.component_item import ComponentItem
from ui.grid import GridItem
from ui.pin_connector import PinConnector
from ui.wire_item import WireItem


class BreadboardView(QGraphicsView):
    """
    Drawing surface for the workbench.

    Mirrors the Workbench's graph into scene items after every change and
    forwards pin clicks to the two-click PinConnector.
    """
    GRID_SIZE = 20

    # Emitted with True while a wire has a pending first endpoint
    pending_changed = Signal(bool)

    def __init__(self, workbench: Workbench):
        super().__init__()
        self.workbench = workbench
        self.connector = PinConnector(workbench.graph)

        # --- Scene & View Configuration ---
        self._scene = QGraphicsScene()
        self.setScene(self._scene)
        self.setSceneRect(-2000, -2000, 4000, 4000)

        self.setBackgroundBrush(QColor(10, 10, 10))
        self.setMouseTracking(True)
        self.setRenderHints(QPainter.Antialiasing | QPainter.TextAntialiasing)

        # Ensures zoom centers on the mouse cursor
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)

        self.grid_item = GridItem(self.GRID_SIZE)
        self._scene.addItem(self.grid_item)

        self.zoom_step = 1.2

        self.component_items: Dict[str, ComponentItem] = {}
        self.wire_items: Dict[str, WireItem] = {}
        self.preview_wire: Optional[WireItem] = None

        self.workbench.subscribe(self.sync_from_workbench)
        self.sync_from_workbench(self.workbench)

    # ------------------------------------------------------------------
    # Graph -> scene
    # ------------------------------------------------------------------

    def sync_from_workbench(self, workbench: Workbench) -> None:
        """Adds, removes and refreshes items so the scene matches the graph."""
        graph = workbench.graph

        for component_id in list(self.component_items):
            if component_id not in graph.components:
                self._scene.removeItem(self.component_items.pop(component_id))

        for component_id, component in graph.components.items():
            item = self.component_items.get(component_id)
            if item is None:
                item = ComponentItem(component)
                self._scene.addItem(item)
                self.component_items[component_id] = item
            else:
                item.sync_from_model()
            item.set_brightness(workbench.brightness.get(component_id, 0.0))

        live_ids = {conn.id for conn in graph.connections}
        for conn_id in list(self.wire_items):
            if conn_id not in live_ids:
                self._scene.removeItem(self.wire_items.pop(conn_id))
        for conn in graph.connections:
            if conn.id not in self.wire_items:
                wire = WireItem(conn)
                self._scene.addItem(wire)
                self.wire_items[conn.id] = wire

        # The half-drawn wire dies with the component it started on
        if self.connector.drop_stale():
            self._cancel_preview()

        self.refresh_wires()
        self._refresh_pending_pin()

    def _pin_point(self, component_id: str, pin_id: str) -> Optional[QPointF]:
        item = self.component_items.get(component_id)
        if item is None:
            return None
        for pin_item in item.pin_items:
            if pin_item.pin.id == pin_id:
                return pin_item.scene_connection_point()
        return None

    def _wire_points(self, conn: Connection):
        start = self._pin_point(conn.from_end.component_id, conn.from_end.pin_id)
        end = self._pin_point(conn.to_end.component_id, conn.to_end.pin_id)
        return start, end

    def refresh_wires(self) -> None:
        """Re-anchors every wire on its pins (called while components are dragged)."""
        for wire in self.wire_items.values():
            start, end = self._wire_points(wire.connection)
            if start is None or end is None:
                wire.hide()
                continue
            wire.show()
            wire.set_points(start, end)

    def _refresh_pending_pin(self) -> None:
        pending = self.connector.pending
        for item in self.component_items.values():
            for pin_item in item.pin_items:
                armed = (pending is not None and pending.component_id == item.model.id
                         and pending.pin_id == pin_item.pin.id)
                pin_item.set_armed(armed)
        self.pending_changed.emit(pending is not None)

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------

    def pin_clicked(self, component_id: str, pin_id: str) -> None:
        """Entry point used by PinItem for the two-click wiring gesture."""
        self.connector.click(component_id, pin_id)
        if self.connector.is_armed:
            self._start_preview(component_id, pin_id)
        else:
            self._cancel_preview()
        self._refresh_pending_pin()

    def _start_preview(self, component_id: str, pin_id: str) -> None:
        start = self._pin_point(component_id, pin_id)
        if start is None:
            return
        if self.preview_wire is None:
            self.preview_wire = WireItem(preview=True)
            self._scene.addItem(self.preview_wire)
        self.preview_wire.set_points(start, start)

    def _cancel_preview(self) -> None:
        if self.preview_wire is not None:
            if self.preview_wire.scene():
                self._scene.removeItem(self.preview_wire)
            self.preview_wire = None

    def cancel_wiring(self) -> None:
        self.connector.cancel()
        self._cancel_preview()
        self._refresh_pending_pin()

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------

    def wheelEvent(self, event: QWheelEvent) -> None:
        """Handles zooming via the mouse scroll wheel."""
        factor = self.zoom_step if event.angleDelta().y() > 0 else 1 / self.zoom_step
        self.scale(factor, factor)

    def mouseMoveEvent(self, event) -> None:
        if self.preview_wire is not None and self.connector.pending is not None:
            pending = self.connector.pending
            start = self._pin_point(pending.component_id, pending.pin_id)
            if start is not None:
                self.preview_wire.set_points(start, self.mapToScene(event.pos()))
        super().mouseMoveEvent(event)

    def keyPressEvent(self, event) -> None:
        """
        Esc: cancels the pending wire.
        Del: removes the selected components (and their wires).
        """
        if event.key() == Qt.Key_Escape and self.connector.is_armed:
            self.cancel_wiring()
        elif event.key() == Qt.Key_Delete:
            selected = [item for item in self._scene.selectedItems() if isinstance(item, ComponentItem)]
            for item in selected:
                self.workbench.graph.remove_component(item.model.id)
        else:
            super().keyPressEvent(event)
