# ui/component_item.py
import math
from typing import Optional, List, TYPE_CHECKING

from PySide6.QtWidgets import (
    QGraphicsRectItem, QGraphicsItem, QGraphicsEllipseItem,
    QGraphicsLineItem, QGraphicsSimpleTextItem
)
from PySide6.QtCore import Qt, QPointF
from PySide6.QtGui import QBrush, QColor, QPen, QFont

from core.component import ANALOG_MAX, Component, ComponentKind, CONTROLLER_WIDTH
from ui.pin_item import PinItem

if TYPE_CHECKING:
    from ui.breadboard_view import BreadboardView

KNOB_CENTER = QPointF(35, 30)
KNOB_RADIUS = 22
KNOB_SWEEP = math.pi * 1.5  # 270 degree travel
KNOB_START = -math.pi * 0.75


def knob_angle(value: int) -> float:
    """Angle (radians, screen coordinates) of the knob pointer for a reading."""
    return value / ANALOG_MAX * KNOB_SWEEP + KNOB_START


def value_from_knob_point(dx: float, dy: float) -> int:
    """Reading selected by clicking at offset (dx, dy) from the knob centre."""
    fraction = (math.atan2(dy, dx) - KNOB_START) / KNOB_SWEEP
    return max(0, min(ANALOG_MAX, round(fraction * ANALOG_MAX)))


def glow_color(color: str, brightness: float) -> QColor:
    """Scales each channel of an LED colour by the brightness level."""
    base = QColor(color)
    if not base.isValid():
        base = QColor("#ff0000")
    return QColor(
        round(base.red() * brightness),
        round(base.green() * brightness),
        round(base.blue() * brightness),
    )


class ComponentItem(QGraphicsRectItem):
    """Visual representation of a placed Component, with clickable pins."""

    BODY_SIZES = {
        ComponentKind.CONTROLLER: (CONTROLLER_WIDTH, 300),
        ComponentKind.LED: (40, 50),
        ComponentKind.RESISTOR: (80, 30),
        ComponentKind.POTENTIOMETER: (70, 65),
    }

    def __init__(self, component_model: Component):
        width, height = self.BODY_SIZES[component_model.kind]
        super().__init__(0, 0, width, height)
        self.model = component_model
        self.brightness = 0.0
        self._press_pos: Optional[QPointF] = None

        self.setFlags(
            QGraphicsItem.ItemIsSelectable |
            QGraphicsItem.ItemIsMovable |
            QGraphicsItem.ItemSendsGeometryChanges
        )
        self.setAcceptedMouseButtons(Qt.LeftButton)
        self.setPos(QPointF(self.model.x, self.model.y))

        # Transparent bounding box; the symbol is drawn with child items
        self.setBrush(QBrush(Qt.transparent))
        self.setPen(QPen(Qt.NoPen))

        self._create_symbol(width, height)

        self.pin_items: List[PinItem] = [PinItem(pin, self) for pin in self.model.pins]

    # ------------------------------------------------------------------
    # Symbols
    # ------------------------------------------------------------------

    def _create_symbol(self, width: int, height: int) -> None:
        kind = self.model.kind
        if kind == ComponentKind.CONTROLLER:
            self._create_controller_symbol(width, height)
        elif kind == ComponentKind.LED:
            self._create_led_symbol()
        elif kind == ComponentKind.RESISTOR:
            self._create_resistor_symbol()
        elif kind == ComponentKind.POTENTIOMETER:
            self._create_potentiometer_symbol()

    def _text(self, text: str, x: float, y: float, size: int = 9, bold: bool = False,
              color: str = "#00d4ff") -> QGraphicsSimpleTextItem:
        item = QGraphicsSimpleTextItem(text, self)
        font = QFont("Arial", size)
        font.setBold(bold)
        item.setFont(font)
        item.setBrush(QBrush(QColor(color)))
        # Centre horizontally on x
        item.setPos(x - item.boundingRect().width() / 2, y)
        return item

    def _create_controller_symbol(self, width: int, height: int) -> None:
        body = QGraphicsRectItem(0, 0, width, height, self)
        body.setBrush(QBrush(QColor("#1a1a2e")))
        body.setPen(QPen(QColor("#00d4ff"), 2))

        usb = QGraphicsRectItem(45, -5, 30, 10, self)
        usb.setBrush(QBrush(QColor("#444444")))
        usb.setPen(QPen(Qt.NoPen))

        chip = QGraphicsRectItem(20, 50, 80, 60, self)
        chip.setBrush(QBrush(QColor("#2a2a3e")))
        chip.setPen(QPen(QColor("#3a3a5e"), 1))

        self._text("ESP8266", width / 2, 18, bold=True)
        self._text("NodeMCU", width / 2, 72, bold=True)

    def _create_led_symbol(self) -> None:
        self.led_body = QGraphicsEllipseItem(5, 10, 30, 30, self)
        self.led_body.setPen(QPen(QColor("#ffffff"), 2))
        self.refresh_led()

    def _create_resistor_symbol(self) -> None:
        lead_pen = QPen(QColor("#c0c0c0"), 2)
        QGraphicsLineItem(0, 15, 15, 15, self).setPen(lead_pen)
        QGraphicsLineItem(65, 15, 80, 15, self).setPen(lead_pen)

        body = QGraphicsRectItem(15, 8, 50, 14, self)
        body.setBrush(QBrush(QColor("#d2b48c")))
        body.setPen(QPen(QColor("#8b7355"), 1))
        for band_x, band_color in ((22, "#ff0000"), (35, "#ff0000"), (48, "#8b4513")):
            band = QGraphicsRectItem(band_x, 6, 4, 18, self)
            band.setBrush(QBrush(QColor(band_color)))
            band.setPen(QPen(Qt.NoPen))

        self.value_label = self._text("", 40, 26, size=8, color="#ffffff")
        self.refresh_label()

    def _create_potentiometer_symbol(self) -> None:
        body = QGraphicsEllipseItem(KNOB_CENTER.x() - KNOB_RADIUS, KNOB_CENTER.y() - KNOB_RADIUS,
                                    2 * KNOB_RADIUS, 2 * KNOB_RADIUS, self)
        body.setBrush(QBrush(QColor("#2a4a7a")))
        body.setPen(QPen(QColor("#4a9eff"), 2))

        self.knob_pointer = QGraphicsLineItem(self)
        pointer_pen = QPen(QColor("#ffffff"), 3)
        pointer_pen.setCapStyle(Qt.RoundCap)
        self.knob_pointer.setPen(pointer_pen)

        self.value_label = self._text("", KNOB_CENTER.x(), KNOB_CENTER.y() - 8, size=8, color="#ffffff")
        self.refresh_label()

    # ------------------------------------------------------------------
    # State refresh
    # ------------------------------------------------------------------

    def refresh_label(self) -> None:
        """Updates the value text (and knob pointer) from the model config."""
        kind = self.model.kind
        if kind == ComponentKind.RESISTOR:
            self.value_label.setText(f"{self.model.config.value}Ω")
        elif kind == ComponentKind.POTENTIOMETER:
            value = self.model.config.value
            self.value_label.setText(str(value))
            angle = knob_angle(value)
            tip = QPointF(KNOB_CENTER.x() + math.cos(angle) * 16, KNOB_CENTER.y() + math.sin(angle) * 16)
            self.knob_pointer.setLine(KNOB_CENTER.x(), KNOB_CENTER.y(), tip.x(), tip.y())
        else:
            return
        width = self.value_label.boundingRect().width()
        center_x = 40 if kind == ComponentKind.RESISTOR else KNOB_CENTER.x()
        self.value_label.setX(center_x - width / 2)

    def set_brightness(self, brightness: float) -> None:
        self.brightness = brightness
        if self.model.kind == ComponentKind.LED:
            self.refresh_led()

    def refresh_led(self) -> None:
        color = self.model.config.color
        if self.brightness > 0:
            self.led_body.setBrush(QBrush(glow_color(color, self.brightness)))
        else:
            dim = QColor(color) if QColor(color).isValid() else QColor("#ff0000")
            dim.setAlpha(60)
            self.led_body.setBrush(QBrush(dim))

    def sync_from_model(self) -> None:
        """Re-reads position and config after a graph change."""
        if self.pos() != QPointF(self.model.x, self.model.y):
            self.setPos(QPointF(self.model.x, self.model.y))
        self.refresh_label()
        if self.model.kind == ComponentKind.LED:
            self.refresh_led()

    # ------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------

    def _view(self) -> Optional['BreadboardView']:
        if self.scene() is None or not self.scene().views():
            return None
        return self.scene().views()[0]

    def itemChange(self, change, value):
        if change == QGraphicsItem.ItemPositionHasChanged:
            view = self._view()
            if view is not None:
                view.refresh_wires()
        return super().itemChange(change, value)

    def mousePressEvent(self, event) -> None:
        if self.model.kind == ComponentKind.POTENTIOMETER:
            delta = event.pos() - KNOB_CENTER
            if math.hypot(delta.x(), delta.y()) < KNOB_RADIUS:
                view = self._view()
                if view is not None:
                    new_value = value_from_knob_point(delta.x(), delta.y())
                    view.workbench.graph.update_component_config(self.model.id, {"value": new_value})
                event.accept()
                return
        self._press_pos = self.pos()
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        super().mouseReleaseEvent(event)
        if self._press_pos is not None and self.pos() != self._press_pos:
            view = self._view()
            if view is not None:
                view.workbench.graph.update_component_position(self.model.id, self.pos().x(), self.pos().y())
        self._press_pos = None
