# ui/pin_item.py
from typing import TYPE_CHECKING

from PySide6.QtWidgets import QGraphicsEllipseItem, QGraphicsSimpleTextItem
from PySide6.QtGui import QBrush, QColor, QPen, QFont
from PySide6.QtCore import Qt, QPointF

from core.pin import Pin, PinSide

if TYPE_CHECKING:
    from ui.component_item import ComponentItem


class PinItem(QGraphicsEllipseItem):
    """Clickable dot representing a component terminal."""

    IDLE_COLOR = QColor("#c0c0c0")
    ARMED_COLOR = QColor("#ffd700")

    def __init__(self, pin: Pin, parent: 'ComponentItem'):
        # 10px diameter dot, centred on the pin offset
        super().__init__(-5, -5, 10, 10, parent)

        self.pin = pin
        self.setPos(QPointF(pin.rel_x, pin.rel_y))
        self.setBrush(QBrush(self.IDLE_COLOR, Qt.SolidPattern))
        self.setPen(QPen(QColor("#333333"), 1))
        self.setAcceptHoverEvents(True)
        self.setCursor(Qt.PointingHandCursor)
        self.setToolTip(f"{pin.label} ({pin.id})")

        # Ensure it renders above the parent component's body
        self.setZValue(5)

        self.label = QGraphicsSimpleTextItem(pin.label, self)
        self.label.setFont(QFont("Arial", 7))
        self.label.setBrush(QBrush(QColor("#e0e0e0")))
        width = self.label.boundingRect().width()
        if pin.side == PinSide.LEFT:
            self.label.setPos(-8 - width, -6)
        else:
            self.label.setPos(8, -6)

    @property
    def component_id(self) -> str:
        return self.parentItem().model.id

    def set_armed(self, armed: bool) -> None:
        """Highlights the pin while it is the pending end of a wire."""
        color = self.ARMED_COLOR if armed else self.IDLE_COLOR
        self.setBrush(QBrush(color, Qt.SolidPattern))

    def scene_connection_point(self) -> QPointF:
        # Maps the center of the pin to the global scene coordinates
        return self.mapToScene(QPointF(0, 0))

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton and self.scene() is not None:
            views = self.scene().views()
            if views:
                views[0].pin_clicked(self.component_id, self.pin.id)
                event.accept()
                return
        super().mousePressEvent(event)
