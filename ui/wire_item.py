# ui/wire_item.py
from typing import Optional
from PySide6.QtWidgets import QGraphicsLineItem, QWidget
from PySide6.QtGui import QPen, QColor, QPainterPath, QPainterPathStroker, QPainter
from PySide6.QtCore import Qt, QPointF

from core.connection import Connection


class WireItem(QGraphicsLineItem):
    """
    Straight line drawn between the two pins of a Connection.
    A preview wire (no connection) follows the mouse from the pending pin.
    """

    DEFAULT_COLOR = QColor("#00ffff")

    def __init__(self, connection: Optional[Connection] = None, preview: bool = False):
        super().__init__()
        self.connection = connection
        self.preview = preview

        pen = QPen(self.DEFAULT_COLOR, 3)
        pen.setCosmetic(True)
        pen.setCapStyle(Qt.RoundCap)
        if self.preview:
            pen.setStyle(Qt.DashLine)
            preview_color = QColor(self.DEFAULT_COLOR)
            preview_color.setAlpha(180)
            pen.setColor(preview_color)
        self.setPen(pen)

        # Wires sit below components so pins stay clickable
        self.setZValue(-1)

    def set_points(self, start: QPointF, end: QPointF) -> None:
        self.setLine(start.x(), start.y(), end.x(), end.y())

    def shape(self) -> QPainterPath:
        """Increases the hit-box of the wire for easier hovering."""
        path = QPainterPath()
        path.moveTo(self.line().p1())
        path.lineTo(self.line().p2())

        stroker = QPainterPathStroker()
        stroker.setWidth(10)
        return stroker.createStroke(path)

    def paint(self, painter: QPainter, option, widget: Optional[QWidget] = None) -> None:
        if not self.preview:
            # Soft glow underneath the wire
            glow = QColor(self.DEFAULT_COLOR)
            glow.setAlpha(60)
            glow_pen = QPen(glow, 8)
            glow_pen.setCosmetic(True)
            painter.setPen(glow_pen)
            painter.drawLine(self.line())
        painter.setPen(self.pen())
        painter.drawLine(self.line())
