# ui/grid.py
from typing import Optional
from PySide6.QtWidgets import QGraphicsItem, QWidget
from PySide6.QtGui import QPen, QColor, QPainter
from PySide6.QtCore import QRectF


class GridItem(QGraphicsItem):
    """
    A background item that draws the workbench grid.
    Static and non-selectable; purely a visual guide.
    """

    def __init__(self, spacing: int = 20):
        super().__init__()
        self.spacing = spacing

        # Ensure the grid is behind all other elements
        self.setZValue(-100)

        # Disable caching to prevent distortion/smearing during panning.
        self.setCacheMode(QGraphicsItem.NoCache)

    def boundingRect(self) -> QRectF:
        MAX = 1e6
        return QRectF(-MAX, -MAX, 2 * MAX, 2 * MAX)

    def paint(self, painter: QPainter, option, widget: Optional[QWidget] = None) -> None:
        """Draws grid lines within the exposed area only."""
        painter.setPen(QPen(QColor(26, 26, 26), 0))
        painter.setRenderHint(QPainter.Antialiasing, False)

        visible_rect = option.exposedRect

        # Python's modulo keeps the alignment correct for negative coordinates too
        left = int(visible_rect.left())
        left -= left % self.spacing
        top = int(visible_rect.top())
        top -= top % self.spacing
        right = int(visible_rect.right())
        bottom = int(visible_rect.bottom())

        x = left
        while x <= right:
            painter.drawLine(x, top, x, bottom)
            x += self.spacing

        y = top
        while y <= bottom:
            painter.drawLine(left, y, right, y)
            y += self.spacing
