# app/component_palette.py
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QPushButton, QLabel

from core.component import ComponentKind
from synthesis.workbench import Workbench


class ComponentPalette(QWidget):
    """
    Strip of buttons that place new parts on the workbench.
    The controller button is disabled while a board is already placed.
    """

    BUTTONS = [
        ("ESP8266", ComponentKind.CONTROLLER, "#00d4ff", "black"),
        ("LED", ComponentKind.LED, "#dc2626", "white"),
        ("Resistor", ComponentKind.RESISTOR, "#a16207", "white"),
        ("Potentiometer", ComponentKind.POTENTIOMETER, "#2563eb", "white"),
    ]

    def __init__(self, workbench: Workbench):
        super().__init__()
        self.workbench = workbench

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.addWidget(QLabel("<b>Components</b>"))

        row = QHBoxLayout()
        self.buttons = {}
        for label, kind, background, foreground in self.BUTTONS:
            btn = QPushButton(label)
            btn.setStyleSheet(
                f"QPushButton {{ background-color: {background}; color: {foreground}; "
                f"padding: 6px 12px; border-radius: 4px; }}"
                "QPushButton:disabled { background-color: #555555; color: #999999; }"
            )
            # Use default argument in lambda to capture the current kind
            btn.clicked.connect(lambda checked=False, k=kind: self.add_component(k))
            row.addWidget(btn)
            self.buttons[kind] = btn
        row.addStretch()
        layout.addLayout(row)

        self.hint_label = QLabel("")
        self.hint_label.setStyleSheet("color: #facc15;")
        layout.addWidget(self.hint_label)

        self.workbench.subscribe(self._on_workbench_changed)
        self._on_workbench_changed(self.workbench)

    def add_component(self, kind: ComponentKind) -> None:
        """Places a new part at the default position."""
        if self.workbench.graph.can_add(kind):
            self.workbench.graph.add_component(kind)

    def set_pending_hint(self, armed: bool) -> None:
        self.hint_label.setText("Click a pin on another component to finish the wire" if armed else "")

    def _on_workbench_changed(self, workbench: Workbench) -> None:
        can_add_controller = workbench.graph.can_add(ComponentKind.CONTROLLER)
        self.buttons[ComponentKind.CONTROLLER].setEnabled(can_add_controller)
