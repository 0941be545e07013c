# app/parameter_inspector.py
from typing import Optional
from PySide6.QtWidgets import (
    QWidget, QFormLayout, QLabel, QLineEdit, QVBoxLayout, QPushButton,
    QSlider, QColorDialog
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QIntValidator

from core.component import ANALOG_MAX, ANALOG_MIN, Component, ComponentKind
from synthesis.workbench import Workbench


class ParameterInspector(QWidget):
    """
    Side-panel widget that edits the config of the selected component.
    Every edit goes through CircuitGraph.update_component_config.
    """

    def __init__(self, workbench: Workbench):
        super().__init__()
        self.workbench = workbench
        self.current_id: Optional[str] = None

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(10, 0, 10, 10)
        self.form = QFormLayout()
        self.main_layout.addLayout(self.form)

        self.value_slider: Optional[QSlider] = None
        self.value_edit: Optional[QLineEdit] = None
        self.color_button: Optional[QPushButton] = None

        self.workbench.subscribe(self._on_workbench_changed)

    @property
    def current_component(self) -> Optional[Component]:
        if self.current_id is None:
            return None
        return self.workbench.graph.get_component(self.current_id)

    def inspect_component(self, component_id: str) -> None:
        """Populates the form with the fields of the selected component."""
        self.clear_inspector()
        component = self.workbench.graph.get_component(component_id)
        if component is None:
            return
        self.current_id = component_id

        self.form.addRow(QLabel("<b>Id:</b>"), QLabel(component.id))
        self.form.addRow(QLabel("<b>Type:</b>"), QLabel(component.kind.value.capitalize()))

        if component.kind == ComponentKind.LED:
            self.color_button = QPushButton(component.config.color)
            self._paint_color_button(component.config.color)
            self.color_button.clicked.connect(self._open_color_dialog)
            self.form.addRow(QLabel("color"), self.color_button)

        elif component.kind == ComponentKind.RESISTOR:
            self.value_edit = QLineEdit(str(component.config.value))
            self.value_edit.setValidator(QIntValidator(1, 10_000_000))
            self.value_edit.editingFinished.connect(self._on_resistance_edited)
            self.form.addRow(QLabel("value (Ω)"), self.value_edit)

        elif component.kind == ComponentKind.POTENTIOMETER:
            self.value_slider = QSlider(Qt.Horizontal)
            self.value_slider.setRange(ANALOG_MIN, ANALOG_MAX)
            self.value_slider.setValue(component.config.value)
            self.value_slider.valueChanged.connect(self._on_pot_value_changed)
            self.form.addRow(QLabel("value"), self.value_slider)

    def clear_inspector(self) -> None:
        """Clears the inspector when no component is selected."""
        self.current_id = None
        self.value_slider = None
        self.value_edit = None
        self.color_button = None
        for i in reversed(range(self.form.rowCount())):
            self.form.removeRow(i)

    def _paint_color_button(self, color: str) -> None:
        self.color_button.setText(color)
        self.color_button.setStyleSheet(f"background-color: {color}; border: 1px solid #888;")

    def _open_color_dialog(self) -> None:
        component = self.current_component
        if component is None:
            return
        color = QColorDialog.getColor(QColor(component.config.color), self, "Select LED Color")
        if color.isValid():
            self.workbench.graph.update_component_config(component.id, {"color": color.name()})

    def _on_resistance_edited(self) -> None:
        component = self.current_component
        if component is None or not self.value_edit.text():
            return
        value = int(self.value_edit.text())
        if value != component.config.value:
            self.workbench.graph.update_component_config(component.id, {"value": value})

    def _on_pot_value_changed(self, value: int) -> None:
        component = self.current_component
        if component is not None and value != component.config.value:
            self.workbench.graph.update_component_config(component.id, {"value": value})

    def _on_workbench_changed(self, workbench: Workbench) -> None:
        """Keeps widgets in step with edits made elsewhere (e.g. the knob)."""
        component = self.current_component
        if component is None:
            if self.current_id is not None:
                self.clear_inspector()
            return
        if self.value_slider is not None and self.value_slider.value() != component.config.value:
            self.value_slider.blockSignals(True)
            self.value_slider.setValue(component.config.value)
            self.value_slider.blockSignals(False)
        if self.color_button is not None:
            self._paint_color_button(component.config.color)
