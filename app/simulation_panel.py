# app/simulation_panel.py
"""
Simulation Panel — Run/Stop control and live LED readout.

Brightness values come from the Workbench, which re-derives them after every
graph change while the simulation is running.
"""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Signal

from core.component import ANALOG_MAX, PWM_MAX
from synthesis.sketch_generator import drive_level
from synthesis.workbench import Workbench


class SimulationPanel(QWidget):
    """
    Panel for starting and stopping the LED simulation.

    Provides:
    - Run/Stop toggle
    - Per-LED brightness and equivalent PWM drive level
    """

    # Emitted with the new running flag after each toggle
    running_changed = Signal(bool)

    RUN_STYLE = """
        QPushButton {
            background-color: #008184;
            color: white;
            font-weight: bold;
            border: none;
            border-radius: 4px;
            padding: 6px 16px;
        }
        QPushButton:hover {
            background-color: #00979d;
        }
    """

    def __init__(self, workbench: Workbench, parent=None):
        super().__init__(parent)
        self.workbench = workbench

        layout = QVBoxLayout(self)
        layout.setContentsMargins(5, 5, 5, 5)

        self.run_button = QPushButton()
        self.run_button.setStyleSheet(self.RUN_STYLE)
        self.run_button.setMinimumHeight(32)
        self.run_button.clicked.connect(self._on_toggle)
        layout.addWidget(self.run_button)

        self.readout = QLabel()
        self.readout.setStyleSheet("color: #d4d4d4; font-family: Consolas, monospace;")
        layout.addWidget(self.readout)
        layout.addStretch()

        self.workbench.subscribe(self._on_workbench_changed)
        self._on_workbench_changed(self.workbench)

    def _on_toggle(self) -> None:
        running = self.workbench.toggle_running()
        self.running_changed.emit(running)

    def _on_workbench_changed(self, workbench: Workbench) -> None:
        self.run_button.setText("■ Stop" if workbench.running else "▶ Run")
        self.readout.setText(self.format_readout(workbench))

    @staticmethod
    def format_readout(workbench: Workbench) -> str:
        """One line per lit LED: id, brightness percentage and nearest PWM drive level."""
        if not workbench.running:
            return "Simulation stopped"
        if not workbench.brightness:
            return "No LED is driven"
        lines = []
        for led_id, level in workbench.brightness.items():
            pwm = drive_level(round(level * ANALOG_MAX))
            lines.append(f"{led_id}: {level * 100:.1f}%  (nearest PWM {pwm}/{PWM_MAX})")
        return "\n".join(lines)
