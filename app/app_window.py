# app_window.py
"""
Main application window for the NodeMCU Workbench.

Left half: the generated sketch with its toolbar (run, export, clear wires).
Right half: component palette, breadboard view and config inspector.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QPushButton, QSplitter,
    QPlainTextEdit, QLabel, QFileDialog, QMessageBox, QFrame
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont

from synthesis.workbench import SKETCH_FILENAME, Workbench
from ui.breadboard_view import BreadboardView
from ui.component_item import ComponentItem
from ui.sketch_highlighter import SketchHighlighter
from app.component_palette import ComponentPalette
from app.parameter_inspector import ParameterInspector
from app.simulation_panel import SimulationPanel


class AppWindow(QMainWindow):
    """
    The main entry point window for the workbench.
    Coordinates the sketch editor, palette, breadboard view, inspector and
    simulation panel around one Workbench.
    """

    BOARD_LABEL = "NodeMCU 1.0 (ESP-12E Module)"

    def __init__(self, workbench: Optional[Workbench] = None):
        super().__init__()
        self.setWindowTitle("NodeMCU Workbench")
        self.resize(1400, 900)

        self.workbench = workbench or Workbench()
        self._updating_editor = False

        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)

        self._main_splitter = QSplitter(Qt.Horizontal)
        self._main_splitter.addWidget(self._create_code_panel())
        self._main_splitter.addWidget(self._create_board_panel())
        self._main_splitter.setSizes([700, 700])
        main_layout.addWidget(self._main_splitter)

        # --- Event Connections ---
        self.breadboard_view.scene().selectionChanged.connect(self._on_selection_changed)
        self.breadboard_view.pending_changed.connect(self.palette.set_pending_hint)
        self.editor.textChanged.connect(self._on_editor_edited)
        self.workbench.subscribe(self._on_workbench_changed)
        self._on_workbench_changed(self.workbench)

    def _create_code_panel(self) -> QWidget:
        """Creates the sketch editor with its toolbar and status bar."""
        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        toolbar = QFrame()
        toolbar.setStyleSheet("background-color: #4e4e4e;")
        toolbar_layout = QHBoxLayout(toolbar)
        toolbar_layout.setContentsMargins(6, 6, 6, 6)

        self.simulation_panel = SimulationPanel(self.workbench)
        toolbar_layout.addWidget(self.simulation_panel)

        self.export_btn = QPushButton("Export")
        self.export_btn.setToolTip(f"Save the sketch as {SKETCH_FILENAME}")
        self.export_btn.clicked.connect(self._on_export)
        toolbar_layout.addWidget(self.export_btn)

        toolbar_layout.addStretch()

        self.clear_btn = QPushButton("Clear Connections")
        self.clear_btn.clicked.connect(lambda: self.workbench.graph.clear_connections())
        toolbar_layout.addWidget(self.clear_btn)

        layout.addWidget(toolbar)

        self.editor = QPlainTextEdit()
        self.editor.setFont(QFont("Consolas", 10))
        self.editor.setStyleSheet("background-color: #2d2d2d; color: #d4d4d4;")
        self.editor.setTabStopDistance(2 * self.editor.fontMetrics().horizontalAdvance(" "))
        self.highlighter = SketchHighlighter(self.editor.document())
        layout.addWidget(self.editor, stretch=1)

        status = QFrame()
        status.setStyleSheet("background-color: #008184; color: white;")
        status_layout = QHBoxLayout(status)
        status_layout.setContentsMargins(10, 2, 10, 2)
        status_layout.addWidget(QLabel(self.BOARD_LABEL))
        status_layout.addStretch()
        self.line_count_label = QLabel()
        status_layout.addWidget(self.line_count_label)
        layout.addWidget(status)

        return panel

    def _create_board_panel(self) -> QWidget:
        """Creates the palette, breadboard and inspector column."""
        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)

        self.palette = ComponentPalette(self.workbench)
        layout.addWidget(self.palette)

        self.breadboard_view = BreadboardView(self.workbench)
        layout.addWidget(self.breadboard_view, stretch=1)

        self.inspector = ParameterInspector(self.workbench)
        layout.addWidget(self.inspector)

        return panel

    def _on_workbench_changed(self, workbench: Workbench) -> None:
        """Replaces the editor text whenever the sketch is regenerated."""
        if self.editor.toPlainText() != workbench.code:
            self._updating_editor = True
            self.editor.setPlainText(workbench.code)
            self._updating_editor = False
        self._update_line_count()

    def _on_editor_edited(self) -> None:
        if not self._updating_editor:
            self.workbench.edit_code(self.editor.toPlainText())
        self._update_line_count()

    def _update_line_count(self) -> None:
        count = len(self.editor.toPlainText().split("\n"))
        self.line_count_label.setText(f"{count} lines")

    def _on_export(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Export Sketch", SKETCH_FILENAME,
                                              "Arduino Sketch (*.ino)")
        if not path:
            return
        try:
            self.workbench.export_sketch(path)
        except OSError as e:
            QMessageBox.critical(self, "Export Failed", f"Could not write {path}:\n{e}")

    def _on_selection_changed(self) -> None:
        """Syncs the inspector with the currently selected item."""
        selected = self.breadboard_view.scene().selectedItems()
        if len(selected) == 1 and isinstance(selected[0], ComponentItem):
            self.inspector.inspect_component(selected[0].model.id)
        else:
            self.inspector.clear_inspector()
