"""
GUI tests for the breadboard view, palette, inspector and main window.
"""

import math
import os
import sys
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from core.component import ComponentKind
from synthesis.workbench import Workbench
from ui.breadboard_view import BreadboardView
from ui.component_item import ComponentItem, glow_color, knob_angle, value_from_knob_point
from app.app_window import AppWindow
from app.component_palette import ComponentPalette
from app.parameter_inspector import ParameterInspector
from app.simulation_panel import SimulationPanel

app = None


def setUpModule():
    global app
    app = QApplication.instance() or QApplication(sys.argv)


class TestKnobGeometry(unittest.TestCase):

    def test_knob_sweep_endpoints(self):
        self.assertAlmostEqual(knob_angle(0), -math.pi * 0.75)
        self.assertAlmostEqual(knob_angle(1023), math.pi * 0.75)

    def test_click_maps_back_to_value(self):
        for value in (0, 256, 512, 900, 1023):
            angle = knob_angle(value)
            self.assertEqual(value_from_knob_point(math.cos(angle), math.sin(angle)), value)

    def test_dead_zone_is_clamped(self):
        """Clicks in the gap below the knob snap to the nearest end."""
        self.assertEqual(value_from_knob_point(-1, 0.01), 1023)
        self.assertEqual(value_from_knob_point(-1, -0.01), 0)


class TestGlowColor(unittest.TestCase):

    def test_scales_channels(self):
        color = glow_color("#ff8000", 0.5)
        self.assertEqual((color.red(), color.green(), color.blue()), (128, 64, 0))

    def test_invalid_color_falls_back_to_red(self):
        color = glow_color("not-a-color", 1.0)
        self.assertEqual((color.red(), color.green(), color.blue()), (255, 0, 0))


class TestBreadboardView(unittest.TestCase):
    """Tests for mirroring the graph into scene items."""

    def setUp(self):
        self.workbench = Workbench()
        self.graph = self.workbench.graph
        self.view = BreadboardView(self.workbench)

    def test_items_follow_graph(self):
        board = self.graph.add_component(ComponentKind.CONTROLLER)
        led = self.graph.add_component(ComponentKind.LED, x=300, y=50)
        self.assertEqual(set(self.view.component_items), {board.id, led.id})
        self.assertEqual(len(self.view.component_items[board.id].pin_items), 30)

        conn = self.graph.add_connection(led.id, "anode", board.id, "D1")
        self.assertIn(conn.id, self.view.wire_items)

        self.graph.remove_component(led.id)
        self.assertNotIn(led.id, self.view.component_items)
        self.assertEqual(self.view.wire_items, {})

    def test_position_update_moves_item(self):
        led = self.graph.add_component(ComponentKind.LED)
        self.graph.update_component_position(led.id, 240, 60)
        item = self.view.component_items[led.id]
        self.assertEqual((item.pos().x(), item.pos().y()), (240, 60))

    def test_two_pin_clicks_create_wire(self):
        board = self.graph.add_component(ComponentKind.CONTROLLER)
        led = self.graph.add_component(ComponentKind.LED)
        armed = []
        self.view.pending_changed.connect(armed.append)

        self.view.pin_clicked(led.id, "anode")
        self.assertIsNotNone(self.view.preview_wire)
        self.view.pin_clicked(board.id, "D2")

        self.assertEqual(len(self.graph.connections), 1)
        self.assertIsNone(self.view.preview_wire)
        self.assertEqual(armed[0], True)
        self.assertEqual(armed[-1], False)

    def test_cancel_wiring(self):
        led = self.graph.add_component(ComponentKind.LED)
        self.view.pin_clicked(led.id, "anode")
        self.view.cancel_wiring()
        self.assertFalse(self.view.connector.is_armed)
        self.assertIsNone(self.view.preview_wire)

    def test_deleting_pending_component_cancels_wire(self):
        board = self.graph.add_component(ComponentKind.CONTROLLER)
        led = self.graph.add_component(ComponentKind.LED)
        armed = []
        self.view.pending_changed.connect(armed.append)
        self.view.pin_clicked(led.id, "anode")

        self.graph.remove_component(led.id)

        self.assertFalse(self.view.connector.is_armed)
        self.assertIsNone(self.view.preview_wire)
        self.assertEqual(armed[-1], False)

        other = self.graph.add_component(ComponentKind.LED)
        self.view.pin_clicked(board.id, "D1")
        self.view.pin_clicked(other.id, "anode")
        self.assertEqual(len(self.graph.connections), 1)

    def test_led_glows_while_running(self):
        board = self.graph.add_component(ComponentKind.CONTROLLER)
        led = self.graph.add_component(ComponentKind.LED)
        self.graph.add_connection(led.id, "anode", board.id, "D1")
        self.workbench.set_running(True)
        self.assertEqual(self.view.component_items[led.id].brightness, 1.0)
        self.workbench.set_running(False)
        self.assertEqual(self.view.component_items[led.id].brightness, 0.0)

    def test_potentiometer_label_tracks_value(self):
        pot = self.graph.add_component(ComponentKind.POTENTIOMETER)
        self.graph.update_component_config(pot.id, {"value": 700})
        item = self.view.component_items[pot.id]
        self.assertIsInstance(item, ComponentItem)
        self.assertEqual(item.value_label.text(), "700")


class TestPanels(unittest.TestCase):

    def setUp(self):
        self.workbench = Workbench()
        self.graph = self.workbench.graph

    def test_palette_disables_second_controller(self):
        palette = ComponentPalette(self.workbench)
        self.assertTrue(palette.buttons[ComponentKind.CONTROLLER].isEnabled())
        palette.add_component(ComponentKind.CONTROLLER)
        self.assertFalse(palette.buttons[ComponentKind.CONTROLLER].isEnabled())
        palette.add_component(ComponentKind.CONTROLLER)
        self.assertEqual(len(self.graph.components), 1)

    def test_inspector_slider_updates_pot(self):
        inspector = ParameterInspector(self.workbench)
        pot = self.graph.add_component(ComponentKind.POTENTIOMETER)
        inspector.inspect_component(pot.id)
        inspector.value_slider.setValue(300)
        self.assertEqual(pot.config.value, 300)

        self.graph.update_component_config(pot.id, {"value": 42})
        self.assertEqual(inspector.value_slider.value(), 42)

        self.graph.remove_component(pot.id)
        self.assertIsNone(inspector.current_id)

    def test_readout(self):
        self.assertEqual(SimulationPanel.format_readout(self.workbench), "Simulation stopped")
        self.workbench.set_running(True)
        self.assertEqual(SimulationPanel.format_readout(self.workbench), "No LED is driven")

        board = self.graph.add_component(ComponentKind.CONTROLLER)
        led = self.graph.add_component(ComponentKind.LED)
        self.graph.add_connection(led.id, "anode", board.id, "D1")
        self.assertEqual(SimulationPanel.format_readout(self.workbench),
                         f"{led.id}: 100.0%  (nearest PWM 255/255)")

    def test_readout_with_potentiometer(self):
        """Half travel rounds to 128, one above the 127 that map() writes."""
        board = self.graph.add_component(ComponentKind.CONTROLLER)
        led = self.graph.add_component(ComponentKind.LED)
        pot = self.graph.add_component(ComponentKind.POTENTIOMETER)
        self.graph.add_connection(led.id, "anode", board.id, "D1")
        self.graph.add_connection(pot.id, "signal", board.id, "A0")
        self.workbench.set_running(True)
        self.assertEqual(SimulationPanel.format_readout(self.workbench),
                         f"{led.id}: 50.0%  (nearest PWM 128/255)")

    def test_run_button_toggles(self):
        panel = SimulationPanel(self.workbench)
        self.assertEqual(panel.run_button.text(), "▶ Run")
        panel.run_button.click()
        self.assertTrue(self.workbench.running)
        self.assertEqual(panel.run_button.text(), "■ Stop")


class TestAppWindow(unittest.TestCase):

    def test_editor_follows_sketch(self):
        window = AppWindow()
        graph = window.workbench.graph
        self.assertEqual(window.editor.toPlainText(), window.workbench.code)

        graph.add_component(ComponentKind.CONTROLLER)
        self.assertIn("void setup() {", window.editor.toPlainText())

    def test_manual_edit_reaches_workbench(self):
        window = AppWindow()
        window.editor.setPlainText("// hand written")
        self.assertEqual(window.workbench.code, "// hand written")
        self.assertEqual(window.line_count_label.text(), "1 lines")

    def test_clear_button(self):
        window = AppWindow()
        graph = window.workbench.graph
        board = graph.add_component(ComponentKind.CONTROLLER)
        led = graph.add_component(ComponentKind.LED)
        graph.add_connection(led.id, "anode", board.id, "D1")
        window.clear_btn.click()
        self.assertEqual(graph.connections, [])
        self.assertIn("// Main code here", window.editor.toPlainText())


if __name__ == "__main__":
    unittest.main()
