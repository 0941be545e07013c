import unittest

from core.circuit_graph import CircuitGraph
from core.component import ComponentKind
from core.connection import Endpoint
from ui.pin_connector import PinConnector


class TestPinConnector(unittest.TestCase):
    """Tests for the two-click wiring gesture."""

    def setUp(self):
        self.graph = CircuitGraph()
        self.board = self.graph.add_component(ComponentKind.CONTROLLER)
        self.led = self.graph.add_component(ComponentKind.LED)
        self.connector = PinConnector(self.graph)

    def test_first_click_arms(self):
        self.assertIsNone(self.connector.click(self.led.id, "anode"))
        self.assertTrue(self.connector.is_armed)
        self.assertEqual(self.connector.pending, Endpoint(self.led.id, "anode"))

    def test_second_click_connects(self):
        self.connector.click(self.led.id, "anode")
        conn = self.connector.click(self.board.id, "D1")
        self.assertIsNotNone(conn)
        self.assertEqual(conn.from_end, Endpoint(self.led.id, "anode"))
        self.assertEqual(conn.to_end, Endpoint(self.board.id, "D1"))
        self.assertFalse(self.connector.is_armed)

    def test_same_component_keeps_pending(self):
        self.connector.click(self.board.id, "D1")
        self.assertIsNone(self.connector.click(self.board.id, "D2"))
        self.assertEqual(self.connector.pending, Endpoint(self.board.id, "D1"))
        self.assertEqual(self.graph.connections, [])

    def test_removed_pending_component_rearms(self):
        """A click after the pending component is deleted starts a new wire."""
        self.connector.click(self.led.id, "anode")
        self.graph.remove_component(self.led.id)

        self.assertIsNone(self.connector.click(self.board.id, "D1"))
        self.assertEqual(self.connector.pending, Endpoint(self.board.id, "D1"))

        other = self.graph.add_component(ComponentKind.LED)
        conn = self.connector.click(other.id, "anode")
        self.assertIsNotNone(conn)
        self.assertEqual(self.graph.connections, [conn])

    def test_drop_stale(self):
        self.connector.click(self.led.id, "anode")
        self.assertFalse(self.connector.drop_stale())
        self.graph.remove_component(self.led.id)
        self.assertTrue(self.connector.drop_stale())
        self.assertFalse(self.connector.is_armed)

    def test_cancel(self):
        self.connector.click(self.led.id, "anode")
        self.connector.cancel()
        self.assertFalse(self.connector.is_armed)
        self.connector.click(self.board.id, "D1")
        self.assertEqual(self.connector.pending, Endpoint(self.board.id, "D1"))


if __name__ == "__main__":
    unittest.main()
