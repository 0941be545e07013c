import unittest

from core.circuit_graph import CircuitGraph
from core.component import ComponentKind
from core.connection import Connection, Endpoint
from synthesis.role_resolver import BoundRole, RoleBindings, RoleResolver, normalize_pin_name


class TestNormalizePinName(unittest.TestCase):

    def test_suffix_is_stripped(self):
        self.assertEqual(normalize_pin_name("GND_L1"), "GND")
        self.assertEqual(normalize_pin_name("GND_R2"), "GND")
        self.assertEqual(normalize_pin_name("3V3_L"), "3V3")

    def test_plain_names_unchanged(self):
        self.assertEqual(normalize_pin_name("D1"), "D1")
        self.assertEqual(normalize_pin_name("A0"), "A0")


class TestRoleResolver(unittest.TestCase):
    """Tests for classifying LEDs and potentiometers wired to the board."""

    def setUp(self):
        self.graph = CircuitGraph()
        self.resolver = RoleResolver()
        self.board = self.graph.add_component(ComponentKind.CONTROLLER)

    def test_no_controller_gives_empty_bindings(self):
        graph = CircuitGraph()
        graph.add_component(ComponentKind.LED)
        bindings = self.resolver.resolve(graph)
        self.assertEqual(bindings, RoleBindings())
        self.assertFalse(bindings.has_controller)

    def test_unwired_parts_are_not_bound(self):
        self.graph.add_component(ComponentKind.LED)
        self.graph.add_component(ComponentKind.POTENTIOMETER)
        bindings = self.resolver.resolve(self.graph)
        self.assertEqual(bindings.controller_id, self.board.id)
        self.assertEqual(bindings.leds, ())
        self.assertEqual(bindings.potentiometers, ())

    def test_led_bound_by_anode(self):
        led = self.graph.add_component(ComponentKind.LED)
        self.graph.add_connection(led.id, "anode", self.board.id, "D1")
        bindings = self.resolver.resolve(self.graph)
        self.assertEqual(bindings.leds, (BoundRole(led.id, "D1"),))

    def test_cathode_wire_does_not_bind(self):
        """Only the anode carries the drive signal."""
        led = self.graph.add_component(ComponentKind.LED)
        self.graph.add_connection(led.id, "cathode", self.board.id, "GND_R1")
        self.assertEqual(self.resolver.resolve(self.graph).leds, ())

    def test_reverse_orientation_binds(self):
        led = self.graph.add_component(ComponentKind.LED)
        pot = self.graph.add_component(ComponentKind.POTENTIOMETER)
        self.graph.add_connection(self.board.id, "D2", led.id, "anode")
        self.graph.add_connection(self.board.id, "A0", pot.id, "signal")
        bindings = self.resolver.resolve(self.graph)
        self.assertEqual(bindings.leds, (BoundRole(led.id, "D2"),))
        self.assertEqual(bindings.potentiometers, (BoundRole(pot.id, "A0"),))

    def test_pot_requires_signal_pin(self):
        pot = self.graph.add_component(ComponentKind.POTENTIOMETER)
        self.graph.add_connection(pot.id, "vcc", self.board.id, "3V3_L")
        self.graph.add_connection(pot.id, "gnd", self.board.id, "GND_L1")
        self.assertEqual(self.resolver.resolve(self.graph).potentiometers, ())

    def test_controller_pin_is_normalized(self):
        led = self.graph.add_component(ComponentKind.LED)
        self.graph.add_connection(led.id, "anode", self.board.id, "GND_R2")
        self.assertEqual(self.resolver.resolve(self.graph).leds[0].controller_pin, "GND")

    def test_order_follows_component_creation(self):
        """Wires drawn in reverse order still list LEDs by creation order."""
        first = self.graph.add_component(ComponentKind.LED)
        second = self.graph.add_component(ComponentKind.LED)
        self.graph.add_connection(second.id, "anode", self.board.id, "D5")
        self.graph.add_connection(first.id, "anode", self.board.id, "D6")
        leds = self.resolver.resolve(self.graph).leds
        self.assertEqual([role.component_id for role in leds], [first.id, second.id])

    def test_first_wire_wins(self):
        led = self.graph.add_component(ComponentKind.LED)
        self.graph.add_connection(led.id, "anode", self.board.id, "D3")
        self.graph.add_connection(led.id, "anode", self.board.id, "D4")
        self.assertEqual(self.resolver.resolve(self.graph).leds, (BoundRole(led.id, "D3"),))

    def test_wire_to_other_part_does_not_bind(self):
        led = self.graph.add_component(ComponentKind.LED)
        resistor = self.graph.add_component(ComponentKind.RESISTOR)
        self.graph.add_connection(led.id, "anode", resistor.id, "pin1")
        self.graph.add_connection(resistor.id, "pin2", self.board.id, "D1")
        self.assertEqual(self.resolver.resolve(self.graph).leds, ())

    def test_stale_connection_is_skipped(self):
        led = self.graph.add_component(ComponentKind.LED)
        self.graph.connections.append(
            Connection("conn_x", Endpoint("led_99", "anode"), Endpoint(self.board.id, "D7")))
        self.graph.add_connection(led.id, "anode", self.board.id, "D8")
        self.assertEqual(self.resolver.resolve(self.graph).leds, (BoundRole(led.id, "D8"),))

    def test_removed_led_unbinds(self):
        led = self.graph.add_component(ComponentKind.LED)
        self.graph.add_connection(led.id, "anode", self.board.id, "D1")
        self.graph.remove_component(led.id)
        self.assertEqual(self.resolver.resolve(self.graph).leds, ())


if __name__ == "__main__":
    unittest.main()
