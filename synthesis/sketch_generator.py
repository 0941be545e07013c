# synthesis/sketch_generator.py
"""
Sketch Generator — Renders Arduino firmware for the NodeMCU from bound roles.

The generator picks one of three fixed behaviours:
- idle: board placed, no LED bound
- blink: LEDs bound, no potentiometer bound (all LEDs in lock-step)
- dimmer: LEDs and potentiometers bound (PWM level from the last pot read)
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from core.circuit_graph import CircuitGraph
from core.component import ANALOG_MAX, PWM_MAX
from synthesis.role_resolver import RoleBindings, RoleResolver

PLACEHOLDER = "// Add an ESP8266 to get started"


@dataclass
class SketchSettings:
    """Constants baked into every generated sketch."""
    board_name: str = "NodeMCU ESP8266"
    baud_rate: int = 115200
    blink_interval_ms: int = 500  # half period of the blink template
    poll_interval_ms: int = 100  # potentiometer sampling period
    idle_delay_ms: int = 100
    ready_message: str = "ESP8266 ready"


def drive_level(reading: int) -> int:
    """
    Linear remap of an analog reading [0, 1023] to a PWM level [0, 255], rounded half up.
    Arduino map() in the generated sketch truncates, so it can land one step lower.
    """
    return int(math.floor(reading * PWM_MAX / ANALOG_MAX + 0.5))


class SketchGenerator:
    """
    Generates `.ino` source text from RoleBindings.

    Output is fully determined by the bindings and the settings; the
    generator keeps no state between calls.
    """

    def __init__(self, settings: Optional[SketchSettings] = None):
        self.settings = settings or SketchSettings()

    def generate(self, bindings: RoleBindings) -> str:
        """
        Returns the complete sketch as a single newline-joined string.

        Args:
            bindings: The resolved LED and potentiometer roles.
        """
        if not bindings.has_controller:
            return PLACEHOLDER

        leds = bindings.leds
        pots = bindings.potentiometers
        dimmer = bool(leds) and bool(pots)

        lines = [f"// Auto-generated sketch for {self.settings.board_name}", ""]
        lines.extend(self._format_defines(bindings))

        if dimmer:
            lines.append("int potValue = 0;")
            lines.append("int brightness = 0;")
            lines.append("")

        lines.extend(self._format_setup(len(leds)))
        lines.append("")

        lines.append("void loop() {")
        if dimmer:
            lines.extend(self._format_dimmer_loop(len(leds), len(pots)))
        elif leds:
            lines.extend(self._format_blink_loop(len(leds)))
        else:
            lines.extend(self._format_idle_loop())
        lines.append("}")

        return "\n".join(lines)

    def _format_defines(self, bindings: RoleBindings) -> List[str]:
        defines = [f"#define LED_PIN_{i} {role.controller_pin}"
                   for i, role in enumerate(bindings.leds, start=1)]
        defines += [f"#define POT_PIN_{i} {role.controller_pin}"
                    for i, role in enumerate(bindings.potentiometers, start=1)]
        if defines:
            defines.append("")
        return defines

    def _format_setup(self, led_count: int) -> List[str]:
        lines = ["void setup() {", f"  Serial.begin({self.settings.baud_rate});"]
        for i in range(1, led_count + 1):
            lines.append(f"  pinMode(LED_PIN_{i}, OUTPUT);")
        lines.append(f'  Serial.println("{self.settings.ready_message}");')
        lines.append("}")
        return lines

    def _format_idle_loop(self) -> List[str]:
        return [
            "  // Main code here",
            f"  delay({self.settings.idle_delay_ms});",
        ]

    def _format_blink_loop(self, led_count: int) -> List[str]:
        interval = self.settings.blink_interval_ms
        lines = ["  // Simple LED blink"]
        lines += [f"  digitalWrite(LED_PIN_{i}, HIGH);" for i in range(1, led_count + 1)]
        lines.append(f"  delay({interval});")
        lines += [f"  digitalWrite(LED_PIN_{i}, LOW);" for i in range(1, led_count + 1)]
        lines.append(f"  delay({interval});")
        return lines

    def _format_dimmer_loop(self, led_count: int, pot_count: int) -> List[str]:
        # Every pot is read into the same variable, so the last one wins
        lines = ["  // Read the potentiometer"]
        lines += [f"  potValue = analogRead(POT_PIN_{i});" for i in range(1, pot_count + 1)]
        lines += [
            "  ",
            f"  // Scale to PWM range (0-{ANALOG_MAX} to 0-{PWM_MAX})",
            f"  brightness = map(potValue, 0, {ANALOG_MAX}, 0, {PWM_MAX});",
            "  ",
            "  // Drive LED brightness with PWM",
        ]
        lines += [f"  analogWrite(LED_PIN_{i}, brightness);" for i in range(1, led_count + 1)]
        lines += [
            "  ",
            "  // Report values on the serial monitor",
            '  Serial.print("Potentiometer: ");',
            "  Serial.print(potValue);",
            '  Serial.print(" | LED brightness: ");',
            "  Serial.println(brightness);",
            "  ",
            f"  delay({self.settings.poll_interval_ms});",
        ]
        return lines

    def generate_for_graph(self, graph: CircuitGraph) -> str:
        """Convenience wrapper: resolve roles from a CircuitGraph, then generate."""
        return self.generate(RoleResolver().resolve(graph))
