"""Ready-made example circuits, from a single lamp to a conveyor line.

Every preset is laid out on the 20 px grid with wire end points placed
exactly on the terminals they feed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from panelsim.schematic.catalog import make_component
from panelsim.schematic.models import Point, Schematic, Wire


class PresetNotFound(KeyError):
    """Raised when a preset id is not in the library."""


@dataclass(frozen=True)
class Preset:
    preset_id: str
    name: str
    description: str
    level: str  # "beginner", "intermediate", "advanced"
    build: Callable[[], Schematic]


def _wire(wire_id: str, *points: tuple[float, float]) -> Wire:
    return Wire(id=wire_id, points=[Point(x=x, y=y) for x, y in points])


# ---------------------------------------------------------------------------
# Preset builders
# ---------------------------------------------------------------------------

def _basic_on_off() -> Schematic:
    return Schematic(
        schematic_id="basic_on_off",
        name="Basic On/Off",
        description="Lamp controlled by a NO push-button",
        components=[
            make_component("dc_source", "src_1", 300, 100, label="24V DC"),
            make_component("push_button_no", "pb_1", 300, 200, label="S1 - On"),
            make_component("lamp", "lamp_1", 300, 300, label="H1"),
            make_component("earth", "gnd_1", 300, 400, label="GND"),
        ],
        wires=[
            _wire("w1", (300, 140), (300, 160)),
            _wire("w2", (300, 240), (300, 260)),
            _wire("w3", (300, 340), (300, 360)),
        ],
    )


def _traffic_light() -> Schematic:
    return Schematic(
        schematic_id="traffic_light",
        name="Simple Traffic Light",
        description="Three lamps, each switched by its own push-button",
        components=[
            make_component("dc_source", "f1", 300, 80, label="24V DC"),
            make_component("push_button_no", "s1", 200, 200, label="S1"),
            make_component("push_button_no", "s2", 300, 200, label="S2"),
            make_component("push_button_no", "s3", 400, 200, label="S3"),
            make_component("lamp_red", "lr", 200, 320, label="Red"),
            make_component("lamp_yellow", "ly", 300, 320, label="Yellow"),
            make_component("lamp_green", "lg", 400, 320, label="Green"),
            make_component("earth", "gnd", 300, 440, label="GND"),
        ],
        wires=[
            # Supply t2 (300,120) fans out to the three buttons
            _wire("w1", (300, 120), (200, 120), (200, 160)),
            _wire("w2", (300, 120), (300, 160)),
            _wire("w3", (300, 120), (400, 120), (400, 160)),
            _wire("w4", (200, 240), (200, 280)),
            _wire("w5", (300, 240), (300, 280)),
            _wire("w6", (400, 240), (400, 280)),
            # Lamps back to earth t1 (300,400)
            _wire("w7", (200, 360), (200, 400), (300, 400)),
            _wire("w8", (300, 360), (300, 400)),
            _wire("w9", (400, 360), (400, 400), (300, 400)),
        ],
    )


def _motor_contactor() -> Schematic:
    return Schematic(
        schematic_id="motor_contactor",
        name="Motor with Contactor",
        description="Direct-on-line start with stop button, seal-in contact and breaker",
        components=[
            # Control circuit
            make_component("phase_l1", "l1", 300, 60, label="L1"),
            make_component("breaker_1p", "q1", 300, 140, label="Q1"),
            make_component("push_button_nc", "s2", 300, 240, label="S2 - Stop"),
            make_component("push_button_no", "s1", 300, 340, label="S1 - Start"),
            make_component("contactor_coil", "k1", 300, 440, label="K1"),
            make_component("neutral", "n1", 300, 540, label="N"),
            make_component("contactor_no", "k1a", 460, 340, label="K1 (seal-in)"),
            # Power circuit
            make_component("contactor_no", "k1f", 600, 200, label="K1 (power)"),
            make_component("motor_1ph", "m1", 600, 320, label="M1"),
            make_component("lamp_green", "hv", 600, 440, label="H1 - Running"),
            make_component("neutral", "n2", 600, 540, label="N"),
        ],
        wires=[
            _wire("w1", (300, 20), (300, 100)),
            _wire("w2", (300, 180), (300, 200)),
            _wire("w3", (300, 280), (300, 300)),
            _wire("w4", (300, 380), (300, 400)),
            _wire("w5", (300, 480), (300, 500)),
            # Seal-in contact in parallel with S1
            _wire("w6", (300, 300), (460, 300)),
            _wire("w7", (460, 380), (460, 400), (300, 400)),
            # Power branch from L1
            _wire("w8", (300, 20), (600, 20), (600, 160)),
            _wire("w9", (600, 240), (600, 280)),
            _wire("w10", (600, 360), (600, 400)),
            _wire("w11", (600, 480), (600, 500)),
        ],
    )


def _sensor_signaling() -> Schematic:
    return Schematic(
        schematic_id="sensor_signaling",
        name="Sensor with Signaling",
        description="Inductive sensor drives a status lamp; buzzer drives an alarm lamp",
        components=[
            make_component("dc_source", "f1", 300, 80, label="24V DC"),
            make_component("inductive_sensor", "b1", 200, 220, label="B1 - Sensor"),
            make_component("lamp_green", "lg", 200, 340, label="H1 - OK"),
            make_component("lamp_red", "lr", 400, 340, label="H2 - Alarm"),
            make_component("buzzer", "bz", 400, 220, label="BZ1"),
            make_component("earth", "gnd", 300, 460, label="GND"),
        ],
        wires=[
            _wire("w1", (300, 120), (200, 120), (200, 180)),
            _wire("w2", (300, 120), (400, 120), (400, 180)),
            _wire("w3", (200, 260), (200, 300)),
            _wire("w4", (400, 260), (400, 300)),
            _wire("w5", (200, 380), (200, 420), (300, 420)),
            _wire("w6", (400, 380), (400, 420), (300, 420)),
        ],
    )


def _conveyor() -> Schematic:
    return Schematic(
        schematic_id="conveyor",
        name="Conveyor Line",
        description="Breaker and emergency stop feeding three sensor-driven outputs",
        components=[
            make_component("dc_source", "f1", 400, 60, label="24V DC"),
            make_component("breaker_1p", "q1", 400, 160, label="Q1"),
            make_component("emergency_stop", "s0", 400, 260, label="S0 - E-Stop"),
            make_component("optical_sensor", "b1", 200, 360, label="B1 - Start"),
            make_component("inductive_sensor", "b2", 400, 360, label="B2 - Metal"),
            make_component("optical_sensor", "b3", 600, 360, label="B3 - End"),
            make_component("motor_dc", "m1", 200, 480, label="M1 - Belt"),
            make_component("solenoid", "y1", 400, 480, label="Y1 - Diverter"),
            make_component("lamp_green", "h1", 600, 480, label="H1 - OK"),
            make_component("earth", "gnd", 400, 600, label="GND"),
        ],
        wires=[
            _wire("w1", (400, 100), (400, 120)),
            _wire("w2", (400, 200), (400, 220)),
            # E-stop t2 (400,300) fans out to the sensors
            _wire("w3", (400, 300), (200, 300), (200, 320)),
            _wire("w4", (400, 300), (400, 320)),
            _wire("w5", (400, 300), (600, 300), (600, 320)),
            _wire("w6", (200, 400), (200, 440)),
            _wire("w7", (400, 400), (400, 440)),
            _wire("w8", (600, 400), (600, 440)),
            _wire("w9", (200, 520), (200, 560), (400, 560)),
            _wire("w10", (400, 520), (400, 560)),
            _wire("w11", (600, 520), (600, 560), (400, 560)),
        ],
    )


PRESETS: dict[str, Preset] = {
    p.preset_id: p
    for p in [
        Preset("basic_on_off", "Basic On/Off", "Lamp controlled by a NO push-button", "beginner", _basic_on_off),
        Preset("traffic_light", "Simple Traffic Light", "Three lamps switched independently", "beginner",
               _traffic_light),
        Preset("motor_contactor", "Motor with Contactor", "Direct-on-line start with seal-in and protection",
               "intermediate", _motor_contactor),
        Preset("sensor_signaling", "Sensor with Signaling", "Inductive sensor drives signaling lamps",
               "intermediate", _sensor_signaling),
        Preset("conveyor", "Conveyor Line", "Motor, diverter and lamp behind sensors and an E-stop", "advanced",
               _conveyor),
    ]
}


def get_preset(preset_id: str) -> Schematic:
    """Build a fresh copy of a preset schematic."""
    preset = PRESETS.get(preset_id)
    if preset is None:
        raise PresetNotFound(preset_id)
    return preset.build()


def list_presets() -> list[dict]:
    return [
        {"preset_id": p.preset_id, "name": p.name, "description": p.description, "level": p.level}
        for p in PRESETS.values()
    ]
