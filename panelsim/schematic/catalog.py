"""Component catalog: the symbol kinds a control schematic can use.

Each kind carries a palette category, a display label, the sub-role it is
simulated as, and its terminal layout on the 20 px editor grid. The
simulator itself never reads this module directly; it only sees the role
table derived from it (see `panelsim.simulation.roles`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from panelsim.schematic.models import Component, Point, Terminal
from panelsim.types import SubRole

GRID_UNIT = 20

NO = SubRole.GATE_NORMALLY_OPEN
NC = SubRole.GATE_NORMALLY_CLOSED
PROTECTIVE = SubRole.GATE_PROTECTIVE
PASSIVE = SubRole.PASSIVE


@dataclass(frozen=True)
class CatalogEntry:
    kind: str
    label: str
    category: str
    sub_role: SubRole
    layout: str = "vertical"


# ---------------------------------------------------------------------------
# Terminal layouts, as (terminal_id, local offset)
# ---------------------------------------------------------------------------

G = GRID_UNIT

TERMINAL_LAYOUTS: dict[str, list[tuple[str, tuple[float, float]]]] = {
    "vertical": [("t1", (0, -2 * G)), ("t2", (0, 2 * G))],
    "single": [("t1", (0, -2 * G))],
    "two_pole": [
        ("t1", (-G, -2 * G)), ("t2", (G, -2 * G)),
        ("t3", (-G, 2 * G)), ("t4", (G, 2 * G)),
    ],
    "three_pole": [
        ("t1", (-G, -2 * G)), ("t2", (0, -2 * G)), ("t3", (G, -2 * G)),
        ("t4", (-G, 2 * G)), ("t5", (0, 2 * G)), ("t6", (G, 2 * G)),
    ],
    "cross": [
        ("t1", (0, -G)), ("t2", (0, G)),
        ("t3", (-G, 0)), ("t4", (G, 0)),
    ],
}


def _entries(category: str, rows: list[tuple]) -> list[CatalogEntry]:
    return [CatalogEntry(kind, label, category, sub_role, *rest) for kind, label, sub_role, *rest in rows]


CATALOG: dict[str, CatalogEntry] = {
    e.kind: e
    for e in [
        *_entries("Supply", [
            ("ac_source", "AC Source", SubRole.SOURCE),
            ("dc_source", "DC Source", SubRole.SOURCE),
            ("phase_l1", "Phase L1", SubRole.SOURCE, "single"),
            ("phase_l2", "Phase L2", SubRole.SOURCE, "single"),
            ("phase_l3", "Phase L3", SubRole.SOURCE, "single"),
            ("neutral", "Neutral (N)", SubRole.RETURN, "single"),
            ("earth", "Earth (PE)", SubRole.RETURN, "single"),
        ]),
        *_entries("Protection", [
            ("breaker_1p", "Breaker 1P", PROTECTIVE),
            ("breaker_2p", "Breaker 2P", PROTECTIVE, "two_pole"),
            ("breaker_3p", "Breaker 3P", PROTECTIVE, "three_pole"),
            ("fuse", "Fuse", PROTECTIVE),
            ("thermal_overload", "Thermal Overload Relay", PROTECTIVE),
            ("motor_breaker", "Motor Protective Breaker", PROTECTIVE),
        ]),
        *_entries("Passive", [
            ("resistor", "Resistor", PASSIVE),
            ("capacitor", "Capacitor", PASSIVE),
            ("inductor", "Inductor", PASSIVE),
        ]),
        *_entries("Switches", [
            ("contact_no", "NO Contact", NO),
            ("contact_nc", "NC Contact", NC),
            ("push_button_no", "NO Push-button", NO),
            ("push_button_nc", "NC Push-button", NC),
            ("emergency_stop", "Emergency Stop", NC),
            ("selector_switch", "Selector Switch", NO),
            ("limit_switch", "Limit Switch", NO),
            ("pressure_switch", "Pressure Switch", NO),
            ("level_switch", "Level Switch", NO),
            ("flow_switch", "Flow Switch", NO),
        ]),
        *_entries("Sensors", [
            ("inductive_sensor", "Inductive Sensor", NO),
            ("capacitive_sensor", "Capacitive Sensor", NO),
            ("optical_sensor", "Optical Sensor", NO),
            ("temperature_sensor", "Temperature Sensor", NO),
        ]),
        *_entries("Contactors", [
            ("contactor_coil", "Contactor Coil", PASSIVE),
            ("contactor_no", "Contactor NO Contact", NO),
            ("contactor_nc", "Contactor NC Contact", NC),
        ]),
        *_entries("Relays", [
            ("relay_coil", "Relay Coil", PASSIVE),
            ("relay_no", "Relay NO Contact", NO),
            ("relay_nc", "Relay NC Contact", NC),
        ]),
        *_entries("Timers", [
            ("timer_ton", "On-delay Timer", PASSIVE),
            ("timer_tof", "Off-delay Timer", PASSIVE),
            ("timer_tp", "Pulse Timer", PASSIVE),
            ("timed_contact_no", "Timed NO Contact", NO),
            ("timed_contact_nc", "Timed NC Contact", NC),
        ]),
        *_entries("Outputs", [
            ("lamp", "Lamp", PASSIVE),
            ("lamp_green", "Green Lamp", PASSIVE),
            ("lamp_red", "Red Lamp", PASSIVE),
            ("lamp_yellow", "Yellow Lamp", PASSIVE),
            ("motor_1ph", "Single-phase Motor", PASSIVE),
            ("motor_3ph", "Three-phase Motor", PASSIVE, "three_pole"),
            ("motor_dc", "DC Motor", PASSIVE),
            ("siren", "Siren", PASSIVE),
            ("buzzer", "Buzzer", PASSIVE),
            ("solenoid", "Solenoid", PASSIVE),
            ("fan", "Fan", PASSIVE),
        ]),
        *_entries("Transformers", [
            ("transformer", "Transformer", PASSIVE, "two_pole"),
            ("transformer_ct", "Center-tap Transformer", PASSIVE, "two_pole"),
        ]),
        *_entries("PLC", [
            ("plc_input", "PLC Input", PASSIVE),
            ("plc_output", "PLC Output", PASSIVE),
        ]),
        *_entries("Connectors", [
            ("terminal_block", "Terminal Block", PASSIVE, "cross"),
            ("junction", "Junction", PASSIVE, "cross"),
            ("connector", "Connector", PASSIVE),
        ]),
    ]
}


def get_entry(kind: str) -> Optional[CatalogEntry]:
    return CATALOG.get(kind)


def default_terminals(kind: str) -> list[Terminal]:
    """Terminal layout for a kind; unknown kinds get the two-terminal vertical layout."""
    entry = CATALOG.get(kind)
    layout = TERMINAL_LAYOUTS[entry.layout if entry else "vertical"]
    return [Terminal(id=tid, offset=Point(x=x, y=y)) for tid, (x, y) in layout]


def make_component(
    kind: str,
    component_id: str,
    x: float,
    y: float,
    *,
    rotation: float = 0.0,
    label: str = "",
) -> Component:
    """Place a catalog symbol with its default terminals."""
    entry = CATALOG.get(kind)
    return Component(
        id=component_id,
        kind=kind,
        position=Point(x=x, y=y),
        rotation=rotation,
        label=label or (entry.label if entry else kind),
        terminals=default_terminals(kind),
    )


def categories() -> dict[str, list[CatalogEntry]]:
    """Catalog entries grouped by palette category, in catalog order."""
    grouped: dict[str, list[CatalogEntry]] = {}
    for entry in CATALOG.values():
        grouped.setdefault(entry.category, []).append(entry)
    return grouped
