"""Test switch state seeding and toggling."""

from panelsim.schematic.catalog import make_component
from panelsim.schematic.models import Component
from panelsim.simulation.roles import RoleTable
from panelsim.simulation.switches import SwitchState, is_toggleable, seed, toggle
from panelsim.types import SubRole


def _components():
    return [
        make_component("dc_source", "f1", 0, 0),
        make_component("push_button_no", "s1", 0, 100),
        make_component("push_button_nc", "s2", 0, 200),
        make_component("emergency_stop", "s0", 0, 300),
        make_component("breaker_1p", "q1", 0, 400),
        make_component("fuse", "f2", 0, 500),
        make_component("relay_nc", "k1b", 0, 600),
        make_component("limit_switch", "b1", 0, 700),
        make_component("lamp", "h1", 0, 800),
        make_component("earth", "pe", 0, 900),
    ]


def test_seed_creates_one_entry_per_gate():
    state = seed(_components())
    assert state.gate_ids == ["s1", "s2", "s0", "q1", "f2", "k1b", "b1"]
    assert "h1" not in state
    assert "f1" not in state
    assert len(state) == 7


def test_seed_defaults():
    state = seed(_components())
    assert state.as_dict() == {
        "s1": False,
        "s2": True,
        "s0": True,
        "q1": True,
        "f2": True,
        "k1b": True,
        "b1": False,
    }


def test_seed_respects_injected_roles():
    roles = RoleTable.with_overrides({"lamp": "gate_normally_closed"})
    state = seed(_components(), roles)
    assert state.is_closed("h1")


def test_toggle_returns_new_value():
    state = seed(_components())
    toggled = toggle(state, "s1")
    assert toggled is not state
    assert toggled.is_closed("s1")
    assert not state.is_closed("s1")
    assert toggle(toggled, "s1") == state


def test_toggle_unknown_id_is_noop():
    state = seed(_components())
    assert toggle(state, "h1") == state
    assert toggle(state, "missing") == state


def test_missing_gate_reads_open():
    assert not SwitchState().is_closed("anything")


def test_switch_state_is_a_value():
    a = SwitchState.from_mapping({"s1": True, "s2": False})
    b = SwitchState.from_mapping({"s1": True, "s2": False})
    assert a == b
    assert hash(a) == hash(b)
    assert a.as_dict() == {"s1": True, "s2": False}


def test_is_toggleable():
    assert is_toggleable(make_component("selector_switch", "sa", 0, 0))
    assert not is_toggleable(make_component("motor_dc", "m", 0, 0))
    assert is_toggleable(Component(id="g", role="gate"))
    assert RoleTable().classify(Component(id="g", role="gate")) is SubRole.GATE_NORMALLY_OPEN


def test_equality_ignores_entry_order():
    a = SwitchState.from_mapping({"s1": True, "s2": False})
    b = SwitchState.from_mapping({"s2": False, "s1": True})
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a.gate_ids == ["s1", "s2"]
    assert b.gate_ids == ["s2", "s1"]

    assert a != SwitchState.from_mapping({"s1": False, "s2": False})
    assert a != SwitchState.from_mapping({"s1": True})
    assert toggle(toggle(a, "s2"), "s2") == b
