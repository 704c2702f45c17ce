"""Test role classification and the injectable role table."""

from panelsim.schematic.catalog import CATALOG, make_component
from panelsim.schematic.models import Component
from panelsim.simulation.roles import DEFAULT_ROLE_TABLE, RoleTable, parse_sub_role
from panelsim.types import Role, SubRole


def test_default_table_covers_catalog():
    assert set(DEFAULT_ROLE_TABLE) == set(CATALOG)


def test_catalog_roles():
    roles = RoleTable()
    assert roles.classify(make_component("phase_l1", "l1", 0, 0)) is SubRole.SOURCE
    assert roles.classify(make_component("neutral", "n", 0, 0)) is SubRole.RETURN
    assert roles.classify(make_component("earth", "pe", 0, 0)) is SubRole.RETURN
    assert roles.classify(make_component("push_button_no", "s1", 0, 0)) is SubRole.GATE_NORMALLY_OPEN
    assert roles.classify(make_component("emergency_stop", "s0", 0, 0)) is SubRole.GATE_NORMALLY_CLOSED
    assert roles.classify(make_component("fuse", "f1", 0, 0)) is SubRole.GATE_PROTECTIVE
    assert roles.classify(make_component("inductive_sensor", "b1", 0, 0)) is SubRole.GATE_NORMALLY_OPEN
    assert roles.classify(make_component("contactor_coil", "k1", 0, 0)) is SubRole.PASSIVE
    assert roles.classify(make_component("timer_ton", "kt1", 0, 0)) is SubRole.PASSIVE


def test_sub_role_defaults():
    assert SubRole.GATE_NORMALLY_OPEN.role is Role.GATE
    assert not SubRole.GATE_NORMALLY_OPEN.default_closed
    assert SubRole.GATE_NORMALLY_CLOSED.default_closed
    assert SubRole.GATE_PROTECTIVE.default_closed
    assert SubRole.RETURN.role is Role.RETURN


def test_explicit_role_wins_over_kind():
    comp = Component(id="x", kind="lamp", role="gate_normally_closed")
    assert RoleTable().classify(comp) is SubRole.GATE_NORMALLY_CLOSED


def test_generic_role_names():
    assert parse_sub_role("source") is SubRole.SOURCE
    assert parse_sub_role("GATE") is SubRole.GATE_NORMALLY_OPEN
    assert parse_sub_role("") is None


def test_unknown_role_and_kind_fall_back_to_passive():
    roles = RoleTable()
    assert roles.classify(Component(id="a", kind="flux_capacitor")) is SubRole.PASSIVE
    assert roles.classify(Component(id="b", kind="push_button_no", role="banana")) is SubRole.PASSIVE


def test_overrides():
    roles = RoleTable.with_overrides({"timer_ton": "gate_normally_open", "lamp": "not-a-role"})
    assert roles.classify(Component(id="t", kind="timer_ton")) is SubRole.GATE_NORMALLY_OPEN
    assert roles.classify(Component(id="h", kind="lamp")) is SubRole.PASSIVE


def test_custom_table_replaces_defaults():
    roles = RoleTable({"bell": SubRole.SOURCE})
    assert roles.classify(Component(id="b", kind="bell")) is SubRole.SOURCE
    assert roles.classify(Component(id="h", kind="lamp")) is SubRole.PASSIVE
