"""Switch state store: the open/closed position of every gate.

A `SwitchState` is an immutable value. `seed` creates one entry per gate
when a simulation starts, `toggle` returns a new value with one flag
flipped, and nothing else ever changes an entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, Mapping, Optional

from panelsim.schematic.models import Component
from panelsim.simulation.roles import DEFAULT_ROLES, RoleTable
from panelsim.types import Role


@dataclass(frozen=True, eq=False)
class SwitchState:
    """Gate id -> closed, kept in seeding order.

    Equality and hashing go by the mapping, so the order entries arrive
    in does not matter.
    """

    entries: tuple[tuple[str, bool], ...] = ()

    @classmethod
    def from_mapping(cls, closed: Mapping[str, bool]) -> SwitchState:
        return cls(tuple((gate_id, bool(value)) for gate_id, value in closed.items()))

    @cached_property
    def _lookup(self) -> dict[str, bool]:
        return dict(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SwitchState):
            return NotImplemented
        return self._lookup == other._lookup

    def __hash__(self) -> int:
        return hash(frozenset(self._lookup.items()))

    def is_closed(self, gate_id: str) -> bool:
        """Closed flag for a gate; gates without an entry read as open."""
        return self._lookup.get(gate_id, False)

    @property
    def gate_ids(self) -> list[str]:
        return [gate_id for gate_id, _ in self.entries]

    def as_dict(self) -> dict[str, bool]:
        return dict(self.entries)

    def __contains__(self, gate_id: object) -> bool:
        return gate_id in self._lookup

    def __len__(self) -> int:
        return len(self.entries)


def is_toggleable(component: Component, roles: Optional[RoleTable] = None) -> bool:
    return (roles or DEFAULT_ROLES).role_of(component) is Role.GATE


def seed(components: Iterable[Component], roles: Optional[RoleTable] = None) -> SwitchState:
    """Initial switch state: NO gates open, NC and protective gates closed."""
    roles = roles or DEFAULT_ROLES
    closed: dict[str, bool] = {}
    for comp in components:
        sub_role = roles.classify(comp)
        if sub_role.role is Role.GATE and comp.id not in closed:
            closed[comp.id] = sub_role.default_closed
    return SwitchState.from_mapping(closed)


def toggle(state: SwitchState, gate_id: str) -> SwitchState:
    """Flip one gate. Unknown ids leave the state unchanged."""
    if gate_id not in state:
        return state
    return SwitchState(tuple(
        (gid, not closed if gid == gate_id else closed) for gid, closed in state.entries
    ))
