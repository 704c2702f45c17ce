"""Role classification: which simulation role each component plays.

The reachability algorithm never looks at symbol kinds. It only asks a
`RoleTable` for a component's sub-role, so the vocabulary of electrical
symbols stays configuration data (catalog defaults plus YAML overrides).
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from panelsim.schematic.catalog import CATALOG
from panelsim.schematic.models import Component
from panelsim.types import Role, SubRole

log = logging.getLogger(__name__)

DEFAULT_ROLE_TABLE: dict[str, SubRole] = {kind: entry.sub_role for kind, entry in CATALOG.items()}

# Generic role names accepted as an explicit tag on a component
_ROLE_ALIASES: dict[str, SubRole] = {
    Role.SOURCE.value: SubRole.SOURCE,
    Role.RETURN.value: SubRole.RETURN,
    Role.GATE.value: SubRole.GATE_NORMALLY_OPEN,
    Role.PASSIVE.value: SubRole.PASSIVE,
}


def parse_sub_role(value: Optional[str]) -> Optional[SubRole]:
    """Map a role tag to a SubRole; None for missing or unrecognized tags."""
    if not value:
        return None
    key = value.strip().lower()
    try:
        return SubRole(key)
    except ValueError:
        return _ROLE_ALIASES.get(key)


class RoleTable:
    """Injectable kind -> sub-role mapping."""

    def __init__(self, table: Optional[Mapping[str, SubRole]] = None) -> None:
        self._table: dict[str, SubRole] = dict(DEFAULT_ROLE_TABLE if table is None else table)

    @classmethod
    def with_overrides(cls, overrides: Mapping[str, str]) -> RoleTable:
        """Default table with per-kind overrides; bad sub-role names are skipped."""
        table = dict(DEFAULT_ROLE_TABLE)
        for kind, value in overrides.items():
            sub_role = parse_sub_role(value)
            if sub_role is None:
                log.warning("Ignoring role override %s=%r: unknown sub-role", kind, value)
                continue
            table[kind] = sub_role
        return cls(table)

    def classify(self, component: Component) -> SubRole:
        """Explicit tag first, then the table by kind, then passive."""
        if component.role:
            explicit = parse_sub_role(component.role)
            if explicit is None:
                log.debug("Component %s has unknown role %r, treating as passive", component.id, component.role)
                return SubRole.PASSIVE
            return explicit
        sub_role = self._table.get(component.kind)
        if sub_role is None:
            log.debug("Component %s kind %r not in role table, treating as passive", component.id, component.kind)
            return SubRole.PASSIVE
        return sub_role

    def role_of(self, component: Component) -> Role:
        return self.classify(component).role

    def kinds(self) -> dict[str, SubRole]:
        return dict(self._table)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RoleTable) and self._table == other._table

    __hash__ = None  # type: ignore[assignment]


DEFAULT_ROLES = RoleTable()
