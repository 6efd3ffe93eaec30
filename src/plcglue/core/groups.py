"""Bool group aggregation.

Bit-addressed variables sharing a direction and major index are packed into
one 8-slot group (``%IX0.0`` .. ``%IX0.7`` all belong to ``IG0``). The glue
table then carries one entry per group instead of one per bit.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from pyrsistent import PMap, PRecord, PVector, field, pmap, pvector

from plcglue.core.declaration import Declaration
from plcglue.core.location import Direction

BOOL_GROUP_SIZE = 8

GroupKey = tuple[Direction, int]


def group_name(direction: Direction, major: int) -> str:
    return f"{direction.flag}G{major}"


class BoolGroup(PRecord):
    """Up to eight bit variables sharing ``(direction, major)``.

    ``slots[i]`` holds the name of the variable at minor index ``i``, or
    ``None`` when nothing is located there.
    """

    direction = field(type=Direction, mandatory=True)
    major = field(type=int, mandatory=True)
    slots = field(type=PVector, initial=pvector([None] * BOOL_GROUP_SIZE))

    @property
    def name(self) -> str:
        return group_name(self.direction, self.major)

    @property
    def key(self) -> GroupKey:
        return (self.direction, self.major)

    def with_slot(self, minor: int, var_name: str) -> BoolGroup:
        if not 0 <= minor < BOOL_GROUP_SIZE:
            raise ValueError(f"Slot {minor} out of range for bool group {self.name}")
        return self.set(slots=self.slots.set(minor, var_name))

    def assigned(self) -> list[tuple[int, str]]:
        return [(minor, name) for minor, name in enumerate(self.slots) if name is not None]


@dataclass(frozen=True)
class GroupingResult:
    """Declarations that survive grouping, plus the groups they stand for."""

    declarations: tuple[Declaration, ...]
    groups: PMap

    def groups_in_emit_order(self) -> Iterator[BoolGroup]:
        """Inputs, then outputs, then memory; each by ascending major index."""
        for direction in Direction:
            keys = sorted(major for (d, major) in self.groups if d is direction)
            for major in keys:
                yield self.groups[(direction, major)]

    def group_for(self, declaration: Declaration) -> BoolGroup | None:
        if not declaration.is_group:
            return None
        return self.groups.get((declaration.direction, declaration.major))


def group_bool_declarations(declarations: Iterable[Declaration]) -> GroupingResult:
    """Collapse bit declarations into bool groups.

    The first bit declaration seen for a ``(direction, major)`` key stays in
    place, renamed to the group identifier with its minor index cleared. Later
    members of the same group are dropped from the result; their names live
    only in the group slots. A second declaration for an occupied slot
    replaces the first. Bits whose minor index cannot fit in a group are left
    out entirely.
    """
    survivors: list[Declaration] = []
    groups: dict[GroupKey, BoolGroup] = {}

    for decl in declarations:
        if not decl.is_bit:
            survivors.append(decl)
            continue
        if not 0 <= decl.minor < BOOL_GROUP_SIZE:
            continue

        key: GroupKey = (decl.direction, decl.major)
        group = groups.get(key)
        if group is None:
            group = BoolGroup(direction=decl.direction, major=decl.major)
            survivors.append(
                decl.set(name=group_name(decl.direction, decl.major), minor=0, is_group=True)
            )
        groups[key] = group.with_slot(decl.minor, decl.name)

    return GroupingResult(declarations=tuple(survivors), groups=pmap(groups))
