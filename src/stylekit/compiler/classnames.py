"""Classname resolution: collect every classname and assign dense slots.

Slots follow the sorted order of the names, not their order of appearance, so
reordering rules never changes the generated class names.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from stylekit.model.style import RuleList, SourceLocation


@dataclass(frozen=True)
class ClassnameTable(Mapping[str, int]):
    """Classname -> slot index, plus the first location each name was seen."""

    slots: dict[str, int] = field(default_factory=dict)
    locations: dict[str, SourceLocation | None] = field(default_factory=dict)

    def __getitem__(self, name: str) -> int:
        return self.slots[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def names(self) -> list[str]:
        """Classnames in slot order."""
        return sorted(self.slots, key=self.slots.__getitem__)


def resolve_classnames(rules: RuleList) -> ClassnameTable:
    """Build the ClassnameTable for a rule tree.

    Collection and indexing are separate passes: indices are handed out only
    once every name is known, by walking the sorted names.
    """
    seen: dict[str, SourceLocation | None] = {}
    for name, location in rules.classname_parts():
        seen.setdefault(name, location)

    slots = {name: idx for idx, name in enumerate(sorted(seen))}
    locations = {name: seen[name] for name in slots}
    return ClassnameTable(slots=slots, locations=locations)
