"""
Data models for tokensheet.

A token record is the flat input unit. Aggregation turns a sequence of
records into a NestedGroup: class key -> ClassBlock, where every entry in
a block is either a Scalar (item: value) or a SubGroup (item -> subitem: value).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Optional, Union


@dataclass(frozen=True)
class TokenRecord:
    """A single resolved design token with its CTI attributes."""

    category: str
    type: str
    item: str
    value: str
    subitem: Optional[str] = None

    @property
    def class_key(self) -> str:
        """Top-level class name for this token (``category-type``)."""
        return f"{self.category}-{self.type}"

    @property
    def has_subitem(self) -> bool:
        # Empty strings count as absent
        return bool(self.subitem)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenRecord":
        """
        Create a TokenRecord from a plain mapping.

        Accepts the flat shape::

            {"category": "component", "type": "button", "item": "padding", "value": "16px"}

        or a Style Dictionary property carrying an ``attributes`` object::

            {"attributes": {"category": "component", ...}, "value": "16px"}

        Missing fields are kept as None so the Aggregator can report them.
        """
        attributes = data.get("attributes")
        source = attributes if isinstance(attributes, Mapping) else data

        value = data.get("value")
        if value is not None and not isinstance(value, str):
            value = str(value)

        return cls(
            category=source.get("category"),
            type=source.get("type"),
            item=source.get("item"),
            value=value,
            subitem=source.get("subitem"),
        )

    def to_dict(self) -> dict[str, str]:
        data = {"category": self.category, "type": self.type, "item": self.item}
        if self.has_subitem:
            data["subitem"] = self.subitem
        data["value"] = self.value
        return data


@dataclass(frozen=True)
class Scalar:
    """A plain declaration inside a class block (``item: value;``)."""

    value: str


@dataclass(frozen=True)
class SubGroup:
    """A nested ``&.item`` block holding subitem -> value declarations."""

    declarations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.declarations, MappingProxyType):
            object.__setattr__(self, "declarations", MappingProxyType(dict(self.declarations)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SubGroup):
            return NotImplemented
        return list(self.declarations.items()) == list(other.declarations.items())

    def __hash__(self) -> int:
        return hash(tuple(self.declarations.items()))


Entry = Union[Scalar, SubGroup]


@dataclass(frozen=True)
class ClassBlock:
    """All entries that share one class key, in insertion order."""

    name: str
    category: str
    type: str
    entries: Mapping[str, Entry] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.entries, MappingProxyType):
            object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassBlock):
            return NotImplemented
        return (
            self.name == other.name
            and self.category == other.category
            and self.type == other.type
            and list(self.entries.items()) == list(other.entries.items())
        )

    def __hash__(self) -> int:
        return hash((self.name, tuple(self.entries.items())))

    def scalars(self) -> dict[str, str]:
        """Get item -> value for every scalar entry."""
        return {
            item: entry.value
            for item, entry in self.entries.items()
            if isinstance(entry, Scalar)
        }

    def sub_groups(self) -> dict[str, SubGroup]:
        """Get item -> SubGroup for every sub-group entry."""
        return {
            item: entry
            for item, entry in self.entries.items()
            if isinstance(entry, SubGroup)
        }


class NestedGroup(Mapping):
    """
    Read-only, insertion-ordered mapping of class key -> ClassBlock.

    Produced by the Aggregator and consumed by the Renderer. Equality is
    order-sensitive because order drives the rendered output.
    """

    def __init__(self, blocks: Optional[Mapping[str, ClassBlock]] = None):
        self._blocks: dict[str, ClassBlock] = dict(blocks or {})

    def __getitem__(self, class_key: str) -> ClassBlock:
        return self._blocks[class_key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NestedGroup):
            return NotImplemented
        return list(self._blocks.items()) == list(other._blocks.items())

    def __hash__(self) -> int:
        return hash(tuple(self._blocks.items()))

    def __repr__(self) -> str:
        return f"NestedGroup({list(self._blocks)!r})"

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """
        Convert to plain nested dicts.

        Returns:
            ``{class_key: {item: value | {subitem: value}}}``
        """
        result: dict[str, dict[str, Any]] = {}
        for class_key, block in self._blocks.items():
            inner: dict[str, Any] = {}
            for item, entry in block.entries.items():
                if isinstance(entry, SubGroup):
                    inner[item] = dict(entry.declarations)
                else:
                    inner[item] = entry.value
            result[class_key] = inner
        return result

    def flatten(self) -> list[TokenRecord]:
        """
        Turn the group back into token records.

        Aggregating the result reproduces any group built by aggregate().
        Empty sub-groups have no declarations to emit and are dropped.
        """
        records = []
        for block in self._blocks.values():
            for item, entry in block.entries.items():
                if isinstance(entry, SubGroup):
                    for subitem, value in entry.declarations.items():
                        records.append(TokenRecord(
                            category=block.category,
                            type=block.type,
                            item=item,
                            subitem=subitem,
                            value=value,
                        ))
                else:
                    records.append(TokenRecord(
                        category=block.category,
                        type=block.type,
                        item=item,
                        value=entry.value,
                    ))
        return records
