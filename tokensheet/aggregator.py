"""
Aggregator - flat token records to a nested class/sub-class structure.

Each record lands in the block for its class key (``category-type``).
Records with a subitem become declarations inside an ``item`` sub-group;
records without one become plain ``item: value`` declarations.

Usage:
    from tokensheet.aggregator import aggregate

    groups = aggregate(records)
    groups["component-button"].entries["primary"]
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Union

from .exceptions import MalformedRecordError, StructuralConflictError
from .models import ClassBlock, NestedGroup, Scalar, SubGroup, TokenRecord

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("category", "type", "item")

RecordLike = Union[TokenRecord, Mapping[str, Any]]


def _coerce(record: RecordLike) -> TokenRecord:
    if isinstance(record, TokenRecord):
        return record
    if isinstance(record, Mapping):
        return TokenRecord.from_dict(record)
    raise TypeError(f"Expected TokenRecord or mapping, got {type(record).__name__}")


def _validate(record: TokenRecord, index: Optional[int]) -> None:
    for name in REQUIRED_FIELDS:
        value = getattr(record, name)
        if value is None:
            raise MalformedRecordError(name, repr(record), index=index)
        if not isinstance(value, str) or not value:
            raise MalformedRecordError(
                name, repr(record), index=index, reason="must be a non-empty string"
            )
    if record.value is None:
        raise MalformedRecordError("value", repr(record), index=index)


class _BlockBuilder:
    """Mutable staging area for one class key."""

    def __init__(self, record: TokenRecord):
        self.name = record.class_key
        self.category = record.category
        self.type = record.type
        # item -> str (scalar) or dict (sub-group)
        self.entries: dict[str, Union[str, dict[str, str]]] = {}

    def freeze(self) -> ClassBlock:
        entries = {}
        for item, entry in self.entries.items():
            if isinstance(entry, dict):
                entries[item] = SubGroup(entry)
            else:
                entries[item] = Scalar(entry)
        return ClassBlock(
            name=self.name,
            category=self.category,
            type=self.type,
            entries=entries,
        )


class Aggregator:
    """
    Incremental builder behind :func:`aggregate`.

    One instance per output target. Records are applied in order and
    ``build()`` returns an immutable NestedGroup.

    Duplicate ``(class key, item[, subitem])`` tuples overwrite the earlier
    value and keep its original position. When an item switches between
    scalar and sub-group, strict mode raises StructuralConflictError;
    otherwise the later usage replaces the earlier one.

    Example:
        aggregator = Aggregator(strict=True)
        aggregator.extend(records)
        groups = aggregator.build()
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._blocks: dict[str, _BlockBuilder] = {}
        self._count = 0

    @property
    def record_count(self) -> int:
        return self._count

    def add(self, record: RecordLike) -> None:
        """Apply a single record."""
        index = self._count
        record = _coerce(record)
        _validate(record, index)

        class_key = record.class_key
        block = self._blocks.get(class_key)
        if block is None:
            block = _BlockBuilder(record)
            self._blocks[class_key] = block

        existing = block.entries.get(record.item)

        if record.has_subitem:
            if existing is not None and not isinstance(existing, dict):
                self._conflict(class_key, record.item, "property", "sub-class")
                existing = None
            if existing is None:
                existing = {}
                block.entries[record.item] = existing
            elif record.subitem in existing:
                logger.debug(f"Overwriting {class_key}.{record.item}.{record.subitem}")
            existing[record.subitem] = record.value
        else:
            if isinstance(existing, dict):
                self._conflict(class_key, record.item, "sub-class", "property")
            elif existing is not None:
                logger.debug(f"Overwriting {class_key}.{record.item}")
            block.entries[record.item] = record.value

        self._count += 1

    def extend(self, records: Iterable[RecordLike]) -> "Aggregator":
        """Apply records in order."""
        for record in records:
            self.add(record)
        return self

    def build(self) -> NestedGroup:
        """Freeze the collected blocks into a NestedGroup."""
        groups = NestedGroup({
            class_key: block.freeze()
            for class_key, block in self._blocks.items()
        })
        logger.debug(f"Aggregated {self._count} records into {len(groups)} classes")
        return groups

    def _conflict(self, class_key: str, item: str, existing: str, incoming: str) -> None:
        if self.strict:
            raise StructuralConflictError(class_key, item, existing, incoming)
        logger.warning(
            f"Item '{item}' in '{class_key}' changed from {existing} to {incoming}; "
            f"keeping the later {incoming}"
        )


def aggregate(records: Iterable[RecordLike], *, strict: bool = False) -> NestedGroup:
    """
    Group flat token records by class key and sub-class.

    Args:
        records: Resolved token records (TokenRecord or mappings)
        strict: Reject items used both as property and sub-class

    Returns:
        Immutable NestedGroup in first-seen order

    Raises:
        MalformedRecordError: category, type or item missing/empty, or value missing
        StructuralConflictError: strict mode and an item changes kind
    """
    return Aggregator(strict=strict).extend(records).build()
