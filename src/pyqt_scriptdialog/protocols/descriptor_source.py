"""
Descriptor source ABC - the scripting engine's table access, abstracted.

A scripting bridge hands dialog descriptions over as tables: keyed fields for a
single control, positional entries for lists of controls or labels. The dialog
core only ever needs two capabilities from such a table:

- get(name): the value stored under a key, or None when absent
- iterate(): the positional entries, in order

Bridges for a concrete runtime implement DescriptorSource directly. Plain
Python dicts, lists and tuples are wrapped by TableDescriptor.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional, Tuple


class DescriptorSource(ABC):
    """
    ABC for opaque key/value tables supplied by a scripting environment.

    Values returned by get() and iterate() are dynamically typed: str, int,
    float, bool, None, or another table (a DescriptorSource, Mapping or
    Sequence).
    """

    @abstractmethod
    def get(self, name: str) -> Optional[Any]:
        """
        Look up a keyed field.

        Args:
            name: Field name

        Returns:
            The stored value, or None if the key is absent
        """
        pass

    @abstractmethod
    def iterate(self) -> List[Any]:
        """
        Return the table's entries in order.

        Returns:
            Ordered list of entry values
        """
        pass

    def items(self) -> List[Tuple[Any, Any]]:
        """
        Return (key, value) pairs in table order.

        Sources that cannot report keys treat entries as positional,
        numbered from 1 like script arrays.
        """
        return list(enumerate(self.iterate(), start=1))


class TableDescriptor(DescriptorSource):
    """
    DescriptorSource over a Python mapping or sequence.

    Mappings answer both keyed lookups and iteration (values in insertion
    order). Sequences only have positional entries, so get() always misses.
    """

    def __init__(self, table: Any):
        if not is_table(table) or isinstance(table, DescriptorSource):
            raise TypeError(f"TableDescriptor needs a mapping or sequence, got {type(table).__name__}")
        self._table = table

    def get(self, name: str) -> Optional[Any]:
        if isinstance(self._table, Mapping):
            return self._table.get(name)
        return None

    def iterate(self) -> List[Any]:
        if isinstance(self._table, Mapping):
            return list(self._table.values())
        return list(self._table)

    def items(self) -> List[Tuple[Any, Any]]:
        if isinstance(self._table, Mapping):
            return list(self._table.items())
        return super().items()

    def __repr__(self) -> str:
        return f"TableDescriptor({self._table!r})"


def is_table(value: Any) -> bool:
    """Check whether a dynamic value is table-shaped."""
    if isinstance(value, DescriptorSource):
        return True
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Mapping, Sequence))


def as_descriptor(value: Any) -> DescriptorSource:
    """
    Wrap a table-shaped value as a DescriptorSource.

    Raises:
        TypeError: If the value is not table-shaped
    """
    if isinstance(value, DescriptorSource):
        return value
    return TableDescriptor(value)
