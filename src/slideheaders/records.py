# records.py
"""In-memory record tree of the binary slideshow format.

Only the records the headers/footers settings touch are modelled. Atoms keep
their fixed payload as raw little-endian bytes; containers keep an ordered list
of children with parent back-references.
"""

from __future__ import annotations

import logging
import struct
from enum import IntEnum
from typing import Iterable, Optional

from slideheaders.internals import constants

log = logging.getLogger("slideheaders")


# region RecordTypes
class RecordTypes(IntEnum):
    """Record type ids (the `recType` field of a record header)."""

    DOCUMENT = 1000
    SLIDE = 1006
    NOTES = 1008
    MAIN_MASTER = 1016
    LIST = 2000
    CSTRING = 4026
    HEADERS_FOOTERS = 4057
    HEADERS_FOOTERS_ATOM = 4058


# endregion


# region Record
class Record:
    """Base of every record: a type tag plus the options word of the record header."""

    record_type: int = 0

    def __init__(self, options: int = 0) -> None:
        self.options = options
        self.parent: Optional[RecordContainer] = None

    @property
    def instance(self) -> int:
        """Record instance, the high 12 bits of the options word."""
        return self.options >> 4

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.record_type}, options=0x{self.options:04X})"


# endregion


# region RecordAtom
class RecordAtom(Record):
    """Leaf record holding a payload of raw bytes."""

    def __init__(
        self, data: bytes = b"", options: int = 0, record_type: int | None = None
    ) -> None:
        super().__init__(options)
        if record_type is not None:
            self.record_type = record_type
        self._data = bytearray(data)

    @property
    def data(self) -> bytes:
        return bytes(self._data)


# endregion


# region RecordContainer
class RecordContainer(Record):
    """Record with ordered child records."""

    def __init__(
        self,
        record_type: int | None = None,
        options: int = 0x0F,
        children: Iterable[Record] | None = None,
    ) -> None:
        super().__init__(options)
        if record_type is not None:
            self.record_type = record_type
        self._children: list[Record] = []
        for child in children or ():
            self.append_child(child)

    @property
    def child_records(self) -> list[Record]:
        """Direct children, in order. The returned list is a copy."""
        return list(self._children)

    def find_first_of_type(self, record_type: int) -> Optional[Record]:
        """Depth-first (pre-order) search of the descendants for the first record of the given type."""
        for child in self._children:
            if child.record_type == record_type:
                return child
            if isinstance(child, RecordContainer):
                found = child.find_first_of_type(record_type)
                if found is not None:
                    return found
        return None

    def append_child(self, new_child: Record) -> Record:
        """Add a record as the last child."""
        new_child.parent = self
        self._children.append(new_child)
        return new_child

    def add_child_after(self, new_child: Record, after: Optional[Record]) -> Record:
        """
        Insert a record immediately after one of this container's direct children.

        Args:
            new_child: The record to insert
            after: The existing sibling to insert after

        Raises:
            ValueError: If `after` is None or is not a direct child of this container
        """
        index = self._index_of(after)
        if index is None:
            error_msg = (
                f"Cannot insert {new_child!r} into {self!r}: "
                f"reference record {after!r} is not a child"
            )
            log.error(error_msg)
            raise ValueError(error_msg)

        new_child.parent = self
        self._children.insert(index + 1, new_child)
        return new_child

    def _index_of(self, record: Optional[Record]) -> int | None:
        # Identity, not equality: two records with the same fields are still distinct nodes.
        for i, child in enumerate(self._children):
            if child is record:
                return i
        return None


# endregion


# region CString
class CString(RecordAtom):
    """Atom holding a UTF-16LE string."""

    record_type = RecordTypes.CSTRING

    def __init__(self, text: str = "", options: int = 0) -> None:
        super().__init__(text.encode("utf-16-le"), options)

    @property
    def text(self) -> str:
        return self._data.decode("utf-16-le")

    @text.setter
    def text(self, value: str) -> None:
        self._data = bytearray(value.encode("utf-16-le"))


# endregion


# region HeadersFootersAtom
class HeadersFootersAtom(RecordAtom):
    """
    Fixed-layout atom with the date format id and the display flags.

    Payload layout (little-endian):
        offset 0: format id, signed 16-bit
        offset 2: flag bitset, unsigned 16-bit (HAS_DATE, HAS_HEADER, ...)
    """

    record_type = RecordTypes.HEADERS_FOOTERS_ATOM

    _LAYOUT = struct.Struct("<hH")

    def __init__(self, format_id: int = 0, flags: int = 0) -> None:
        super().__init__(bytes(self._LAYOUT.size))
        self.format_id = format_id
        struct.pack_into("<H", self._data, 2, flags & 0xFFFF)

    @property
    def format_id(self) -> int:
        return self._LAYOUT.unpack_from(self._data)[0]

    @format_id.setter
    def format_id(self, value: int) -> None:
        # Stored as the low 16 bits, read back signed
        struct.pack_into("<H", self._data, 0, value & 0xFFFF)

    @property
    def flags(self) -> int:
        return self._LAYOUT.unpack_from(self._data)[1]

    def get_flag(self, bit: int) -> bool:
        return (self.flags & bit) != 0

    def set_flag(self, bit: int, value: bool) -> None:
        flags = self.flags | bit if value else self.flags & ~bit
        struct.pack_into("<H", self._data, 2, flags)


# endregion


# region HeadersFootersContainer
class HeadersFootersContainer(RecordContainer):
    """
    Settings record for the headers/footers of one sheet kind.

    The options word tells which kind it governs (SLIDE_HEADERS_FOOTERS or
    NOTES_HEADERS_FOOTERS). The first child is always the HeadersFootersAtom;
    the optional CString children follow it in user-date, header, footer order.
    """

    record_type = RecordTypes.HEADERS_FOOTERS

    # Lazily created text atoms, in the order they sit after the flags atom.
    _TEXT_ATOM_ORDER = (
        constants.USER_DATE_ATOM_INSTANCE,
        constants.HEADER_ATOM_INSTANCE,
        constants.FOOTER_ATOM_INSTANCE,
    )

    def __init__(
        self,
        options: int = constants.SLIDE_HEADERS_FOOTERS,
        children: Iterable[Record] | None = None,
    ) -> None:
        if children is None:
            children = [HeadersFootersAtom()]
        super().__init__(options=options, children=children)

    @property
    def headers_footers_atom(self) -> HeadersFootersAtom:
        for child in self._children:
            if isinstance(child, HeadersFootersAtom):
                return child
        raise ValueError(f"{self!r} has no HeadersFootersAtom")

    @property
    def user_date_atom(self) -> Optional[CString]:
        return self.text_atom(constants.USER_DATE_ATOM_INSTANCE)

    @property
    def header_atom(self) -> Optional[CString]:
        return self.text_atom(constants.HEADER_ATOM_INSTANCE)

    @property
    def footer_atom(self) -> Optional[CString]:
        return self.text_atom(constants.FOOTER_ATOM_INSTANCE)

    def text_atom(self, instance: int) -> Optional[CString]:
        """Return the CString child with the given record instance, or None."""
        for child in self._children:
            if isinstance(child, CString) and child.instance == instance:
                return child
        return None

    def get_or_add_text_atom(self, instance: int) -> CString:
        """Return the CString child with the given record instance, creating it if absent."""
        existing = self.text_atom(instance)
        if existing is not None:
            return existing

        if instance not in self._TEXT_ATOM_ORDER:
            raise ValueError(f"Unknown text atom instance: {instance}")

        # Sit after the nearest preceding text atom that exists, else after the flags atom.
        after: Record = self.headers_footers_atom
        for preceding in self._TEXT_ATOM_ORDER[: self._TEXT_ATOM_ORDER.index(instance)]:
            atom = self.text_atom(preceding)
            if atom is not None:
                after = atom

        log.debug(f"Creating text atom instance {instance} in {self!r}")
        cs = CString(options=instance << 4)
        self.add_child_after(cs, after)
        return cs


# endregion


# region Document / SheetContainer
class Document(RecordContainer):
    """Root record of the document stream."""

    record_type = RecordTypes.DOCUMENT

    @classmethod
    def with_settings_list(cls) -> Document:
        """Create an empty document holding only the settings-list anchor."""
        return cls(children=[RecordContainer(RecordTypes.LIST)])


class SheetContainer(RecordContainer):
    """Record container of one sheet (slide, notes or main master)."""

    def __init__(
        self,
        record_type: int = RecordTypes.SLIDE,
        children: Iterable[Record] | None = None,
    ) -> None:
        super().__init__(record_type=record_type, children=children)


# endregion
