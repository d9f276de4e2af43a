# sheets.py
"""Sheets of a slideshow and the placeholder text shapes they carry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from slideheaders.internals import constants
from slideheaders.records import Document, RecordTypes, SheetContainer

if TYPE_CHECKING:
    from slideheaders.headers_footers import HeadersFooters


# region PlaceholderRole
class PlaceholderRole(IntEnum):
    """Placement ids of the master placeholders that stand in for header/footer settings."""

    MASTER_DATE = 7
    MASTER_SLIDE_NUMBER = 8
    MASTER_FOOTER = 9
    MASTER_HEADER = 10


# endregion


# region TextShape
@dataclass
class TextShape:
    """A text-bearing shape, optionally occupying a placeholder role."""

    placeholder: Optional[PlaceholderRole] = None
    text: Optional[str] = None


# endregion


# region Sheet
class Sheet:
    """Base sheet: owns a SheetContainer and a list of shapes."""

    container_type: int = RecordTypes.SLIDE

    def __init__(
        self, slideshow: SlideShow, sheet_container: SheetContainer | None = None
    ) -> None:
        self.slideshow = slideshow
        self.sheet_container = sheet_container or SheetContainer(self.container_type)
        self.shapes: list[TextShape] = []

    def add_shape(self, shape: TextShape) -> TextShape:
        self.shapes.append(shape)
        return shape

    def get_placeholder(self, role: int) -> Optional[TextShape]:
        """Return the first text shape occupying the given placeholder role, or None."""
        for shape in self.shapes:
            if shape.placeholder is not None and shape.placeholder == role:
                return shape
        return None


class Slide(Sheet):
    container_type = RecordTypes.SLIDE

    def get_headers_footers(self) -> HeadersFooters:
        """Header/footer settings of this slide."""
        from slideheaders.headers_footers import HeadersFooters

        return HeadersFooters(self, constants.SLIDE_HEADERS_FOOTERS)


class Notes(Sheet):
    container_type = RecordTypes.NOTES

    def get_headers_footers(self) -> HeadersFooters:
        """Header/footer settings of this notes page."""
        from slideheaders.headers_footers import HeadersFooters

        return HeadersFooters(self, constants.NOTES_HEADERS_FOOTERS)


class MasterSheet(Sheet):
    """Main master. Its programmable tag tells which format revision saved the file."""

    container_type = RecordTypes.MAIN_MASTER

    def __init__(
        self,
        slideshow: SlideShow,
        sheet_container: SheetContainer | None = None,
        programmable_tag: str | None = None,
    ) -> None:
        super().__init__(slideshow, sheet_container)
        self.programmable_tag = programmable_tag


# endregion


# region SlideShow
class SlideShow:
    """An already-loaded slideshow: the document record plus its sheets."""

    def __init__(self, document_record: Document | None = None) -> None:
        self.document_record = document_record or Document.with_settings_list()
        self.slide_masters: list[MasterSheet] = []
        self.slides: list[Slide] = []
        self.notes: list[Notes] = []

    def add_master(self, programmable_tag: str | None = None) -> MasterSheet:
        master = MasterSheet(self, programmable_tag=programmable_tag)
        self.slide_masters.append(master)
        return master

    def add_slide(self) -> Slide:
        slide = Slide(self)
        self.slides.append(slide)
        return slide

    def add_notes(self) -> Notes:
        notes = Notes(self)
        self.notes.append(notes)
        return notes

    def get_slide_headers_footers(self) -> HeadersFooters:
        """Slide header/footer settings, resolved on the first master."""
        from slideheaders.headers_footers import HeadersFooters

        return HeadersFooters.for_slideshow(self, constants.SLIDE_HEADERS_FOOTERS)

    def get_notes_headers_footers(self) -> HeadersFooters:
        """Notes header/footer settings, resolved on the first notes page (or the first master without notes)."""
        from slideheaders.headers_footers import HeadersFooters

        if not self.notes:
            return HeadersFooters.for_slideshow(self, constants.NOTES_HEADERS_FOOTERS)
        return HeadersFooters(self.notes[0], constants.NOTES_HEADERS_FOOTERS)


# endregion
