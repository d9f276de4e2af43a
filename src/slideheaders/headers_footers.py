# headers_footers.py
"""
Header / footer settings of a slideshow sheet.

You can get these on slides, or across all notes. Files saved by the 2007
revision of the format (first master tagged "___PPT12") keep header, footer and
date visibility and text in master placeholder shapes rather than in the
settings record, so reads in that mode go to the placeholders.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from slideheaders.internals import constants
from slideheaders.records import (
    CString,
    HeadersFootersContainer,
    RecordTypes,
)
from slideheaders.sheets import MasterSheet, PlaceholderRole, Sheet, SlideShow

log = logging.getLogger("slideheaders")


# region first_master
def first_master(slideshow: SlideShow) -> MasterSheet:
    """Return the first master sheet.

    Raises:
        ValueError: If the slideshow has no master sheet
    """
    if not slideshow.slide_masters:
        error_msg = "Slideshow has no master sheet"
        log.error(error_msg)
        raise ValueError(error_msg)
    return slideshow.slide_masters[0]


# endregion


# region FormatMode
class FormatMode(Enum):
    """Where header/footer visibility and text are read from."""

    LEGACY = "legacy"  # Settings record flags and text atoms
    LATER_REVISION = "later_revision"  # Master placeholder shapes

    @classmethod
    def detect(cls, slideshow: SlideShow) -> FormatMode:
        """Decide the mode from the programmable tag of the first master."""
        tag = first_master(slideshow).programmable_tag
        if tag == constants.PPT12_TAG:
            return cls.LATER_REVISION
        return cls.LEGACY


# endregion


# region resolve_container
def resolve_container(sheet: Sheet, headers_footers_type: int) -> HeadersFootersContainer:
    """
    Find or create the settings record governing a sheet.

    First match wins:
    1. Any settings record in the sheet's own container, whatever its type.
    2. A direct child of the document whose options equal `headers_footers_type`.
    3. A new empty record of that type, inserted right after the document's
       settings-list record.

    Raises:
        ValueError: If a new record is needed and the document has no settings-list record
    """
    found = sheet.sheet_container.find_first_of_type(RecordTypes.HEADERS_FOOTERS)
    if isinstance(found, HeadersFootersContainer):
        log.debug(f"Using settings record of sheet: {found!r}")
        return found

    doc = sheet.slideshow.document_record
    for child in doc.child_records:
        if (
            isinstance(child, HeadersFootersContainer)
            and child.options == headers_footers_type
        ):
            log.debug(f"Using document settings record: {child!r}")
            return child

    container = HeadersFootersContainer(headers_footers_type)
    anchor = doc.find_first_of_type(RecordTypes.LIST)
    doc.add_child_after(container, anchor)
    log.debug(f"Created settings record {container!r} after {anchor!r}")
    return container


# endregion


# region HeadersFooters
class HeadersFooters:
    """Typed access to the header, footer and date settings of one sheet."""

    def __init__(self, sheet: Sheet, headers_footers_type: int) -> None:
        self._sheet = sheet
        self._format_mode = FormatMode.detect(sheet.slideshow)
        self._container = resolve_container(sheet, headers_footers_type)

    @classmethod
    def for_slideshow(
        cls, slideshow: SlideShow, headers_footers_type: int
    ) -> HeadersFooters:
        """Settings resolved on the first master of the slideshow."""
        return cls(first_master(slideshow), headers_footers_type)

    @property
    def container(self) -> HeadersFootersContainer:
        return self._container

    @property
    def sheet(self) -> Sheet:
        return self._sheet

    @property
    def format_mode(self) -> FormatMode:
        return self._format_mode

    # region text
    def get_header_text(self) -> Optional[str]:
        """Header's text, or None if there is none."""
        return self._get_placeholder_text(
            PlaceholderRole.MASTER_HEADER, self._container.header_atom
        )

    def set_header_text(self, text: str) -> None:
        """Set header's text; also turns the header on."""
        self.set_header_visible(True)
        self._write_text_atom(constants.HEADER_ATOM_INSTANCE, text)

    def get_footer_text(self) -> Optional[str]:
        """Footer's text, or None if there is none."""
        return self._get_placeholder_text(
            PlaceholderRole.MASTER_FOOTER, self._container.footer_atom
        )

    def set_footer_text(self, text: str) -> None:
        """Set footer's text; also turns the footer on."""
        self.set_footer_visible(True)
        self._write_text_atom(constants.FOOTER_ATOM_INSTANCE, text)

    def get_date_time_text(self) -> Optional[str]:
        """The date the user wants in the footers, instead of today's date."""
        return self._get_placeholder_text(
            PlaceholderRole.MASTER_DATE, self._container.user_date_atom
        )

    def set_date_time_text(self, text: str) -> None:
        """Set a custom date to be displayed instead of today's date; shows the date in custom mode."""
        self.set_user_date_visible(True)
        self.set_date_time_visible(True)
        self._write_text_atom(constants.USER_DATE_ATOM_INSTANCE, text)

    # endregion

    # region flags
    def is_header_visible(self) -> bool:
        return self._is_visible(constants.HAS_HEADER, PlaceholderRole.MASTER_HEADER)

    def set_header_visible(self, flag: bool) -> None:
        self._set_flag(constants.HAS_HEADER, flag)

    def is_footer_visible(self) -> bool:
        return self._is_visible(constants.HAS_FOOTER, PlaceholderRole.MASTER_FOOTER)

    def set_footer_visible(self, flag: bool) -> None:
        self._set_flag(constants.HAS_FOOTER, flag)

    def is_date_time_visible(self) -> bool:
        """Whether the date is displayed in the footer."""
        return self._is_visible(constants.HAS_DATE, PlaceholderRole.MASTER_DATE)

    def set_date_time_visible(self, flag: bool) -> None:
        self._set_flag(constants.HAS_DATE, flag)

    def is_user_date_visible(self) -> bool:
        """Whether the custom user date is used instead of today's date."""
        return self._is_visible(constants.HAS_USER_DATE, PlaceholderRole.MASTER_DATE)

    def set_user_date_visible(self, flag: bool) -> None:
        self._set_flag(constants.HAS_USER_DATE, flag)

    def is_slide_number_visible(self) -> bool:
        """Whether the slide number is displayed in the footer."""
        return self._is_visible(
            constants.HAS_SLIDE_NUMBER, PlaceholderRole.MASTER_SLIDE_NUMBER
        )

    def set_slide_number_visible(self, flag: bool) -> None:
        self._set_flag(constants.HAS_SLIDE_NUMBER, flag)

    # endregion

    # region date format
    def get_date_time_format(self) -> int:
        """Format id used to style the date."""
        return self._container.headers_footers_atom.format_id

    def set_date_time_format(self, format_id: int) -> None:
        self._container.headers_footers_atom.format_id = format_id

    # endregion

    header_text = property(get_header_text, set_header_text)
    footer_text = property(get_footer_text, set_footer_text)
    date_time_text = property(get_date_time_text, set_date_time_text)
    header_visible = property(is_header_visible, set_header_visible)
    footer_visible = property(is_footer_visible, set_footer_visible)
    date_time_visible = property(is_date_time_visible, set_date_time_visible)
    user_date_visible = property(is_user_date_visible, set_user_date_visible)
    slide_number_visible = property(is_slide_number_visible, set_slide_number_visible)
    date_time_format = property(get_date_time_format, set_date_time_format)

    # region helpers
    def _is_visible(self, flag: int, role: PlaceholderRole) -> bool:
        if self._format_mode is FormatMode.LATER_REVISION:
            placeholder = self._sheet.get_placeholder(role)
            return placeholder is not None and bool(placeholder.text)
        return self._container.headers_footers_atom.get_flag(flag)

    def _get_placeholder_text(
        self, role: PlaceholderRole, cs: Optional[CString]
    ) -> Optional[str]:
        if self._format_mode is FormatMode.LATER_REVISION:
            placeholder = self._sheet.get_placeholder(role)
            text = placeholder.text if placeholder is not None else None
            # Default text in master placeholders is not visible
            if not text or text == constants.MASTER_PLACEHOLDER_DEFAULT_TEXT:
                return None
            return text
        return cs.text if cs is not None else None

    def _write_text_atom(self, instance: int, text: str) -> None:
        # Written to the settings record in both modes; placeholders are left alone.
        self._container.get_or_add_text_atom(instance).text = text

    def _set_flag(self, flag: int, value: bool) -> None:
        self._container.headers_footers_atom.set_flag(flag, value)

    # endregion


# endregion
