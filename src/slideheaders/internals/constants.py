"""Options words, flag bits and other fixed values of the binary slideshow format."""

# Options word of a HeadersFooters container: record instance in the high 12 bits,
# version 0xF (container) in the low nibble.
SLIDE_HEADERS_FOOTERS = 0x3F
NOTES_HEADERS_FOOTERS = 0x4F

# Record instance (options >> 4) of the CString children of a HeadersFooters container.
USER_DATE_ATOM_INSTANCE = 0x0
HEADER_ATOM_INSTANCE = 0x1
FOOTER_ATOM_INSTANCE = 0x2

# Bits of the HeadersFootersAtom flag word.
HAS_DATE = 0x01
HAS_TODAY_DATE = 0x02
HAS_USER_DATE = 0x04
HAS_SLIDE_NUMBER = 0x08
HAS_HEADER = 0x10
HAS_FOOTER = 0x20

# Programmable tag on the first master when the file was saved by the 2007 revision.
PPT12_TAG = "___PPT12"

# Default text of master placeholders; never shown to the user.
MASTER_PLACEHOLDER_DEFAULT_TEXT = "*"

# Fallback for get_debug_mode() in utils
DEBUG_MODE_DEFAULT = False  # Hard-coded default
