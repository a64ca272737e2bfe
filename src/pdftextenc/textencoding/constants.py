# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Text encoding constants."""

# PDF name of the horizontal identity CMap used for embedded TrueType fonts
IDENTITY_H = "Identity-H"

# Bytes per character code in a 2-byte identity CMap
IDENTITY_CODE_WIDTH = 2

# Charcode written for runes the font does not cover (GID 0 is .notdef)
NOTDEF_CHARCODE = 0

# Largest glyph index / charcode representable in 16 bits
MAX_GLYPH_INDEX = 0xFFFF

# Maximum number of table entries shown in TrueTypeFontEncoder.__str__()
MAX_DEBUG_ENTRIES = 10

# Substitute for charcodes that have no rune when decoding
REPLACEMENT_CHARACTER = "\ufffd"
