# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Text encoding for composite TrueType fonts."""

from .cmap import CharCode, CMap, CMapIdentityH
from .constants import IDENTITY_H, MAX_DEBUG_ENTRIES, NOTDEF_CHARCODE
from .glyph_names import SPACE_GLYPH_NAME, format_uni_name, parse_uni_name
from .glyphlist import GlyphList, default_glyph_list
from .loader import build_rune_to_glyph_index_map, encoder_from_font, load_font
from .tounicode import generate_tounicode_cmap, make_tounicode_stream
from .truetype import GlyphIndex, TrueTypeFontEncoder

__all__ = [
    # CMaps
    "CharCode",
    "CMap",
    "CMapIdentityH",
    # Constants
    "IDENTITY_H",
    "MAX_DEBUG_ENTRIES",
    "NOTDEF_CHARCODE",
    "SPACE_GLYPH_NAME",
    # Glyph names
    "GlyphList",
    "default_glyph_list",
    "format_uni_name",
    "parse_uni_name",
    # Encoder
    "GlyphIndex",
    "TrueTypeFontEncoder",
    # Loading
    "build_rune_to_glyph_index_map",
    "encoder_from_font",
    "load_font",
    # ToUnicode
    "generate_tounicode_cmap",
    "make_tounicode_stream",
]
