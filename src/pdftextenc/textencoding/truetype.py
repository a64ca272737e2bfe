# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Text encoding for composite (Type0/CIDFontType2) TrueType fonts.

Character codes are glyph indices (Identity-H, CIDToGIDMap /Identity), so
the only table needed is the font's rune -> glyph index map.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from .cmap import CharCode, CMap, CMapIdentityH
from .constants import MAX_DEBUG_ENTRIES, NOTDEF_CHARCODE, REPLACEMENT_CHARACTER
from .glyph_names import SPACE_GLYPH_NAME, SPACE_RUNE, format_uni_name, parse_uni_name
from .glyphlist import GlyphList, default_glyph_list

logger = logging.getLogger(__name__)

GlyphIndex = int


def _as_rune(r: int | str) -> int:
    """Normalizes a one-character string or code point to a code point."""
    if isinstance(r, str):
        return ord(r)
    return r


class TrueTypeFontEncoder:
    """Maps between runes, charcodes and glyph names for one embedded font.

    The encoder is read-only after construction and may be shared between
    threads. When several runes share a glyph index, reverse lookups
    resolve to the lowest rune.
    """

    def __init__(
        self,
        rune_to_glyph_index: Mapping[int | str, GlyphIndex],
        glyph_list: GlyphList | None = None,
        cmap: CMap | None = None,
    ) -> None:
        """Initializes the encoder.

        Args:
            rune_to_glyph_index: Rune to glyph index table loaded from the
                font. Keys may be code points or one-character strings.
                Duplicate glyph indices are accepted.
            glyph_list: Glyph name to rune mapping. Defaults to the Adobe
                Glyph List.
            cmap: CMap used to serialize charcodes. Defaults to Identity-H.
        """
        table = {_as_rune(r): gid for r, gid in rune_to_glyph_index.items()}
        self._rune_to_glyph_index = MappingProxyType(table)
        if glyph_list is None:
            glyph_list = default_glyph_list()
        self._glyph_list = glyph_list
        self._cmap = cmap if cmap is not None else CMapIdentityH()

        # Identity: charcode <-> glyph index
        charcode_to_rune: dict[CharCode, int] = {}
        for r in sorted(table):
            charcode_to_rune.setdefault(table[r], r)
        self._charcode_to_rune = MappingProxyType(charcode_to_rune)

    @property
    def cmap(self) -> CMap:
        return self._cmap

    @property
    def rune_to_glyph_index(self) -> Mapping[int, GlyphIndex]:
        return self._rune_to_glyph_index

    def __len__(self) -> int:
        return len(self._rune_to_glyph_index)

    def __str__(self) -> str:
        parts = [f"{len(self._rune_to_glyph_index)} entries"]
        for r in sorted(self._rune_to_glyph_index)[:MAX_DEBUG_ENTRIES]:
            parts.append(f"{r}=0x{r:02x}: {self._rune_to_glyph_index[r]}")
        return f"TRUETYPE_ENCODER{{{', '.join(parts)}}}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {len(self)} entries, {self._cmap.name}>"

    def encode(self, text: str) -> bytes:
        """Encodes a Unicode string as a PDF string for this font.

        Runes missing from the font are written as charcode 0 (.notdef),
        so the output always holds one code per rune.

        Args:
            text: Text to encode.

        Returns:
            Concatenated serialized charcodes.
        """
        encoded = bytearray()
        for char in text:
            code, found = self.rune_to_charcode(char)
            if not found:
                code = NOTDEF_CHARCODE
            encoded += self._cmap.serialize(code)
        return bytes(encoded)

    def decode(self, data: bytes) -> str:
        """Decodes a PDF string written with this font back to Unicode.

        Charcodes without a rune become U+FFFD.
        """
        chars = []
        for code in self._cmap.charcodes(data):
            r, found = self.charcode_to_rune(code)
            chars.append(chr(r) if found else REPLACEMENT_CHARACTER)
        return "".join(chars)

    def rune_to_charcode(self, r: int | str) -> tuple[CharCode, bool]:
        """Converts rune ``r`` to a PDF character code.

        The bool return flag is True if there was a match, and False otherwise.
        """
        r = _as_rune(r)
        glyph_index = self._rune_to_glyph_index.get(r)
        if glyph_index is None:
            logger.debug("Missing rune %d (U+%04X) from encoding", r, r)
            return 0, False
        return glyph_index, True

    def charcode_to_rune(self, code: CharCode) -> tuple[int, bool]:
        """Converts PDF character code ``code`` to a rune.

        The bool return flag is True if there was a match, and False otherwise.
        """
        r = self._charcode_to_rune.get(code)
        if r is None:
            logger.debug("charcode_to_rune: no match. code=0x%04x enc=%s", code, self)
            return 0, False
        return r, True

    def charcode_to_glyph(self, code: CharCode) -> tuple[str, bool]:
        """Returns the glyph name for character code ``code``.

        The name is ``space`` if the code decodes to U+0020, otherwise
        ``uniXXXX`` built from the code itself (not from its rune). Always
        reports a match.
        """
        r, found = self.charcode_to_rune(code)
        if found and r == SPACE_RUNE:
            return SPACE_GLYPH_NAME, True
        return format_uni_name(code), True

    def glyph_to_charcode(self, glyph: str) -> tuple[CharCode, bool]:
        """Returns the character code for glyph name ``glyph``.

        ``uniXXXX`` names are resolved through their rune; the glyph list is
        only consulted for names of any other shape.

        The bool return flag is True if there was a match, and False otherwise.
        """
        value = parse_uni_name(glyph)
        if value is not None:
            return self.rune_to_charcode(value)

        r, found = self._glyph_list.lookup(glyph)
        if found:
            return self.rune_to_charcode(r)

        logger.debug("Unable to find glyph->charcode entry (%s)", glyph)
        return 0, False

    def rune_to_glyph(self, r: int | str) -> tuple[str, bool]:
        """Returns the glyph name for rune ``r``. Always reports a match."""
        r = _as_rune(r)
        if r == SPACE_RUNE:
            return SPACE_GLYPH_NAME, True
        return format_uni_name(r), True

    def glyph_to_rune(self, glyph: str) -> tuple[int, bool]:
        """Returns the rune for glyph name ``glyph``.

        Independent of the font: only the ``uniXXXX`` form and the glyph
        list are consulted.

        The bool return flag is True if there was a match, and False otherwise.
        """
        value = parse_uni_name(glyph)
        if value is not None:
            return value, True

        r, found = self._glyph_list.lookup(glyph)
        if found:
            return r, True

        logger.debug("Unable to find glyph->rune entry (%s)", glyph)
        return 0, False
