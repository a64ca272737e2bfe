# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Loading rune -> glyph index tables from TrueType fonts."""

import logging
import struct
from io import BytesIO
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from ..exceptions import FontLoadError
from .glyphlist import GlyphList
from .truetype import TrueTypeFontEncoder

logger = logging.getLogger(__name__)


def load_font(source: str | Path | bytes) -> TTFont:
    """Parses a TrueType font with fonttools.

    Args:
        source: Path to the font file, or the raw font data.

    Returns:
        TTFont object.

    Raises:
        FontLoadError: If the font cannot be read or parsed.
    """
    if isinstance(source, bytes):
        font_data = source
    else:
        try:
            font_data = Path(source).read_bytes()
        except OSError as e:
            raise FontLoadError(f"Could not read font '{source}': {e}") from e

    try:
        return TTFont(BytesIO(font_data))
    except (TTLibError, struct.error, ValueError, EOFError) as e:
        raise FontLoadError(f"Could not parse font: {e}") from e


def build_rune_to_glyph_index_map(tt_font: TTFont) -> dict[int, int]:
    """Builds the rune -> glyph index table from the font's best cmap.

    Args:
        tt_font: fonttools TTFont object.

    Returns:
        Dictionary mapping Unicode codepoints to glyph indices. Empty if
        the font has no usable cmap.
    """
    try:
        cmap = tt_font.getBestCmap()
    except KeyError:
        cmap = None
    if cmap is None:
        logger.warning("Font has no Unicode cmap; encoder table is empty")
        return {}

    glyph_order = tt_font.getGlyphOrder()
    glyph_name_to_gid = {name: i for i, name in enumerate(glyph_order)}

    rune_to_gid: dict[int, int] = {}
    for unicode_val, glyph_name in cmap.items():
        gid = glyph_name_to_gid.get(glyph_name)
        if gid is None:
            logger.debug("cmap glyph %r not in glyph order", glyph_name)
            continue
        rune_to_gid[unicode_val] = gid

    logger.debug("Loaded %d rune->GID entries", len(rune_to_gid))
    return rune_to_gid


def encoder_from_font(
    source: str | Path | bytes | TTFont,
    glyph_list: GlyphList | None = None,
) -> TrueTypeFontEncoder:
    """Creates a TrueTypeFontEncoder for a font.

    Args:
        source: Font path, raw font data, or an already parsed TTFont.
        glyph_list: Optional glyph list passed to the encoder.

    Returns:
        Encoder for the font's glyph set.

    Raises:
        FontLoadError: If the font cannot be read or parsed.
    """
    if isinstance(source, TTFont):
        return TrueTypeFontEncoder(
            build_rune_to_glyph_index_map(source), glyph_list=glyph_list
        )

    tt_font = load_font(source)
    try:
        table = build_rune_to_glyph_index_map(tt_font)
    finally:
        tt_font.close()
    return TrueTypeFontEncoder(table, glyph_list=glyph_list)
