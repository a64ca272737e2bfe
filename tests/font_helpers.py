# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Shared helper functions for font-related tests."""

from io import BytesIO

from fontTools.fontBuilder import FontBuilder
from fontTools.ttLib import TTFont
from fontTools.ttLib.tables._g_l_y_f import Glyph

# Glyph order of the default test font: .notdef=0, space=1, A=2, B=3, C=4
DEFAULT_GLYPHS = [".notdef", "space", "A", "B", "C"]
DEFAULT_CMAP = {0x20: "space", 0x41: "A", 0x42: "B", 0x43: "C"}


def _make_test_ttfont(*, glyphs=None, cmap=None, upm=1000):
    """Build a minimal TrueType font for testing.

    Args:
        glyphs: List of glyph names (default: DEFAULT_GLYPHS).
        cmap: Character-to-glyph mapping dict (default: DEFAULT_CMAP).
        upm: Units per em (default: 1000).

    Returns:
        Tuple of (font_data bytes, TTFont object).
    """
    if glyphs is None:
        glyphs = DEFAULT_GLYPHS
    if cmap is None:
        cmap = DEFAULT_CMAP

    fb = FontBuilder(upm, isTTF=True)
    fb.setupGlyphOrder(glyphs)
    fb.setupCharacterMap(cmap)

    fb.setupGlyf({})
    glyf_table = fb.font["glyf"]
    for gname in glyphs:
        glyf_table[gname] = Glyph()

    metrics = {g: (600, 0) for g in glyphs}
    metrics[".notdef"] = (500, 0)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Test", "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()

    tt = fb.font
    buf = BytesIO()
    tt.save(buf)
    font_data = buf.getvalue()
    tt.close()

    tt = TTFont(BytesIO(font_data))
    return font_data, tt
