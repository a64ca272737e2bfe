# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for textencoding/glyph_names.py and textencoding/glyphlist.py."""

import pytest

from pdftextenc.textencoding import (
    SPACE_GLYPH_NAME,
    GlyphList,
    default_glyph_list,
    format_uni_name,
    parse_uni_name,
)


class TestFormatUniName:
    """Tests for format_uni_name()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "uni0000"),
            (0x41, "uni0041"),
            (0x1A2, "uni01A2"),
            (0xABCD, "uniABCD"),
            (0x1F600, "uni1F600"),
        ],
    )
    def test_format(self, value, expected):
        """Uppercase hex, zero-padded to at least 4 digits."""
        assert format_uni_name(value) == expected

    def test_space_name(self):
        """The special name for U+0020 is 'space'."""
        assert SPACE_GLYPH_NAME == "space"


class TestParseUniName:
    """Tests for parse_uni_name()."""

    def test_uppercase(self):
        """uni + 4 uppercase hex digits parse."""
        assert parse_uni_name("uni0041") == 0x41

    def test_lowercase(self):
        """Lowercase hex digits parse."""
        assert parse_uni_name("uniabcd") == 0xABCD

    @pytest.mark.parametrize(
        "name",
        ["uni41", "uni00411", "Uni0041", "uni00G1", "uni+041", "space", "", "uni"],
    )
    def test_rejects_other_shapes(self, name):
        """Anything but exactly uni + 4 hex digits is rejected."""
        assert parse_uni_name(name) is None

    def test_supplementary_name_not_parsed(self):
        """5-digit names produced for supplementary runes are not parsed."""
        assert parse_uni_name(format_uni_name(0x1F600)) is None


class TestGlyphList:
    """Tests for GlyphList and the default Adobe Glyph List."""

    def test_lookup(self):
        """Known names resolve, unknown names report not found."""
        glyph_list = GlyphList({"alpha": 0x3B1})

        assert glyph_list.lookup("alpha") == (0x3B1, True)
        assert glyph_list.lookup("beta") == (0, False)

    def test_mapping_protocol(self):
        """GlyphList behaves as a read-only mapping."""
        glyph_list = GlyphList({"alpha": 0x3B1, "beta": 0x3B2})

        assert len(glyph_list) == 2
        assert glyph_list["beta"] == 0x3B2
        assert set(glyph_list) == {"alpha", "beta"}
        with pytest.raises(TypeError):
            glyph_list["gamma"] = 0x3B3

    def test_source_is_copied(self):
        """Changes to the source mapping do not leak in."""
        source = {"alpha": 0x3B1}
        glyph_list = GlyphList(source)
        source["beta"] = 0x3B2

        assert "beta" not in glyph_list

    def test_default_is_shared(self):
        """The default glyph list is created once."""
        assert default_glyph_list() is default_glyph_list()

    def test_default_is_adobe_glyph_list(self):
        """The default list contains standard Adobe names."""
        glyph_list = default_glyph_list()

        assert glyph_list.lookup("A") == (0x41, True)
        assert glyph_list.lookup("space") == (0x20, True)
        assert glyph_list.lookup("Aacute") == (0xC1, True)
        assert len(glyph_list) > 1000

    def test_default_includes_legacy_names(self):
        """Names only in the full Adobe Glyph List resolve."""
        glyph_list = default_glyph_list()

        assert glyph_list.lookup("Acyrillic") == (0x410, True)
        assert glyph_list.lookup("afii10017") == (0x410, True)
        assert glyph_list.lookup("enspace") == (0x2002, True)
