# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""pdftextenc - Identity-H text encoding for embedded TrueType fonts."""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import FontLoadError, TextEncodingError
from .textencoding import (
    CMap,
    CMapIdentityH,
    GlyphList,
    TrueTypeFontEncoder,
    default_glyph_list,
    encoder_from_font,
)

try:
    __version__ = version("pdftextenc")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "__version__",
    "CMap",
    "CMapIdentityH",
    "GlyphList",
    "TrueTypeFontEncoder",
    "default_glyph_list",
    "encoder_from_font",
    "TextEncodingError",
    "FontLoadError",
]
