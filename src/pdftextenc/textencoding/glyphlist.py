# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Read-only glyph name to Unicode mapping.

The default list is the Adobe Glyph List shipped with fontTools. It is
built once per process and shared by all encoders.
"""

import functools
import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from fontTools.agl import AGL2UV, LEGACY_AGL2UV

logger = logging.getLogger(__name__)


class GlyphList(Mapping[str, int]):
    """Immutable mapping from glyph names to runes."""

    def __init__(self, glyph_to_rune: Mapping[str, int]) -> None:
        self._glyph_to_rune = MappingProxyType(dict(glyph_to_rune))

    def __getitem__(self, name: str) -> int:
        return self._glyph_to_rune[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._glyph_to_rune)

    def __len__(self) -> int:
        return len(self._glyph_to_rune)

    def lookup(self, name: str) -> tuple[int, bool]:
        """Returns ``(rune, True)`` for a known name, else ``(0, False)``."""
        rune = self._glyph_to_rune.get(name)
        if rune is None:
            return 0, False
        return rune, True


@functools.cache
def default_glyph_list() -> GlyphList:
    """Returns the shared Adobe Glyph List.

    Built from the full legacy list (first code point per name), with the
    AGL for New Fonts entries taking precedence.
    """
    glyph_to_rune = {name: uvs[0] for name, uvs in LEGACY_AGL2UV.items()}
    glyph_to_rune.update(AGL2UV)
    glyph_list = GlyphList(glyph_to_rune)
    logger.debug("Loaded %d glyph list entries", len(glyph_list))
    return glyph_list
