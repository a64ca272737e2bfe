# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Synthesized ``uniXXXX`` glyph names."""

import re

SPACE_GLYPH_NAME = "space"
SPACE_RUNE = 0x20

_UNI_NAME_RE = re.compile(r"uni([0-9A-Fa-f]{4})")


def format_uni_name(value: int) -> str:
    """Returns ``uni`` + uppercase hex of ``value``, at least 4 digits.

    Values above 0xFFFF keep all their digits (``uni1F600``). Such names
    do not match ``parse_uni_name`` and are one-way.
    """
    return f"uni{value:04X}"


def parse_uni_name(name: str) -> int | None:
    """Parses a ``uniXXXX`` glyph name (exactly 4 hex digits).

    Args:
        name: Glyph name.

    Returns:
        The encoded value, or None if ``name`` has any other shape.
    """
    match = _UNI_NAME_RE.fullmatch(name)
    if match is None:
        return None
    return int(match.group(1), 16)
