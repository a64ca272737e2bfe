# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""ToUnicode CMap generation for text written with a TrueTypeFontEncoder."""

import logging
import re

import pikepdf
from pikepdf import Stream

from .truetype import TrueTypeFontEncoder

logger = logging.getLogger(__name__)

# Unicode values forbidden in PDF/A ToUnicode CMaps (veraPDF rule 6.2.11.7.2)
INVALID_UNICODE_VALUES = frozenset({0x0000, 0xFEFF, 0xFFFE})

_SURROGATE_RANGE = range(0xD800, 0xE000)

# Maximum entries per beginbfchar block
BFCHAR_CHUNK_SIZE = 100


def _is_invalid_unicode(val: int) -> bool:
    """Return True if a Unicode value is forbidden in PDF/A ToUnicode CMaps."""
    return val in INVALID_UNICODE_VALUES or val in _SURROGATE_RANGE


def _utf16_hex(unicode_val: int) -> str:
    """Formats a codepoint as UTF-16BE hex, using a surrogate pair above BMP."""
    if unicode_val <= 0xFFFF:
        return f"{unicode_val:04X}"
    high = 0xD800 + ((unicode_val - 0x10000) >> 10)
    low = 0xDC00 + ((unicode_val - 0x10000) & 0x3FF)
    return f"{high:04X}{low:04X}"


def generate_tounicode_cmap(encoder: TrueTypeFontEncoder) -> bytes:
    """Generates a 16-bit ToUnicode CMap from the encoder's glyph table.

    Each charcode maps to the rune that ``encoder.charcode_to_rune`` returns,
    so extraction agrees with the encoder's tie-break for shared glyphs.

    Args:
        encoder: Encoder whose charcodes are described.

    Returns:
        CMap data as bytes.
    """
    code_to_unicode: dict[int, int] = {}
    for gid in set(encoder.rune_to_glyph_index.values()):
        unicode_val, found = encoder.charcode_to_rune(gid)
        if not found:
            continue
        if _is_invalid_unicode(unicode_val):
            logger.debug("Skipping forbidden ToUnicode value U+%04X", unicode_val)
            continue
        code_to_unicode[gid] = unicode_val

    lines = [
        "/CIDInit /ProcSet findresource begin",
        "12 dict begin",
        "begincmap",
        "/CIDSystemInfo <<",
        "  /Registry (Adobe)",
        "  /Ordering (UCS)",
        "  /Supplement 0",
        ">> def",
        "/CMapName /Adobe-Identity-UCS def",
        "/CMapType 2 def",
        "1 begincodespacerange",
        "<0000> <FFFF>",
        "endcodespacerange",
    ]

    sorted_codes = sorted(code_to_unicode)
    for i in range(0, len(sorted_codes), BFCHAR_CHUNK_SIZE):
        chunk = sorted_codes[i : i + BFCHAR_CHUNK_SIZE]
        lines.append(f"{len(chunk)} beginbfchar")
        for code in chunk:
            lines.append(f"<{code:04X}> <{_utf16_hex(code_to_unicode[code])}>")
        lines.append("endbfchar")

    lines.extend(
        [
            "endcmap",
            "CMapName currentdict /CMap defineresource pop",
            "end",
            "end",
        ]
    )

    result = "\n".join(lines).encode("ascii")
    validate_tounicode_cmap(result)
    return result


def validate_tounicode_cmap(data: bytes) -> None:
    """Validates the structural syntax of a generated ToUnicode CMap.

    Args:
        data: CMap data as bytes.

    Raises:
        ValueError: If the CMap syntax is invalid.
    """
    try:
        text = data.decode("ascii")
    except UnicodeDecodeError as e:
        raise ValueError(f"CMap contains non-ASCII bytes: {e}") from e

    required = [
        "/CIDInit /ProcSet findresource begin",
        "begincmap",
        "endcmap",
        "/Registry (Adobe)",
        "/Ordering (UCS)",
        "begincodespacerange",
        "endcodespacerange",
        "CMapName currentdict /CMap defineresource pop",
    ]
    for element in required:
        if element not in text:
            raise ValueError(f"Missing required CMap element: {element}")

    hex_entry = re.compile(r"<([0-9A-Fa-f]+)>\s*<([0-9A-Fa-f]+)>")
    for block in re.finditer(
        r"(\d+)\s+beginbfchar\s*(.*?)\s*endbfchar", text, re.DOTALL
    ):
        declared = int(block.group(1))
        if declared > BFCHAR_CHUNK_SIZE:
            raise ValueError(f"bfchar block declares {declared} entries (max 100)")
        entries = hex_entry.findall(block.group(2))
        if len(entries) != declared:
            raise ValueError(
                f"bfchar block declares {declared} entries but contains {len(entries)}"
            )

    if text.count("begincmap") != text.count("endcmap"):
        raise ValueError("Unbalanced begincmap/endcmap")


def parse_tounicode_cmap(data: bytes) -> dict[int, str]:
    """Reads the bfchar entries of a generated ToUnicode CMap.

    Args:
        data: CMap data as bytes.

    Returns:
        Dictionary mapping charcodes to the Unicode text they represent.
    """
    text = data.decode("ascii")
    result: dict[int, str] = {}
    for block in re.finditer(r"beginbfchar\s*(.*?)\s*endbfchar", text, re.DOTALL):
        for src, dst in re.findall(
            r"<([0-9A-Fa-f]+)>\s*<([0-9A-Fa-f]+)>", block.group(1)
        ):
            result[int(src, 16)] = bytes.fromhex(dst).decode("utf-16-be")
    return result


def make_tounicode_stream(
    pdf: pikepdf.Pdf, encoder: TrueTypeFontEncoder
) -> Stream:
    """Creates a ToUnicode stream object for a Type0 font dictionary.

    Args:
        pdf: Opened pikepdf PDF the stream belongs to.
        encoder: Encoder whose charcodes are described.

    Returns:
        pikepdf Stream holding the CMap.
    """
    return Stream(pdf, generate_tounicode_cmap(encoder))
