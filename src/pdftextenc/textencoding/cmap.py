# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""CMaps: serialization of character codes to content stream bytes.

Only the identity variant is implemented. Encoders depend on the ``CMap``
interface so that further variants can be added without changing them.
"""

import logging
import struct
from abc import ABC, abstractmethod

from pikepdf import Name

from .constants import IDENTITY_CODE_WIDTH, IDENTITY_H, MAX_GLYPH_INDEX

logger = logging.getLogger(__name__)

CharCode = int


class CMap(ABC):
    """Maps character codes to their byte representation."""

    name: str
    code_width: int

    @abstractmethod
    def serialize(self, code: CharCode) -> bytes:
        """Returns the bytes for a single character code."""

    @abstractmethod
    def charcodes(self, data: bytes) -> list[CharCode]:
        """Splits an encoded string into its character codes."""

    def to_pdf_object(self) -> Name:
        """Returns the CMap name as used in a Type0 font's /Encoding entry."""
        return Name(f"/{self.name}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CMapIdentityH(CMap):
    """Identity-H: 2-byte big-endian codes, charcode equals CID."""

    name = IDENTITY_H
    code_width = IDENTITY_CODE_WIDTH

    def serialize(self, code: CharCode) -> bytes:
        """Serializes ``code`` as 2 bytes, big-endian.

        Only the low 16 bits are kept; every 16-bit value is representable.

        Args:
            code: Character code.

        Returns:
            Exactly two bytes.
        """
        return struct.pack(">H", code & MAX_GLYPH_INDEX)

    def charcodes(self, data: bytes) -> list[CharCode]:
        """Reads consecutive 2-byte big-endian codes from ``data``.

        Args:
            data: Encoded string bytes.

        Returns:
            List of character codes. A trailing odd byte is dropped.
        """
        if len(data) % self.code_width != 0:
            logger.warning(
                "Encoded string has odd length %d; dropping trailing byte",
                len(data),
            )
        num_codes = len(data) // self.code_width
        usable = data[: num_codes * self.code_width]
        return list(struct.unpack(f">{num_codes}H", usable))
