# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pytest fixtures for the pdftextenc test suite."""

import logging
from pathlib import Path

import pytest
from font_helpers import _make_test_ttfont
from pikepdf import Pdf

from pdftextenc.textencoding import TrueTypeFontEncoder

# -- Global PDF tracker --

_tracked_pdfs: list[Pdf] = []


@pytest.fixture(autouse=True)
def _auto_close_pdfs():
    """Close all tracked PDF objects after each test."""
    yield
    for pdf in reversed(_tracked_pdfs):
        try:
            pdf.close()
        except Exception:
            pass
    _tracked_pdfs.clear()


def new_pdf(**kwargs) -> Pdf:
    """Create a tracked Pdf (auto-closed after test)."""
    pdf = Pdf.new(**kwargs)
    _tracked_pdfs.append(pdf)
    return pdf


# -- Fixtures --


@pytest.fixture
def example_encoder() -> TrueTypeFontEncoder:
    """Encoder over the two-entry table {'A': 5, ' ': 3}."""
    return TrueTypeFontEncoder({"A": 5, " ": 3})


@pytest.fixture
def test_font_bytes() -> bytes:
    """Minimal TrueType font (space, A, B, C) as bytes."""
    font_data, tt_font = _make_test_ttfont()
    tt_font.close()
    return font_data


@pytest.fixture
def test_font_path(tmp_path: Path, test_font_bytes: bytes) -> Path:
    """Minimal TrueType font on disk.

    Args:
        tmp_path: Pytest-provided temporary directory.
        test_font_bytes: Font data.

    Returns:
        Path to the font file.
    """
    font_path = tmp_path / "test.ttf"
    font_path.write_bytes(test_font_bytes)
    return font_path


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by setup_logging() during a test."""
    yield
    package_logger = logging.getLogger("pdftextenc")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
