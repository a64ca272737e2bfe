# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Click-based CLI for pdftextenc.

Encodes text with an embedded TrueType font's Identity-H encoding and
prints the resulting PDF hex string.
"""

# Standard Library
import logging
import sys

# Third Party
import click
from colorama import Fore, Style, init

# Local
from . import __version__
from .exceptions import FontLoadError
from .textencoding import TrueTypeFontEncoder, encoder_from_font
from .textencoding.tounicode import generate_tounicode_cmap
from .utils import format_hex_string, setup_logging

EXIT_SUCCESS = 0
EXIT_GENERAL_ERROR = 1
# click reports a missing FONT path as a usage error with this code
EXIT_FILE_NOT_FOUND = 2
EXIT_FONT_ERROR = 3
EXIT_UNMAPPED_RUNES = 4

logger = logging.getLogger(__name__)


def print_error(msg: str) -> None:
    """Prints an error message in red.

    Args:
        msg: The error message to output.
    """
    click.echo(f"{Fore.RED}\u2717 Error:{Style.RESET_ALL} {msg}", err=True)


def print_warning(msg: str) -> None:
    """Prints a warning in yellow.

    Args:
        msg: The warning to output.
    """
    click.echo(f"{Fore.YELLOW}\u26a0{Style.RESET_ALL} {msg}", err=True)


def _unmapped_runes(encoder: TrueTypeFontEncoder, text: str) -> list[str]:
    """Returns the distinct characters of ``text`` the font does not cover."""
    missing: list[str] = []
    seen: set[str] = set()
    for char in text:
        if char in seen:
            continue
        seen.add(char)
        if not encoder.rune_to_charcode(char)[1]:
            missing.append(char)
    return missing


def _print_glyph_table(encoder: TrueTypeFontEncoder, text: str) -> None:
    """Prints one line per character: rune, charcode and glyph name."""
    for char in text:
        code, found = encoder.rune_to_charcode(char)
        glyph, _ = encoder.rune_to_glyph(char)
        charcode = f"{code:04X}" if found else "----"
        click.echo(f"U+{ord(char):04X}  {charcode}  {glyph}")


@click.command()
@click.argument("font", type=click.Path(exists=True, dir_okay=False))
@click.argument("text")
@click.option(
    "--glyphs",
    "show_glyphs",
    is_flag=True,
    help="Print rune, charcode and glyph name for each character",
)
@click.option(
    "--tounicode",
    "show_tounicode",
    is_flag=True,
    help="Print the ToUnicode CMap for the font",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail if the font does not cover every character",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Only output errors",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Detailed output",
)
@click.version_option(version=__version__)
def main(
    font: str,
    text: str,
    show_glyphs: bool,
    show_tounicode: bool,
    strict: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """Encodes TEXT with the Identity-H encoding of a TrueType FONT.

    FONT is the path to a TrueType font file.
    TEXT is the Unicode text to encode.
    """
    # Initialize colorama for Windows compatibility
    init()

    setup_logging(verbose=verbose, quiet=quiet)

    try:
        exit_code = _encode(font, text, show_glyphs, show_tounicode, strict, quiet)
    except FontLoadError as e:
        print_error(str(e))
        exit_code = EXIT_FONT_ERROR
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        exit_code = EXIT_GENERAL_ERROR

    sys.exit(exit_code)


def _encode(
    font: str,
    text: str,
    show_glyphs: bool,
    show_tounicode: bool,
    strict: bool,
    quiet: bool,
) -> int:
    """Encodes ``text`` with ``font`` and prints the results.

    Returns:
        Exit code.
    """
    encoder = encoder_from_font(font)
    logger.debug("Encoder: %s", encoder)

    missing = _unmapped_runes(encoder, text)
    if missing and not quiet:
        listed = ", ".join(f"U+{ord(c):04X}" for c in missing)
        print_warning(f"Font does not cover {len(missing)} character(s): {listed}")

    if show_glyphs:
        _print_glyph_table(encoder, text)

    click.echo(format_hex_string(encoder.encode(text)))

    if show_tounicode:
        click.echo(generate_tounicode_cmap(encoder).decode("ascii"))

    if strict and missing:
        return EXIT_UNMAPPED_RUNES
    return EXIT_SUCCESS


if __name__ == "__main__":
    main()
