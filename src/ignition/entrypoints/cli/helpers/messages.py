"""Terminal message helpers for the IGNITION CLI.

Status lines go to stderr so stdout stays machine-readable. Emoji glyphs fall
back to ASCII when stderr cannot encode them.
"""

import sys

import click


def _glyph(emoji: str, fallback: str) -> str:
    encoding = getattr(sys.stderr, "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    click.secho(f"{_glyph('✅', '[OK]')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    click.secho(f"{_glyph('❌', '[X]')}  {msg}", fg="red", bold=True, err=True)
