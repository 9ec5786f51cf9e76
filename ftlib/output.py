"""Writing characters, strings and numbers to text streams."""

import sys
from typing import Optional, TextIO

from ftlib.convert import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character *c*."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(c)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write *text*; a missing text writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write *text* followed by a newline."""
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write *number*, taken as a signed 32-bit integer, in decimal."""
    put_str(itoa(number), stream)


def put_padding(size: int, c: str, stream: Optional[TextIO] = None) -> None:
    """Write *c* *size* times; a size below one writes nothing."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    if size > 0:
        _target(stream).write(c * size)