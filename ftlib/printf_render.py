"""Rendering of single printf conversions, precision applied, width not."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ftlib.convert import itoa, itoa_base, itoa_hex
from ftlib.printf_spec import DEC_BASE, HEX_BASE_L, HEX_BASE_U, Arguments
from ftlib.strings import strdup

_UINT32 = 1 << 32


@dataclass(frozen=True)
class Rendered:
    """The text of one conversion.

    *null_char* marks a ``%c`` of the NUL character, whose text is empty
    but which still writes one NUL when output.
    """

    text: str
    null_char: bool = False

    @property
    def length(self) -> int:
        """The length of the text."""
        return len(self.text)


def _pad_digits(text: str, precision: int) -> str:
    if precision > len(text):
        return text.rjust(precision, "0")
    return text


def _trim_zero(text: str, precision: int) -> str:
    if text.startswith("0") and 0 <= precision < len(text):
        return text[:precision]
    return text


def render_char(value: int) -> Rendered:
    """Render *value* as one byte-sized character."""
    code = value & 0xFF
    if code == 0:
        return Rendered("", null_char=True)
    return Rendered(chr(code))


def render_int(value: int, precision: int) -> Rendered:
    """Render a signed 32-bit integer with at least *precision* digits.

    A zero with precision zero renders as nothing.
    """
    text = itoa(value)
    if precision == 0 and text == "0":
        return Rendered("")
    if precision >= len(text):
        if text.startswith("-"):
            text = "-" + text[1:].rjust(precision, "0")
        else:
            text = text.rjust(precision, "0")
    return Rendered(text)


def render_str(value: Optional[str], precision: int) -> Rendered:
    """Render a string, cut to *precision* characters when it is not negative.

    A missing string renders as ``(null)``.
    """
    if value is None:
        text = "(null)"
    elif isinstance(value, str):
        text = strdup(value)
    else:
        raise TypeError("expected a string or None")
    if 0 <= precision < len(text):
        text = text[:precision]
    return Rendered(text)


def render_pointer(value: Any, precision: int) -> Rendered:
    """Render an address in lower-case hexadecimal after ``0x``.

    None is the null address; an object that is not an integer is
    represented by its identity.
    """
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value
    else:
        address = id(value)
    digits = _pad_digits(itoa_base(address, HEX_BASE_L), precision)
    if digits.startswith("0") and precision == 0:
        return Rendered("0x")
    return Rendered("0x" + digits)


def render_unsigned(value: int, precision: int) -> Rendered:
    """Render *value*, taken as unsigned 32-bit, in decimal."""
    text = _pad_digits(itoa_base(value % _UINT32, DEC_BASE), precision)
    return Rendered(_trim_zero(text, precision))


def render_hex(value: int, precision: int, upper: bool) -> Rendered:
    """Render *value*, taken as unsigned 32-bit, in hexadecimal."""
    base = HEX_BASE_U if upper else HEX_BASE_L
    text = _pad_digits(itoa_hex(value, base), precision)
    return Rendered(_trim_zero(text, precision))


def render_conversion(conversion: str, precision: int, args: Arguments) -> Optional[Rendered]:
    """Render one conversion, taking its value from *args*.

    Returns None, consuming nothing, for a conversion that has no renderer.
    """
    if conversion in ("d", "i"):
        return render_int(args.next_int(), precision)
    if conversion == "c":
        return render_char(args.next_int())
    if conversion == "s":
        return render_str(args.next_value(), precision)
    if conversion == "x":
        return render_hex(args.next_int(), precision, upper=False)
    if conversion == "X":
        return render_hex(args.next_int(), precision, upper=True)
    if conversion == "p":
        return render_pointer(args.next_value(), precision)
    if conversion == "u":
        return render_unsigned(args.next_int(), precision)
    return None