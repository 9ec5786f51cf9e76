"""Formatting of whole printf-style format strings, width and padding included."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, TextIO

from ftlib.output import put_str
from ftlib.printf_render import Rendered, render_conversion
from ftlib.printf_spec import (
    Arguments,
    Directive,
    precision_from,
    read_directive,
    width_from,
)
from ftlib.strings import strdup

_NUL = "\0"


@dataclass
class _Field:
    """The state of one directive while it is being formatted."""

    flag: str
    conversion: str
    width: int = 0
    precision: int = -1
    from_asterisk: bool = False
    rendered: Optional[Rendered] = None


class _Formatter:
    """Formats one format string against one set of arguments."""

    def __init__(self, args: Arguments) -> None:
        self._args = args
        self._out: list[str] = []
        # The length of the last rendered conversion; it carries over
        # between directives until a new conversion replaces it.
        self._len_c = 0

    def run(self, fmt: str) -> str:
        fmt = strdup(fmt)
        pos = 0
        while pos < len(fmt):
            index = fmt.find("%", pos)
            if index < 0:
                self._out.append(fmt[pos:])
                break
            self._out.append(fmt[pos:index])
            directive = read_directive(fmt, index)
            self._dispatch(directive)
            pos = directive.end
        return "".join(self._out)

    def _dispatch(self, directive: Directive) -> None:
        field = _Field(flag=directive.flag, conversion=directive.conversion)
        first = field.flag[:1]
        if first == "*":
            self._asterisk(field)
        elif first and "1" <= first <= "9":
            self._width(field)
        elif first == "-":
            self._minus(field)
        elif first == "0":
            self._zeros(field)
        elif first == ".":
            self._precision(field)
        else:
            self._none(field)

    def _check_precision(self, field: _Field) -> None:
        precision = precision_from(field.flag, field.conversion, self._args)
        if precision is not None:
            field.precision = precision

    def _convert(self, field: _Field) -> None:
        rendered = render_conversion(field.conversion, field.precision, self._args)
        if rendered is not None:
            field.rendered = rendered
            self._len_c = rendered.length

    def _emit(self, rendered: Rendered) -> None:
        self._out.append(_NUL if rendered.null_char else rendered.text)

    def _pad(self, field: _Field, kind: str) -> None:
        if field.conversion == "%":
            field.rendered = Rendered("%")
            self._len_c = 1
        rendered = field.rendered
        if rendered is None or not field.conversion:
            return
        size = field.width - self._len_c
        if rendered.null_char:
            size -= 1
        if kind == "left":
            self._out.append(" " * max(size, 0))
            self._emit(rendered)
        elif kind == "right":
            self._emit(rendered)
            self._out.append(" " * max(size, 0))
        else:
            text = rendered.text
            if text.startswith("-") and size > 0:
                self._out.append("-")
                size -= 1
                text = "0" + text[1:]
            self._out.append("0" * max(size, 0))
            self._out.append(_NUL if rendered.null_char else text)

    def _asterisk(self, field: _Field) -> None:
        field.from_asterisk = True
        value = self._args.next_int()
        if value > 0:
            field.width = value
            self._width(field)
        else:
            field.width = -value
            self._minus(field)

    def _width(self, field: _Field) -> None:
        self._check_precision(field)
        self._convert(field)
        if field.width == 0:
            field.width = width_from(field.flag, 0)
        self._pad(field, "left")

    def _minus(self, field: _Field) -> None:
        star = field.flag.find("*")
        dot = field.flag.find(".")
        star_is_width = star >= 0 and (dot < 0 or dot > star)
        if not field.from_asterisk and star_is_width:
            field.width = abs(self._args.next_int())
        if field.width == 0:
            field.width = width_from(field.flag, 1)
        self._check_precision(field)
        self._convert(field)
        self._pad(field, "right")

    def _zeros(self, field: _Field) -> None:
        if field.flag[1:2] == "*":
            value = self._args.next_int()
            if value < 0:
                field.width = -value
                self._check_precision(field)
                self._convert(field)
                self._pad(field, "right")
                return
            field.width = value
        if field.width == 0:
            field.width = width_from(field.flag, 1)
        self._check_precision(field)
        self._convert(field)
        if self._len_c < field.width and field.precision != -1:
            self._pad(field, "left")
        else:
            self._pad(field, "zero")

    def _precision(self, field: _Field) -> None:
        if field.flag[1:2] == "*":
            field.precision = self._args.next_int()
        else:
            self._check_precision(field)
        self._convert(field)
        if field.rendered is not None:
            self._out.append(field.rendered.text)

    def _none(self, field: _Field) -> None:
        if field.conversion == "%":
            self._out.append("%")
            return
        self._convert(field)
        if field.rendered is not None:
            self._emit(field.rendered)


def format_string(fmt: str, *args: Any) -> str:
    """Return *fmt* with its directives replaced by the formatted *args*.

    Raises IndexError when the format needs more arguments than given.
    """
    return _Formatter(Arguments(args)).run(fmt)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to *file*, standard output by default.

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    put_str(text, file)
    return len(text)