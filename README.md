# ftlib

A small collection of helpers with exact, well-defined edge cases. It needs
nothing beyond the standard library.

## Modules

- `ftlib.convert`: `atoi`, `itoa`, `itoa_base`, `itoa_hex` and `int_len`.
  `atoi` skips leading whitespace, takes one optional sign and stops at the
  first non-digit; `itoa` works on signed 32-bit values, `itoa_base` on
  unsigned 64-bit values and `itoa_hex` on unsigned 32-bit values, written
  with the digits of any base string of two or more characters.
- `ftlib.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and
  `is_print`. Each takes a one-character string or an integer code.
- `ftlib.strings`: `split`, `count_words`, `strchr`, `strcmp`, `strcpy`,
  `strdup`, `strjoin`, `strlcpy`, `strlcat`, `shift` and `shift2`. They
  return new values rather than writing into buffers: `strchr` returns an
  index or `None`, and `strlcpy` and `strlcat` return a pair of the
  resulting text and the length the full result would have had.
- `ftlib.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`,
  `memccpy`, `memchr` and `memcmp`, working on `bytearray` objects and other
  byte sequences. `memmove` copies between two offsets of one buffer;
  `memccpy` and `memchr` return an index or `None`. A count larger than a
  buffer raises `ValueError`.
- `ftlib.linked`: `Node` and `LinkedList`, a singly linked list with
  `add_front`, `add_back`, `last`, `clear`, `delete_first`, `each` and
  `map`. A list can be built from any iterable, iterated over, and measured
  with `len`.
- `ftlib.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` and
  `put_padding`, which write to any text stream, standard output by default.
- `ftlib.printf_spec`: `read_directive`, `width_from`, `precision_from`, the
  `Directive` record and the `Arguments` class that hands out the values a
  format consumes.
- `ftlib.printf_render`: `render_char`, `render_int`, `render_str`,
  `render_pointer`, `render_unsigned`, `render_hex` and
  `render_conversion`, each returning a `Rendered` value with precision
  applied.
- `ftlib.printf_format`: `format_string` and `printf`, a printf-style
  formatter.

## The formatter

`format_string(fmt, *args)` returns the formatted text; `printf(fmt, *args,
file=None)` writes it to `file` (standard output by default) and returns the
number of characters written. The conversions `c s p d i u x X %` are
supported, with the `-`, `0` and `.` flags, a field width, and `*` for a
width or precision taken from the arguments. Integer arguments are taken as
32-bit values, `%s` of `None` gives `(null)`, `%c` of 0 writes a NUL
character, and `%p` of `None` is the null address. A format that needs more
arguments than are given raises `IndexError`.

## Examples

```python
from ftlib.convert import atoi, itoa_base
from ftlib.strings import split
from ftlib.linked import LinkedList
from ftlib.printf_format import format_string, printf

atoi("  -42abc")                     # -42
itoa_base(255, "0123456789abcdef")   # "ff"
split("  a b  c ", " ")              # ["a", "b", "c"]

numbers = LinkedList([1, 2, 3])
list(numbers.map(lambda n: n * 10))  # [10, 20, 30]

text = format_string("[%5d|%-4s|%.3x]", 42, "ab", 10)
# "[   42|ab  |00a]"

count = printf("%s=%d\n", "answer", 42)  # writes "answer=42\n", returns 10
```

## What it does not do

The formatter does not render floating-point conversions (`f`, `g`, `e`)
or `%n`: such a directive is consumed from the format but writes nothing and
takes no argument. The `#`, space, `+` and length modifiers are not
interpreted. There is no command-line program; the package is used as a
library.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```