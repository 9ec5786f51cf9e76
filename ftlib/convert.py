"""Conversions between integers and their textual representations."""

_WHITESPACE = " \n\t\v\f\r"
_INT_LIMIT = 2147483648
_UINT32 = 1 << 32
_UINTMAX = 1 << 64


def _to_int32(number: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    number %= _UINT32
    return number - _UINT32 if number >= _INT_LIMIT else number


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. If the magnitude grows past 2147483648, the result
    is -1 for a positive number and 0 for a negative one. The result is
    wrapped into the signed 32-bit range.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    for char in stripped:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
        if value > _INT_LIMIT:
            return -1 if sign == 1 else 0
    return _to_int32(value * sign)


def itoa(number: int) -> str:
    """Return the decimal text of *number* taken as a signed 32-bit integer."""
    return str(_to_int32(number))


def _in_base(number: int, base: str) -> str:
    if len(base) < 2:
        raise ValueError("base must have at least two digits")
    radix = len(base)
    digits = []
    while True:
        number, remainder = divmod(number, radix)
        digits.append(base[remainder])
        if number == 0:
            break
    return "".join(reversed(digits))


def itoa_base(number: int, base: str) -> str:
    """Write *number*, taken as an unsigned 64-bit value, with the digits of *base*."""
    return _in_base(number % _UINTMAX, base)


def itoa_hex(number: int, base: str) -> str:
    """Write *number*, taken as an unsigned 32-bit value, with the digits of *base*."""
    return _in_base(number % _UINT32, base)


def int_len(number: int) -> int:
    """Count the decimal digits of *number*; zero has none."""
    return len(str(abs(number))) if number else 0