"""String helpers that follow NUL-terminated string conventions."""

_NUL = "\0"


def _terminated(text: str) -> str:
    """Return *text* up to, not including, its first NUL character."""
    return text.split(_NUL, 1)[0]


def split(text: str, sep: str) -> list[str]:
    """Split *text* on *sep*, dropping the empty pieces between separators."""
    return [word for word in text.split(sep) if word]


def count_words(text: str, sep: str) -> int:
    """Count the places where a field ends.

    A field ends at a separator or at the end of the text, unless the
    character before it is itself a separator. A separator at the very
    start of the text therefore counts as ending an empty field, and the
    empty text counts as one field.
    """
    count = 0
    previous = None
    for char in (*text, None):
        if (char is None or char == sep) and previous != sep:
            count += 1
        previous = char
    return count


def strchr(text: str | None, c: str) -> int | None:
    """Return the index of the first *c* in *text*, or None.

    Searching for the NUL character finds the end of the text.
    """
    if text is None:
        return None
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return index if index >= 0 else None


def strcmp(first: str | None, second: str | None) -> int:
    """Compare two strings character by character.

    The result is the difference between the first pair of differing
    characters, with the end of a string counting as code 0. If exactly
    one argument is None the result is 1; if both are, it is 0.
    """
    if first is None and second is None:
        return 0
    if first is None or second is None:
        return 1
    for left, right in zip(first + _NUL, second + _NUL):
        if left != right or left == _NUL:
            return ord(left) - ord(right)
    return 0


def strcpy(src: str | None) -> str:
    """Return a copy of *src* up to its terminator; None copies as empty."""
    if src is None:
        return ""
    return _terminated(src)


def strdup(text: str) -> str:
    """Return a copy of *text* up to its terminator."""
    return _terminated(text)


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; None if either one is missing."""
    if first is None or second is None:
        return None
    return first + second


def strlcpy(src: str | None, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters, terminator included.

    Returns the text that fits and the full length of *src*.
    """
    if src is None:
        return "", 0
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns the resulting text and the length the full result would have
    had. If *dst* already fills the buffer it is left unchanged and the
    reported length is ``size + len(src)``.
    """
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def shift(offset: int, c: str) -> str:
    """Move character *c* forward by *offset*, wrapping within one byte."""
    return chr((ord(c) + offset) % 256)


def shift2(offset: int, c: str) -> str:
    """Move character *c* forward by *offset* plus one, wrapping within one byte."""
    return shift(offset + 1, c)