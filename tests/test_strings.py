import pytest

from ftlib.strings import (
    count_words,
    shift,
    shift2,
    split,
    strchr,
    strcmp,
    strcpy,
    strdup,
    strjoin,
    strlcat,
    strlcpy,
)


def test_split_drops_empty_pieces():
    assert split("  a  bb c ", " ") == ["a", "bb", "c"]


def test_split_only_separators():
    assert split(",,,", ",") == []


def test_split_rejoin_round_trip():
    words = ["one", "two", "three"]
    assert split(",".join(words), ",") == words


@pytest.mark.parametrize("text", ["a b c", "a  b", "word", "a b "])
def test_count_words_matches_split_without_leading_separator(text):
    assert count_words(text, " ") == len(split(text, " "))


def test_count_words_counts_leading_separator():
    assert count_words(" a b", " ") == len(split(" a b", " ")) + 1


def test_count_words_empty_text():
    assert count_words("", " ") == 1


def test_strchr_finds_first():
    text = "hello"
    index = strchr(text, "l")
    assert index == text.index("l")
    assert text[index] == "l"


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_nul_finds_end():
    assert strchr("hello", "\0") == len("hello")


def test_strchr_none_text():
    assert strchr(None, "a") is None


def test_strcmp_equal():
    assert strcmp("same", "same") == 0


def test_strcmp_is_antisymmetric():
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") == -strcmp("abc", "abd")


def test_strcmp_prefix_is_smaller():
    assert strcmp("ab", "abc") == -ord("c")


def test_strcmp_none_handling():
    assert strcmp(None, "x") == 1
    assert strcmp("x", None) == 1
    assert strcmp(None, None) == 0


def test_strcpy_stops_at_nul():
    assert strcpy("ab\0cd") == "ab"


def test_strcpy_none():
    assert strcpy(None) == ""


def test_strdup_copies():
    assert strdup("text") == "text"
    assert strdup("ab\0cd") == strcpy("ab\0cd")


def test_strjoin():
    assert strjoin("ab", "cd") == "ab" + "cd"
    assert strjoin(None, "cd") is None
    assert strjoin("ab", None) is None


def test_strlcpy_truncates():
    src = "hello"
    copied, length = strlcpy(src, 3)
    assert len(copied) == 2
    assert src.startswith(copied)
    assert length == len(src)


def test_strlcpy_fits():
    assert strlcpy("hi", 10) == ("hi", len("hi"))


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcpy_none():
    assert strlcpy(None, 5) == ("", 0)


def test_strlcat_fits():
    dst, src = "ab", "cdef"
    assert strlcat(dst, src, 10) == (dst + src, len(dst) + len(src))


def test_strlcat_truncates():
    dst, src = "ab", "cdef"
    result, length = strlcat(dst, src, 4)
    assert len(result) == 3
    assert (dst + src).startswith(result)
    assert length == len(dst) + len(src)


def test_strlcat_buffer_already_full():
    dst, src = "abcd", "ef"
    assert strlcat(dst, src, 3) == (dst, 3 + len(src))


def test_shift_moves_forward():
    assert ord(shift(3, "a")) == ord("a") + 3


def test_shift_wraps_within_byte():
    assert shift(256, "a") == "a"


def test_shift2_adds_one():
    assert shift2(4, "k") == shift(5, "k")