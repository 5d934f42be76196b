import pytest
from hypothesis import given
from hypothesis import strategies as st

from fractol.strings import (
    itoa,
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

text_st = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=0x7F))


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_difference_is_code_point_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_shorter_string_counts_as_zero():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("mandelbrot", "mandelbrot", 11) == 0
    assert strncmp("julia", "julias", 6) < 0


def test_strncmp_zero_length():
    assert strncmp("x", "y", 0) == 0


@given(text_st, text_st)
def test_strncmp_antisymmetric(a, b):
    n = max(len(a), len(b)) + 1
    assert strncmp(a, b, n) == -strncmp(b, a, n)


def test_strchr_finds_first():
    text = "hello"
    idx = strchr(text, "l")
    assert idx == text.index("l")
    assert strchr(text, "z") is None


def test_strchr_nul_gives_length():
    assert strchr("hello", 0) == len("hello")
    assert strchr("", "\0") == 0


def test_strrchr_finds_last():
    text = "hello"
    assert strrchr(text, "l") == text.rindex("l")
    assert strrchr(text, ord("h")) == 0
    assert strrchr(text, "q") is None
    assert strrchr(text, 0) == len(text)


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strnstr_match_within_limit():
    big, little = "lorem ipsum dolor", "ipsum"
    idx = strnstr(big, little, len(big))
    assert big[idx : idx + len(little)] == little


def test_strnstr_match_must_end_before_limit():
    big, little = "lorem ipsum dolor", "ipsum"
    start = big.index(little)
    assert strnstr(big, little, start + len(little) - 1) is None
    assert strnstr(big, little, start + len(little)) == start


def test_strnstr_empty_and_zero():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None


def test_strlcpy_truncates():
    copied, length = strlcpy("hello", 3)
    assert copied == "he"
    assert length == len("hello")


def test_strlcpy_size_zero():
    assert strlcpy("hello", 0) == ("", len("hello"))


@given(text_st, st.integers(min_value=1, max_value=50))
def test_strlcpy_invariants(src, size):
    copied, length = strlcpy(src, size)
    assert length == len(src)
    assert src.startswith(copied)
    assert len(copied) <= size - 1


def test_strlcat_appends_within_room():
    result, length = strlcat("abc", "defgh", 6)
    assert result == "abcde"
    assert length == len("abc") + len("defgh")


def test_strlcat_full_buffer():
    result, length = strlcat("abcdef", "xyz", 4)
    assert result == "abcdef"
    assert length == 4 + len("xyz")


def test_strlcat_size_zero():
    assert strlcat("abc", "xyz", 0) == ("abc", len("xyz"))


@given(text_st, text_st)
def test_strlcat_large_buffer_concatenates(dest, src):
    size = len(dest) + len(src) + 1
    assert strlcat(dest, src, size) == (dest + src, len(dest) + len(src))


def test_substr_basic_and_past_end():
    assert substr("fract-ol", 0, 5) == "fract"
    assert substr("fract-ol", 20, 3) == ""
    assert substr("fract-ol", 6, 100) == "ol"


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("fract", "-ol") == "fract-ol"
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim():
    assert strtrim("xxabcxx", "x") == "abc"
    assert strtrim("  abc ", "") == "  abc "
    assert strtrim("xyx", "xy") == ""


@given(text_st, st.text(alphabet="abc ", min_size=1, max_size=3))
def test_strtrim_invariants(text, charset):
    result = strtrim(text, charset)
    assert result in text
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@given(text_st)
def test_split_rejoins_to_text_without_separators(text):
    words = split(text, ",")
    assert "".join(words) == text.replace(",", "")
    assert all(words)


def test_itoa_limits():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


def test_itoa_rejects_float():
    with pytest.raises(TypeError):
        itoa(1.5)


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, c: c * (i + 1)) == "abbccc"


def test_striteri_replaces_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C", "d"]


def test_striteri_visits_every_index():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, c: seen.append((i, c)))
    assert seen == list(enumerate("xyz"))
    assert chars == list("xyz")