import pytest

from solong.strings import (
    count_words,
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_empty_and_text():
    assert strlen("") == 0
    assert strlen("so_long") == len("so_long")


def test_strchr_finds_first_occurrence():
    text = "Hello World"
    index = strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_missing_and_terminator():
    assert strchr("Hello World", "z") is None
    assert strchr("Hello World", "\0") == len("Hello World")


def test_strchr_rejects_multi_character_needle():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last_occurrence():
    text = "Hello World"
    index = strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1:]


def test_strrchr_first_char_and_missing():
    assert strrchr("abc", "a") == 0
    assert strrchr("abc", "z") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strncmp_equal_and_zero_length():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_difference_sign_and_value():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string_compares_low():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strnstr_found_within_limit():
    big = "Hello, World!"
    little = "World"
    index = strnstr(big, little, len(big))
    assert big[index:index + len(little)] == little


def test_strnstr_match_must_fit_within_limit():
    big = "Hello, World!"
    assert strnstr(big, "World", 8) is None
    assert strnstr(big, "missing", len(big)) is None


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strlcpy_truncates_and_reports_source_length():
    copied, length = strlcpy("hello", 3)
    assert copied == "he"
    assert length == len("hello")


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcpy_large_size_copies_everything():
    assert strlcpy("hello", 100) == ("hello", len("hello"))


def test_strlcat_appends_within_room():
    result, total = strlcat("foo", "bar", 100)
    assert result == "foobar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates_to_size():
    result, total = strlcat("foo", "bar", 5)
    assert len(result) == 5 - 1
    assert result.startswith("foo")
    assert total == len("foobar")


def test_strlcat_size_not_larger_than_dst():
    result, total = strlcat("foo", "bar", 2)
    assert result == "foo"
    assert total == 2 + len("bar")


def test_strdup_and_strjoin():
    assert strdup("map.ber") == "map.ber"
    assert strjoin("so_", "long") == "so_long"
    assert strjoin("", "") == ""


def test_substr_normal_and_clamped():
    assert substr("Hello World", 6, 5) == "World"
    assert substr("Hello World", 6, 100) == "World"


def test_substr_start_past_end():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 50, 2) == ""


def test_substr_rejects_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  \tword\n ", " \t\n") == "word"


def test_strtrim_all_trimmed_and_empty_set():
    assert strtrim("aaaa", "a") == ""
    assert strtrim(" keep ", "") == " keep "


def test_split_drops_empty_pieces():
    assert split("  one two   three ", " ") == ["one", "two", "three"]
    assert split("", " ") == []
    assert split("solo", " ") == ["solo"]


def test_count_words_matches_split():
    text = ",,a,,b,c,,"
    assert count_words(text, ",") == len(split(text, ","))
    assert count_words(",,,", ",") == 0


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "")


def test_split_join_round_trip():
    words = ["10001", "1PCE1", "10001"]
    assert split("\n".join(words), "\n") == words


def test_strmapi_uses_index_and_char():
    result = strmapi("abcdef", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCdEf"
    assert strmapi("", lambda i, c: c) == ""


def test_striteri_modifies_in_place():
    chars = list("abc")
    seen = []

    def record_and_upper(index, ch):
        seen.append(index)
        return ch.upper()

    assert striteri(chars, record_and_upper) is None
    assert chars == ["A", "B", "C"]
    assert seen == [0, 1, 2]


def test_striteri_none_keeps_element():
    chars = list("xyz")
    striteri(chars, lambda i, c: None)
    assert chars == ["x", "y", "z"]