import pytest

from minitalk.search import (
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)

SAMPLE = "Salopette eheh"


def test_strlen_plain():
    assert strlen("Salut") == len("Salut")


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == len("ab")


def test_strlen_empty():
    assert strlen("") == 0


def test_strchr_finds_first():
    idx = strchr(SAMPLE, "l")
    assert SAMPLE[idx] == "l"
    assert "l" not in SAMPLE[:idx]


def test_strchr_int_argument_matches_str():
    assert strchr(SAMPLE, ord("e")) == strchr(SAMPLE, "e")


def test_strchr_int_truncated_to_byte():
    assert strchr(SAMPLE, 256 + ord("p")) == strchr(SAMPLE, "p")


def test_strchr_nul_gives_terminator():
    assert strchr(SAMPLE, "\0") == len(SAMPLE)
    assert strchr(SAMPLE, 0) == len(SAMPLE)


def test_strchr_missing():
    assert strchr(SAMPLE, "z") is None


def test_strchr_ignores_text_after_nul():
    assert strchr("ab\0cd", "c") is None


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr(SAMPLE, "ab")


def test_strrchr_finds_last():
    idx = strrchr(SAMPLE, "e")
    assert SAMPLE[idx] == "e"
    assert "e" not in SAMPLE[idx + 1:]


def test_strrchr_single_occurrence_agrees_with_strchr():
    assert strrchr(SAMPLE, "S") == strchr(SAMPLE, "S")


def test_strrchr_nul_and_missing():
    assert strrchr(SAMPLE, "\0") == len(SAMPLE)
    assert strrchr(SAMPLE, "q") is None


def test_strdup_copies():
    original = "Comment est votre blanquette?"
    assert strdup(original) == original


def test_strdup_empty_and_truncated():
    assert strdup("") == ""
    assert strdup("ab\0cd") == "ab"


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_difference_sign():
    assert strncmp("Hello", "Helium", 5) > 0
    assert strncmp("Helium", "Hello", 5) < 0


def test_strncmp_antisymmetric():
    assert strncmp("Hello", "Helium", 5) == -strncmp("Helium", "Hello", 5)


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 3) == -ord("c")


def test_strncmp_identical_and_zero_length():
    assert strncmp("same", "same", 100) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_negative_size():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found():
    haystack = "Heyy ahah"
    idx = strnstr(haystack, "ahah", 11)
    assert idx == haystack.find("ahah")
    assert haystack[idx:].startswith("ahah")


def test_strnstr_limit_too_small():
    haystack = "Heyy ahah"
    assert strnstr(haystack, "ahah", len(haystack) - 1) is None
    assert strnstr(haystack, "ahah", len(haystack)) == haystack.find("ahah")


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_not_found():
    assert strnstr("Heyy ahah", "zz", 20) is None


def test_strnstr_negative_size():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -3)


def test_strlcpy_fits():
    assert strlcpy("Merci", 50) == ("Merci", len("Merci"))


def test_strlcpy_truncates():
    copied, total = strlcpy("Merci", 3)
    assert copied == "Me"
    assert total == len("Merci")


def test_strlcpy_zero_and_one():
    assert strlcpy("Merci", 0) == ("", len("Merci"))
    assert strlcpy("Merci", 1) == ("", len("Merci"))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("x", -1)


def test_strlcat_partial():
    result, total = strlcat("yo", "Ah", 4)
    assert result == "yo" + "Ah"[:1]
    assert total == len("yo") + len("Ah")


def test_strlcat_full():
    result, total = strlcat("yo", "Ah", 10)
    assert result == "yoAh"
    assert total == len("yoAh")


def test_strlcat_no_room():
    result, total = strlcat("yo", "Ah", 2)
    assert result == "yo"
    assert total == 2 + len("Ah")


def test_strlcat_result_bounded_by_size():
    for size in range(12):
        result, _ = strlcat("hello", "world", size)
        assert len(result) <= max(size - 1, len("hello"))
        assert result.startswith("hello")