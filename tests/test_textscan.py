import pytest

from raycub.textscan import find, find_unquoted, split_words


def test_split_words_on_spaces_and_tabs():
    assert split_words("  16 16\t4  1 ") == ["16", "16", "4", "1"]


def test_split_words_keeps_newlines_in_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty_and_blank():
    assert split_words("") == []
    assert split_words(" \t \t") == []


def test_split_words_stops_at_nul():
    assert split_words("one two\0three") == ["one", "two"]


def test_split_words_round_trip():
    words = ["c", "#FF0000", "s", "red"]
    assert split_words("\t".join(words)) == words
    assert split_words(" ".join(words)) == words


@pytest.mark.parametrize(
    "text,needle",
    [("static char *x = {", '"'), ('abc"def"', '"'), ("a /* b */ c", "*/")],
)
def test_find_locates_needle(text, needle):
    pos = find(text, needle, len(text))
    assert pos >= 0
    assert text[pos:pos + len(needle)] == needle
    assert needle not in text[:pos + len(needle) - 1]


def test_find_absent():
    assert find("no quotes here", '"', 100) == -1


def test_find_needle_longer_than_limit():
    assert find('x"y', '"', 0) == -1
    assert find("abcdef", "cd", 1) == -1


def test_find_ignores_text_after_nul():
    assert find('abc\0"', '"', 10) == -1


def test_find_unquoted_skips_quoted_occurrence():
    text = 'a "/* inside" /* outside */'
    pos = find_unquoted(text, "/*", len(text))
    assert pos > text.index("/*")
    assert text[pos:pos + 2] == "/*"
    assert text[:pos].count('"') % 2 == 0


def test_find_unquoted_matches_find_without_quotes():
    text = "line // comment\nnext"
    assert find_unquoted(text, "//", len(text)) == find(text, "//", len(text))


def test_find_unquoted_all_inside_quotes():
    text = '"// only inside"'
    assert find_unquoted(text, "//", len(text)) == -1


def test_find_unquoted_limit():
    assert find_unquoted("ab//", "//", 1) == -1