import pytest

from lspkit.strsplit import chunk_split, join, split, split_whitespace


def test_split_on_character_from_documented_example():
    assert split("This|is|a|test.", "|") == ["This", "is", "a", "test."]


def test_join_from_documented_example():
    assert join("|", ["This", "is", "a", "test."]) == "This|is|a|test."


def test_chunk_split_from_documented_example():
    assert chunk_split("abcdefghijk", 3) == ["abc", "def", "ghi", "jk"]


def test_split_without_separator_returns_whole_text():
    assert split("nothing here", ",") == ["nothing here"]


def test_split_empty_text_gives_no_pieces():
    assert split("", ",") == []
    assert split_whitespace("") == []
    assert chunk_split("", 4) == []


def test_split_trailing_separator_gives_no_empty_piece():
    text = "x,y,"
    assert split(text, ",") == split(text[:-1], ",")


def test_split_keeps_empty_inner_pieces():
    pieces = split("a,,b", ",")
    assert len(pieces) == 3
    assert pieces[1] == ""


def test_split_multi_character_separator_round_trips():
    text = "one--two--three"
    assert join("--", split(text, "--")) == text


@pytest.mark.parametrize("text", ["a b c", "alpha beta", "one", "x y z w"])
def test_split_whitespace_single_spaces_matches_str_split(text):
    assert split_whitespace(text) == text.split(" ")


def test_split_whitespace_mixed_single_whitespace_chars():
    assert split_whitespace("a\tb\nc\rd") == "a b c d".split(" ")


def test_split_whitespace_run_keeps_earlier_whitespace_in_piece():
    pieces = split_whitespace("ab  cd")
    assert pieces == ["ab ", "cd"]


def test_split_whitespace_trailing_whitespace_dropped():
    assert split_whitespace("word ") == split_whitespace("word")


def test_split_limit_puts_rest_in_last_piece():
    pieces = split("a|b|c|d", "|", 2)
    assert pieces[0] == "a"
    assert "|".join(pieces) == "a|b|c|d"
    assert len(pieces) == 2


def test_split_whitespace_limit_puts_rest_in_last_piece():
    pieces = split_whitespace("a b c d", 3)
    assert len(pieces) == 3
    assert " ".join(pieces) == "a b c d"


def test_chunk_split_pieces_rejoin_and_respect_length():
    text = "the quick brown fox"
    pieces = chunk_split(text, 4)
    assert "".join(pieces) == text
    assert all(len(p) == 4 for p in pieces[:-1])
    assert 0 < len(pieces[-1]) <= 4


def test_join_with_empty_glue_of_nothing_is_empty():
    assert join("", []) == ""


def test_join_empty_sequence_with_glue_is_an_error():
    with pytest.raises(ValueError):
        join(",", [])


def test_split_empty_separator_is_an_error():
    with pytest.raises(ValueError):
        split("abc", "")


def test_chunk_split_zero_length_is_an_error():
    with pytest.raises(ValueError):
        chunk_split("abc", 0)


@pytest.mark.parametrize("limit", [0, -1])
def test_limit_below_one_is_an_error(limit):
    with pytest.raises(ValueError):
        split("a,b", ",", limit)
    with pytest.raises(ValueError):
        split_whitespace("a b", limit)