import re

import pytest

from tmplfuncs.refuncs import ReFuncs


@pytest.fixture
def rf():
    return ReFuncs()


def test_replace(rf):
    assert rf.replace("i", "ello", "hi world") == "hello world"


def test_replace_expansion(rf):
    assert rf.replace("a(x*)b", "${1}W", "-ab-axxb-") == "-W-xxW-"
    assert rf.replace("a(x*)b", "$1W", "-ab-axxb-") == "---"
    assert rf.replace("a(x*)b", "$1", "-ab-axxb-") == "--xx-"
    assert rf.replace("(?P<word>h)i", "${word}ello", "hi world") == "hello world"
    assert rf.replace("i", "$$", "hi") == "h$"


def test_replace_empty_matches(rf):
    assert rf.replace("x*", "-", "abxd") == "-a-b-d-"


def test_replace_bad_pattern(rf):
    with pytest.raises(re.error):
        rf.replace("[a-", "x", "abc")


def test_match(rf):
    assert rf.match(r"i\ ", "hi world") is True
    assert rf.match(r"^world", "hi world") is False


def test_find(rf):
    assert rf.find(r"[a-z]+", "foo bar baz") == "foo"
    assert rf.find("4", 42) == "4"
    assert rf.find(False, 42) == ""
    with pytest.raises(re.error):
        rf.find("[a-", "")


def test_find_all(rf):
    assert rf.find_all(r"[a-z]+", "foo bar baz") == ["foo", "bar", "baz"]
    assert rf.find_all(r"[a-z]+", -1, "foo bar baz") == ["foo", "bar", "baz"]
    assert rf.find_all(r"[a-z]+", 0, "foo bar baz") == []
    assert rf.find_all(r"[a-z]+", 2, "foo bar baz") == ["foo", "bar"]
    assert rf.find_all(r"[a-z]+", 14, "foo bar baz") == ["foo", "bar", "baz"]
    assert rf.find_all("qux", "foo bar baz") == []


def test_find_all_more(rf):
    assert rf.find_all("a.", "paranormal") == ["ar", "an", "al"]
    assert rf.find_all("a.", 2, "paranormal") == ["ar", "an"]
    assert rf.find_all("a.", "graal") == ["aa"]


def test_find_all_errors(rf):
    with pytest.raises(re.error):
        rf.find_all("[a-", "")
    with pytest.raises(TypeError, match="want 2 or 3, got 1"):
        rf.find_all("")
    with pytest.raises(TypeError, match="want 2 or 3, got 4"):
        rf.find_all("", "", "", "")


def test_split(rf):
    assert rf.split(" ", "foo bar baz") == ["foo", "bar", "baz"]
    assert rf.split(r"\s+", -1, "foo  bar baz") == ["foo", "bar", "baz"]
    assert rf.split(" ", 0, "foo bar baz") == []
    assert rf.split(r"\s+", 2, "foo bar baz") == ["foo", "bar baz"]
    assert rf.split(r"\s", 14, "foo  bar baz") == ["foo", "", "bar", "baz"]
    assert rf.split(r"[\s,.]", 14, "foo bar.baz,qux") == ["foo", "bar", "baz", "qux"]


def test_split_more(rf):
    assert rf.split("a*", 5, "abaabaccadaaae") == ["", "b", "b", "c", "cadaaae"]
    assert rf.split("z+", "pizza") == ["pi", "a"]
    assert rf.split("z+", 2, "pizza") == ["pi", "a"]
    assert rf.split(",", "") == [""]


def test_split_errors(rf):
    with pytest.raises(re.error):
        rf.split("[a-", "")
    with pytest.raises(TypeError):
        rf.split("")
    with pytest.raises(TypeError):
        rf.split("", "", "", "")


def test_replace_literal(rf):
    assert rf.replace_literal("i", "ello$1", "hi world") == "hello$1 world"
    with pytest.raises(re.error):
        rf.replace_literal("(", "x", "y")


def test_quote_meta(rf):
    assert (
        rf.quote_meta("Escaping symbols like: .+*?()|[]{}^$")
        == r"Escaping symbols like: \.\+\*\?\(\)\|\[\]\{\}\^\$"
    )
    assert rf.quote_meta("a-b c") == "a-b c"