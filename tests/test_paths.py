import pytest

from tmplfuncs.paths import FilePathFuncs, PathFuncs


@pytest.fixture
def p():
    return PathFuncs()


@pytest.fixture
def fp():
    return FilePathFuncs()


def test_path_base(p):
    assert p.base("foo/bar") == "bar"
    assert p.base("/foo/bar") == "bar"
    assert p.base("") == "."
    assert p.base("/") == "/"
    assert p.base("foo/bar///") == "bar"


def test_path_clean(p):
    assert p.clean("/foo/bar/../baz") == "/foo/baz"
    assert p.clean("") == "."
    assert p.clean("a//b/./c/..") == "a/b"
    assert p.clean("/../x") == "/x"
    assert p.clean("../../x") == "../../x"


def test_path_dir_ext(p):
    assert p.dir("foo/bar") == "foo"
    assert p.dir("bar") == "."
    assert p.dir("/") == "/"
    assert p.ext("/foo/bar/baz.txt") == ".txt"
    assert p.ext("a.b/c") == ""


def test_path_is_abs(p):
    assert p.is_abs("foo/bar") is False
    assert p.is_abs("/foo/bar") is True


def test_path_join(p):
    assert p.join("foo", "bar", "baz", "..", "qux") == "foo/bar/qux"
    assert p.join("", "") == ""
    assert p.join("", "a", "", "b") == "a/b"


def test_path_match(p):
    assert p.match("*.txt", "foo.json") is False
    assert p.match("*.txt", "foo.txt") is True
    assert p.match("*", "a/b") is False
    assert p.match("[^a]x", "bx") is True
    assert p.match("[a-c]?", "bz") is True
    assert p.match(r"\*", "*") is True


@pytest.mark.parametrize("pattern", ["a[", "[]", "[-a]", "a\\", "[a-"])
def test_path_match_bad_pattern(p, pattern):
    with pytest.raises(ValueError):
        p.match(pattern, "a")


def test_path_split(p):
    assert p.split("/foo/bar/baz") == ["/foo/bar/", "baz"]
    assert p.split("baz") == ["", "baz"]


def test_filepath_funcs(fp):
    assert fp.base("foo/bar") == "bar"
    assert fp.base("/foo/bar") == "bar"
    assert fp.clean("/foo/bar/../baz") == "/foo/baz"
    assert fp.dir("foo/bar") == "foo"
    assert fp.ext("/foo/bar/baz.txt") == ".txt"
    assert fp.is_abs("foo/bar") is False
    assert fp.is_abs("/foo/bar") is True
    assert fp.join("foo", "bar", "baz", "..", "qux") == "foo/bar/qux"
    assert fp.match("*.txt", "foo.json") is False
    assert fp.match("*.txt", "foo.txt") is True
    assert fp.rel("/foo/bar", "/foo/bar/baz") == "baz"
    assert fp.split("/foo/bar/baz") == ["/foo/bar/", "baz"]
    assert fp.volume_name("/foo/bar") == ""


def test_filepath_rel(fp):
    assert fp.rel("/a/b", "/a/b") == "."
    assert fp.rel("/a/b/c", "/a/x") == "../../x"
    assert fp.rel("a", ".") == "../."
    with pytest.raises(ValueError):
        fp.rel("/a", "b")
    with pytest.raises(ValueError):
        fp.rel("../a", "b")


def test_filepath_slashes(fp):
    assert fp.to_slash("a/b") == "a/b"
    assert fp.from_slash("a/b") == "a/b"