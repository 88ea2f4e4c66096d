import pytest

from aatools import filters


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "subdir").mkdir()
    (tmp_path / "notes.txt").write_text("x")
    (tmp_path / ".hidden").write_text("x")
    (tmp_path / "README.md").write_text("x")
    return tmp_path


def test_directories(tree):
    assert filters.filter_directories()(tree / "subdir") is True
    assert filters.filter_directories()(tree / "notes.txt") is False
    assert filters.filter_out_directories()(tree / "notes.txt") is True
    assert filters.filter_out_directories()(tree / "subdir") is False


def test_names(tree):
    accept = filters.filter_names("README.md", "other")
    assert accept(tree / "README.md") is True
    assert accept(tree / "notes.txt") is False
    reject = filters.filter_out_names("README.md")
    assert reject(tree / "README.md") is False
    assert reject(tree / "notes.txt") is True


def test_names_use_base_of_string_path():
    assert filters.filter_names("b")("/a/b/") is True
    assert filters.filter_names("a")("/a/b") is False


def test_suffixes(tree):
    assert filters.filter_suffixes(".md", ".rst")(tree / "README.md") is True
    assert filters.filter_suffixes(".md")(tree / "notes.txt") is False
    assert filters.filter_out_suffixes(".md")(tree / "README.md") is False
    assert filters.filter_out_suffixes(".md")(tree / "notes.txt") is True


def test_suffix_matches_whole_path():
    assert filters.filter_suffixes("dir/file")("/some/dir/file") is True


def test_prefixes(tree):
    assert filters.filter_prefixes(".")(tree / ".hidden") is True
    assert filters.filter_prefixes(".")(tree / "notes.txt") is False
    assert filters.filter_out_prefixes(".")(tree / ".hidden") is False
    assert filters.filter_out_prefixes(".")(tree / "notes.txt") is True


def test_prefix_uses_base_name():
    assert filters.filter_prefixes("tmp")("/tmp/file") is False


def test_or_and_not(tree):
    md = filters.filter_suffixes(".md")
    hidden = filters.filter_prefixes(".")
    either = filters.or_filter(md, hidden)
    both = filters.and_filter(md, filters.filter_out_directories())
    assert either(tree / "README.md") is True
    assert either(tree / ".hidden") is True
    assert either(tree / "notes.txt") is False
    assert both(tree / "README.md") is True
    assert both(tree / ".hidden") is False
    assert filters.not_filter(md)(tree / "README.md") is False
    assert filters.not_filter(md)(tree / "notes.txt") is True


def test_empty_combinators():
    assert filters.or_filter()("anything") is False
    assert filters.and_filter()("anything") is True


def test_filtering_a_listing(tree):
    entries = sorted(tree.iterdir())
    accept = filters.and_filter(
        filters.filter_out_directories(), filters.filter_out_prefixes(".")
    )
    kept = [entry.name for entry in entries if accept(entry)]
    assert kept == ["README.md", "notes.txt"]