"""Tests for reading suffix rules from a file."""

import pytest

from pslookup.source.reader import ReadError, load_suffix_tree, read_lines
from pslookup.tree.suffix_tree import SuffixTree


class TestReadLines:

    def test_yields_all_lines(self, psl_file):
        lines = list(read_lines(psl_file))
        assert lines[0].startswith("// This Source Code Form")
        assert "co.uk\n" in lines
        assert "*.sch.uk\n" in lines

    def test_lazy_open(self, tmp_path):
        """Nothing is opened until iteration starts."""
        lines = read_lines(tmp_path / "missing.dat")
        with pytest.raises(ReadError):
            next(lines)

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.dat"
        with pytest.raises(ReadError) as exc_info:
            list(read_lines(path))
        assert exc_info.value.path == str(path)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert "missing.dat" in str(exc_info.value)

    def test_directory_is_unreadable(self, tmp_path):
        with pytest.raises(ReadError):
            list(read_lines(tmp_path))

    def test_bad_encoding(self, tmp_path):
        path = tmp_path / "latin1.dat"
        path.write_bytes(b"co.uk\n\xe9cole.fr\n")
        with pytest.raises(ReadError) as exc_info:
            list(read_lines(path))
        assert "utf-8" in exc_info.value.reason
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_explicit_encoding(self, tmp_path):
        path = tmp_path / "latin1.dat"
        path.write_bytes(b"co.uk\n\xe9cole.fr\n")
        assert list(read_lines(path, encoding="latin-1")) == ["co.uk\n", "\xe9cole.fr\n"]

    def test_unknown_encoding(self, psl_file):
        with pytest.raises(ReadError) as exc_info:
            list(read_lines(psl_file, encoding="no-such-codec"))
        assert "no-such-codec" in exc_info.value.reason


class TestLoadSuffixTree:

    def test_load_from_file(self, psl_file):
        tree = load_suffix_tree(psl_file)
        assert tree.lookup_etld("www.kevin.co.uk") == "co.uk"
        assert tree.lookup_etld("x.y.sch.uk") == "y.sch.uk"
        assert tree.lookup_etld("host.domain.schools.nsw.edu.au") == "schools.nsw.edu.au"

    def test_load_accepts_str_path(self, psl_file):
        tree = load_suffix_tree(str(psl_file))
        assert tree.lookup_etld("example.com") == "com"

    def test_same_tree_as_lines(self, psl_file, psl_lines):
        assert load_suffix_tree(psl_file).render() == SuffixTree.build(psl_lines).render()

    def test_read_error_propagates(self, tmp_path):
        with pytest.raises(ReadError):
            load_suffix_tree(tmp_path / "missing.dat")

    def test_utf8_labels(self, tmp_path):
        path = tmp_path / "idn.dat"
        path.write_text("// IDN\n公司.cn\n", encoding="utf-8")
        tree = load_suffix_tree(path)
        assert tree.lookup_etld("www.example.公司.cn") == "公司.cn"
