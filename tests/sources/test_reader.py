"""Tests for the named source readers."""

from pathlib import Path

from domain_forest.sources.reader import (
    FileSource,
    Lines,
    LinesSource,
    ReadFailure,
    ResourceSource,
    sources_of,
)


class TestFileSource:

    def test_reads_lines(self, tmp_path: Path):
        p = tmp_path / "domains.txt"
        p.write_text("acme.com\n  internal.acme.com \n\n", encoding="utf-8")
        result = FileSource(p).read()
        assert result == Lines(["acme.com", "  internal.acme.com ", ""])

    def test_name_is_path(self, tmp_path: Path):
        p = tmp_path / "domains.txt"
        assert FileSource(p).name == str(p)

    def test_missing_file_is_failure(self, tmp_path: Path):
        result = FileSource(tmp_path / "nope.txt").read()
        assert isinstance(result, ReadFailure)
        assert "nope.txt" in result.reason

    def test_directory_is_failure(self, tmp_path: Path):
        assert isinstance(FileSource(tmp_path).read(), ReadFailure)

    def test_undecodable_file_is_failure(self, tmp_path: Path):
        p = tmp_path / "latin1.txt"
        p.write_bytes("café.acme.com\n".encode("latin-1"))
        result = FileSource(p).read()
        assert isinstance(result, ReadFailure)
        assert "decode" in result.reason

    def test_other_encoding(self, tmp_path: Path):
        p = tmp_path / "latin1.txt"
        p.write_bytes("café.acme.com\n".encode("latin-1"))
        assert FileSource(p, encoding="latin-1").read() == Lines(["café.acme.com"])

    def test_unknown_encoding_is_failure(self, tmp_path: Path):
        p = tmp_path / "domains.txt"
        p.write_text("acme.com\n", encoding="utf-8")
        result = FileSource(p, encoding="utf9").read()
        assert isinstance(result, ReadFailure)
        assert "unknown encoding" in result.reason

    def test_splits_on_line_endings_only(self, tmp_path: Path):
        p = tmp_path / "domains.txt"
        text = "a.acme.com\x85b.acme.com\r\nc.acme.com\rd.acme.com\u2028e.acme.com\n"
        p.write_bytes(text.encode("utf-8"))
        assert FileSource(p).read() == Lines(
            ["a.acme.com\x85b.acme.com", "c.acme.com", "d.acme.com\u2028e.acme.com"]
        )

    def test_no_trailing_newline(self, tmp_path: Path):
        p = tmp_path / "domains.txt"
        p.write_text("acme.com\nopenai.com", encoding="utf-8")
        assert FileSource(p).read() == Lines(["acme.com", "openai.com"])

    def test_empty_file(self, tmp_path: Path):
        p = tmp_path / "domains.txt"
        p.write_text("", encoding="utf-8")
        assert FileSource(p).read() == Lines([])

    def test_sources_of_keeps_order(self, tmp_path: Path):
        paths = [tmp_path / "b.txt", tmp_path / "a.txt"]
        assert [s.name for s in sources_of(paths)] == [str(p) for p in paths]


class TestLinesSource:

    def test_reads_given_lines(self):
        src = LinesSource("mem", ["acme.com", " x "])
        assert src.read() == Lines(["acme.com", " x "])
        assert src.name == "mem"

    def test_repeatable(self):
        src = LinesSource("mem", iter(["acme.com"]))
        assert src.read() == src.read()

    def test_repr(self):
        assert repr(LinesSource("mem", [])) == "LinesSource('mem')"


class TestResourceSource:

    def test_reads_package_resource(self):
        result = ResourceSource("domain_forest", "__init__.py").read()
        assert isinstance(result, Lines)
        assert any("Forest" in line for line in result.lines)

    def test_missing_resource_is_failure(self):
        result = ResourceSource("domain_forest", "no-such-file.txt").read()
        assert isinstance(result, ReadFailure)

    def test_missing_package_is_failure(self):
        result = ResourceSource("no_such_package_anywhere", "domains.txt").read()
        assert isinstance(result, ReadFailure)
        assert "no_such_package_anywhere" in result.reason

    def test_module_not_package_is_failure(self):
        result = ResourceSource("domain_forest.cli", "domains.txt").read()
        assert isinstance(result, ReadFailure)

    def test_unknown_encoding_is_failure(self):
        result = ResourceSource("domain_forest", "__init__.py", encoding="utf9").read()
        assert isinstance(result, ReadFailure)
        assert "unknown encoding" in result.reason
