"""Edit set tests: ordering, overlap detection, serialization."""

import pytest

from refshift.builders import current_access, line_indent, ref_attribute
from refshift.printer import Edit, EditSet


class FakeNode:
    def __init__(self, start_byte, end_byte):
        self.start_byte = start_byte
        self.end_byte = end_byte


class TestEditSet:

    def test_empty_returns_source(self):
        source = b"const x = 1;\n"
        assert EditSet().apply(source) is source

    def test_replace_and_insert(self):
        source = b"{ this.refs.a; }"
        edits = EditSet()
        edits.insert(1, " aRef;")
        edits.replace(FakeNode(2, 13), current_access("aRef"))

        assert edits.apply(source) == b"{ aRef; this.aRef.current; }"

    def test_later_insert_goes_first(self):
        edits = EditSet()
        edits.insert(1, "A")
        edits.insert(1, "B")

        assert edits.apply(b"{}") == b"{BA}"

    def test_overlapping_replacements_rejected(self):
        edits = EditSet()
        edits.replace(FakeNode(0, 5), "x")

        with pytest.raises(ValueError):
            edits.replace(FakeNode(3, 8), "y")

    def test_insert_inside_replacement_rejected(self):
        edits = EditSet()
        edits.replace(FakeNode(0, 5), "x")

        with pytest.raises(ValueError):
            edits.insert(2, "y")

    def test_covers(self):
        edits = EditSet()
        edits.insert(0, "prefix")
        edits.replace(FakeNode(4, 10), "x")

        assert edits.covers(FakeNode(4, 10))
        assert edits.covers(FakeNode(5, 6))
        assert not edits.covers(FakeNode(0, 1))
        assert len(edits) == 2

    def test_multibyte_source(self):
        source = "const s = 'é'; this.refs.a;".encode("utf-8")
        start = source.index(b"this")
        edits = EditSet()
        edits.replace(FakeNode(start, start + len(b"this.refs.a")), "this.aRef.current")

        assert edits.apply(source).decode("utf-8") == "const s = 'é'; this.aRef.current;"

    def test_edit_is_insertion(self):
        assert Edit(3, 3, "x").is_insertion
        assert not Edit(3, 4, "x").is_insertion


class TestBuilders:

    def test_ref_attribute(self):
        assert ref_attribute("fooRef") == "ref={this.fooRef}"

    def test_line_indent(self):
        source = b"a\n\t  b = 1;\n"
        assert line_indent(source, source.index(b"b")) == "\t  "
        assert line_indent(source, 0) == ""
