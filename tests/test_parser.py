"""Parser dialect selection and failure tests."""

import pytest

from refshift.parser import DEFAULT_DIALECT, ParseError, detect_dialect, parse


class TestDetectDialect:

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("Form.jsx", "tsx"),
            ("Form.js", "tsx"),
            ("Form.tsx", "tsx"),
            ("lib/util.ts", "typescript"),
            ("lib/util.MTS", "typescript"),
            (None, DEFAULT_DIALECT),
        ],
    )
    def test_by_extension(self, path, expected):
        assert detect_dialect(path) == expected


class TestParse:

    def test_jsx_with_annotations(self):
        tree = parse("const el: Element = <div ref=\"x\" />;\n", "tsx")
        assert tree.root_node.type == "program"
        assert not tree.root_node.has_error

    def test_plain_javascript(self):
        tree = parse("const el = <div />;\n", "javascript")
        assert not tree.root_node.has_error

    def test_unknown_dialect(self):
        with pytest.raises(ValueError, match="Unsupported dialect"):
            parse("x;", "coffeescript")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("function (", "tsx")

    def test_parse_error_names_path(self):
        with pytest.raises(ParseError, match="Broken.jsx"):
            parse("class {", "tsx", path="Broken.jsx")
