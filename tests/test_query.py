"""Tree query helper tests: predicate search and enclosing-class lookup."""

import pytest

from refshift.parser import parse
from refshift.query import (
    class_name,
    find_all,
    find_enclosing_class,
    is_refs_access,
    is_string_ref_attribute,
    node_text,
    walk,
)

CODE = """class Outer extends React.Component {
  render() {
    return <div ref="first"><span ref="second" /></div>;
  }
}

function loose() {
  return this.refs.first.value + this.refs.other.value;
}
"""


@pytest.fixture
def root():
    return parse(CODE).root_node


class TestFindAll:

    def test_walk_starts_at_root(self, root):
        nodes = list(walk(root))
        assert nodes[0].type == "program"
        assert len(nodes) > 10

    def test_document_order(self, root):
        attrs = find_all(root, "jsx_attribute", is_string_ref_attribute)
        assert [node_text(a) for a in attrs] == ['ref="first"', 'ref="second"']

    def test_multiple_kinds(self, root):
        found = find_all(root, ("class_declaration", "function_declaration"))
        assert [n.type for n in found] == ["class_declaration", "function_declaration"]

    def test_without_predicate(self, root):
        assert len(find_all(root, "jsx_attribute")) == 2

    def test_refs_access_matches_by_name(self, root):
        first = find_all(root, "member_expression", lambda n: is_refs_access(n, "first"))
        assert [node_text(n) for n in first] == ["this.refs.first"]
        assert find_all(root, "member_expression", lambda n: is_refs_access(n, "missing")) == []


class TestEnclosingClass:

    def test_attribute_inside_class(self, root):
        attr = find_all(root, "jsx_attribute")[1]
        clazz = find_enclosing_class(attr)

        assert clazz is not None
        assert class_name(clazz) == "Outer"

    def test_nothing_above_function(self, root):
        usage = find_all(root, "member_expression", lambda n: is_refs_access(n, "other"))[0]
        assert find_enclosing_class(usage) is None

    def test_innermost_class_wins(self):
        tree = parse(
            """class A {
  make() {
    class B {
      render() { return <i ref="b" />; }
    }
    return B;
  }
}
"""
        )
        attr = find_all(tree.root_node, "jsx_attribute")[0]
        assert class_name(find_enclosing_class(attr)) == "B"
