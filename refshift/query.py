"""Predicate-based node search over tree-sitter syntax trees.

Matches are always collected into a list before the caller edits anything,
so rewriting never happens while a traversal is still in flight.
"""

from collections.abc import Callable, Iterator
from typing import Any

CLASS_DECLARATION_TYPES = ("class_declaration", "abstract_class_declaration")


def node_text(node: Any) -> str:
    """Decoded source text of a node."""
    return node.text.decode("utf-8", errors="replace")


def walk(root: Any) -> Iterator[Any]:
    """Yield every node under root in pre-order (document order)."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def find_all(
    root: Any,
    kind: str | tuple[str, ...],
    predicate: Callable[[Any], bool] | None = None,
) -> list[Any]:
    """Collect all nodes of the given type(s) that satisfy predicate."""
    kinds = (kind,) if isinstance(kind, str) else kind
    return [
        node
        for node in walk(root)
        if node.type in kinds and (predicate is None or predicate(node))
    ]


def is_class_declaration(node: Any) -> bool:
    """True for named class declarations and `export default class {}`."""
    if node.type in CLASS_DECLARATION_TYPES:
        return True
    # An anonymous default-exported class parses as a bare `class` expression
    return (
        node.type == "class"
        and node.parent is not None
        and node.parent.type == "export_statement"
    )


def find_enclosing_class(node: Any) -> Any | None:
    """Walk parent links upward to the nearest class declaration, or None."""
    current = node.parent
    while current is not None:
        if is_class_declaration(current):
            return current
        current = current.parent
    return None


def class_name(class_node: Any) -> str | None:
    name = class_node.child_by_field_name("name")
    return node_text(name) if name is not None else None


def attribute_parts(attr: Any) -> tuple[Any, Any | None]:
    """Split a jsx_attribute into its (name, value) nodes."""
    named = attr.named_children
    name = named[0] if named else None
    value = named[1] if len(named) > 1 else None
    return name, value


def string_literal_value(node: Any) -> str:
    """Contents of a quoted JSX string, without the quotes."""
    return node_text(node)[1:-1]


def is_string_ref_attribute(node: Any) -> bool:
    """Match `ref="name"`: attribute named ref with a quoted literal value."""
    if node.type != "jsx_attribute":
        return False
    name, value = attribute_parts(node)
    if name is None or name.type != "property_identifier" or node_text(name) != "ref":
        return False
    return value is not None and value.type == "string"


def _is_plain_member(node: Any) -> bool:
    return (
        node.type == "member_expression"
        and not any(child.type in ("optional_chain", "?.") for child in node.children)
        and node.child_by_field_name("property").type == "property_identifier"
    )


def unwrap_parens(node: Any) -> Any:
    """Skip parenthesized_expression wrappers: `((this.refs))` -> `this.refs`."""
    while node.type == "parenthesized_expression" and node.named_child_count == 1:
        node = node.named_children[0]
    return node


def is_refs_access(node: Any, name: str) -> bool:
    """Match the expression `this.refs.<name>`, parentheses allowed around the parts."""
    if not _is_plain_member(node):
        return False
    if node_text(node.child_by_field_name("property")) != name:
        return False

    inner = unwrap_parens(node.child_by_field_name("object"))
    if not _is_plain_member(inner):
        return False
    return (
        unwrap_parens(inner.child_by_field_name("object")).type == "this"
        and node_text(inner.child_by_field_name("property")) == "refs"
    )
