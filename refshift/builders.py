"""Source builders for the nodes the ref migration introduces."""

from typing import Any


def class_property(name: str, factory: str) -> str:
    """`fooRef = React.createRef();`"""
    return f"{name} = {factory}();"


def this_member(name: str) -> str:
    return f"this.{name}"


def ref_attribute(field: str) -> str:
    """`ref={this.fooRef}`"""
    return f"ref={{{this_member(field)}}}"


def current_access(field: str) -> str:
    """`this.fooRef.current`"""
    return f"{this_member(field)}.current"


def line_indent(source: bytes, offset: int) -> str:
    """Leading whitespace of the line containing offset."""
    start = source.rfind(b"\n", 0, offset) + 1
    end = start
    while end < len(source) and source[end : end + 1] in (b" ", b"\t"):
        end += 1
    return source[start:end].decode("utf-8")


def newline_style(source: bytes) -> str:
    """Line terminator to use for inserted lines: CRLF if the file has any, else LF."""
    return "\r\n" if source.find(b"\r\n") != -1 else "\n"


def member_indent(source: bytes, class_node: Any, body: Any) -> str:
    """Indentation for a member prepended to a class body."""
    members = body.named_children
    if members and members[0].start_point[0] > body.start_point[0]:
        return line_indent(source, members[0].start_byte)
    return line_indent(source, class_node.start_byte) + "  "


def prepended_member(source: bytes, class_node: Any, body: Any, text: str, first: bool) -> str:
    """Text inserted right after the opening brace of a class body.

    Only the first insertion into an empty body closes the line before `}`;
    later prepends land in front of it.
    """
    newline = newline_style(source)
    inserted = newline + member_indent(source, class_node, body) + text
    if first and not body.named_children:
        inserted += newline + line_indent(source, class_node.start_byte)
    return inserted
