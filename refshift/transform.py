"""Migrate React string refs to createRef() object refs.

    class Form extends React.Component {        class Form extends React.Component {
      focus() {                                   inputRef = React.createRef();
        this.refs.input.focus();         ->       focus() {
      }                                             this.inputRef.current.focus();
      render() {                                  }
        return <input ref="input" />;             render() {
      }                                             return <input ref={this.inputRef} />;
    }                                             }
                                                }

Only `this.refs.<name>` usages are rewritten. Other reads of `this.refs`
(destructuring, computed keys) are left for manual cleanup.
"""

from dataclasses import dataclass, field

from refshift import builders
from refshift.parser import detect_dialect, parse
from refshift.printer import EditSet
from refshift.query import (
    attribute_parts,
    class_name,
    find_all,
    find_enclosing_class,
    is_refs_access,
    is_string_ref_attribute,
    string_literal_value,
)
from refshift.utils.logging import logger

DEFAULT_FACTORY = "React.createRef"
REF_SUFFIX = "Ref"


@dataclass
class RefRewrite:
    """One migrated `ref="name"` definition."""

    old_name: str
    new_name: str
    class_name: str | None
    line: int
    usages: int = 0


@dataclass
class TransformResult:
    path: str
    source: str
    output: str
    rewrites: list[RefRewrite] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.output != self.source


def new_ref_name(old_name: str) -> str:
    return f"{old_name}{REF_SUFFIX}"


def transform(
    source: str,
    path: str = "<unknown>",
    dialect: str | None = None,
    factory: str = DEFAULT_FACTORY,
) -> TransformResult:
    """Run the string-ref migration over one file's source.

    Raises ParseError for unparseable input. Definitions outside any class
    are skipped with a warning and leave the source untouched.
    """
    data = source.encode("utf-8")
    tree = parse(data, dialect or detect_dialect(path), path=path)
    root = tree.root_node

    definitions = find_all(root, "jsx_attribute", is_string_ref_attribute)
    logger.debug("{} string ref(s) found in {}", len(definitions), path)

    result = TransformResult(path=path, source=source, output=source)
    if not definitions:
        return result

    edits = EditSet()
    bodies_prepended: set[int] = set()

    for attr in definitions:
        _, value = attribute_parts(attr)
        old_name = string_literal_value(value)
        new_name = new_ref_name(old_name)

        clazz = find_enclosing_class(attr)
        if clazz is None:
            logger.warning("Cannot fix ref {} in {}", old_name, path)
            result.skipped.append(old_name)
            continue

        body = clazz.child_by_field_name("body")
        edits.insert(
            body.start_byte + 1,
            builders.prepended_member(
                data,
                clazz,
                body,
                builders.class_property(new_name, factory),
                first=body.id not in bodies_prepended,
            ),
        )
        bodies_prepended.add(body.id)

        edits.replace(attr, builders.ref_attribute(new_name))

        # Usages anywhere in the file, not only inside this class
        usages = [
            node
            for node in find_all(root, "member_expression", lambda n: is_refs_access(n, old_name))
            if not edits.covers(node)
        ]
        for usage in usages:
            edits.replace(usage, builders.current_access(new_name))

        rewrite = RefRewrite(
            old_name=old_name,
            new_name=new_name,
            class_name=class_name(clazz),
            line=attr.start_point[0] + 1,
            usages=len(usages),
        )
        result.rewrites.append(rewrite)
        logger.debug(
            "{}:{} ref {} -> {} ({} usage(s))",
            path,
            rewrite.line,
            old_name,
            new_name,
            rewrite.usages,
        )

    result.output = edits.apply(data).decode("utf-8")
    return result


def transform_source(
    source: str,
    path: str = "<unknown>",
    dialect: str | None = None,
    factory: str = DEFAULT_FACTORY,
) -> str:
    """Runner-facing entry point: source text in, rewritten source text out."""
    return transform(source, path=path, dialect=dialect, factory=factory).output
