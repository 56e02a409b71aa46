"""Tree-sitter parsing for JavaScript/TypeScript sources with JSX."""

from functools import lru_cache
from pathlib import Path

from tree_sitter_language_pack import get_parser

SUPPORTED_DIALECTS = ("javascript", "typescript", "tsx")

# Plain .ts cannot hold JSX; every other script flavour goes through the tsx
# grammar, which accepts both type annotations and JSX.
_TYPESCRIPT_SUFFIXES = {".ts", ".mts", ".cts"}
DEFAULT_DIALECT = "tsx"


class ParseError(ValueError):
    """Raised when source text does not parse cleanly in the chosen dialect."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column


def detect_dialect(path: str | Path | None) -> str:
    """Pick a grammar for a file from its extension."""
    if path is None:
        return DEFAULT_DIALECT
    if Path(str(path)).suffix.lower() in _TYPESCRIPT_SUFFIXES:
        return "typescript"
    return DEFAULT_DIALECT


@lru_cache(maxsize=None)
def _parser_for(dialect: str):
    if dialect not in SUPPORTED_DIALECTS:
        raise ValueError(
            f"Unsupported dialect '{dialect}'. Choose one of: {', '.join(SUPPORTED_DIALECTS)}"
        )
    try:
        return get_parser(dialect)
    except Exception as e:
        raise RuntimeError(
            f"Failed to load tree-sitter grammar for {dialect}: {e}\n"
            "Please try: pip install --force-reinstall tree-sitter-language-pack"
        ) from e


def _first_error(node):
    """Return the first ERROR or MISSING node in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            return current
        if current.has_error:
            stack.extend(reversed(current.children))
    return None


def parse(source: str | bytes, dialect: str = DEFAULT_DIALECT, path: str = "<unknown>"):
    """Parse source text into a tree-sitter Tree.

    Raises:
        ValueError: dialect is not one of SUPPORTED_DIALECTS
        ParseError: the tree contains syntax errors
    """
    parser = _parser_for(dialect)
    data = source.encode("utf-8") if isinstance(source, str) else source
    tree = parser.parse(data)

    if tree.root_node.has_error:
        bad = _first_error(tree.root_node) or tree.root_node
        line, column = bad.start_point[0] + 1, bad.start_point[1] + 1
        raise ParseError(
            f"Syntax error in {path} at line {line}, column {column} ({dialect})",
            line=line,
            column=column,
        )

    return tree
