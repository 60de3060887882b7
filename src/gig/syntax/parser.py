"""Parse Go source into a :class:`~gig.syntax.tree.SourceTree` using tree-sitter."""
from __future__ import annotations

from functools import lru_cache

import tree_sitter
from tree_sitter_go import language

from gig.errors import SourceParseError
from gig.imports.models import ImportSpec
from gig.syntax.tree import ImportDeclaration, Node, SourceTree, TopLevelNode


@lru_cache(maxsize=1)
def _go_language() -> tree_sitter.Language:
    return tree_sitter.Language(language())


def _row(point) -> int:
    return point[0]


def _text(source: bytes, node) -> str:
    return source[node.start_byte:node.end_byte].decode("utf-8")


def comment_text(raw: str) -> str:
    """Strip comment markers and surrounding whitespace from a comment.

    >>> comment_text("// indirect")
    'indirect'
    >>> comment_text("/* legacy */")
    'legacy'
    """
    if raw.startswith("//"):
        text = raw[2:]
    elif raw.startswith("/*"):
        text = raw[2:-2] if raw.endswith("*/") else raw[2:]
    else:
        text = raw
    if "\n" in text:
        # Re-emitted as a single line comment.
        return " ".join(text.split())
    return text.strip()


def _find_error(node):
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _find_error(child)
            if found is not None:
                return found
    return None


def _import_path(source: bytes, path_node) -> str:
    raw = _text(source, path_node)
    if path_node.type == "raw_string_literal":
        return raw.strip("`")
    return raw.strip('"')


def _build_spec(source: bytes, spec_node, comments: list[str]) -> ImportSpec:
    path_node = spec_node.child_by_field_name("path")
    path = _import_path(source, path_node) if path_node is not None else ""
    if not path:
        line = _row(spec_node.start_point) + 1
        raise SourceParseError(f"empty import path on line {line}")

    name_node = spec_node.child_by_field_name("name")
    alias = _text(source, name_node) if name_node is not None else ""
    comment = " ".join(text for text in comments if text)
    return ImportSpec(path=path, alias=alias, comment=comment)


def _collect_specs(source: bytes, container, entries: list) -> None:
    """Collect the import specs below a declaration with the comments on their lines.

    A comment belongs to an import when it ends the import's line, or when it
    starts that line before the import (``/* keep */ "os"``).
    """
    leading: list[tuple[int, str]] = []
    for child in container.named_children:
        if child.type == "import_spec_list":
            _collect_specs(source, child, entries)
        elif child.type == "import_spec":
            row = _row(child.start_point)
            comments = [text for end_row, text in leading if end_row == row]
            leading.clear()
            comments.extend(
                comment_text(_text(source, part))
                for part in child.named_children
                if part.type == "comment"
            )
            entries.append((child, comments))
        elif child.type == "comment":
            text = comment_text(_text(source, child))
            if entries and _row(child.start_point) == _row(entries[-1][0].end_point):
                entries[-1][1].append(text)
            else:
                leading.append((_row(child.end_point), text))
        # Comments on their own lines inside the list are not kept.


def parse_source(source: bytes) -> SourceTree:
    """Parse Go source text.

    Parameters
    ----------
    source : bytes
        Content of a Go file.

    Returns
    -------
    SourceTree
        The top-level structure of the file.

    Raises
    ------
    SourceParseError
        If the source has syntax errors, or has imports but no package clause.
    """
    parser = tree_sitter.Parser(_go_language())
    tree = parser.parse(source)
    root = tree.root_node

    if root.has_error:
        error = _find_error(root) or root
        line = _row(error.start_point) + 1
        column = error.start_point[1] + 1
        raise SourceParseError(f"syntax error at line {line}, column {column}")

    try:
        return _build_tree(source, root)
    except UnicodeDecodeError as e:
        raise SourceParseError(f"invalid UTF-8 text: {e.reason}") from e


def _build_tree(source: bytes, root) -> SourceTree:
    children = root.children
    package_index = next(
        (i for i, child in enumerate(children) if child.type == "package_clause"),
        None,
    )

    package_name = ""
    package_end = 0
    position = 0
    if package_index is not None:
        package_node = children[package_index]
        for child in package_node.named_children:
            if child.type == "package_identifier":
                package_name = _text(source, child)
        package_end = package_node.end_byte
        position = package_index + 1
        # A comment on the package line stays with the header.
        while (
            position < len(children)
            and children[position].type == "comment"
            and _row(children[position].start_point) == _row(package_node.end_point)
        ):
            package_end = children[position].end_byte
            position += 1

    nodes: list[Node] = []
    lead = package_end
    while position < len(children):
        child = children[position]
        position += 1
        if not child.is_named:
            if child.type == ";" and nodes and isinstance(nodes[-1], ImportDeclaration):
                last = nodes[-1]
                nodes[-1] = ImportDeclaration(last.lead, last.start, child.end_byte, last.specs)
                lead = child.end_byte
            continue

        if child.type != "import_declaration":
            nodes.append(TopLevelNode(child.type, lead, child.start_byte, child.end_byte))
            lead = child.end_byte
            continue

        end = child.end_byte
        entries: list[tuple[object, list[str]]] = []
        _collect_specs(source, child, entries)
        parenthesized = any(part.type == "import_spec_list" for part in child.named_children)
        if entries and not parenthesized:
            # import "x" // comment
            while (
                position < len(children)
                and children[position].type == "comment"
                and _row(children[position].start_point) == _row(child.end_point)
            ):
                entries[-1][1].append(comment_text(_text(source, children[position])))
                end = children[position].end_byte
                position += 1

        specs = tuple(_build_spec(source, node, comments) for node, comments in entries)
        nodes.append(ImportDeclaration(lead, child.start_byte, end, specs))
        lead = end

    if package_index is None and any(isinstance(node, ImportDeclaration) for node in nodes):
        raise SourceParseError("missing package clause")

    return SourceTree(
        source=source,
        package_name=package_name,
        package_end=package_end,
        nodes=tuple(nodes),
        tail_start=lead,
    )


def count_imports(tree: SourceTree) -> int:
    """Count the import specs in a tree, duplicates included."""
    return sum(len(decl.specs) for decl in tree.import_declarations)
