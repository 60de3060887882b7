"""Print a :class:`~gig.syntax.tree.SourceTree` back to Go source."""
from __future__ import annotations

from gig.errors import GigError, SourcePrintError
from gig.imports.emitter import render_import_block
from gig.syntax.parser import parse_source
from gig.syntax.tree import ImportBlock, ImportDeclaration, SourceTree

_WHITESPACE = b" \t\r\n"


def _render_body(tree: SourceTree) -> bytes:
    chunks = []
    for node in tree.nodes:
        if isinstance(node, (ImportBlock, ImportDeclaration)):
            continue
        chunks.append(tree.text_of(node, with_lead=True))
    chunks.append(tree.tail)
    return b"".join(chunks).lstrip(_WHITESPACE)


def render_source(tree: SourceTree) -> bytes:
    """Render a tree without validating the result.

    The layout of a rebuilt tree is the header through the package clause, a
    blank line, the import block, and then the remaining top-level nodes
    after one blank line. Each retained node keeps the whitespace that
    preceded it in the original file, except the first one.
    """
    block = tree.import_block
    if not tree.rebuilt or block is None:
        return tree.source

    output = tree.header.rstrip(_WHITESPACE)
    if output:
        output += b"\n\n"
    output += render_import_block(block).encode("utf-8") + b"\n"

    body = _render_body(tree)
    if body:
        output += b"\n" + body
    return output


def print_source(tree: SourceTree) -> bytes:
    """Render a tree and check that the result is still valid Go.

    Raises
    ------
    SourcePrintError
        If the rendered source does not parse.
    """
    output = render_source(tree)
    if output is tree.source:
        return output
    try:
        parse_source(output)
    except GigError as e:
        raise SourcePrintError(e.cause or e.message) from e
    return output


def print_imports_only(tree: SourceTree) -> bytes:
    """Render only the package clause and the import block.

    Used to preview the organized imports of a file.
    """
    lines = [f"package {tree.package_name}", ""]
    block = tree.import_block
    if block is not None:
        lines.append(render_import_block(block))
    else:
        for decl in tree.import_declarations:
            lines.append(tree.text_of(decl).decode("utf-8"))
    return ("\n".join(lines) + "\n").encode("utf-8")
