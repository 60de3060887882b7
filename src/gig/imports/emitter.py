"""Re-emission of organized imports.

:func:`rebuild_imports` replaces the import declarations of a
:class:`~gig.syntax.tree.SourceTree` with one synthesized block, and
:func:`render_import_block` serializes that block with a blank line at every
group boundary and between sub-projects of an organization.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from gig.imports.models import Group, GroupedImports, ImportSpec
from gig.syntax.tree import ImportBlock, ImportDeclaration, SourceTree


def emission_order(grouped: GroupedImports, org_count: int) -> list[Group]:
    """Return the groups present in ``grouped`` in the order they are emitted."""
    order = [Group.standard(), Group.third_party()]
    order.extend(Group.organization(i) for i in range(org_count))
    order.append(Group.project())
    return [group for group in order if grouped.get(group)]


def rebuild_imports(tree: SourceTree, grouped: GroupedImports, org_count: int) -> SourceTree:
    """Return a new tree whose imports are replaced by one organized block.

    Parameters
    ----------
    tree : SourceTree
        The parsed file. It is not modified.
    grouped : GroupedImports
        Classified and sorted imports keyed by group.
    org_count : int
        Number of configured organization prefixes.

    Returns
    -------
    SourceTree
        A tree holding the other top-level nodes in their original order,
        preceded by the synthesized :class:`ImportBlock`. When ``grouped``
        is empty the tree is returned unchanged.
    """
    specs: list[ImportSpec] = []
    for group in emission_order(grouped, org_count):
        specs.extend(grouped[group])
    if not specs:
        return tree

    retained = tuple(node for node in tree.nodes if not isinstance(node, ImportDeclaration))
    return replace(tree, nodes=(ImportBlock(tuple(specs)), *retained), rebuilt=True)


def format_import_spec(spec: ImportSpec) -> str:
    """Format one import entry as ``[alias ]"path"[ // comment]``."""
    parts = []
    if spec.alias:
        parts.append(spec.alias)
    parts.append(f'"{spec.path}"')
    comment = spec.comment.strip()
    if comment:
        parts.append(f"// {comment}")
    return " ".join(parts)


def needs_blank_line(previous: ImportSpec, current: ImportSpec) -> bool:
    """Check whether a blank line separates two adjacent entries.

    Entries of different groups are always separated. Within an organization
    group, entries are separated when both have a sub-project and the
    sub-projects differ; an import of the organization root never starts a
    new cluster.
    """
    if previous.group != current.group:
        return True
    if current.group is not None and current.group.is_organization:
        return bool(
            previous.sub_project
            and current.sub_project
            and previous.sub_project != current.sub_project
        )
    return False


def render_import_lines(specs: Sequence[ImportSpec]) -> list[str]:
    """Render entries as tab-indented lines with separator blank lines."""
    lines: list[str] = []
    for i, spec in enumerate(specs):
        if i > 0 and needs_blank_line(specs[i - 1], spec):
            lines.append("")
        lines.append("\t" + format_import_spec(spec))
    return lines


def render_import_block(block: ImportBlock) -> str:
    """Render a synthesized import declaration, without a trailing newline."""
    return "\n".join(["import (", *render_import_lines(block.specs), ")"])
