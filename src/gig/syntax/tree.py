"""Immutable view of the top level of a Go source file.

Only the parts needed to rewrite the import block are modelled. Every node
records byte offsets into the original source, so retained declarations are
printed from their original bytes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from gig.imports.models import ImportSpec


@dataclass(frozen=True)
class TopLevelNode:
    """A top-level declaration, statement or comment kept verbatim.

    Attributes
    ----------
    kind : str
        Grammar node type, e.g. ``"function_declaration"`` or ``"comment"``.
    lead : int
        Offset where the gap before the node starts (the end of the previous
        top-level node).
    start : int
        Offset of the first byte of the node.
    end : int
        Offset just past the node.
    """

    kind: str
    lead: int
    start: int
    end: int


@dataclass(frozen=True)
class ImportDeclaration:
    """An ``import`` declaration found in the source."""

    lead: int
    start: int
    end: int
    specs: tuple[ImportSpec, ...] = ()
    kind: str = field(default="import_declaration", init=False)


@dataclass(frozen=True)
class ImportBlock:
    """A synthesized import declaration holding organized imports."""

    specs: tuple[ImportSpec, ...]
    kind: str = field(default="import_block", init=False)


Node = Union[TopLevelNode, ImportDeclaration, ImportBlock]


@dataclass(frozen=True)
class SourceTree:
    """Top-level structure of a parsed Go file.

    Attributes
    ----------
    source : bytes
        The original file content.
    package_name : str
        Name from the package clause, ``""`` if the file has none.
    package_end : int
        Offset just past the package clause (and any comment on the same
        line). Everything before it is the file header.
    nodes : tuple[Node, ...]
        Top-level nodes following the package clause, in order.
    tail_start : int
        Offset where the trailing text after the last node starts.
    rebuilt : bool
        True once the import block was regenerated. Untouched trees print
        their original bytes.
    """

    source: bytes
    package_name: str
    package_end: int
    nodes: tuple[Node, ...]
    tail_start: int
    rebuilt: bool = False

    @property
    def import_declarations(self) -> list[ImportDeclaration]:
        return [node for node in self.nodes if isinstance(node, ImportDeclaration)]

    @property
    def import_block(self) -> ImportBlock | None:
        for node in self.nodes:
            if isinstance(node, ImportBlock):
                return node
        return None

    @property
    def header(self) -> bytes:
        return self.source[:self.package_end]

    @property
    def tail(self) -> bytes:
        return self.source[self.tail_start:]

    def text_of(self, node: TopLevelNode | ImportDeclaration, with_lead: bool = False) -> bytes:
        """Return the source bytes of a node, optionally with its leading gap."""
        begin = node.lead if with_lead else node.start
        return self.source[begin:node.end]
