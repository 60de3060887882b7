"""Import organization for Go files.

Organizes imports into groups separated by blank lines:
1. Standard library imports
2. Third-party imports
3. Organization imports, one group per configured prefix, split further by
   sub-project
4. Current project imports
"""
from __future__ import annotations

from typing import Iterable, Sequence

from gig.imports.classifier import classify_import, get_org_info
from gig.imports.emitter import emission_order, rebuild_imports
from gig.imports.models import Group, GroupedImports, ImportSpec
from gig.syntax.tree import SourceTree


class ImportOrganizer:
    """Classify, sort and regroup the imports of a parsed Go file.

    The organizer holds no per-file state; one instance can organize any
    number of files that share the same settings.

    Parameters
    ----------
    org_prefixes : Sequence[str]
        Organization prefixes. Their order defines the order of the
        organization groups.
    project_prefix : str
        Module path of the current project, ``""`` when unknown. Without it
        no import is classified as a project import.
    """

    def __init__(self, org_prefixes: Sequence[str] = (), project_prefix: str = "") -> None:
        self.org_prefixes = tuple(org_prefixes)
        self.project_prefix = project_prefix

    def extract_imports(self, tree: SourceTree) -> list[ImportSpec]:
        """Collect the imports of a tree, keeping the first occurrence of each path."""
        imports: list[ImportSpec] = []
        seen: set[str] = set()
        for decl in tree.import_declarations:
            for spec in decl.specs:
                if spec.path in seen:
                    continue
                seen.add(spec.path)
                imports.append(spec)
        return imports

    def classify(self, spec: ImportSpec) -> ImportSpec:
        """Return ``spec`` with its group and organization details assigned."""
        group = classify_import(spec.path, self.project_prefix, self.org_prefixes)
        if group.is_organization:
            org_index, sub_project = get_org_info(spec.path, self.org_prefixes)
            return spec.classified(group, org_index, sub_project)
        return spec.classified(group)

    def sort_imports(self, imports: list[ImportSpec], group: Group) -> None:
        """Sort the imports of one group in place.

        Organization imports sort by sub-project first, so every sub-project
        stays contiguous, and by path second. Other groups sort by path.
        """
        if group.is_organization:
            imports.sort(key=lambda imp: (imp.sub_project, imp.path))
        else:
            imports.sort(key=lambda imp: imp.path)

    def group_imports(self, imports: Iterable[ImportSpec]) -> GroupedImports:
        """Classify imports and bucket them by group, each bucket sorted."""
        grouped: GroupedImports = {}
        for spec in imports:
            classified = self.classify(spec)
            grouped.setdefault(classified.group, []).append(classified)

        for group, members in grouped.items():
            self.sort_imports(members, group)
        return grouped

    def ordered_groups(self, grouped: GroupedImports) -> list[Group]:
        """Return the non-empty groups in emission order."""
        return emission_order(grouped, len(self.org_prefixes))

    def organize(self, tree: SourceTree) -> SourceTree:
        """Return a new tree with the imports of ``tree`` organized.

        Trees without imports are returned unchanged.
        """
        imports = self.extract_imports(tree)
        if not imports:
            return tree
        grouped = self.group_imports(imports)
        return rebuild_imports(tree, grouped, len(self.org_prefixes))
