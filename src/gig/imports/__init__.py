"""Import classification, grouping and re-emission.

Provides:
- Standard library detection
- Classification into standard, third-party, organization and project groups
- Sorting within groups and organization sub-projects
- Rebuilding and rendering of the organized import block
"""
from __future__ import annotations

from gig.imports.classifier import classify_import, get_org_info, has_path_prefix
from gig.imports.emitter import (
    format_import_spec,
    needs_blank_line,
    rebuild_imports,
    render_import_block,
)
from gig.imports.models import Group, GroupedImports, GroupKind, ImportSpec
from gig.imports.organizer import ImportOrganizer
from gig.imports.stdlib import STANDARD_PACKAGES, is_standard_package

__all__ = [
    "Group",
    "GroupKind",
    "GroupedImports",
    "ImportSpec",
    "ImportOrganizer",
    "STANDARD_PACKAGES",
    "classify_import",
    "format_import_spec",
    "get_org_info",
    "has_path_prefix",
    "is_standard_package",
    "needs_blank_line",
    "rebuild_imports",
    "render_import_block",
]
