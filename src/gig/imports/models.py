"""Data model for import organization.

An :class:`ImportSpec` describes one import of a Go source file. The
organizer assigns each spec a :class:`Group`; groups are emitted in the order
given by :attr:`Group.rank`:

1. Standard library
2. Third-party packages
3. Organization packages, one group per configured prefix
4. Current project packages
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class GroupKind(Enum):
    """Kinds of import groups."""

    STANDARD = "standard"
    THIRD_PARTY = "third_party"
    ORGANIZATION = "organization"
    PROJECT = "project"


# Organization groups sort between third-party and project imports.
_KIND_ORDER = {
    GroupKind.STANDARD: 0,
    GroupKind.THIRD_PARTY: 1,
    GroupKind.ORGANIZATION: 2,
    GroupKind.PROJECT: 3,
}


@dataclass(frozen=True)
class Group:
    """An import group.

    Attributes
    ----------
    kind : GroupKind
        The kind of group.
    index : int
        Position of the matching organization prefix in the configured
        prefix list. Always 0 for non-organization groups.
    """

    kind: GroupKind
    index: int = 0

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Group index must be non-negative, got {self.index}")
        if self.kind is not GroupKind.ORGANIZATION and self.index != 0:
            raise ValueError(f"Only organization groups carry an index, got {self.kind.value}")

    @classmethod
    def standard(cls) -> Group:
        return cls(GroupKind.STANDARD)

    @classmethod
    def third_party(cls) -> Group:
        return cls(GroupKind.THIRD_PARTY)

    @classmethod
    def project(cls) -> Group:
        return cls(GroupKind.PROJECT)

    @classmethod
    def organization(cls, index: int) -> Group:
        return cls(GroupKind.ORGANIZATION, index)

    @property
    def is_organization(self) -> bool:
        return self.kind is GroupKind.ORGANIZATION

    @property
    def rank(self) -> tuple[int, int]:
        """Sort key giving Standard < ThirdParty < Organization(0) < ... < Project."""
        return (_KIND_ORDER[self.kind], self.index)

    def __str__(self) -> str:
        if self.is_organization:
            return f"organization[{self.index}]"
        return self.kind.value


@dataclass(frozen=True)
class ImportSpec:
    """A single import of a Go source file.

    Attributes
    ----------
    path : str
        The package path without quotes, e.g. ``"net/http"``.
    alias : str
        The import name, ``""`` when the import is not renamed. ``"_"`` and
        ``"."`` are kept as written.
    comment : str
        Text of the trailing comment without comment markers, ``""`` if none.
    group : Group | None
        The assigned group, ``None`` until the import is classified.
    org_index : int
        Index of the matching organization prefix, -1 for other groups.
    sub_project : str
        Path segment following the organization prefix, ``""`` for other
        groups or when the path is the organization root itself.
    """

    path: str
    alias: str = ""
    comment: str = ""
    group: Group | None = None
    org_index: int = -1
    sub_project: str = ""

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Import path must not be empty")

    @property
    def is_classified(self) -> bool:
        return self.group is not None

    def classified(self, group: Group, org_index: int = -1, sub_project: str = "") -> ImportSpec:
        """Return a copy of this spec with its group assigned.

        Raises
        ------
        ValueError
            If the import already has a group, or the organization details do
            not agree with ``group``.
        """
        if self.group is not None:
            raise ValueError(f"Import {self.path!r} is already classified as {self.group}")
        if group.is_organization:
            if org_index != group.index:
                raise ValueError(
                    f"Organization index {org_index} does not match group {group} for {self.path!r}"
                )
        elif org_index != -1 or sub_project:
            raise ValueError(f"Only organization imports carry organization details: {self.path!r}")
        return replace(self, group=group, org_index=org_index, sub_project=sub_project)


GroupedImports = dict[Group, list[ImportSpec]]
