"""Import classification.

Maps an import path to its :class:`~gig.imports.models.Group`. The checks run
in a fixed order because prefixes can overlap (a project usually lives under
one of the organization prefixes):

1. Standard library
2. Current project
3. Organization prefixes, in configured order
4. Third-party (everything else)
"""
from __future__ import annotations

from typing import Sequence

from gig.imports.models import Group
from gig.imports.stdlib import is_standard_package

PATH_SEPARATOR = "/"


def has_path_prefix(import_path: str, prefix: str) -> bool:
    """Check whether ``prefix`` is a whole-segment prefix of ``import_path``.

    ``github.com/acme/tool`` is a prefix of ``github.com/acme/tool/cmd`` but
    not of ``github.com/acme/toolbox``. An empty prefix never matches.
    """
    if not prefix:
        return False
    prefix = prefix.rstrip(PATH_SEPARATOR)
    if not prefix:
        return False
    return import_path == prefix or import_path.startswith(prefix + PATH_SEPARATOR)


def classify_import(
    import_path: str,
    project_prefix: str,
    org_prefixes: Sequence[str],
) -> Group:
    """Determine which group an import belongs to.

    Parameters
    ----------
    import_path : str
        The package path being imported.
    project_prefix : str
        Module path of the current project, ``""`` when unknown.
    org_prefixes : Sequence[str]
        Organization prefixes. The first matching prefix wins.

    Returns
    -------
    Group
        The group of the import. Paths matching nothing are third-party.
    """
    if is_standard_package(import_path):
        return Group.standard()

    if has_path_prefix(import_path, project_prefix):
        return Group.project()

    for index, org in enumerate(org_prefixes):
        if org and import_path.startswith(org):
            return Group.organization(index)

    return Group.third_party()


def get_org_info(import_path: str, org_prefixes: Sequence[str]) -> tuple[int, str]:
    """Return the organization index and sub-project name of an import.

    The sub-project is the path segment following the organization prefix.

    Examples
    --------
    >>> get_org_info("github.com/myorg/tool/cmd", ["github.com/myorg"])
    (0, 'tool')
    >>> get_org_info("github.com/myorg", ["github.com/myorg"])
    (0, '')
    >>> get_org_info("github.com/other/lib", ["github.com/myorg"])
    (-1, '')
    """
    for index, org in enumerate(org_prefixes):
        if org and import_path.startswith(org):
            remaining = import_path[len(org):]
            if remaining.startswith(PATH_SEPARATOR):
                remaining = remaining[1:]
            return index, remaining.split(PATH_SEPARATOR)[0]
    return -1, ""
