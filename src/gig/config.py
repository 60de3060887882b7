"""Formatter configuration.

Settings can come from a TOML file and from command line flags; flags win.
A configuration file looks like::

    orgs = ["github.com/myorg", "github.com/acme-corp"]
    current_project = "github.com/myorg/tool"
    in_place = false

The same keys may also live under a ``[gig]`` table.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping

from gig.errors import ConfigError
from gig.project.module import MAX_PARENT_DEPTH, get_project_module

# Python 3.11+ has tomllib built-in
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

DEFAULT_CONFIG_NAME = ".gig.toml"
CONFIG_TABLE = "gig"
CONFIG_KEYS = {"orgs", "current_project", "in_place"}


def split_prefixes(values: Iterable[str]) -> tuple[str, ...]:
    """Split comma separated prefixes, dropping empty items.

    >>> split_prefixes(["github.com/a,github.com/b", "gitlab.com/c"])
    ('github.com/a', 'github.com/b', 'gitlab.com/c')
    """
    prefixes: list[str] = []
    for value in values:
        prefixes.extend(item.strip() for item in value.split(",") if item.strip())
    return tuple(prefixes)


@dataclass(frozen=True)
class FormatterConfig:
    """Settings for organizing the imports of a file.

    The configuration is passed explicitly to every operation; the path of
    the file being processed is never part of it.

    Attributes
    ----------
    org_prefixes : tuple[str, ...]
        Organization prefixes in group order.
    current_project : str
        Module path of the current project. When empty it is detected per
        file from the nearest ``go.mod``.
    in_place : bool
        Whether files are rewritten on disk.
    """

    org_prefixes: tuple[str, ...] = field(default_factory=tuple)
    current_project: str = ""
    in_place: bool = False

    def __post_init__(self) -> None:
        # Accept any sequence, store a tuple
        object.__setattr__(self, "org_prefixes", tuple(self.org_prefixes))

    def project_prefix_for(self, file_path: str | Path | None) -> str:
        """Return the project module path to use for ``file_path``."""
        if self.current_project:
            return self.current_project
        if file_path is None:
            return ""
        return get_project_module(file_path)

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        *,
        org_prefixes: Iterable[str] | None = None,
        current_project: str | None = None,
        in_place: bool | None = None,
    ) -> FormatterConfig:
        """Build a configuration from file values and overrides.

        Overrides that are ``None`` leave the file value in place.
        """
        orgs = split_prefixes(data.get("orgs", ()))
        if org_prefixes is not None:
            orgs = split_prefixes(org_prefixes)
        return cls(
            org_prefixes=orgs,
            current_project=current_project if current_project is not None
            else data.get("current_project", ""),
            in_place=in_place if in_place is not None else data.get("in_place", False),
        )


def _validate(data: Mapping[str, Any], path: Path) -> dict[str, Any]:
    unknown = set(data) - CONFIG_KEYS
    if unknown:
        raise ConfigError(f"unknown keys {', '.join(sorted(unknown))}", path=path)

    orgs = data.get("orgs", [])
    if isinstance(orgs, str):
        orgs = [orgs]
    if not isinstance(orgs, list) or not all(isinstance(org, str) for org in orgs):
        raise ConfigError("'orgs' must be a list of strings", path=path)

    current_project = data.get("current_project", "")
    if not isinstance(current_project, str):
        raise ConfigError("'current_project' must be a string", path=path)

    in_place = data.get("in_place", False)
    if not isinstance(in_place, bool):
        raise ConfigError("'in_place' must be a boolean", path=path)

    return {"orgs": orgs, "current_project": current_project, "in_place": in_place}


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Read and validate a TOML configuration file.

    Parameters
    ----------
    path : str | Path
        Path to the file.

    Returns
    -------
    dict[str, Any]
        Validated values for ``orgs``, ``current_project`` and ``in_place``.

    Raises
    ------
    ConfigError
        If the file cannot be read, is not valid TOML, or holds invalid
        values.
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(e, path=path) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(e, path=path) from e

    if CONFIG_TABLE in data:
        table = data[CONFIG_TABLE]
        if not isinstance(table, dict):
            raise ConfigError(f"[{CONFIG_TABLE}] must be a table", path=path)
        data = table
    return _validate(data, path)


def find_config_file(start: str | Path) -> Path | None:
    """Find :data:`DEFAULT_CONFIG_NAME` in ``start`` or one of its parents."""
    directory = Path(start).absolute()
    if not directory.is_dir():
        directory = directory.parent
    for depth, candidate in enumerate((directory, *directory.parents)):
        if depth >= MAX_PARENT_DEPTH:
            break
        config = candidate / DEFAULT_CONFIG_NAME
        if config.is_file():
            return config
    return None
