"""Project discovery: module detection and Go file discovery."""
from __future__ import annotations

from gig.project.files import find_go_files, is_directory, is_go_file, write_atomic
from gig.project.module import get_project_module, read_module_path

__all__ = [
    "find_go_files",
    "get_project_module",
    "is_directory",
    "is_go_file",
    "read_module_path",
    "write_atomic",
]
