"""
gig - Go imports grouper.

Groups and sorts the imports of Go source files. Imports are organized into
blank-line separated groups, in this order:

1. Go standard library
2. Third-party packages
3. Organization packages, one group per configured prefix, split further by
   project (the path segment after the prefix)
4. Current project packages

Only the import block is rewritten; every other declaration keeps its exact
source text.

Example
-------
>>> from gig import FormatterConfig, format_source
>>>
>>> config = FormatterConfig(
...     org_prefixes=("github.com/myorg",),
...     current_project="github.com/myorg/tool",
... )
>>> source = b'package main\\n\\nimport "github.com/myorg/lib"\\nimport "fmt"\\n'
>>> print(format_source(source, config).decode())
package main
<BLANKLINE>
import (
	"fmt"
<BLANKLINE>
	"github.com/myorg/lib"
)
<BLANKLINE>

Functions
---------
format_source
    Organize the imports of Go source text.

process_file
    Organize the imports of one file and return a Result.

process_batch
    Process several files; one failure never stops the batch.

process_path
    Process a file or every Go file below a directory.

Classes
-------
FormatterConfig
    Organization prefixes, current project and in-place mode.

ImportOrganizer
    Classification, sorting and regrouping of the imports of a parsed file.

Result, ErrorResult, BatchResult
    Outcomes of file operations.
"""
from __future__ import annotations

from gig.config import FormatterConfig
from gig.core.results import BatchResult, ErrorResult, Result
from gig.errors import (
    ConfigError,
    GigError,
    SourceParseError,
    SourcePrintError,
    SourceReadError,
    SourceWriteError,
)
from gig.formatter import format_source, preview_imports, process_batch, process_file, process_path
from gig.imports import Group, GroupKind, ImportOrganizer, ImportSpec

__all__ = [
    "BatchResult",
    "ConfigError",
    "ErrorResult",
    "FormatterConfig",
    "GigError",
    "Group",
    "GroupKind",
    "ImportOrganizer",
    "ImportSpec",
    "Result",
    "SourceParseError",
    "SourcePrintError",
    "SourceReadError",
    "SourceWriteError",
    "format_source",
    "preview_imports",
    "process_batch",
    "process_file",
    "process_path",
]
