"""
Core module.

Example
-------
>>> from gig.core import BatchResult, Result
>>>
>>> result = Result(success=True, message="Imports already organized")
>>> batch = BatchResult([result])
>>> batch.success_count
1
"""
from __future__ import annotations

from .diff import combine_diffs, generate_diff
from .results import BatchResult, ErrorResult, Result

__all__ = [
    "Result",
    "ErrorResult",
    "BatchResult",
    "combine_diffs",
    "generate_diff",
]
