"""Working-tree status parsing."""

from hunkwise.status.parser import parse_status, parse_status_lines
from hunkwise.status.types import FileStatus, WorkingTreeStatus

__all__ = [
    "FileStatus",
    "WorkingTreeStatus",
    "parse_status",
    "parse_status_lines",
]
