"""
Namesake — finds files that share a name across directory trees.

Core features:
- Concurrent name matching over any number of root directories
- Groups ordered newest first, ties broken by path
- Strict mode: keep only byte-identical files (SHA-256 or xxHash64 digests)
- CLI interface with colored, appendable reports
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("namesake")
except Exception:
    import tomllib

    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from namesake.commands import ScanCommand
from namesake.core import (
    ScanParams, ScanResult, ScanStats, HashAlgorithmName,
    FileRecord, NameGroup, ContentGroup,
    NamesakeError, PathNotFound, TraversalError, HashReadError, OutputWriteError)
from namesake.reporter import ReportWriter

__all__ = [
    "ScanCommand",
    "ScanParams",
    "ScanResult",
    "ScanStats",
    "HashAlgorithmName",
    "FileRecord",
    "NameGroup",
    "ContentGroup",
    "NamesakeError",
    "PathNotFound",
    "TraversalError",
    "HashReadError",
    "OutputWriteError",
    "ReportWriter",
    "__version__",
]
