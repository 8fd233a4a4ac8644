"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the scan pipeline.
These protocols enforce structural typing using Python's `typing.Protocol` so that
every stage can be replaced independently (for example by fakes in tests).

Key Components:
---------------
- PathResolver: Validates and normalizes the root paths to scan.
- FileScanner: Walks root paths and returns flat lists of FileRecord.
- NameGrouper: Partitions records into NameGroups by base filename.
- HashAlgorithm: Factory for incremental digest objects (SHA-256, xxHash64, ...).
- Hasher: Computes whole-file content hashes.
- ContentVerifier: Narrows NameGroups down to byte-identical ContentGroups.
"""

from typing import Protocol, List, Dict, Optional, Callable
from namesake.core.models import FileRecord, NameGroup


ProgressCallback = Callable[[str, int, Optional[int]], None]


# ===== Interfaces =====

class PathResolver(Protocol):
    def resolve(self, paths: List[str]) -> List[str]:
        """
        Return the validated list of roots to scan.

        Raises:
            PathNotFound: if any given path does not exist.
        """
        ...


class FileScanner(Protocol):
    """
    Interface for walking file systems and collecting file metadata.
    """
    def scan(
        self,
        progress_callback: Optional[ProgressCallback] = None
    ) -> List[FileRecord]:
        """
        Scan every configured root.

        Args:
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            Records for every non-directory entry found.
        """
        ...


class NameGrouper(Protocol):
    def group_by_name(
        self,
        files: List[FileRecord],
        progress_callback: Optional[ProgressCallback] = None
    ) -> Dict[str, NameGroup]:
        """Group files by base filename, keeping only names found at 2+ distinct paths."""
        ...


class Digest(Protocol):
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256 or xxHash
    without affecting the rest of the verification logic.
    """

    @staticmethod
    def new() -> Digest:
        """Returns a fresh incremental digest object."""
        ...


class Hasher(Protocol):
    """Interface for hashing whole files."""
    def compute_content_hash(self, file: FileRecord) -> str: ...


class ContentVerifier(Protocol):
    def verify(
        self,
        groups: Dict[str, NameGroup],
        progress_callback: Optional[ProgressCallback] = None
    ) -> Dict[str, NameGroup]:
        """Keep only files with at least one byte-identical sibling in their name group."""
        ...
