"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for directory scanning and name-based duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Union
import os
from enum import Enum


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Digest used by strict mode to compare file contents.
    """
    SHA256 = "sha256"
    XXHASH64 = "xxhash"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            HashAlgorithmName.SHA256: "SHA-256",
            HashAlgorithmName.XXHASH64: "xxHash64",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class Stage(str, Enum):
    RESOLVE = "Resolving paths"
    LOADING = "Loading files"
    NAME_GROUPING = "Name grouping"
    CONTENT_HASHING = "Content hashing"

    @classmethod
    def get_all(cls):
        return [cls.RESOLVE, cls.LOADING, cls.NAME_GROUPING, cls.CONTENT_HASHING]


# ======================
#  Core Data Models
# ======================

@dataclass
class FileRecord:
    """
    Represents a single non-directory entry found on the file system.
    The content hash is filled lazily, only by strict verification.
    """
    path: str
    size: int  # in bytes
    modified_time: float = 0.0
    name: Optional[str] = None
    content_hash: Optional[str] = None

    def __post_init__(self):
        """Extract the base filename from path if not provided."""
        if self.name is None:
            self.name = os.path.basename(self.path)

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


@dataclass
class ContentGroup:
    """
    Files of one name group that share an identical content hash.
    """
    content_hash: str
    files: List[FileRecord]

    @property
    def duplicate_count(self) -> int:
        return len(self.files)

    def add_file(self, file: FileRecord) -> None:
        if file.content_hash != self.content_hash:
            raise ValueError("Cannot add file with different content hash to a group.")
        self.files.append(file)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    def __repr__(self):
        return f"<ContentGroup hash={self.content_hash[:12]}, count={len(self.files)}>"


@dataclass
class NameGroup:
    """
    Files sharing one base filename across distinct paths.
    After strict verification `content_groups` is set and `files` holds
    their concatenation.
    """
    name: str
    files: List[FileRecord]
    content_groups: Optional[List[ContentGroup]] = None

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    def is_duplicate(self) -> bool:
        return self.duplicate_count >= 2

    def __repr__(self):
        return f"<NameGroup name={self.name}, count={len(self.files)}>"


@dataclass
class ScanResult:
    """
    Final output of a scan: filename -> NameGroup, in filename order.
    Reporters must treat it as read-only.
    """
    groups: Dict[str, NameGroup] = field(default_factory=dict)
    strict: bool = False

    @property
    def total_files(self) -> int:
        """Number of files reported across all groups."""
        return sum(len(g.files) for g in self.groups.values())

    @property
    def duplicate_groups(self) -> int:
        """Number of reported name groups."""
        return len(self.groups)

    def __iter__(self):
        return iter(self.groups.values())

    def __len__(self):
        return len(self.groups)

    def __contains__(self, name: str) -> bool:
        return name in self.groups

    def __getitem__(self, name: str) -> NameGroup:
        return self.groups[name]


@dataclass
class ScanStats:
    """
    Statistics collected while a scan runs.
    """
    total_time: float = 0.0
    stage_stats: Dict[str, Dict[str, Union[int, float]]] = field(default_factory=dict)

    def update_stage(
            self,
            stage_name: str,
            groups_found: int,
            files_processed: int,
            duration: float
    ) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {
                "groups": 0,
                "files": 0,
                "time": 0.0
            }
        self.stage_stats[stage_name]["groups"] += groups_found
        self.stage_stats[stage_name]["files"] += files_processed
        self.stage_stats[stage_name]["time"] += duration

    def print_summary(self) -> str:
        lines = [
            "Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            "Stage: GROUPS / FILES / TIME"
        ]

        for stage, data in self.stage_stats.items():
            lines.append(f"{stage}: {data['groups']} / {data['files']} / {data['time']:.3f}s")

        return "\n".join(lines)


"""
DTO for scan parameters with built-in validation.
"""

DEFAULT_MAX_WORKERS = 50


@dataclass
class ScanParams:
    """Parameters for one scan with validation."""
    paths: List[str] = field(default_factory=list)
    strict: bool = False
    verbose: bool = True
    output_file: Optional[str] = None
    hash_algorithm: HashAlgorithmName = HashAlgorithmName.SHA256
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if self.max_workers < 1:
            raise ValueError("Worker count must be at least 1")

        if self.output_file is not None and not self.output_file.strip():
            raise ValueError("Output file cannot be empty")
