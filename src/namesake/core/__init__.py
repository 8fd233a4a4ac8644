"""
Core scan engine — resolver, scanner, name grouper, hasher and content verifier.

This package contains the whole duplicate-detection pipeline:
- PathResolverImpl: validates root paths (falls back to the current directory)
- FileScannerImpl: recursive enumeration of every non-directory entry
- NameGrouperImpl: worker-pool grouping by base filename, newest first
- HasherImpl + Sha256AlgorithmImpl / XXHashAlgorithmImpl: whole-file digests
- ContentVerifierImpl: strict mode, keeps byte-identical files only
- Models: FileRecord, NameGroup, ContentGroup, ScanResult and configuration objects

All components are pure Python with no console dependencies — suitable for CLI and library usage.
"""

from .resolver import PathResolverImpl
from .scanner import FileScannerImpl
from .grouper import NameGrouperImpl, MatchUnit, partition, sort_newest_first
from .hasher import HasherImpl, Sha256AlgorithmImpl, XXHashAlgorithmImpl, algorithm_for
from .verifier import ContentVerifierImpl
from .errors import NamesakeError, PathNotFound, TraversalError, HashReadError, OutputWriteError
from .models import (
    FileRecord, NameGroup, ContentGroup, ScanResult, ScanParams, ScanStats,
    HashAlgorithmName, Stage)

__all__ = [
    "PathResolverImpl",
    "FileScannerImpl",
    "NameGrouperImpl",
    "MatchUnit",
    "partition",
    "sort_newest_first",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "algorithm_for",
    "ContentVerifierImpl",
    "NamesakeError",
    "PathNotFound",
    "TraversalError",
    "HashReadError",
    "OutputWriteError",
    "FileRecord",
    "NameGroup",
    "ContentGroup",
    "ScanResult",
    "ScanParams",
    "ScanStats",
    "HashAlgorithmName",
    "Stage",
]
