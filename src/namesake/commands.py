"""
Unified command orchestrator for a scan.
This is the SINGLE source of truth for the pipeline — used by the CLI and by library callers.
No console dependencies — pure Python.
"""
import time
import logging
from typing import List, Optional, Callable, Tuple, Dict

from namesake.core.models import FileRecord, NameGroup, ScanParams, ScanResult, ScanStats, Stage
from namesake.core.resolver import PathResolverImpl
from namesake.core.scanner import FileScannerImpl
from namesake.core.grouper import NameGrouperImpl
from namesake.core.hasher import HasherImpl, algorithm_for
from namesake.core.verifier import ContentVerifierImpl

logger = logging.getLogger(__name__)


class ScanCommand:
    """
    Orchestrates the entire scan workflow:
    1. Resolve root paths (current directory when none given)
    2. Enumerate every root into a flat list of records
    3. Group records by filename with the worker pool
    4. In strict mode, keep byte-identical files only

    Usage:
        params = ScanParams(paths=["~/Music", "/mnt/backup"], strict=True)
        command = ScanCommand()
        result, stats = command.execute(
            params,
            progress_callback=cli_progress_printer,
            notice_callback=cli_warning
        )
    """

    def __init__(self):
        self._files: List[FileRecord] = []  # Local state storage

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
            notice_callback: Optional[Callable[[str], None]] = None
    ) -> Tuple[ScanResult, ScanStats]:
        """
        Execute a scan with given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            notice_callback: (message: str) -> None, receives informational notices

        Returns:
            Tuple of (scan result, statistics)

        Raises:
            PathNotFound: a root does not exist
            TraversalError: the walk hit a non-permission I/O error
            HashReadError: strict mode could not read a file
        """
        stats = ScanStats()
        total_start_time = time.time()

        # Step 1: Resolve roots
        start_time = time.time()
        roots = PathResolverImpl(notice_callback=notice_callback).resolve(params.paths)
        stats.update_stage(Stage.RESOLVE.value, 0, len(roots), time.time() - start_time)

        # Step 2: Enumerate
        start_time = time.time()
        self._files = FileScannerImpl(roots).scan(progress_callback=progress_callback)
        stats.update_stage(Stage.LOADING.value, 0, len(self._files), time.time() - start_time)

        # Step 3: Group by name
        start_time = time.time()
        groups = NameGrouperImpl(max_workers=params.max_workers).group_by_name(
            self._files, progress_callback=progress_callback)
        ScanCommand._update_stats(stats, Stage.NAME_GROUPING.value, time.time() - start_time, groups)

        # Step 4: Optional content verification
        if params.strict:
            start_time = time.time()
            verifier = ContentVerifierImpl(HasherImpl(algorithm_for(params.hash_algorithm)))
            groups = verifier.verify(groups, progress_callback=progress_callback)
            ScanCommand._update_stats(stats, Stage.CONTENT_HASHING.value, time.time() - start_time, groups)

        stats.total_time = time.time() - total_start_time
        result = ScanResult(groups=groups, strict=params.strict)
        logger.debug(f"Scan finished: {result.duplicate_groups} groups, {result.total_files} files")
        return result, stats

    def get_files(self) -> List[FileRecord]:
        """Get scanned files after execution."""
        return self._files.copy()  # Return copy to prevent external mutation

    @staticmethod
    def _update_stats(stats: ScanStats, stage: str, duration: float, groups: Dict[str, NameGroup]) -> None:
        stats.update_stage(
            stage_name=stage,
            groups_found=len(groups),
            files_processed=sum(len(g.files) for g in groups.values()),
            duration=duration
        )
