"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements name-based grouping of scanned files with a bounded worker pool.

WORKFLOW
--------
1. One pass builds an index: filename -> every record with that filename.
   The index is never modified afterwards and is shared read-only by all workers.
2. The index range [0, n) is cut into min(max_workers, n) contiguous slices,
   one per worker thread. No work stealing, no rebalancing.
3. For each record in its slice a worker emits exactly one MatchUnit onto the
   shared result queue, carrying the records with the same name at another path
   (possibly none).
4. The orchestrator drains exactly n units, reports one progress tick per unit
   and is the only code that touches the accumulating name -> records mapping.
5. Each list is de-duplicated by path, sorted newest first (path breaks ties)
   and dropped when fewer than two distinct paths remain.
"""

import queue
import logging
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Dict, Optional

from namesake.core.interfaces import NameGrouper, ProgressCallback
from namesake.core.models import FileRecord, NameGroup, Stage, DEFAULT_MAX_WORKERS

logger = logging.getLogger(__name__)


@dataclass
class MatchUnit:
    """One processed input file: the file itself and its same-name matches."""
    filename: str
    file: FileRecord
    matches: List[FileRecord]


@dataclass
class _WorkerFailure:
    error: BaseException


def partition(total: int, workers: int) -> List[range]:
    """
    Split range(total) into `workers` contiguous, non-overlapping slices covering it.
    The first `total % workers` slices get one extra index.
    """
    if total <= 0 or workers <= 0:
        return []
    base, extra = divmod(total, workers)
    slices = []
    start = 0
    for i in range(workers):
        stop = start + base + (1 if i < extra else 0)
        slices.append(range(start, stop))
        start = stop
    return slices


def sort_newest_first(files: List[FileRecord]) -> List[FileRecord]:
    """Newest modification time first; equal times fall back to path order."""
    return sorted(files, key=lambda f: (-f.modified_time, f.path))


class NameGrouperImpl(NameGrouper):
    """
    Groups records by base filename using a pool of worker threads.
    """

    def __init__(self, max_workers: int = DEFAULT_MAX_WORKERS):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.max_workers = max_workers

    def group_by_name(
            self,
            files: List[FileRecord],
            progress_callback: Optional[ProgressCallback] = None
    ) -> Dict[str, NameGroup]:
        total = len(files)
        if total == 0:
            return {}

        index = self.build_index(files)
        results: "queue.Queue" = queue.Queue()
        pool_size = min(self.max_workers, total)
        slices = partition(total, pool_size)
        logger.debug(f"Matching {total} files with {pool_size} workers")

        accumulated: Dict[str, List[FileRecord]] = defaultdict(list)

        with ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix="namesake-match") as executor:
            for index_range in slices:
                executor.submit(self._match_slice, files, index_range, index, results)

            for processed in range(1, total + 1):
                unit = results.get()
                if isinstance(unit, _WorkerFailure):
                    raise unit.error
                if unit.matches:
                    accumulated[unit.filename].append(unit.file)
                    accumulated[unit.filename].extend(unit.matches)
                if progress_callback:
                    progress_callback(Stage.NAME_GROUPING, processed, total)

        return self._finalize(accumulated)

    @staticmethod
    def build_index(files: List[FileRecord]) -> Dict[str, List[FileRecord]]:
        """Single pass: filename -> records carrying that filename."""
        index = defaultdict(list)
        for file in files:
            index[file.name].append(file)
        return dict(index)

    @staticmethod
    def _match_slice(
            files: List[FileRecord],
            index_range: range,
            index: Dict[str, List[FileRecord]],
            results: "queue.Queue"
    ) -> None:
        """Worker body: exactly one MatchUnit per file in the slice."""
        try:
            for i in index_range:
                file = files[i]
                matches = [other for other in index[file.name] if other.path != file.path]
                results.put(MatchUnit(filename=file.name, file=file, matches=matches))
        except BaseException as e:
            # Unblock the orchestrator, which is waiting for this slice's units
            results.put(_WorkerFailure(e))

    @staticmethod
    def _finalize(accumulated: Dict[str, List[FileRecord]]) -> Dict[str, NameGroup]:
        """
        De-duplicate each raw match list by path, sort it and drop single-path names.
        Returned groups are keyed in filename order.
        """
        result = {}
        for filename in sorted(accumulated):
            seen = set()
            unique = []
            for file in accumulated[filename]:
                if file.path not in seen:
                    seen.add(file.path)
                    unique.append(file)

            if len(unique) >= 2:  # Avoid groups with less than 2 files
                result[filename] = NameGroup(name=filename, files=sort_newest_first(unique))

        return result
