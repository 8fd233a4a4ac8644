"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements recursive enumeration of root paths.
Features:
- Walks every root with os.walk, never following symbolic links
- Records every non-directory entry (regular files, symlinks, devices, sockets)
- Skips entries that raise PermissionError, fails the run on any other OSError
- Returns a flat list of FileRecord for all roots
"""

import os
import time
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

# Local imports
from namesake.core.models import FileRecord, Stage
from namesake.core.errors import TraversalError
from namesake.core.interfaces import FileScanner, ProgressCallback


class FileScannerImpl(FileScanner):
    """
    Walks root paths recursively and turns each non-directory entry into a FileRecord.

    Attributes:
        roots: Root paths to walk, in order. A root that is a file yields one record.
    """

    def __init__(self, roots: List[str]):
        self.roots = list(roots)

    def scan(self, progress_callback: Optional[ProgressCallback] = None) -> List[FileRecord]:
        """
        Returns the concatenation of all roots' records (no global order).
        """
        found_files: List[FileRecord] = []
        start_time = time.time()

        for root in self.roots:
            logger.debug(f"Scanning root: {root}")
            found_files.extend(self.scan_root(root, progress_callback=progress_callback))

        logger.debug(f"Total scan time: {time.time() - start_time:.2f} seconds")
        logger.debug(f"Scan completed. Found {len(found_files)} files.")
        return found_files

    def scan_root(self, root: str, progress_callback: Optional[ProgressCallback] = None) -> List[FileRecord]:
        found_files: List[FileRecord] = []

        if not os.path.isdir(root):
            record = self._process_file(root)
            if record:
                found_files.append(record)
            if progress_callback:
                progress_callback(Stage.LOADING, len(found_files), None)
            return found_files

        # Progress throttling: update every N files to reduce console overhead
        progress_interval = 5000
        progress_counter = 0

        for dirpath, dirs, files in os.walk(root, onerror=self._on_walk_error):
            # Symlinks to directories show up in `dirs`; os.walk does not
            # descend into them, they are recorded as plain entries instead.
            linked_dirs = [d for d in dirs if os.path.islink(os.path.join(dirpath, d))]
            if linked_dirs:
                dirs[:] = [d for d in dirs if d not in linked_dirs]

            for filename in files + linked_dirs:
                record = self._process_file(os.path.join(dirpath, filename))
                if record:
                    found_files.append(record)
                    progress_counter += 1

                if progress_callback and progress_counter >= progress_interval:
                    progress_callback(Stage.LOADING, len(found_files), None)
                    progress_counter = 0

        # Final update for small trees
        if progress_callback:
            progress_callback(Stage.LOADING, len(found_files), None)

        return found_files

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        """
        os.walk error hook: unreadable directories are skipped, anything else aborts.
        """
        if isinstance(error, PermissionError):
            logger.debug(f"Skipping inaccessible directory: {error.filename}")
            return
        logger.error(f"Traversal failed at {error.filename}: {error}")
        raise TraversalError(f"Cannot read {error.filename}: {error.strerror or error}",
                             path=error.filename) from error

    @staticmethod
    def _stat(path: str) -> os.stat_result:
        return os.lstat(path)

    def _process_file(self, path: str) -> Optional[FileRecord]:
        """
        Build a FileRecord from the entry's own metadata.
        Returns:
            Optional[FileRecord]: None when the entry is not accessible
        Raises:
            TraversalError: on any non-permission I/O failure
        """
        try:
            stat_result = self._stat(path)
        except PermissionError as e:
            logger.debug(f"Skipping {path}: {e}")
            return None
        except OSError as e:
            logger.error(f"Could not stat {path}: {e}")
            raise TraversalError(f"Cannot stat {path}: {e.strerror or e}", path=path) from e

        record = FileRecord(
            path=os.path.abspath(path),
            size=stat_result.st_size,
            modified_time=stat_result.st_mtime,
        )
        logger.debug(f"Accepted file: {record.name} ({record.size} bytes)")
        return record
