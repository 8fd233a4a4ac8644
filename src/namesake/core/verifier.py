"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/verifier.py
Strict mode: narrows name groups down to byte-identical content groups.

Hash equality is transitive, so splitting a name group into buckets keyed by
content hash gives the same groups as comparing every pair of its files, while
visiting each file once. Buckets keep the order in which their first member
appears in the (already sorted) name group, which is the order their first
matching pair would be discovered by a pairwise scan.
"""

import time
import logging
from typing import List, Dict, Optional

from namesake.core.hasher import HasherImpl
from namesake.core.interfaces import ContentVerifier, Hasher, ProgressCallback
from namesake.core.models import FileRecord, NameGroup, ContentGroup, Stage

logger = logging.getLogger(__name__)


class ContentVerifierImpl(ContentVerifier):
    def __init__(self, hasher: Hasher = None):
        self.hasher = hasher or HasherImpl()

    def verify(
            self,
            groups: Dict[str, NameGroup],
            progress_callback: Optional[ProgressCallback] = None
    ) -> Dict[str, NameGroup]:
        """
        Returns only the name groups that contain at least one matching pair,
        with `files` replaced by the concatenation of their content groups.
        Raises HashReadError (from the hasher) on any unreadable file.
        """
        total_files = sum(len(g.files) for g in groups.values() if len(g.files) > 1)
        processed_files = 0
        start_time = time.time()

        result = {}
        for name, group in groups.items():
            if len(group.files) < 2:
                continue

            for file in group.files:
                self.hasher.compute_content_hash(file)
                processed_files += 1
                if progress_callback:
                    progress_callback(Stage.CONTENT_HASHING, processed_files, total_files)

            content_groups = self.split_by_content(group.files)
            if not content_groups:
                logger.debug(f"No identical content among {len(group.files)} files named {name}")
                continue

            result[name] = NameGroup(
                name=name,
                files=[f for cg in content_groups for f in cg.files],
                content_groups=content_groups,
            )

        logger.debug(f"Hashed {processed_files} files in {time.time() - start_time:.2f} seconds")
        return result

    @staticmethod
    def split_by_content(files: List[FileRecord]) -> List[ContentGroup]:
        """
        Split already-hashed files into content groups of 2+ members.
        Members keep their order from `files`.
        """
        buckets: Dict[str, ContentGroup] = {}
        for file in files:
            if file.content_hash is None:
                raise ValueError(f"File has no content hash: {file.path}")
            bucket = buckets.get(file.content_hash)
            if bucket is None:
                buckets[file.content_hash] = ContentGroup(content_hash=file.content_hash, files=[file])
            else:
                bucket.add_file(file)

        return [cg for cg in buckets.values() if cg.is_duplicate()]
