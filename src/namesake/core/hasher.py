"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements whole-file content hashing with pluggable hash algorithms.

HasherImpl streams the file in fixed-size chunks through any HashAlgorithm and
caches the hex digest on the FileRecord, so a record is read at most once per scan.
"""

import hashlib
import logging
import os
import stat

import xxhash

from namesake.core.errors import HashReadError
from namesake.core.interfaces import Hasher, HashAlgorithm, Digest
from namesake.core.models import FileRecord, HashAlgorithmName

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 1024 * 1024


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> Digest:
        return hashlib.sha256()


class XXHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> Digest:
        return xxhash.xxh64()


ALGORITHMS = {
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl,
    HashAlgorithmName.XXHASH64: XXHashAlgorithmImpl,
}


def algorithm_for(name: HashAlgorithmName) -> HashAlgorithm:
    return ALGORITHMS[name]()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = READ_CHUNK_SIZE):
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_content_hash(self, file: FileRecord) -> str:
        """
        Computes and caches the digest of the whole file.
        Raises:
            HashReadError: if the file cannot be opened or read
        """
        if file.content_hash is not None:
            return file.content_hash

        digest = self.algorithm.new()
        try:
            # FIFOs and devices would block or never end
            if not stat.S_ISREG(os.stat(file.path).st_mode):
                raise HashReadError(f"Cannot read {file.path}: not a regular file", path=file.path)
            with open(file.path, 'rb') as f:
                for chunk in iter(lambda: f.read(self.chunk_size), b''):
                    digest.update(chunk)
        except OSError as e:
            logger.error(f"Error reading content of {file.path}: {e}")
            raise HashReadError(f"Cannot read {file.path}: {e.strerror or e}", path=file.path) from e

        file.content_hash = digest.hexdigest()
        return file.content_hash
