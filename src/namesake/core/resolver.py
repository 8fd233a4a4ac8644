"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/resolver.py
Validates the root paths given by the caller before any scanning starts.
"""

import os
import logging
from typing import List, Optional, Callable

from namesake.core.errors import PathNotFound
from namesake.core.interfaces import PathResolver

logger = logging.getLogger(__name__)

NO_PATH_SPECIFIED = "No path specified, using current directory: {cwd}"


class PathResolverImpl(PathResolver):
    """
    Turns user input into the ordered list of roots to walk.

    An empty input falls back to the current working directory and emits the
    informational "no path specified" notice. Every explicit path must exist.
    Duplicate roots are kept; files are de-duplicated by full path later on.
    """

    def __init__(self, notice_callback: Optional[Callable[[str], None]] = None):
        self.notice_callback = notice_callback

    def resolve(self, paths: List[str]) -> List[str]:
        if not paths:
            cwd = os.getcwd()
            message = NO_PATH_SPECIFIED.format(cwd=cwd)
            logger.info(message)
            if self.notice_callback:
                self.notice_callback(message)
            return [cwd]

        for path in paths:
            # lexists: a dangling symlink given as a root is still a walkable entry
            if not os.path.lexists(path):
                error_msg = f"Path {path} does not exist"
                logger.error(error_msg)
                raise PathNotFound(error_msg, path=path)

        logger.debug(f"Resolved roots: {paths}")
        return list(paths)
