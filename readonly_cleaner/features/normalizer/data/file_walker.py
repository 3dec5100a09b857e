import os
from pathlib import Path
from typing import Iterator
from ..domain.interfaces import IFileWalker
from ..domain.errors import EnumerationError

class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using standard os.walk for efficiency.
    Unlike a scanner, nothing is skipped: dotfiles, .git and build output are all visited.
    """

    def walk(self, root: Path) -> Iterator[Path]:
        # os.walk swallows listing errors unless given an onerror hook
        for dirpath, dirnames, filenames in os.walk(root, onerror=self._raise_enumeration_error):
            # Sorted so reports come out in a stable order
            dirnames.sort()
            for filename in sorted(filenames):
                yield Path(dirpath) / filename

    @staticmethod
    def _raise_enumeration_error(error: OSError):
        directory = Path(error.filename) if error.filename else None
        raise EnumerationError(
            f"Cannot list directory {directory}: {error.strerror or error}",
            directory=directory
        ) from error
