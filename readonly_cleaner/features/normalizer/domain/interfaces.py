from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    Abstracts os.walk vs pathlib.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[Path]:
        """
        Yields every file path below root, one by one, with no exclusions.
        Raises EnumerationError if a directory cannot be listed.
        """
        pass

class IAttributeWriter(ABC):
    """
    Contract for resetting file attributes to the platform's 'normal' state.
    """
    @abstractmethod
    def reset(self, path: Path) -> None:
        """
        Clears read-only / hidden / system style flags on a single file.
        Raises OSError on failure.
        """
        pass

    @abstractmethod
    def is_normal(self, path: Path) -> bool:
        """Returns True if the file carries no special attributes."""
        pass
