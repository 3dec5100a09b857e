from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from readonly_cleaner.core.common.enums import Outcome
from .errors import RootNotFound

@dataclass(frozen=True)
class NormalizeRequest:
    """
    User intent to reset attributes under a specific directory.
    """
    root_path: Path

    def __post_init__(self):
        # Validate immediately so a bad root never reaches the walker
        if not self.root_path.exists():
            raise RootNotFound(f"Normalize root not found: {self.root_path}")
        if not self.root_path.is_dir():
            raise RootNotFound(f"Normalize root is not a directory: {self.root_path}")
        object.__setattr__(self, "root_path", self.root_path.resolve())

@dataclass(frozen=True)
class FileOutcome:
    """
    Result of one attribute reset attempt.
    """
    path: Path
    outcome: Outcome
    reason: Optional[str] = None

    @classmethod
    def success(cls, path: Path) -> "FileOutcome":
        return cls(path=path, outcome=Outcome.SUCCESS)

    @classmethod
    def failure(cls, path: Path, reason: str) -> "FileOutcome":
        return cls(path=path, outcome=Outcome.FAILURE, reason=reason)

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.SUCCESS

@dataclass
class RunReport:
    """
    Ordered report built while the walk runs.
    One entry per file attempted.
    """
    outcomes: List[FileOutcome] = field(default_factory=list)

    def add(self, outcome: FileOutcome):
        self.outcomes.append(outcome)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def failures(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if not o.ok]

    def __len__(self) -> int:
        return self.total
