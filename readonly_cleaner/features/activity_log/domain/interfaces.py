from abc import ABC, abstractmethod
from typing import List
from uuid import UUID
from .models import RunRecord

class IActivityLogRepository(ABC):
    """
    Contract for persisting normalize runs and their per-file failures.
    """

    @abstractmethod
    def record_run(self, record: RunRecord) -> UUID:
        """
        Writes the run and all of its failures in one transaction.
        Returns the new run ID.
        """
        pass

    @abstractmethod
    def recent_runs(self, limit: int) -> List[RunRecord]:
        """Newest runs first."""
        pass

    @abstractmethod
    def get_run(self, run_id: UUID) -> RunRecord:
        """Raises LookupError if the run does not exist."""
        pass
