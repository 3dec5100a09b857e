import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from readonly_cleaner.core.common.enums import RunStatus
from readonly_cleaner.core.common.paths import printable
from readonly_cleaner.features.normalizer.domain.models import RunReport

from ..domain.interfaces import IActivityLogRepository
from ..domain.models import RunRecord
from ..data.repository import SqlActivityLogRepo

logger = logging.getLogger(__name__)

class ActivityLogService:
    """
    Facade for the Activity Log Feature.
    Turns normalizer reports into persisted run records for later troubleshooting.
    """
    def __init__(self, repo: Optional[IActivityLogRepository] = None):
        self.repo = repo or SqlActivityLogRepo()

    def record(self,
               root_path: str,
               report: RunReport,
               status: RunStatus,
               error_message: Optional[str] = None,
               started_at: Optional[datetime] = None) -> UUID:
        """
        Persists one run.
        Only failed files are written individually; successes are counted.

        Returns:
            UUID of the created Run.
        """
        record = RunRecord(
            root_path=printable(root_path),
            status=status,
            files_total=report.total,
            files_succeeded=report.succeeded,
            files_failed=report.failed,
            error_message=printable(error_message) if error_message else None,
            started_at=started_at,
            finished_at=datetime.now(timezone.utc),
            failures=[(printable(o.path), printable(o.reason or "")) for o in report.failures],
        )

        run_id = self.repo.record_run(record)
        logger.info(f"Run {run_id} logged [{status.value}] with {record.files_failed} failures")
        return run_id

    def recent(self, limit: int) -> List[RunRecord]:
        return self.repo.recent_runs(limit)

    def get(self, run_id: UUID) -> RunRecord:
        return self.repo.get_run(run_id)
