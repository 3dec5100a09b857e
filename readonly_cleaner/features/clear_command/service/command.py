import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from readonly_cleaner.core.common.enums import RunStatus
from readonly_cleaner.core.common.paths import printable
from readonly_cleaner.features.activity_log.service.api import ActivityLogService
from readonly_cleaner.features.normalizer.domain.errors import EnumerationError, RootNotFound
from readonly_cleaner.features.normalizer.domain.models import NormalizeRequest, RunReport
from readonly_cleaner.features.normalizer.service.normalizer import AttributeNormalizer

from ..domain.models import COMPLETION_MESSAGE, CommandResult

logger = logging.getLogger(__name__)

class ClearCommand:
    """
    The 'clear read-only' command.
    Resolves the target folder, runs the normalizer, and writes the run to the activity log.
    """

    def __init__(self,
                 normalizer: Optional[AttributeNormalizer] = None,
                 activity_log: Optional[ActivityLogService] = None):
        self.normalizer = normalizer or AttributeNormalizer()
        self.activity_log = activity_log or ActivityLogService()

    @staticmethod
    def resolve_root(target: Path) -> Path:
        """
        A directory is used as-is; a solution/project file maps to the folder that holds it.
        Anything else is passed through so validation reports it.
        """
        if target.is_file():
            return target.parent
        return target

    def execute(self, target: Union[str, Path]) -> CommandResult:
        root = self.resolve_root(Path(target))
        started_at = datetime.now(timezone.utc)

        try:
            request = NormalizeRequest(root_path=root)
            report = self.normalizer.normalize(request)
        except RootNotFound as e:
            logger.error(str(e))
            self._log_run(root, e.report, RunStatus.ROOT_NOT_FOUND, str(e), started_at)
            raise
        except EnumerationError as e:
            logger.critical(f"Clear failed fatally: {e}")
            self._log_run(root, e.report, RunStatus.ABORTED, str(e), started_at)
            raise

        run_id = self._log_run(request.root_path, report, RunStatus.COMPLETED, None, started_at)

        return CommandResult(
            root_path=request.root_path,
            message=self.format_message(report),
            report=report,
            run_id=run_id
        )

    @staticmethod
    def format_message(report: RunReport) -> str:
        lines = [
            COMPLETION_MESSAGE,
            f"{report.total} files processed, {report.failed} failed",
        ]
        for failure in report.failures:
            lines.append(f"  {printable(failure.path)}: {failure.reason}")
        return "\n".join(lines)

    def _log_run(self,
                 root: Path,
                 report: RunReport,
                 status: RunStatus,
                 error_message: Optional[str],
                 started_at: datetime) -> Optional[UUID]:
        # A broken activity log must not change the outcome of the command
        try:
            return self.activity_log.record(
                root_path=str(root),
                report=report,
                status=status,
                error_message=error_message,
                started_at=started_at
            )
        except (SQLAlchemyError, UnicodeError) as e:
            logger.error(f"Could not write run to activity log: {e}")
            return None
