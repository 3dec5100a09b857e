from typing import List
from uuid import UUID
from sqlalchemy.orm import selectinload
from readonly_cleaner.core.database.connection import SessionLocal
from .sql_models import RunModel, FailureModel
from ..domain.interfaces import IActivityLogRepository
from ..domain.models import RunRecord

class SqlActivityLogRepo(IActivityLogRepository):

    def record_run(self, record: RunRecord) -> UUID:
        """
        Transactional logic:
        1. Insert the Run row.
        2. Insert one Failure row per failed file, linked to the Run.
        """
        with SessionLocal() as db:
            try:
                run = RunModel(
                    root_path=record.root_path,
                    status=record.status,
                    files_total=record.files_total,
                    files_succeeded=record.files_succeeded,
                    files_failed=record.files_failed,
                    error_message=record.error_message,
                )
                if record.started_at:
                    run.started_at = record.started_at
                if record.finished_at:
                    run.finished_at = record.finished_at

                run.failures = [
                    FailureModel(file_path=file_path, reason=reason)
                    for file_path, reason in record.failures
                ]

                db.add(run)
                db.commit()
                db.refresh(run)

                return run.id
            except Exception as e:
                db.rollback()
                raise e

    def recent_runs(self, limit: int) -> List[RunRecord]:
        with SessionLocal() as db:
            runs = (
                db.query(RunModel)
                .options(selectinload(RunModel.failures))
                .order_by(RunModel.finished_at.desc())
                .limit(limit)
                .all()
            )
            return [self._to_record(run) for run in runs]

    def get_run(self, run_id: UUID) -> RunRecord:
        with SessionLocal() as db:
            run = db.get(RunModel, run_id)
            if not run:
                raise LookupError(f"Run {run_id} not found in activity log.")
            return self._to_record(run)

    def _to_record(self, run: RunModel) -> RunRecord:
        # Must be called inside the session so failures can lazy-load
        return RunRecord(
            id=run.id,
            root_path=run.root_path,
            status=run.status,
            files_total=run.files_total,
            files_succeeded=run.files_succeeded,
            files_failed=run.files_failed,
            error_message=run.error_message,
            started_at=run.started_at,
            finished_at=run.finished_at,
            failures=[(f.file_path, f.reason) for f in run.failures],
        )
