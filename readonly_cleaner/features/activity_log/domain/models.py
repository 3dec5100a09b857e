from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID
from readonly_cleaner.core.common.enums import RunStatus

@dataclass(frozen=True)
class RunRecord:
    """
    One normalize run as written to the activity log.
    Decoupled from the RunReport so the log never holds live Path objects.
    """
    root_path: str
    status: RunStatus
    files_total: int = 0
    files_succeeded: int = 0
    files_failed: int = 0
    error_message: Optional[str] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    # (file_path, reason)
    failures: List[Tuple[str, str]] = field(default_factory=list)
    id: Optional[UUID] = None
