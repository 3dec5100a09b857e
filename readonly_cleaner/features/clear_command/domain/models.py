from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from uuid import UUID
from readonly_cleaner.features.normalizer.domain.models import RunReport

COMPLETION_MESSAGE = "Processing complete"

@dataclass
class CommandResult:
    """
    What the command hands back to whoever presents it (console, dialog, ...).
    """
    root_path: Path
    message: str
    report: RunReport
    run_id: Optional[UUID] = None

    @property
    def exit_code(self) -> int:
        return 1 if self.report.failed else 0
