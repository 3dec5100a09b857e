from pathlib import Path
from typing import Optional


class NormalizerError(Exception):
    """Base class for fatal normalizer errors."""

    def __init__(self, message: str, report=None):
        super().__init__(message)
        # Imported lazily: models.py imports this module
        if report is None:
            from .models import RunReport
            report = RunReport()
        self.report = report


class RootNotFound(NormalizerError, FileNotFoundError):
    """
    The root path is missing or is not a directory.
    Raised before any traversal, so the attached report is always empty.
    """


class EnumerationError(NormalizerError):
    """
    The directory walk itself could not proceed.
    `report` holds the outcomes of files processed before the failure.
    """

    def __init__(self, message: str, report=None, directory: Optional[Path] = None):
        super().__init__(message, report)
        self.directory = directory


class AttributeResetFailure(OSError):
    """
    A single file could not be reset.
    Never propagates past the normalizer; it becomes a Failure entry in the report.
    """

    def __init__(self, path: Path, cause: OSError):
        super().__init__(cause.errno, cause.strerror or str(cause), str(path))
        self.path = path
        self.cause = cause

    @property
    def reason(self) -> str:
        return f"{type(self.cause).__name__}: {self.cause.strerror or self.cause}"
