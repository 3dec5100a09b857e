import logging
from typing import Optional

from ..domain.errors import AttributeResetFailure, EnumerationError
from ..domain.interfaces import IAttributeWriter, IFileWalker
from ..domain.models import FileOutcome, NormalizeRequest, RunReport
from ..data.attribute_writer import get_attribute_writer
from ..data.file_walker import LocalFileWalker

logger = logging.getLogger(__name__)

class AttributeNormalizer:
    """
    Walks a directory tree and resets every file's attributes to 'normal'.
    Per-file failures are recorded in the report; only enumeration failures abort the walk.
    """

    def __init__(self,
                 walker: Optional[IFileWalker] = None,
                 writer: Optional[IAttributeWriter] = None):
        self.walker = walker or LocalFileWalker()
        self.writer = writer or get_attribute_writer()

    def normalize(self, request: NormalizeRequest) -> RunReport:
        report = RunReport()
        logger.info(f"Resetting attributes under: {request.root_path}")

        try:
            for file_path in self.walker.walk(request.root_path):
                report.add(self._reset_one(file_path))
        except EnumerationError as e:
            logger.error(f"Walk aborted after {report.total} files: {e}")
            e.report = report
            raise

        logger.info(f"Attribute reset complete. Succeeded: {report.succeeded}/{report.total}")
        return report

    def _reset_one(self, file_path) -> FileOutcome:
        try:
            self.writer.reset(file_path)
        except OSError as e:
            failure = AttributeResetFailure(file_path, e)
            logger.warning(f"Failed to reset {file_path}: {failure.reason}")
            return FileOutcome.failure(file_path, failure.reason)

        return FileOutcome.success(file_path)
