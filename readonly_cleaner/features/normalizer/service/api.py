from pathlib import Path
from typing import Union
from ..domain.models import NormalizeRequest, RunReport
from ..data.attribute_writer import get_attribute_writer
from .normalizer import AttributeNormalizer

def normalize(root_path: Union[str, Path]) -> RunReport:
    """
    Standalone API: resets attributes of every file under root_path.
    Does NOT interact with the activity log.

    Raises:
        RootNotFound: root_path is missing or not a directory.
        EnumerationError: a directory could not be listed; carries the partial report.
    """
    request = NormalizeRequest(root_path=Path(root_path))
    return AttributeNormalizer().normalize(request)

def has_normal_attributes(path: Union[str, Path]) -> bool:
    """Returns True if the file at path carries no read-only or special flags."""
    return get_attribute_writer().is_normal(Path(path))
