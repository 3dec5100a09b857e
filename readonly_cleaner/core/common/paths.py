# File: readonly_cleaner/core/common/paths.py

import os
from pathlib import Path
from typing import Union

def printable(value: Union[str, Path]) -> str:
    """
    Text safe to store in the activity log or print to a UTF-8 stream.
    File names that are not valid UTF-8 come back from os.walk with surrogate
    escapes; those bytes are rendered as \\xNN instead.
    """
    return os.fsencode(value).decode("utf-8", "backslashreplace")
