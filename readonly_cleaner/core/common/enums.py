# File: readonly_cleaner/core/common/enums.py

from enum import Enum, unique

@unique
class Outcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"

@unique
class RunStatus(str, Enum):
    COMPLETED = "completed"
    ABORTED = "aborted"
    ROOT_NOT_FOUND = "root_not_found"
