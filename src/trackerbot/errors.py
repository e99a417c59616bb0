# src/trackerbot/errors.py

"""
Error taxonomy.

Every expected failure is a TrackerError carrying an ErrorKind:
- input: bad user input, always recoverable (the loop continues)
- data:  unreadable save file content, surfaced at load time
- io:    file system failures while saving, reported but not fatal
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    INPUT = "input"
    DATA = "data"
    IO = "io"


class TrackerError(Exception):
    kind: ErrorKind = ErrorKind.INPUT


# ---- input validation ----


class EmptyDescriptionError(TrackerError):
    def __init__(self, message: str = "Cannot track task without description.") -> None:
        super().__init__(message)


class DeadlineFormatError(TrackerError):
    pass


class EventFormatError(TrackerError):
    pass


class EventOrderError(TrackerError):
    def __init__(self, message: str = "An event must end after it starts.") -> None:
        super().__init__(message)


class ReservedCharacterError(TrackerError):
    def __init__(self, message: str = "Descriptions cannot contain '|'.") -> None:
        super().__init__(message)


class DateFormatError(TrackerError):
    pass


class IndexOutOfRangeError(TrackerError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"The specified task does not exist: {index} (list has {size}).")
        self.index = index
        self.size = size


class InvalidIndexError(TrackerError):
    pass


class TooManyArgumentsError(TrackerError):
    pass


class AlreadyDoneError(TrackerError):
    def __init__(self, message: str = "The specified task is already completed.") -> None:
        super().__init__(message)


class NotDoneError(TrackerError):
    def __init__(self, message: str = "This task is already in progress.") -> None:
        super().__init__(message)


class UnrecognizedCommandError(TrackerError):
    def __init__(self, keyword: str = "") -> None:
        super().__init__("Unrecognised Command Type. Try another?")
        self.keyword = keyword


# ---- data ----


class MalformedSaveRecordError(TrackerError):
    kind = ErrorKind.DATA


class CorruptDateError(TrackerError):
    kind = ErrorKind.DATA


class CorruptSaveFileError(TrackerError):
    kind = ErrorKind.DATA

    def __init__(self, path: str, line_no: int, reason: str) -> None:
        super().__init__(f"Save file {path} is corrupted at line {line_no}: {reason}")
        self.path = path
        self.line_no = line_no
        self.reason = reason


# ---- io ----


class StorageWriteError(TrackerError):
    kind = ErrorKind.IO


class StorageReadError(TrackerError):
    kind = ErrorKind.IO
