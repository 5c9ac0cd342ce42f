# ==========================================
# TASK RESULTS: Result<T, E> Model
# ==========================================
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel


class PriorStageEntry(BaseModel):
    """Content and destination of a source, as handed over by a previous task."""
    content: str
    destination: str


class ResultEntry(PriorStageEntry):
    """Fully inlined content of a source and where it goes."""


class ExitCode(int, Enum):
    OK = 0
    ERROR = 1


class ErrorKind(str, Enum):
    """Categorizes why a batch was aborted."""
    MISSING_SOURCE = "MissingSource"
    MISSING_IMPORT = "MissingImport"
    CYCLIC_IMPORT = "CyclicImport"
    UNREADABLE_FILE = "UnreadableFile"
    WRITE_ERROR = "WriteError"


class TaskError(BaseModel):
    """The one failure that aborted a batch."""
    kind: ErrorKind
    message: str
    source: Optional[str] = None
    detail: Optional[str] = None

    def __str__(self):
        return self.message


class Result:
    """Base class for Result<T, E> (Ok or Err)."""

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    @property
    def exit_code(self) -> ExitCode:
        return ExitCode.OK if self.is_ok() else ExitCode.ERROR

    def unwrap(self):
        """Get the result mapping or raise error."""
        if isinstance(self, Ok):
            return self.data
        else:
            raise RuntimeError(f"Called unwrap() on Err: {self.error.message}")

    def unwrap_or(self, default):
        """Get the result mapping or return default."""
        if isinstance(self, Ok):
            return self.data
        else:
            return default


class Ok(Result):
    """Success case: every source was resolved."""

    def __init__(self, message, data: Dict[str, ResultEntry]):
        self.message = message
        self.data = data

    def as_state(self):
        """Plain mapping of the results, suitable for another task's receive_state()."""
        return {source: entry.model_dump() for source, entry in self.data.items()}

    def __repr__(self):
        return f"Ok({list(self.data)})"


class Err(Result):
    """Error case: the batch was aborted by `error`."""

    def __init__(self, error: TaskError):
        self.error = error
        self.data = {}

    @property
    def message(self):
        return self.error.message

    def __repr__(self):
        return f"Err({self.error.kind.value}: {self.error.message})"

    def __str__(self):
        return str(self.error)
