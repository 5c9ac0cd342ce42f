# importjs - JavaScript import inlining task
"""
Modules of the ImportJavascript task:
- errors: Error types, one per way a run can fail
- bundler: Import resolution (inlines imported files)
- result: Ok / Err results and the entries they carry
- log: Loggers the task reports to
- task: The ImportJavascript batch runner
- config: importjs.json loading
"""

from .errors import (
    ImportJsError,
    ConfigurationError,
    ImportResolutionError,
    MissingSourceError,
    MissingImportError,
    CyclicImportError,
    WriteError,
    UnreadableFileError,
)
from .bundler import bundle, find_imports, replace_imports, IMPORT_PATTERN
from .result import Ok, Err, ExitCode, PriorStageEntry, ResultEntry
from .log import NullLogger, ConsoleLogger, MemoryLogger
from .task import ImportJavascript, task_import_javascript
from .config import TaskConfig, load_config

__all__ = [
    'ImportJsError',
    'ConfigurationError',
    'ImportResolutionError',
    'MissingSourceError',
    'MissingImportError',
    'CyclicImportError',
    'WriteError',
    'UnreadableFileError',
    'bundle',
    'find_imports',
    'replace_imports',
    'IMPORT_PATTERN',
    'Ok',
    'Err',
    'ExitCode',
    'PriorStageEntry',
    'ResultEntry',
    'NullLogger',
    'ConsoleLogger',
    'MemoryLogger',
    'ImportJavascript',
    'task_import_javascript',
    'TaskConfig',
    'load_config',
]
