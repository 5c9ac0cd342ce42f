"""
Error types for the JavaScript import task.

Every exception renders exactly the message shown to the user, so the
batch runner can forward ``str(error)`` into a failed result.
"""


class ImportJsError(Exception):
    """Base class for every error raised by the import task."""
    def __init__(self, message, path=None):
        self.message = message
        self.path = path
        super().__init__(message)


class ConfigurationError(ImportJsError, ValueError):
    """The task was invoked without what it needs to run."""


class ImportResolutionError(ImportJsError):
    """A file could not be resolved while inlining imports."""


class MissingSourceError(ImportResolutionError):
    """A declared source file does not exist or is not a regular file."""
    def __init__(self, path):
        super().__init__(f"Impossible to find source file `{path}`", path=path)


class MissingImportError(ImportResolutionError):
    """A file referenced by an import statement does not exist."""
    def __init__(self, path):
        super().__init__(f"Impossible to find imported file `{path}`", path=path)


class CyclicImportError(ImportResolutionError):
    """A file ends up importing itself through its own imports."""
    def __init__(self, path, chain=()):
        self.chain = tuple(chain)
        message = f"Cyclic import of file `{path}`"
        if self.chain:
            message += " (" + " -> ".join(self.chain + (path,)) + ")"
        super().__init__(message, path=path)


class WriteError(ImportJsError):
    """The destination file of a source could not be written."""
    def __init__(self, source, destination=None, detail=None):
        self.source = source
        self.destination = destination
        self.detail = detail or None
        message = f"An error occurred while writing the destination file for source file `{source}`"
        if self.detail:
            message += f". Error : {self.detail}"
        super().__init__(message, path=destination)


class UnreadableFileError(ImportResolutionError):
    """A source or imported file exists but its text cannot be read."""
    def __init__(self, path, detail=None):
        self.detail = detail or None
        message = f"Impossible to read file `{path}`"
        if self.detail:
            message += f". Error : {self.detail}"
        super().__init__(message, path=path)
