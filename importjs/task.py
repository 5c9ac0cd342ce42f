"""
The ImportJavascript task.

Replaces the import statements of a batch of JavaScript files, either read
from disk through a map of sources to destinations, or received from the
previous task of a pipeline.
"""
import os
from enum import Enum

from .bundler import get_content, replace_imports, source_dir
from .errors import (
    ConfigurationError,
    CyclicImportError,
    ImportResolutionError,
    MissingImportError,
    UnreadableFileError,
    WriteError,
)
from .log import NullLogger
from .result import Err, ErrorKind, Ok, PriorStageEntry, ResultEntry, TaskError

SUCCESS_MESSAGE = "All import statements in JS files replaced."
NO_DESTINATIONS_MESSAGE = "Impossible to run the ImportJavascript task without a destinations map."


class InputMode(Enum):
    """Where the sources of a run come from."""
    FRESH_MAP = "fresh_map"
    CHAINED_STATE = "chained_state"


class ImportJavascript:
    """
    Task inlining `roboimport('module');` statements in JavaScript files.

    Import statements are replaced by the content of the file they link to,
    and can be nested (an imported file can import other files).
    """

    def __init__(self, destinations_map=None, logger=None):
        self.destinations_map = {}
        self.data = {}
        self.return_data = {}
        self.write_output = True
        self.logger = logger or NullLogger()
        self.set_destinations_map(destinations_map)

    def set_destinations_map(self, destinations_map=None):
        """Set the sources to process, mapped to their destination file. Returns self."""
        self.destinations_map = dict(destinations_map or {})
        return self

    def set_logger(self, logger):
        self.logger = logger or NullLogger()
        return self

    def enable_write_file(self):
        self.write_output = True
        return self

    def disable_write_file(self):
        self.write_output = False
        return self

    def receive_state(self, prior):
        """
        Take the output of a previous task as the input of the next run.

        Args:
            prior: Mapping of source path to {content, destination}, or the
                Ok result of a previous task

        Raises:
            ConfigurationError: If `prior` is the Err result of a failed task
        """
        if isinstance(prior, Err):
            raise ConfigurationError(f"Impossible to receive the state of a failed task: {prior.message}")
        if isinstance(prior, Ok):
            prior = prior.data
        self.data = {
            source: entry if isinstance(entry, PriorStageEntry) else PriorStageEntry.model_validate(entry)
            for source, entry in prior.items()
        }
        return self

    @property
    def input_mode(self):
        return InputMode.CHAINED_STATE if self.data else InputMode.FRESH_MAP

    def run(self):
        """
        Replace the import statements of every source, in order.

        Returns:
            Ok with the resolved content of each source, or Err describing
            the first failure (the remaining sources are not processed)

        Raises:
            ConfigurationError: If there is neither a previous state nor a destinations map
        """
        mode = self.input_mode
        if mode is InputMode.FRESH_MAP and not self.destinations_map:
            raise ConfigurationError(NO_DESTINATIONS_MESSAGE)

        self.return_data = {}
        source = None
        try:
            if mode is InputMode.CHAINED_STATE:
                for source, entry in self.data.items():
                    self._process_state(source, entry)
            else:
                for source, destination in self.destinations_map.items():
                    self._process_source(source, destination)
        except (ImportResolutionError, WriteError) as e:
            return Err(_task_error(e, source))

        return Ok(SUCCESS_MESSAGE, dict(self.return_data))

    def _process_state(self, source, entry):
        chain = (os.path.abspath(source),)
        content = replace_imports(entry.content, source_dir(source), chain, self.logger)

        if self.write_output:
            self._write(source, entry.destination, content)

        self.output_success_message(source, entry.destination)
        self.return_data[source] = ResultEntry(content=content, destination=entry.destination)

    def _process_source(self, source, destination):
        content = get_content(source, logger=self.logger)
        self.return_data[source] = ResultEntry(content=content, destination=destination)

        if self.write_output:
            self._write(source, destination, content)

        self.output_success_message(source, destination)

    def _write(self, source, destination, content):
        try:
            self.write_file(destination, content)
        except OSError as e:
            raise WriteError(source, destination, e.strerror or str(e)) from e

    def write_file(self, destination, content):
        """Write `content` to `destination`, creating missing directories first."""
        directory = os.path.dirname(destination)
        if directory and not os.path.isdir(directory):
            os.makedirs(directory, mode=0o755, exist_ok=True)

        with open(destination, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    def output_success_message(self, source, destination):
        message = f"Replaced import statement from file {source}"
        if self.write_output:
            message += f" to {destination}"
        self.logger.info(message)


def _task_error(error, source):
    if isinstance(error, WriteError):
        kind = ErrorKind.WRITE_ERROR
        detail = error.detail
    elif isinstance(error, MissingImportError):
        kind, detail = ErrorKind.MISSING_IMPORT, None
    elif isinstance(error, CyclicImportError):
        kind, detail = ErrorKind.CYCLIC_IMPORT, None
    elif isinstance(error, UnreadableFileError):
        kind, detail = ErrorKind.UNREADABLE_FILE, error.detail
    else:
        kind, detail = ErrorKind.MISSING_SOURCE, None
    return TaskError(kind=kind, message=str(error), source=source, detail=detail)


def task_import_javascript(destinations_map=None, **kwargs):
    """Entry point for task runners: build an ImportJavascript task."""
    return ImportJavascript(destinations_map, **kwargs)
