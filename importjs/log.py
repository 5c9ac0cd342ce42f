"""
Loggers the import task writes its messages to.

Any object with `info(message)` and `debug(message)` methods can be given to
the task; these are the ones shipped with it.
"""
import sys


class NullLogger:
    """Discards everything. Used when no logger is set."""

    def info(self, message):
        pass

    def debug(self, message):
        pass


class ConsoleLogger:
    """Log informational messages to stderr, and debug ones too when verbose."""

    def __init__(self, verbose=False, stream=None):
        self.verbose = verbose
        self.stream = stream

    def info(self, message):
        print(f"\033[92m\033[1mINFO:\033[0m {message}", file=self.stream or sys.stderr)

    def debug(self, message):
        if self.verbose:
            print(f"\033[94mDEBUG:\033[0m {message}", file=self.stream or sys.stderr)


class MemoryLogger:
    """Keeps informational messages in memory so they can be inspected."""

    def __init__(self):
        self.logs = []
        self.debug_logs = []

    def info(self, message):
        self.logs.append(message)

    def debug(self, message):
        self.debug_logs.append(message)

    def clear(self):
        self.logs = []
        self.debug_logs = []
        return self
