"""
Bundler for JavaScript imports.

Recursively resolves "roboimport('path/to/module');" statements by inlining
the content of 'path/to/module.js', much like a SASS @import. Module paths
are relative to the directory of the file holding the statement.
"""
import os
import re
from typing import NamedTuple

from .errors import CyclicImportError, MissingImportError, MissingSourceError, UnreadableFileError

# Matches: roboimport('anything');
IMPORT_PATTERN = re.compile(r"roboimport\('([^']*)'\);")
IMPORT_EXTENSION = ".js"


class ImportDirective(NamedTuple):
    """An import statement found in a source: the literal text and the module it names."""
    statement: str
    module: str


def find_imports(content):
    """Return every import statement of `content`, in order of appearance."""
    return [ImportDirective(m.group(0), m.group(1)) for m in IMPORT_PATTERN.finditer(content)]


def source_dir(path):
    """Directory of `path`, with a trailing separator."""
    return (os.path.dirname(path) or os.curdir) + os.sep


def import_path(base_dir, module):
    return base_dir + module + IMPORT_EXTENSION


def read_file(path):
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def replace_imports(content, base_dir, chain=(), logger=None):
    """
    Replace the import statements of `content` by the files they point to.

    Each imported file is resolved recursively before being inlined. The
    substitution is a literal find-and-replace of the statement text, so a
    statement repeated in `content` is replaced everywhere at once.

    Args:
        content: Source code that may contain import statements
        base_dir: Directory (with trailing separator) modules are relative to
        chain: Absolute paths of the files currently being resolved
        logger: Optional logger receiving one debug line per inlined file

    Returns:
        `content` with all import statements replaced, or unmodified if it has none

    Raises:
        MissingImportError: If an imported file doesn't exist
        CyclicImportError: If an imported file is already being resolved
    """
    for directive in find_imports(content):
        path = import_path(base_dir, directive.module)

        if not os.path.isfile(path):
            raise MissingImportError(path)

        imported = get_content(path, chain, logger)
        content = content.replace(directive.statement, imported)

        if logger is not None:
            logger.debug(f"Inlined {path}")

    return content


def get_content(source, chain=(), logger=None):
    """
    Read `source` and return its content with every import inlined.

    Raises:
        MissingSourceError: If `source` is not an existing regular file
        MissingImportError: If one of its (nested) imports doesn't exist
        CyclicImportError: If `source` ends up importing itself
        UnreadableFileError: If `source` exists but cannot be read
    """
    if not os.path.isfile(source):
        raise MissingSourceError(source)

    abs_path = os.path.abspath(source)
    if abs_path in chain:
        raise CyclicImportError(abs_path, chain)

    try:
        content = read_file(source)
    except UnicodeDecodeError as e:
        raise UnreadableFileError(source, f"not valid UTF-8 at byte {e.start}") from e
    except OSError as e:
        raise UnreadableFileError(source, e.strerror or str(e)) from e

    return replace_imports(content, source_dir(source), chain + (abs_path,), logger)


def bundle(file_path, logger=None):
    """Return the content of `file_path` with all its imports inlined."""
    return get_content(file_path, logger=logger)
