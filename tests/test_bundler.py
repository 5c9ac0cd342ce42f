"""
Unit tests for the import bundler.
"""
import os
import tempfile
import pytest
from importjs.bundler import bundle, find_imports, get_content, import_path, replace_imports, source_dir
from importjs.errors import CyclicImportError, MissingImportError, MissingSourceError
from importjs.log import MemoryLogger

BOGUS = '// Some bogus JS code goes here'


class TestFindImports:
    """Tests for import statement detection."""

    def test_no_imports(self):
        assert find_imports(BOGUS) == []

    def test_finds_all_in_order(self):
        content = "roboimport('b');\nvar x = 1;\nroboimport('a/c');"
        imports = find_imports(content)
        assert [i.module for i in imports] == ['b', 'a/c']
        assert imports[0].statement == "roboimport('b');"

    def test_two_statements_on_one_line(self):
        """The module name stops at the first closing quote."""
        imports = find_imports("roboimport('a');roboimport('b');")
        assert [i.module for i in imports] == ['a', 'b']

    def test_requires_exact_syntax(self):
        """Double quotes, spaces or a missing semicolon are not import statements."""
        assert find_imports('roboimport("a");') == []
        assert find_imports("roboimport( 'a' );") == []
        assert find_imports("roboimport('a')") == []


class TestPaths:
    def test_source_dir_has_trailing_separator(self):
        assert source_dir(os.path.join('app', 'js', 'main.js')) == os.path.join('app', 'js') + os.sep

    def test_source_dir_without_directory(self):
        assert source_dir('main.js') == os.curdir + os.sep

    def test_import_path_appends_extension(self):
        assert import_path('app' + os.sep, 'imports/bogus') == 'app' + os.sep + 'imports/bogus.js'


class TestBundle:
    """Tests for recursive import resolution."""

    def test_simple_file_no_imports(self, js_dir):
        """A file with no imports should be returned as-is."""
        assert bundle(os.path.join(js_dir, 'no-import.js')) == BOGUS

    def test_single_import(self, js_dir):
        """The import statement is replaced by the imported file's content."""
        assert bundle(os.path.join(js_dir, 'simple.js')) == BOGUS

    def test_nested_imports(self, js_dir):
        """Imports within imported files are resolved relative to their own directory."""
        result = bundle(os.path.join(js_dir, 'nested.js'))
        assert result == 'var level2 = true;\n\nvar level1 = true;\n\nvar main = true;\n'
        assert 'roboimport' not in result

    def test_missing_import_raises_error(self, js_dir):
        """The error names the fully resolved path of the missing file."""
        with pytest.raises(MissingImportError) as exc_info:
            bundle(os.path.join(js_dir, 'simple-wrong.js'))

        expected = os.path.join(js_dir, 'imports', 'not-here.js')
        assert str(exc_info.value) == f'Impossible to find imported file `{expected}`'
        assert exc_info.value.path == expected

    def test_missing_source_raises_error(self):
        with pytest.raises(MissingSourceError, match='Impossible to find source file `bogus`'):
            get_content('bogus')

    def test_directory_is_not_a_source(self, js_dir):
        with pytest.raises(MissingSourceError):
            get_content(os.path.join(js_dir, 'imports'))

    def test_import_of_a_directory_raises_error(self, js_dir):
        os.makedirs(os.path.join(js_dir, 'imports', 'dir.js'))
        content = "roboimport('imports/dir');"

        with pytest.raises(MissingImportError, match='Impossible to find imported file'):
            replace_imports(content, js_dir + os.sep)

    def test_repeated_import_replaced_at_once(self):
        """Identical statements are all replaced by the same content."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with open(os.path.join(tmpdir, 'lib.js'), 'w') as f:
                f.write('var lib;')

            content = "roboimport('lib');\nvar a;\nroboimport('lib');"
            result = replace_imports(content, tmpdir + os.sep)

            assert result == 'var lib;\nvar a;\nvar lib;'

    def test_diamond_imports_are_not_deduplicated(self):
        """A file imported through two branches is inlined twice."""
        with tempfile.TemporaryDirectory() as tmpdir:
            files = {
                'main.js': "roboimport('a');\nroboimport('b');",
                'a.js': "roboimport('shared');//a",
                'b.js': "roboimport('shared');//b",
                'shared.js': 'var shared;',
            }
            for name, content in files.items():
                with open(os.path.join(tmpdir, name), 'w') as f:
                    f.write(content)

            result = bundle(os.path.join(tmpdir, 'main.js'))

            assert result == 'var shared;//a\nvar shared;//b'

    def test_cycle_detection(self):
        """Circular imports fail with the chain of files involved."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with open(os.path.join(tmpdir, 'a.js'), 'w') as f:
                f.write("roboimport('b');\nvar a;")
            with open(os.path.join(tmpdir, 'b.js'), 'w') as f:
                f.write("roboimport('a');\nvar b;")

            with pytest.raises(CyclicImportError) as exc_info:
                bundle(os.path.join(tmpdir, 'a.js'))

            a_path = os.path.abspath(os.path.join(tmpdir, 'a.js'))
            assert exc_info.value.path == a_path
            assert len(exc_info.value.chain) == 2
            assert str(exc_info.value).startswith(f'Cyclic import of file `{a_path}`')

    def test_self_import(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with open(os.path.join(tmpdir, 'self.js'), 'w') as f:
                f.write("roboimport('self');")

            with pytest.raises(CyclicImportError):
                bundle(os.path.join(tmpdir, 'self.js'))

    def test_debug_log_per_import(self, js_dir):
        logger = MemoryLogger()
        bundle(os.path.join(js_dir, 'nested.js'), logger=logger)

        assert len(logger.debug_logs) == 2
        assert logger.debug_logs[0].endswith('level-2.js')
        assert logger.logs == []
