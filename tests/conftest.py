import os
import shutil
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'app', 'js')


@pytest.fixture
def js_dir(tmp_path):
    """A fresh copy of the JS fixtures, so tests can write next to them."""
    target = tmp_path / 'js'
    shutil.copytree(FIXTURES_DIR, target)
    return str(target)
