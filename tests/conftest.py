import os
import sys

import pytest

# Add src to path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from utils.logging import get_log_file, set_log_file


@pytest.fixture(autouse=True)
def error_log(tmp_path):
    """Send log_error output to a per-test file instead of src/error.log."""
    previous = get_log_file()
    path = tmp_path / "error.log"
    set_log_file(str(path))
    yield path
    set_log_file(previous)
