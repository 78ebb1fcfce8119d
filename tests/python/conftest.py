# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Pytest configuration for tensorlib Python tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import tensorlib
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from tensorlib.config import reset_config  # noqa: E402
from tensorlib.observability import TensorLibLogger  # noqa: E402


@pytest.fixture(autouse=True)
def clean_state():
    """Give every test the default configuration and a fresh logger."""
    TensorLibLogger.reset()
    reset_config()
    yield
    TensorLibLogger.reset()
    reset_config()
