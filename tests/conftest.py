"""Fixtures shared by the apprunner tests."""
from unittest.mock import Mock

import pytest

from apprunner.core.protocols import Logger, TimeProvider


@pytest.fixture
def logger():
    return Mock(spec=Logger)


@pytest.fixture
def time_provider():
    return Mock(spec=TimeProvider)
