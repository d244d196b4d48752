"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so `tests.unit.checker_test_utils` and
`linter_test_utils` import without installing the package.
"""

import pytest

from flow_style_linter.infrastructure.di.container import FlowStyleContainer


@pytest.fixture(autouse=True)
def _fresh_container():
    """Each test sees a container built from its own working directory."""
    FlowStyleContainer.reset_instance()
    yield
    FlowStyleContainer.reset_instance()
