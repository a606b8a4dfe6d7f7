import pytest

from mstgraph.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()
