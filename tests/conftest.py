import pytest
import structlog

@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
