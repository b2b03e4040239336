"""
Global test guard: tests must never touch the real holdings file.

Records the state of data/dividend_app_data.json at session start and warns
if it was created, modified or deleted by the time the session ends (tests
are expected to work on tmp_path stores only).
"""
import logging
import warnings
from itertools import count

import pytest

from config.settings import HOLDINGS_FILE

logger = logging.getLogger(__name__)


def _file_state():
    if not HOLDINGS_FILE.exists():
        return None
    stat = HOLDINGS_FILE.stat()
    return (stat.st_size, stat.st_mtime_ns)


@pytest.fixture(autouse=True, scope="session")
def guard_real_data():
    before = _file_state()
    yield
    after = _file_state()
    if before != after:
        msg = f"Real holdings file changed during tests: {HOLDINGS_FILE}"
        logger.error(msg)
        warnings.warn(msg, UserWarning)


@pytest.fixture
def clock():
    """Deterministic clock: one day later on every call, starting 2024-01-01."""
    days = count(1)

    def _tick():
        day = next(days)
        return f"2024-{(day - 1) // 28 + 1:02d}-{(day - 1) % 28 + 1:02d}T00:00:00.000Z"

    return _tick
