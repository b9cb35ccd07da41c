import logging

import pytest
import structlog

from review_fixtures import MULTI_HUNK_DIFF

from mr_review_engine.core.domain.diff import RawFileDiff
from mr_review_engine.infrastructure.configuration.review_settings import ReviewSettings
from mr_review_engine.infrastructure.observability import logger_factory_service


@pytest.fixture
def review_settings() -> ReviewSettings:
    return ReviewSettings(max_files_per_review=20, max_diff_lines_per_file=500)


@pytest.fixture
def multi_hunk_file() -> RawFileDiff:
    return RawFileDiff(old_path="src/app.py", new_path="src/app.py", diff_text=MULTI_HUNK_DIFF)


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch):
    """Each test starts unconfigured; structlog and the root logger are restored afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    monkeypatch.setattr(logger_factory_service, "_CONFIGURED", False)
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
