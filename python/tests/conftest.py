import logging

import pytest

from tripla import _runtime


@pytest.fixture(autouse=True)
def _isolated_runtime(monkeypatch):
    # setters write through to the environment; undo both after each test
    monkeypatch.setenv("TRIPLA_VALUE_FORMAT", "")
    monkeypatch.setenv("TRIPLA_LOG_LEVEL", "")
    monkeypatch.setattr(_runtime, "_current_value_format", _runtime._default_value_format)
    monkeypatch.setattr(_runtime, "_current_log_level", logging.WARNING)
