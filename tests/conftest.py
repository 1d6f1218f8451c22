from __future__ import annotations

import logging

import pytest

from fetchdump.models.transfer import TransferOptions


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers ``main`` attaches so no test writes to a stale capture stream."""
    yield
    log = logging.getLogger("fetchdump")
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.propagate = True


@pytest.fixture
def make_options():
    def _make(**kwargs) -> TransferOptions:
        defaults = dict(url="https://example.com/", connect_timeout=5.0)
        return TransferOptions(**{**defaults, **kwargs})

    return _make
