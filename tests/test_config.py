from __future__ import annotations

import pytest
from pydantic import ValidationError

from fetchdump.core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FETCHDUMP_CONNECT_TIMEOUT", raising=False)
        assert Settings(_env_file=None).connect_timeout == 5.0

    def test_timeout_from_environment(self, monkeypatch):
        monkeypatch.setenv("FETCHDUMP_CONNECT_TIMEOUT", "2.5")
        assert Settings(_env_file=None).connect_timeout == 2.5

    @pytest.mark.parametrize("raw", ["0", "-3"])
    def test_non_positive_timeout_rejected_at_load(self, monkeypatch, raw):
        monkeypatch.setenv("FETCHDUMP_CONNECT_TIMEOUT", raw)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
