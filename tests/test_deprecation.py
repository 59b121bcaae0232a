"""Tests for one-shot deprecation warnings (simcore.deprecation)."""

import logging

import pytest

from simcore.deprecation import deprecation_warning, reset_deprecation_warnings
from simcore.flags import set_flags


@pytest.fixture
def records(caplog):
    """Deprecation records captured at WARNING level."""
    caplog.set_level(logging.WARNING, logger="simcore.deprecation")
    return caplog


def _messages(caplog):
    return [r.getMessage() for r in caplog.records if r.name == "simcore.deprecation"]


class TestDeprecationWarning:
    """Tests for deprecation_warning."""

    def test_hidden_by_default(self, records):
        deprecation_warning("old api")
        assert _messages(records) == []

    def test_flag_enables_output(self, records):
        set_flags(deprecation_warnings=True)
        deprecation_warning("old api")
        assert _messages(records) == ["Deprecation warning: old api"]
        assert records.records[0].levelno == logging.WARNING

    def test_logged_once_per_message(self, records):
        deprecation_warning("old api", show=True)
        deprecation_warning("old api", show=True)
        deprecation_warning("other api", show=True)
        deprecation_warning("old api", show=True)
        assert _messages(records) == [
            "Deprecation warning: old api",
            "Deprecation warning: other api",
        ]

    def test_explicit_show_overrides_flag(self, records):
        set_flags(deprecation_warnings=True)
        deprecation_warning("quiet", show=False)
        assert _messages(records) == []

    def test_suppressed_call_does_not_consume_message(self, records):
        deprecation_warning("later", show=False)
        deprecation_warning("later", show=True)
        assert _messages(records) == ["Deprecation warning: later"]

    def test_reset(self, records):
        deprecation_warning("again", show=True)
        reset_deprecation_warnings()
        deprecation_warning("again", show=True)
        assert len(_messages(records)) == 2

    def test_unconfigured_never_writes_stdout(self, records, capfd):
        """Without configure_logging nothing is printed on stdout."""
        deprecation_warning("old api", show=True)
        assert capfd.readouterr().out == ""
        assert _messages(records) == ["Deprecation warning: old api"]
