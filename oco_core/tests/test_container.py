"""
Tests for the composition root and logging setup.

Run with: pytest oco_core/tests/test_container.py -v
"""

import json
import logging

import pytest

from oco_core import logging_config
from oco_core.adapters.driven.messaging.in_memory import InMemoryJobQueue
from oco_core.adapters.driven.messaging.noop import NoopJobSubmitter
from oco_core.application.use_cases import ValidationPolicy
from oco_core.domain.draft import DraftField
from oco_core.domain.jobs import Direction
from oco_core.logging_filter import CorrelationIDFilter, clear_correlation_id, set_correlation_id
from oco_core.wiring import container


@pytest.fixture(autouse=True)
def fresh_container():
    container.reset()
    yield
    container.reset()


class TestContainer:

    def test_singletons_are_shared(self):
        assert container.get_submit_uc() is container.get_submit_uc()
        assert container.get_instrument_selection() is container.get_instrument_selection()

    def test_defaults(self):
        assert isinstance(container.get_job_submitter(), InMemoryJobQueue)
        assert container.get_submit_uc().policy is ValidationPolicy.DEFER
        assert container.new_session().draft.direction is Direction.BUY

    def test_settings_drive_wiring(self, monkeypatch):
        monkeypatch.setattr(container.settings, "JOB_SUBMITTER", "noop")
        monkeypatch.setattr(container.settings, "VALIDATION_POLICY", "strict")
        monkeypatch.setattr(container.settings, "DEFAULT_DIRECTION", "SELL")

        assert isinstance(container.get_job_submitter(), NoopJobSubmitter)
        assert container.get_submit_uc().policy is ValidationPolicy.STRICT
        assert container.new_session().draft.direction is Direction.SELL

    def test_job_history_setting_bounds_memory_queue(self, monkeypatch):
        monkeypatch.setattr(container.settings, "JOB_HISTORY", 1)
        selection = container.get_instrument_selection()
        selection.select("binance", "BTC", "USDT")
        session = container.new_session()
        session.update("highPrice", "110")
        session.update("highLimitPrice", "109")
        session.update("amount", "1")

        session.submit()
        last = session.submit()

        assert container.get_job_submitter().submitted == [last]

    def test_sessions_are_independent(self):
        first = container.new_session()
        second = container.new_session()

        first.update(DraftField.AMOUNT, "1")

        assert second.draft.amount == ""

    def test_end_to_end_submission(self):
        container.get_instrument_selection().select("binance", "BTC", "USD")
        session = container.new_session()
        session.update(DraftField.LOW_PRICE, "100")
        session.update(DraftField.LOW_LIMIT_PRICE, "99")
        session.update(DraftField.AMOUNT, "1")

        job = session.submit()

        assert container.get_job_submitter().submitted == [job]


class TestLogging:

    def test_filter_stamps_correlation_id(self):
        record = logging.LogRecord("oco_core", logging.INFO, __file__, 1, "msg", None, None)
        log_filter = CorrelationIDFilter()

        set_correlation_id("job-9")
        try:
            assert log_filter.filter(record) is True
            assert record.correlation_id == "job-9"
        finally:
            clear_correlation_id()

        log_filter.filter(record)
        assert record.correlation_id == "no-job-id"

    def test_config_selects_formatter(self):
        plain = logging_config.build_logging_config(level="debug", json_output=False)
        structured = logging_config.build_logging_config(level="INFO", json_output=True)

        assert plain["handlers"]["console"]["formatter"] == "simple"
        assert plain["loggers"]["oco_core"]["level"] == "DEBUG"
        assert structured["handlers"]["console"]["formatter"] == "json"

    def test_json_output(self, capsys):
        logging_config.configure_logging(level="INFO", json_output=True)
        try:
            set_correlation_id("job-42")
            logging.getLogger("oco_core.test").info("submitted")
        finally:
            clear_correlation_id()
            for handler in list(logging.getLogger("oco_core").handlers):
                logging.getLogger("oco_core").removeHandler(handler)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["message"] == "submitted"
        assert payload["correlation_id"] == "job-42"
        assert payload["levelname"] == "INFO"
