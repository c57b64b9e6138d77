"""Tests for error reporters."""

import logging

from solders.pubkey import Pubkey

from crowdfund_sdk import (
    CollectingErrorReporter,
    LoggingErrorReporter,
    NullErrorReporter,
    PartialListingError,
    SkippedAccount,
)


class TestLoggingErrorReporter:
    def test_logs_error(self, caplog):
        reporter = LoggingErrorReporter()

        with caplog.at_level(logging.ERROR, logger="crowdfund_sdk.reporter"):
            reporter.report("list_campaigns", ConnectionError("refused"))

        assert "list_campaigns: refused" in caplog.text


class TestCollectingErrorReporter:
    def test_collects_in_order(self):
        reporter = CollectingErrorReporter()
        first = ValueError("one")
        second = ValueError("two")

        reporter.report("a", first)
        reporter.report("b", second)

        assert [(r.context, r.error) for r in reporter.reports] == [("a", first), ("b", second)]

    def test_clear(self):
        reporter = CollectingErrorReporter()
        reporter.report("a", ValueError("one"))

        reporter.clear()

        assert reporter.reports == []


class TestNullErrorReporter:
    def test_drops_report(self):
        assert NullErrorReporter().report("a", ValueError("one")) is None


class TestPartialListingError:
    def test_message_lists_addresses(self):
        address = Pubkey.new_unique()

        error = PartialListingError([SkippedAccount(address=address, reason="bad")])

        assert str(address) in str(error)
        assert error.skipped[0].reason == "bad"
