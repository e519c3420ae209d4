"""Tests for BaseCollector class."""

import logging
from unittest.mock import patch

import pytest

from spring_exporter.collectors.base import BaseCollector, safe_collect
from spring_exporter.utils.errors import StatusError
from spring_exporter.utils.metrics import Measurement, MetricKind


class MockCollector(BaseCollector):
    """Mock collector for testing BaseCollector functionality."""

    def __init__(self, measurements=None, error=None, config=None, logger=None):
        if logger is None:
            logger = logging.getLogger(__name__)
        super().__init__(config, logger)
        self.measurements = measurements or []
        self.error = error

    def meta_measurements(self):
        return [Measurement("mock_up", "Mock up", 0.0, MetricKind.GAUGE)]

    @safe_collect
    def scrape(self):
        """Mock scrape method."""
        yield from self.measurements
        if self.error is not None:
            raise self.error


class TestBaseCollector:
    """Test suite for BaseCollector."""

    def test_collect_converts_measurements(self):
        collector = MockCollector([
            Measurement("mock_up", "Mock up", 1.0, MetricKind.GAUGE),
            Measurement("mock_value", "value", 42.0),
        ])

        families = list(collector.collect())

        assert [f.name for f in families] == ["mock_up", "mock_value"]
        assert [f.type for f in families] == ["gauge", "unknown"]

    def test_safe_collect_keeps_measurements_before_error(self):
        """Test measurements yielded before a failure are still delivered."""
        collector = MockCollector(
            [Measurement("mock_up", "Mock up", 1.0, MetricKind.GAUGE)],
            error=StatusError(500)
        )

        with patch.object(collector.logger, "error") as mock_error:
            measurements = list(collector.scrape())

        assert len(measurements) == 1
        assert "expected 200" in mock_error.call_args.args[0]

    def test_safe_collect_logs_unexpected_errors_with_traceback(self):
        collector = MockCollector(error=KeyError("missing"))

        with patch.object(collector.logger, "error") as mock_error:
            assert list(collector.scrape()) == []

        assert mock_error.call_args.kwargs.get("exc_info") is True

    def test_describe_uses_meta_measurements(self):
        families = MockCollector().describe()

        assert [f.name for f in families] == ["mock_up"]
        assert families[0].samples == []

    def test_collector_initialization_with_config(self):
        config = {"uri": "http://localhost"}
        collector = MockCollector(config=config)

        assert collector.config == config
        assert collector.logger is not None
        assert not collector._lock.locked()

    def test_collector_logger_hierarchy(self):
        """Test that collector creates child logger."""
        parent_logger = logging.getLogger("test_parent")
        collector = MockCollector(logger=parent_logger)

        assert collector.logger.parent == parent_logger
        assert collector.logger.name == "test_parent.MockCollector"

    def test_base_collector_is_abstract(self):
        with pytest.raises(TypeError):
            BaseCollector(None, logging.getLogger(__name__))
