"""Collector republishing a spring JSON metrics endpoint."""

import logging
from typing import Iterator, List, Optional

from ..config.models import ScrapeTargetConfig
from ..services.fetcher import SpringFetcher
from ..utils.errors import RequestConstructionError
from ..utils.keys import build_fq_name, sanitize_key
from ..utils.metrics import Measurement, MetricKind
from ..utils.payload import parse_payload
from .base import BaseCollector, safe_collect

UP_HELP = "Could spring endpoint be reached"
DURATION_HELP = "How long the spring endpoint took to deliver the metrics"


class SpringCollector(BaseCollector):
    """Collector for a spring metrics endpoint."""

    def __init__(
        self,
        config: ScrapeTargetConfig,
        logger: logging.Logger,
        fetcher: Optional[SpringFetcher] = None
    ):
        """
        Initialize spring collector.

        Args:
            config: Scrape target configuration
            logger: Logger instance
            fetcher: Fetcher to use; built from config when omitted
        """
        super().__init__(config, logger)
        self.fetcher = fetcher or SpringFetcher(config, logger)
        self.up_name = build_fq_name(config.namespace, "up")
        self.duration_name = build_fq_name(config.namespace, "response_duration")

    def meta_measurements(self) -> List[Measurement]:
        return [
            self._duration(0.0),
            self._up(False),
        ]

    @safe_collect
    def scrape(self) -> Iterator[Measurement]:
        """
        Fetch the endpoint and yield its metrics.

        Yields ``response_duration`` and ``up`` first, then one untyped
        measurement per payload key. Any failure after the meta-measurements
        ends the cycle without payload measurements.
        """
        try:
            result = self.fetcher.fetch()
        except RequestConstructionError:
            yield self._duration(0.0)
            yield self._up(False)
            raise

        yield self._duration(result.duration)
        yield self._up(result.reachable)

        if result.error is not None:
            raise result.error

        rows = parse_payload(result.body)
        self.logger.debug(f"Result has {len(rows)} rows")

        # Metric names are unique per cycle; the meta-measurements own theirs
        emitted = {self.up_name: None, self.duration_name: None}
        for key, value in rows:
            snake_key = sanitize_key(key)
            name = build_fq_name(self.config.namespace, snake_key)
            if name in emitted:
                owner = emitted[name]
                if owner is None:
                    self.logger.warning(f"Skipping key {key!r}: {name} is reserved")
                else:
                    self.logger.warning(
                        f"Skipping key {key!r}: {name} already taken by {owner!r}"
                    )
                continue
            emitted[name] = key

            self.logger.debug(f"Adding key {snake_key} (originally {key}) with value {value}")

            yield Measurement(
                name=name,
                documentation=key,
                value=value,
                kind=MetricKind.UNTYPED
            )

    def close(self) -> None:
        """Close the underlying fetcher."""
        self.fetcher.close()

    def _up(self, reachable: bool) -> Measurement:
        return Measurement(
            name=self.up_name,
            documentation=UP_HELP,
            value=1.0 if reachable else 0.0,
            kind=MetricKind.GAUGE
        )

    def _duration(self, seconds: float) -> Measurement:
        return Measurement(
            name=self.duration_name,
            documentation=DURATION_HELP,
            value=seconds,
            kind=MetricKind.GAUGE
        )
