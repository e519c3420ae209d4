"""Measurement data structures emitted by collectors."""

from dataclasses import dataclass
from enum import Enum

from prometheus_client.core import GaugeMetricFamily, Metric, UnknownMetricFamily


class MetricKind(Enum):
    """Exposition type of a measurement."""

    GAUGE = "gauge"
    UNTYPED = "untyped"


@dataclass(frozen=True)
class Measurement:
    """Single sample produced by one scrape cycle."""

    name: str  # Fully-qualified metric name
    documentation: str  # Help text
    value: float
    kind: MetricKind = MetricKind.UNTYPED

    def to_metric_family(self) -> Metric:
        """
        Convert to a prometheus_client metric family holding one sample.

        Returns:
            Metric: Gauge or untyped family with this measurement's value
        """
        if self.kind is MetricKind.GAUGE:
            return GaugeMetricFamily(self.name, self.documentation, value=self.value)
        return UnknownMetricFamily(self.name, self.documentation, value=self.value)

    def describe(self) -> Metric:
        """Return a sample-less family, used when registering a collector."""
        if self.kind is MetricKind.GAUGE:
            return GaugeMetricFamily(self.name, self.documentation)
        return UnknownMetricFamily(self.name, self.documentation)
