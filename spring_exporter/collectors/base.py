"""Base collector abstract class for prometheus_client custom collectors."""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List
import logging
import threading
from functools import wraps

from prometheus_client.core import Metric

from ..utils.errors import ScrapeError
from ..utils.metrics import Measurement


class BaseCollector(ABC):
    """
    Abstract base class for all collectors.

    Implements the prometheus_client collector protocol (``collect`` and
    ``describe``). Subclasses only produce ``Measurement`` objects from
    ``scrape``; the base class serializes cycles and converts measurements to
    metric families as they are produced.
    """

    def __init__(self, config: Any, logger: logging.Logger):
        """
        Initialize base collector.

        Args:
            config: Collector-specific configuration
            logger: Logger instance
        """
        self.config = config
        self.logger = logger.getChild(self.__class__.__name__)
        self._lock = threading.Lock()

    @abstractmethod
    def scrape(self) -> Iterator[Measurement]:
        """
        Run one scrape cycle.

        Returns:
            Iterator[Measurement]: Measurements in emission order

        Raises:
            ScrapeError: Any cycle failure (will be caught by safe_collect)

        Note:
            Implementations should use @safe_collect so errors are logged
            instead of reaching the exposition server.
        """
        pass

    @abstractmethod
    def meta_measurements(self) -> List[Measurement]:
        """Measurements whose names are known before any scrape."""
        pass

    def describe(self) -> List[Metric]:
        """Describe the fixed metrics. Called by the registry on registration."""
        return [m.describe() for m in self.meta_measurements()]

    def collect(self) -> Iterator[Metric]:
        """
        Collect metrics, one cycle at a time.

        A concurrent caller blocks until the running cycle is finished and
        then runs its own cycle.
        """
        with self._lock:
            for measurement in self.scrape():
                yield measurement.to_metric_family()


def safe_collect(func):
    """
    Decorator to log scrape errors instead of propagating them.

    Measurements yielded before the error are kept, so the meta-measurements
    of a failed cycle still reach the caller.

    Args:
        func: Generator method to wrap

    Returns:
        Wrapped generator that catches and logs exceptions
    """
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            yield from func(self, *args, **kwargs)
        except ScrapeError as e:
            self.logger.error(f"Error scraping spring endpoint: {e}")
        except Exception as e:
            self.logger.error(f"Collection failed: {e}", exc_info=True)
    return wrapper
