import time

from version_exporter.core.exc import BaseHTTPException, MissingParameterException

from .abc import AbstractReleaseFetcher
from .metrics import ProbeMetrics, probe_metrics
from .version import VersionComparator


class ProbeService:
    """
    Runs a single probe: validate the query, compare versions and record the result in the probe gauges.
    """

    def __init__(self, fetcher: AbstractReleaseFetcher, metrics: ProbeMetrics = probe_metrics) -> None:
        self.comparator = VersionComparator(fetcher)
        self.metrics = metrics

    async def run(self, repo: str | None, tag: str | None) -> bytes:
        """
        Probe a repository and render the probe gauges.

        Args:
            repo: Repository in owner/name form.
            tag: Currently deployed version.

        Returns:
            The probe registry in the Prometheus text format.

        Raises:
            BaseHTTPException: Any client-facing failure. The error gauge is incremented first.
        """

        start = time.perf_counter()

        try:
            if not repo:
                raise MissingParameterException(parameter="repo")

            if not tag:
                raise MissingParameterException(parameter="tag")

            result = await self.comparator.probe(repo, tag)

        except BaseHTTPException:
            self.metrics.probe_errors.inc()
            raise

        finally:
            self.metrics.probe_duration.set(time.perf_counter() - start)

        self.metrics.up_to_date.set(result.gauge_value)
        return self.metrics.render()
