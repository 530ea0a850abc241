from prometheus_client import CollectorRegistry, Gauge, generate_latest


class ProbeMetrics:
    """
    Gauges reported by /probe.

    They are kept out of the default registry so /metrics only carries process metrics,
    and every probe renders them through a registry of its own.
    """

    def __init__(self) -> None:
        self.up_to_date = Gauge(
            "up_to_date",
            "will be 0 if there is a new version available",
            registry=None,
        )
        self.probe_duration = Gauge(
            "probe_duration_seconds",
            "Returns how long the probe took to complete in seconds",
            registry=None,
        )
        self.probe_errors = Gauge(
            "probe_error_count",
            "Returns the count of probe errors",
            registry=None,
        )

    @property
    def collectors(self) -> tuple[Gauge, ...]:
        return self.up_to_date, self.probe_duration, self.probe_errors

    def registry(self) -> CollectorRegistry:
        registry = CollectorRegistry()

        for collector in self.collectors:
            registry.register(collector)

        return registry

    def render(self) -> bytes:
        return generate_latest(self.registry())


probe_metrics = ProbeMetrics()
