from .abc import AbstractReleaseFetcher
from .github import GitHubReleaseFetcher
from .metrics import ProbeMetrics, probe_metrics
from .probe import ProbeService
from .version import VersionComparator, coerce_version, is_stable, parse_version

__all__ = (
    "AbstractReleaseFetcher",
    "GitHubReleaseFetcher",
    "ProbeMetrics",
    "ProbeService",
    "VersionComparator",
    "coerce_version",
    "is_stable",
    "parse_version",
    "probe_metrics",
)
