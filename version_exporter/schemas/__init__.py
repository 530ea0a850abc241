from .probe import ProbeResult
from .release import Release, ReleaseList

__all__ = ("ProbeResult", "Release", "ReleaseList")
