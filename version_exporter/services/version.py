import re

from loguru import logger
from semver import Version

from version_exporter.core.exc import InvalidVersionException
from version_exporter.schemas import ProbeResult, Release

from .abc import AbstractReleaseFetcher

NUMERIC_CORE = re.compile(r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?")


def coerce_version(tag: str) -> Version:
    """
    Parse a tag as a semantic version.

    A leading "v" is ignored, leading zeros in the numeric parts are dropped and missing minor or patch
    numbers default to zero, so "v1.2" is 1.2.0 and "2024.01.15" is 2024.1.15.

    Raises:
        ValueError: If the tag is not a semantic version.
    """

    text = tag.strip()

    if text[:1] in {"v", "V"}:
        text = text[1:]

    if match := NUMERIC_CORE.match(text):
        numbers = (str(int(group)) for group in match.groups() if group is not None)
        text = ".".join(numbers) + text[match.end() :]

    return Version.parse(text, optional_minor_and_patch=True)


def parse_version(tag: str) -> Version | None:
    """Return the version a tag names, or None if it is not a semantic version."""
    try:
        return coerce_version(tag)

    except (TypeError, ValueError):
        return None


def is_stable(release: Release, version: Version) -> bool:
    return not (release.is_draft or release.is_prerelease or version.prerelease)


class VersionComparator:
    """
    Finds the latest stable release of a repository and compares it with a deployed version.
    """

    def __init__(self, fetcher: AbstractReleaseFetcher) -> None:
        self.fetcher = fetcher

    async def find_latest(self, repo: str) -> Version | None:
        """
        Scan the releases in upstream order and return the first stable one.

        Drafts, releases flagged as pre-release and tags carrying a pre-release component are skipped.
        Tags that are not semantic versions are logged and skipped.

        Args:
            repo: Repository in owner/name form.

        Returns:
            The latest stable version, or None if the repository has none.
        """

        for release in await self.fetcher.get_releases(repo):
            if release.is_draft or release.is_prerelease:
                continue

            if (version := parse_version(release.tag)) is None:
                logger.warning(f"Failed to parse {release.tag!r} of {repo}, skipping release")
                continue

            if not is_stable(release, version):
                continue

            return version

        return None

    async def probe(self, repo: str, tag: str) -> ProbeResult:
        """
        Compare the deployed tag with the latest stable release of the repository.

        The deployed tag is validated before any request goes out.

        Raises:
            InvalidVersionException: If the tag is not a semantic version.
        """

        try:
            current = coerce_version(tag)

        except ValueError as e:
            raise InvalidVersionException(detail=str(e), tag=tag, error=e) from e

        latest = await self.find_latest(repo)
        result = ProbeResult(repo=repo, current=current, latest=latest)

        logger.debug(
            "Reporting {repo}: current={current} latest={latest} up_to_date={up_to_date}",
            repo=repo,
            current=current,
            latest=latest,
            up_to_date=result.up_to_date,
        )
        return result
