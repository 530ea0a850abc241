"""Tests for tag parsing and latest stable release selection."""

import pytest
from semver import Version

from tests.utils import StubReleaseFetcher, release
from version_exporter.core.exc import FetchException, InvalidVersionException
from version_exporter.schemas import Release
from version_exporter.services import VersionComparator, coerce_version, is_stable, parse_version


class TestParseVersion:
    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("v2.1.0", Version(2, 1, 0)),
            ("2.1.0", Version(2, 1, 0)),
            ("V1.0.3", Version(1, 0, 3)),
            ("v1.2", Version(1, 2, 0)),
            ("v3.0.0-rc1", Version(3, 0, 0, prerelease="rc1")),
            ("1.0.0+build.5", Version(1, 0, 0, build="build.5")),
            ("2024.01.15", Version(2024, 1, 15)),
            ("v01.002.0003", Version(1, 2, 3)),
        ],
    )
    def test_valid_tags(self, tag: str, expected: Version) -> None:
        assert parse_version(tag) == expected

    @pytest.mark.parametrize("tag", ["not-a-version", "", "latest", "v", "release-2024-01-01"])
    def test_invalid_tags_return_none(self, tag: str) -> None:
        assert parse_version(tag) is None

    def test_coerce_raises_with_parser_message(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            coerce_version("not-a-version")

        assert "not-a-version" in str(exc_info.value)

    def test_prerelease_sorts_below_release(self) -> None:
        assert parse_version("v2.0.0-beta.1") < parse_version("v2.0.0")


class TestIsStable:
    def test_flags_and_prerelease_component(self) -> None:
        version = Version(1, 0, 0)

        assert is_stable(Release.model_validate(release("v1.0.0")), version)
        assert not is_stable(Release.model_validate(release("v1.0.0", draft=True)), version)
        assert not is_stable(Release.model_validate(release("v1.0.0", prerelease=True)), version)
        assert not is_stable(Release.model_validate(release("v1.0.0-rc1")), Version(1, 0, 0, prerelease="rc1"))


class TestFindLatest:
    @pytest.mark.asyncio
    async def test_first_stable_release_wins(self) -> None:
        fetcher = StubReleaseFetcher([release("v2.1.0"), release("v2.0.0")])

        assert await VersionComparator(fetcher).find_latest("acme/widget") == Version(2, 1, 0)
        assert fetcher.calls == ["acme/widget"]

    @pytest.mark.asyncio
    async def test_skips_drafts_and_prereleases_anywhere(self) -> None:
        fetcher = StubReleaseFetcher(
            [
                release("v3.0.0", draft=True),
                release("v2.9.0", prerelease=True),
                release("v2.8.0"),
                release("v2.7.0", draft=True),
            ]
        )

        assert await VersionComparator(fetcher).find_latest("acme/widget") == Version(2, 8, 0)

    @pytest.mark.asyncio
    async def test_skips_semantic_prerelease_not_flagged_upstream(self) -> None:
        fetcher = StubReleaseFetcher([release("v2.0.0-beta.1"), release("v1.2.0-rc1"), release("v1.1.0")])

        assert await VersionComparator(fetcher).find_latest("acme/widget") == Version(1, 1, 0)

    @pytest.mark.asyncio
    async def test_unparsable_tags_are_skipped(self) -> None:
        fetcher = StubReleaseFetcher([release("nightly"), release("v1.4.2")])

        assert await VersionComparator(fetcher).find_latest("acme/widget") == Version(1, 4, 2)

    @pytest.mark.asyncio
    async def test_calendar_versioned_tags_compare(self) -> None:
        fetcher = StubReleaseFetcher([release("2024.02.01"), release("2024.01.15")])

        result = await VersionComparator(fetcher).probe("acme/widget", "2024.01.15")

        assert result.latest == Version(2024, 2, 1)
        assert result.up_to_date is False

    @pytest.mark.asyncio
    async def test_release_without_tag_is_skipped(self) -> None:
        fetcher = StubReleaseFetcher([{"tag_name": None}, release("v1.0.0")])

        assert await VersionComparator(fetcher).find_latest("acme/widget") == Version(1, 0, 0)

    @pytest.mark.asyncio
    async def test_no_stable_release(self) -> None:
        fetcher = StubReleaseFetcher([release("v3.0.0-rc1", prerelease=True), release("junk")])

        assert await VersionComparator(fetcher).find_latest("acme/widget") is None

    @pytest.mark.asyncio
    async def test_empty_release_list(self) -> None:
        assert await VersionComparator(StubReleaseFetcher()).find_latest("acme/widget") is None

    @pytest.mark.asyncio
    async def test_fetch_errors_propagate(self) -> None:
        fetcher = StubReleaseFetcher(error=lambda: FetchException(repo="acme/widget", error="boom"))

        with pytest.raises(FetchException):
            await VersionComparator(fetcher).find_latest("acme/widget")


class TestProbe:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "latest, current, up_to_date",
        [
            ("v2.0.0", "v1.9.0", False),
            ("v1.9.0", "v2.0.0", True),
            ("v2.1.0", "v2.1.0", True),
            ("v2.1.0", "2.1", True),
            ("v2.1.0", "v2.1.0-rc1", False),
            ("2024.02.01", "2024.01.15", False),
            ("2024.01.15", "2024.01.15", True),
        ],
    )
    async def test_comparison(self, latest: str, current: str, up_to_date: bool) -> None:
        result = await VersionComparator(StubReleaseFetcher([release(latest)])).probe("acme/widget", current)

        assert result.up_to_date is up_to_date
        assert result.gauge_value == (1.0 if up_to_date else 0.0)

    @pytest.mark.asyncio
    async def test_no_releases_is_up_to_date(self) -> None:
        result = await VersionComparator(StubReleaseFetcher()).probe("acme/widget", "v0.0.1")

        assert result.latest is None
        assert result.up_to_date is True

    @pytest.mark.asyncio
    async def test_invalid_tag_is_rejected_before_fetching(self) -> None:
        fetcher = StubReleaseFetcher([release("v1.0.0")])

        with pytest.raises(InvalidVersionException) as exc_info:
            await VersionComparator(fetcher).probe("acme/widget", "not-a-version")

        assert exc_info.value.status_code == 400
        assert "not-a-version" in exc_info.value.message
        assert fetcher.calls == []
