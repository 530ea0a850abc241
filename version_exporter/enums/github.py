from enum import StrEnum


class GitHubEndpoint(StrEnum):
    RELEASES = "/repos/{repo}/releases"
