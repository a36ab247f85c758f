from typing import List, NamedTuple

DEFAULT_HOST = "github.com"


class PathCheck(NamedTuple):
    ok: bool
    message: str


def split_path(path: str) -> List[str]:
    """
    "github.com/owner/repo" -> ["github.com", "owner", "repo"].
    Empty segments are kept, so a trailing slash makes the path invalid.
    """
    return path.split("/")


def check_path(segments: List[str], expected_host: str = DEFAULT_HOST) -> PathCheck:
    # Expected shape: [host, owner or organization, repository]
    if len(segments) != 3:
        return PathCheck(False, "Incorrect path length")
    if segments[0].lower() != expected_host.lower():
        return PathCheck(False, "Not a github link")
    return PathCheck(True, "All good")
