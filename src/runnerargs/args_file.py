
"""
Locating and reading the auxiliary arguments file.

The file is plain text with one argument token per line; blank lines are
skipped and lines are never split or unquoted.  Locations are URLs
(``file:``, ``http:``, ``https:``) or, without a scheme, filesystem paths
relative to the working directory.
"""

from pathlib import Path
from typing import List, Optional
from urllib.parse import urlsplit, SplitResult
from urllib.request import url2pathname

import requests

from .user_error import UserError
from .logger import logger


DEFAULT_ARGS_FILE_NAME = "runner.args"

LOCAL_SCHEMES = ("", "file")
REMOTE_SCHEMES = ("http", "https")


class MalformedArgsLocation(UserError):
    def __init__(self, location: str) -> None:
        self._init("Arguments location %r is not a valid URL.", location)


class ArgsFileUnreadable(UserError):
    def __init__(self, location: str, cause: BaseException) -> None:
        self._init("Arguments could not be read from %r: %s", location, cause)


def resolve_location(declared: Optional[str], cwd: Optional[Path] = None) -> Optional[str]:
    """
    Return the location of the arguments file to merge, or None.

    An explicitly declared location wins.  Otherwise ``runner.args`` in
    ``cwd`` (default: the current working directory) is used when it exists.
    """

    if declared is not None:
        logger.debug("Using declared arguments location %r.", declared)
        return declared

    default_file = (cwd if cwd is not None else Path.cwd()) / DEFAULT_ARGS_FILE_NAME
    if not default_file.exists():
        return None

    location = default_file.absolute().as_uri()
    logger.debug("Using default arguments file %r.", location)
    return location


def _split(location: str) -> SplitResult:
    try:
        parts = urlsplit(location)
    except ValueError as ex:
        raise MalformedArgsLocation(location) from ex

    # Windows drive letters look like one-letter schemes.
    if len(parts.scheme) == 1:
        return SplitResult("", "", location, "", "")

    if parts.scheme in LOCAL_SCHEMES:
        return parts
    if parts.scheme in REMOTE_SCHEMES and parts.netloc:
        return parts
    raise MalformedArgsLocation(location)


def _local_path(location: str, parts: SplitResult) -> Path:
    if parts.scheme == "file":
        return Path(url2pathname(parts.path))
    return Path(location)


def _read_local(location: str, path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8") as reader:
            return reader.read()
    except (OSError, UnicodeDecodeError) as ex:
        raise ArgsFileUnreadable(location, ex) from ex


def _read_remote(location: str) -> str:
    try:
        with requests.get(location) as response:
            response.raise_for_status()
            return response.text
    except requests.RequestException as ex:
        raise ArgsFileUnreadable(location, ex) from ex


def read_lines(location: str) -> List[str]:
    """Fetch ``location`` and return its non-blank lines in file order."""

    parts = _split(location)
    if parts.scheme in REMOTE_SCHEMES:
        text = _read_remote(location)
    else:
        text = _read_local(location, _local_path(location, parts))

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [line for line in text.split("\n") if line.strip()]
    logger.debug("Read %s argument line(s) from %r.", len(lines), location)
    return lines
