"""Discovery of kubeconfig candidates in a directory and name matching."""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from kubectl_cf.core.errors import AmbiguousMatchError, NoMatchError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "config"

# Name pattern of kubeconfig files, group 1 is the candidate name
KUBECONFIG_PATTERN = re.compile(r"^(.+)\.(?:kubeconfig|config)$")


@dataclass(frozen=True)
class Candidate:
    """A kubeconfig file that the managed symlink can point to."""

    name: str
    full_path: Path


def candidate_name(filename: str) -> str | None:
    """Return the candidate name for a filename, or None if it is not a kubeconfig.

    Examples:
        >>> candidate_name("config")
        'config'
        >>> candidate_name("prod.kubeconfig")
        'prod'
        >>> candidate_name("notes.txt") is None
        True
    """
    if filename == DEFAULT_CONFIG_NAME:
        return DEFAULT_CONFIG_NAME
    match = KUBECONFIG_PATTERN.match(filename)
    if match is None:
        return None
    return match.group(1)


def list_candidates(directory: Path) -> list[Candidate]:
    """List kubeconfig candidates directly inside a directory.

    Directories and symlinks are skipped, so the managed symlink itself is never
    offered as a target. Results follow directory listing order.

    Args:
        directory: Directory to scan (not recursive)

    Returns:
        Candidates found, empty if there are none

    Raises:
        OSError: If the directory cannot be read
    """
    candidates: list[Candidate] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_symlink() or entry.is_dir(follow_symlinks=False):
                continue
            name = candidate_name(entry.name)
            if name is None:
                continue
            candidates.append(Candidate(name=name, full_path=directory / entry.name))

    logger.debug("Found %d kubeconfig candidates in %s", len(candidates), directory)
    return candidates


def match_candidates(candidates: list[Candidate], search: str) -> Candidate:
    """Resolve a typed name or prefix to exactly one candidate.

    An exact name match wins over prefix matches, so "prod" selects "prod" even
    when "production" also exists.

    Raises:
        NoMatchError: If no candidate name starts with search
        AmbiguousMatchError: If several names start with search and none equals it
    """
    guesses: list[Candidate] = []
    for candidate in candidates:
        if candidate.name == search:
            return candidate
        if candidate.name.startswith(search):
            guesses.append(candidate)

    if not guesses:
        raise NoMatchError(search)
    if len(guesses) > 1:
        raise AmbiguousMatchError(search, [guess.name for guess in guesses])
    return guesses[0]
