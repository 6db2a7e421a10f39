"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from commits_since_tag.domain.exceptions import RepoNameFormatError

_FULL_NAME_RE = re.compile(r"(?P<owner>[\w-]+)/(?P<name>[\w-]+)", re.ASCII)

# Official releases only: no pre-release or build metadata.
_VERSION_TAG_RE = re.compile(r"v?\d+\.\d+\.\d+", re.ASCII)


def is_version_tag(name: str) -> bool:
    """Return True if *name* is an official release tag such as ``v1.2.3``."""
    return _VERSION_TAG_RE.fullmatch(name) is not None


@dataclass(frozen=True, slots=True)
class RepoFullName:
    """Validated ``owner/name`` repository identifier.

    Only letters, digits, hyphen and underscore are accepted on either side
    of the single slash.
    """

    owner: str
    name: str

    @classmethod
    def from_string(cls, full_name: str) -> RepoFullName:
        """Parse and validate a user-supplied repository name."""
        match = _FULL_NAME_RE.fullmatch(full_name)
        if not match:
            raise RepoNameFormatError(f"incorrect format: {full_name}")
        return cls(owner=match["owner"], name=match["name"])

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"
