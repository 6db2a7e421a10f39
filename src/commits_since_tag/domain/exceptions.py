"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class CommitsSinceTagError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class RepoNameFormatError(CommitsSinceTagError):
    """The supplied repository name is not of the form ``owner/name``."""


class ConfigurationError(CommitsSinceTagError):
    """Credentials or other required settings are missing."""


# ── Git-host API errors ─────────────────────────────────────────────────────


class ApiError(CommitsSinceTagError):
    """The remote API answered with a non-200 status.

    ``str(exc)`` is the host-supplied message only; ``path`` is kept for
    diagnostics and never surfaced to callers.
    """

    def __init__(self, message: str, status_code: int, path: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.path = path


class TransportError(CommitsSinceTagError):
    """The request never produced a response (DNS, TLS, timeout...)."""


# ── Policy rejections ───────────────────────────────────────────────────────


class PolicyError(CommitsSinceTagError):
    """A domain-level rejection of an otherwise valid request."""


class ForkedRepositoryError(PolicyError):
    """Forked repositories are never examined."""


class MissingVersionTagError(PolicyError):
    """The repository has no official release tag."""


class NoRepositoriesError(PolicyError):
    """The account owns no repositories visible to the caller."""
