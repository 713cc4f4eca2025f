# topmark:header:start
#
#   project      : StdHeader
#   file         : identity.py
#   file_relpath : src/stdheader/header/identity.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Identity resolver: who is writing the header.

The name and email embedded in a header come from the first source that yields
a value:

1. an explicit `IdentityOverride` supplied by the host (CLI flags or
   environment variables, an editor's global settings, ...);
2. the git committer identity, when ``[git].enabled`` is set;
3. the configured defaults (``[user].name`` / ``[user].email``).

When every source is empty the field renders as `IDENTITY_PLACEHOLDER`
(an empty string); a missing identity is never an error.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from stdheader.config.logging import get_logger
from stdheader.constants import IDENTITY_PLACEHOLDER

if TYPE_CHECKING:
    from stdheader.config.logging import StdheaderLogger
    from stdheader.config.model import Config
    from stdheader.config.types import GitOptions

logger: StdheaderLogger = get_logger(__name__)

# (git binary, config key, global scope) -> value or None
GitLookup = Callable[[str, str, bool], str | None]


@dataclass(frozen=True)
class IdentityOverride:
    """Host-supplied identity taking precedence over every other source."""

    user: str | None = None
    email: str | None = None


def git_config_value(git_bin: str, key: str, global_scope: bool) -> str | None:
    """Read one value from the git configuration.

    Runs ``<git_bin> config [--global] <key>`` synchronously. A missing binary,
    a non-zero exit (key unset, not a repository) or empty output all mean
    "no value".

    Args:
        git_bin (str): Git executable.
        key (str): Configuration key, e.g. ``"user.name"``.
        global_scope (bool): Restrict the lookup to the global git config.

    Returns:
        str | None: The stripped value, or None when unavailable.
    """
    cmd: list[str] = [git_bin, "config"]
    if global_scope:
        cmd.append("--global")
    cmd.append(key)

    try:
        proc: subprocess.CompletedProcess[str] = subprocess.run(  # noqa: S603
            cmd,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.debug("Cannot run %s: %s", cmd, exc)
        return None

    if proc.returncode != 0:
        logger.debug("%s exited with %d: %s", cmd, proc.returncode, proc.stderr.strip())
        return None
    value: str = proc.stdout.strip()
    return value or None


class IdentityResolver:
    """Resolve the user name and email for one header composition.

    Args:
        config (Config): Supplies the defaults and the git settings.
        override (IdentityOverride | None): Host-supplied identity.
        git_lookup (GitLookup | None): Replacement for `git_config_value`
            (used by tests and hosts with their own VCS access).
    """

    def __init__(
        self,
        config: Config,
        override: IdentityOverride | None = None,
        *,
        git_lookup: GitLookup | None = None,
    ) -> None:
        self.config = config
        self.override = override or IdentityOverride()
        self.git_lookup: GitLookup = git_lookup or git_config_value

    def _from_git(self, key: str, global_scope: bool) -> str | None:
        git: GitOptions = self.config.git
        if not git.enabled:
            return None
        return self.git_lookup(git.bin, key, global_scope)

    def resolve_user_or_none(self) -> str | None:
        """Return the user name, or None if no source provides one.

        An explicit override wins even when empty.
        """
        if self.override.user is not None:
            return self.override.user
        return (
            self._from_git("user.name", self.config.git.user_global)
            or self.config.user
            or None
        )

    def resolve_email_or_none(self) -> str | None:
        """Return the email, or None if no source provides one.

        An explicit override wins even when empty.
        """
        if self.override.email is not None:
            return self.override.email
        return (
            self._from_git("user.email", self.config.git.email_global)
            or self.config.email
            or None
        )

    def resolve_user(self) -> str:
        """Return the user name to render (placeholder when unknown)."""
        user: str | None = self.resolve_user_or_none()
        if user is None:
            logger.debug("No user name available; rendering placeholder")
            return IDENTITY_PLACEHOLDER
        return user

    def resolve_email(self) -> str:
        """Return the email to render (placeholder when unknown)."""
        email: str | None = self.resolve_email_or_none()
        if email is None:
            logger.debug("No email available; rendering placeholder")
            return IDENTITY_PLACEHOLDER
        return email
