# topmark:header:start
#
#   project      : StdHeader
#   file         : api.py
#   file_relpath : src/stdheader/api.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Public StdHeader API (stable surface).

Thin wrappers that let editors, save hooks and scripts generate, detect and
apply headers without going through the CLI.

Configuration contract
----------------------
- Public functions accept either a plain **mapping** (mirroring the TOML shape)
  or a frozen `stdheader.config.model.Config`. Mappings are layered over the
  runtime defaults (no file discovery):

```python
from stdheader import api

api.generate_header("main.c", config={"layout": {"length": 100}})
```

- ``config=None`` uses the runtime defaults.
- Comment delimiters default to those of the file type named by ``filename``
  (``#``/``#`` for unknown types); pass ``comment_string`` (``"/* %s */"``) or
  explicit `CommentDelimiters` to override.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any

from stdheader.config.logging import get_logger
from stdheader.config.model import Config, MutableConfig
from stdheader.core.diagnostics import DiagnosticLevel
from stdheader.document import DocumentLike
from stdheader.filetypes import resolve_comment_delimiters
from stdheader.header import updater
from stdheader.header.composer import Header, compose_header
from stdheader.header.identity import IdentityOverride, IdentityResolver
from stdheader.header.matcher import has_header

if TYPE_CHECKING:
    from stdheader.config.logging import StdheaderLogger
    from stdheader.header.delimiters import CommentDelimiters
    from stdheader.header.updater import ApplyResult, Clock, Notifier

logger: StdheaderLogger = get_logger(__name__)

ConfigInput = Config | Mapping[str, Any] | None


def _resolve_config(config: ConfigInput) -> Config:
    if isinstance(config, Config):
        return config
    draft: MutableConfig = MutableConfig.from_defaults()
    if config is not None:
        draft = draft.merge_with(MutableConfig.from_toml_dict(dict(config), where="<api>"))
    resolved: Config = draft.freeze()
    for diag in resolved.diagnostics:
        if diag.level is DiagnosticLevel.INFO:
            logger.info("%s", diag.message)
        else:
            logger.warning("%s", diag.message)
    return resolved


def _resolve_delimiters(
    filename: str,
    delimiters: CommentDelimiters | None,
    comment_string: str | None,
) -> CommentDelimiters:
    if delimiters is not None:
        return delimiters
    return resolve_comment_delimiters(filename or None, comment_string)


def generate_header(
    filename: str = "",
    *,
    config: ConfigInput = None,
    delimiters: CommentDelimiters | None = None,
    comment_string: str | None = None,
    identity: IdentityOverride | None = None,
    now: datetime | None = None,
) -> Header:
    """Compose a header for ``filename``.

    Args:
        filename (str): Name shown on the filename line; also selects the
            comment delimiters when neither ``delimiters`` nor
            ``comment_string`` is given.
        config (ConfigInput): Frozen config or TOML-shaped mapping.
        delimiters (CommentDelimiters | None): Explicit delimiters.
        comment_string (str | None): ``%s`` comment template.
        identity (IdentityOverride | None): Explicit user name/email.
        now (datetime | None): Timestamp (defaults to the current time).

    Returns:
        Header: The header lines.

    Raises:
        ArtTooWideError: If the extended art does not fit.
    """
    cfg: Config = _resolve_config(config)
    return compose_header(
        cfg,
        filename,
        now or datetime.now(),
        _resolve_delimiters(filename, delimiters, comment_string),
        IdentityResolver(cfg, identity),
    )


def has_valid_header(
    lines: Sequence[str] | DocumentLike,
    filename: str = "",
    *,
    config: ConfigInput = None,
    delimiters: CommentDelimiters | None = None,
    comment_string: str | None = None,
) -> bool:
    """Return True if ``lines`` start with a header matching the current layout.

    Args:
        lines (Sequence[str] | DocumentLike): Document lines (without terminators)
            or a document; a document also supplies the filename.
        filename (str): Name used to select the comment delimiters.
        config (ConfigInput): Frozen config or TOML-shaped mapping.
        delimiters (CommentDelimiters | None): Explicit delimiters.
        comment_string (str | None): ``%s`` comment template.

    Returns:
        bool: True iff the structural signature lines match.

    Raises:
        ArtTooWideError: If the extended art does not fit.
    """
    cfg: Config = _resolve_config(config)
    if isinstance(lines, DocumentLike):
        filename = filename or lines.filename
    candidate: Header = compose_header(
        cfg,
        filename,
        datetime.now(),
        _resolve_delimiters(filename, delimiters, comment_string),
        # Identity never appears on a signature line; skip the git lookup.
        IdentityResolver(cfg, git_lookup=lambda _bin, _key, _global: None),
    )
    if isinstance(lines, DocumentLike):
        return has_header(candidate, lines.first_lines(len(candidate)))
    return has_header(candidate, list(lines[: len(candidate)]))


def apply_header(
    document: DocumentLike,
    *,
    config: ConfigInput = None,
    delimiters: CommentDelimiters | None = None,
    comment_string: str | None = None,
    identity: IdentityOverride | None = None,
    clock: Clock | None = None,
    notify: Notifier | None = None,
) -> ApplyResult:
    """Insert or refresh the header of ``document``.

    Failures (art too wide, document not writable) are reported via ``notify``
    and returned as an ``ABORTED`` result; the document is then unchanged.

    Args:
        document (DocumentLike): The document to edit.
        config (ConfigInput): Frozen config or TOML-shaped mapping.
        delimiters (CommentDelimiters | None): Explicit delimiters.
        comment_string (str | None): ``%s`` comment template.
        identity (IdentityOverride | None): Explicit user name/email.
        clock (Clock | None): Source of the current time.
        notify (Notifier | None): Receives user-facing warnings (logged at
            WARNING level by default).

    Returns:
        ApplyResult: What happened.
    """
    cfg: Config = _resolve_config(config)
    kwargs: dict[str, Any] = {}
    if clock is not None:
        kwargs["clock"] = clock
    if notify is not None:
        kwargs["notify"] = notify
    return updater.apply_header(
        document,
        cfg,
        _resolve_delimiters(document.filename, delimiters, comment_string),
        identity=identity,
        **kwargs,
    )


__all__ = [
    "ConfigInput",
    "apply_header",
    "generate_header",
    "has_valid_header",
]
