# topmark:header:start
#
#   project      : StdHeader
#   file         : model.py
#   file_relpath : src/stdheader/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, per-session snapshot consumed by the header core.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Immutability:
    - `Config` stores tuples and is ``frozen=True`` to prevent accidental
      mutation at runtime. Use `Config.thaw` → edit → `MutableConfig.freeze`
      for safe updates.

Merge semantics:
    - Every `MutableConfig` field is tri-state: ``None`` means "not set by this
      layer". `MutableConfig.merge_with` is last-wins for set values only, so a
      project file that only sets ``[user].name`` keeps everything else.
    - Defaults are applied in `MutableConfig.freeze` for fields that are still
      unset, after sanitation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING

from stdheader.config.io import (
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_int_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    is_toml_table,
    load_defaults_dict,
    try_load_toml_dict,
)
from stdheader.config.keys import Toml
from stdheader.config.logging import get_logger
from stdheader.config.types import ArtJustify, GitOptions
from stdheader.constants import (
    COMPACT_ART_SIZE,
    DEFAULT_COMPACT_ART,
    DEFAULT_GIT_BIN,
    DEFAULT_LENGTH,
    DEFAULT_MARGIN,
    PYPROJECT_TOOL_SECTION,
    STDHEADER_CONFIG_NAME,
)
from stdheader.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stdheader.config.io import TomlTable
    from stdheader.config.logging import StdheaderLogger

logger: StdheaderLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for StdHeader.

    Attributes:
        length (int): Total width of every header line.
        margin (int): Width of the left and right margins, delimiters included.
        compact_art (tuple[str, ...]): One decorative token per decorated header line
            (exactly seven entries after sanitation).
        extended_art (tuple[str, ...]): Full-width decorative lines appended below
            the text block.
        extended_justify (ArtJustify): Justification of the extended art lines.
        user (str | None): Configured default user name.
        email (str | None): Configured default email.
        git (GitOptions): Version-control identity lookup settings.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading,
            merging or sanitizing config.
    """

    length: int
    margin: int
    compact_art: tuple[str, ...]
    extended_art: tuple[str, ...]
    extended_justify: ArtJustify
    user: str | None
    email: str | None
    git: GitOptions
    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def extended_left(self) -> bool:
        """Whether extended art is left-justified."""
        return self.extended_justify is ArtJustify.LEFT

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict.

        Unset optional values (``None``) are dropped by the renderer.
        """
        return {
            Toml.SECTION_LAYOUT: {
                Toml.KEY_LENGTH: self.length,
                Toml.KEY_MARGIN: self.margin,
            },
            Toml.SECTION_ART: {
                Toml.KEY_COMPACT: list(self.compact_art),
                Toml.KEY_EXTENDED: list(self.extended_art),
                Toml.KEY_EXTENDED_JUSTIFY: self.extended_justify.value,
            },
            Toml.SECTION_USER: {
                Toml.KEY_NAME: self.user,
                Toml.KEY_EMAIL: self.email,
            },
            Toml.SECTION_GIT: {
                Toml.KEY_ENABLED: self.git.enabled,
                Toml.KEY_BIN: self.git.bin,
                Toml.KEY_USER_GLOBAL: self.git.user_global,
                Toml.KEY_EMAIL_GLOBAL: self.git.email_global,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            length=self.length,
            margin=self.margin,
            compact_art=list(self.compact_art),
            extended_art=list(self.extended_art),
            extended_justify=self.extended_justify,
            user=self.user,
            email=self.email,
            git_enabled=self.git.enabled,
            git_bin=self.git.bin,
            git_user_global=self.git.user_global,
            git_email_global=self.git.email_global,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    This builder collects config from defaults, user and project files and
    explicit ``--config`` files, then produces an immutable `Config` via
    `freeze`. All settings default to ``None`` ("not set by this layer").
    """

    length: int | None = None
    margin: int | None = None

    compact_art: list[str] | None = None
    extended_art: list[str] | None = None
    extended_justify: ArtJustify | None = None

    user: str | None = None
    email: str | None = None

    git_enabled: bool | None = None
    git_bin: str | None = None
    git_user_global: bool | None = None
    git_email_global: bool | None = None

    # Stop upward discovery after the directory holding this config.
    root: bool = False

    # Provenance
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # Collected diagnostics while loading / merging / sanitizing config.
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Applies `sanitize` first, so the snapshot always satisfies the shape
        invariants (positive width/margin, exactly seven compact art tokens).
        """
        self.sanitize()

        return Config(
            length=self.length or DEFAULT_LENGTH,
            margin=self.margin or DEFAULT_MARGIN,
            compact_art=tuple(self.compact_art or DEFAULT_COMPACT_ART),
            extended_art=tuple(self.extended_art or ()),
            extended_justify=self.extended_justify or ArtJustify.RIGHT,
            user=self.user,
            email=self.email,
            git=GitOptions(
                enabled=bool(self.git_enabled),
                bin=self.git_bin or DEFAULT_GIT_BIN,
                user_global=True if self.git_user_global is None else self.git_user_global,
                email_global=True if self.git_email_global is None else self.git_email_global,
            ),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    def sanitize(self) -> None:
        """Normalize values in place, recording a warning for every correction.

        Over-wide compact art is reported but kept: rendering then truncates
        header text (and may exceed the width), which is the documented behavior.
        """
        if self.length is None:
            self.length = DEFAULT_LENGTH
        elif self.length <= 0:
            self.diagnostics.add_warning_once(
                f"Invalid [layout].length {self.length}; using {DEFAULT_LENGTH}"
            )
            self.length = DEFAULT_LENGTH

        if self.margin is None:
            self.margin = DEFAULT_MARGIN
        elif self.margin <= 0:
            self.diagnostics.add_warning_once(
                f"Invalid [layout].margin {self.margin}; using {DEFAULT_MARGIN}"
            )
            self.margin = DEFAULT_MARGIN

        if self.compact_art is None:
            self.compact_art = list(DEFAULT_COMPACT_ART)
        elif len(self.compact_art) < COMPACT_ART_SIZE:
            self.diagnostics.add_warning_once(
                f"[art].compact has {len(self.compact_art)} entries, expected "
                f"{COMPACT_ART_SIZE}; padding with empty entries"
            )
            self.compact_art = self.compact_art + [""] * (COMPACT_ART_SIZE - len(self.compact_art))
        elif len(self.compact_art) > COMPACT_ART_SIZE:
            self.diagnostics.add_warning_once(
                f"[art].compact has {len(self.compact_art)} entries, expected "
                f"{COMPACT_ART_SIZE}; ignoring the extra entries"
            )
            self.compact_art = self.compact_art[:COMPACT_ART_SIZE]

        content_width: int = self.length - self.margin * 2
        if content_width <= 0:
            self.diagnostics.add_warning_once(
                f"[layout].length {self.length} leaves no room inside margins of {self.margin}"
            )
        widest: int = max((len(token) for token in self.compact_art), default=0)
        if widest > max(content_width, 0):
            self.diagnostics.add_warning_once(
                f"[art].compact entries are {widest} columns wide but only "
                f"{max(content_width, 0)} fit; header lines will overflow"
            )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Build a draft populated with the runtime defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, where: str = "") -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Wrong value types and unknown keys are reported as warnings in the
        draft's diagnostics and otherwise ignored.

        Args:
            data (TomlTable): The parsed TOML data (already unwrapped from
                ``[tool.stdheader]`` for pyproject files).
            where (str): Source label used as a prefix in diagnostics.

        Returns:
            MutableConfig: The resulting draft.
        """
        draft: MutableConfig = cls()
        diags: DiagnosticLog = draft.diagnostics
        prefix: str = f"{where}:" if where else ""

        for key, value in data.items():
            if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
                diags.add_warning(f"Unknown config key {prefix}{key}")
                continue
            allowed: frozenset[str] | None = Toml.ALLOWED_SECTION_KEYS.get(key)
            if allowed is not None and is_toml_table(value):
                for sub in value:
                    if sub not in allowed:
                        diags.add_warning(f"Unknown config key {prefix}[{key}].{sub}")

        draft.root = bool(data.get(Toml.KEY_ROOT, False))

        layout_tbl: TomlTable = get_table_value(data, Toml.SECTION_LAYOUT)
        logger.trace("TOML [layout]: %s", layout_tbl)
        art_tbl: TomlTable = get_table_value(data, Toml.SECTION_ART)
        logger.trace("TOML [art]: %s", art_tbl)
        user_tbl: TomlTable = get_table_value(data, Toml.SECTION_USER)
        logger.trace("TOML [user]: %s", user_tbl)
        git_tbl: TomlTable = get_table_value(data, Toml.SECTION_GIT)
        logger.trace("TOML [git]: %s", git_tbl)

        def _where(section: str) -> str:
            return f"{prefix}[{section}]"

        draft.length = get_int_value_or_none_checked(
            layout_tbl,
            Toml.KEY_LENGTH,
            where=_where(Toml.SECTION_LAYOUT),
            diagnostics=diags,
            logger=logger,
        )
        draft.margin = get_int_value_or_none_checked(
            layout_tbl,
            Toml.KEY_MARGIN,
            where=_where(Toml.SECTION_LAYOUT),
            diagnostics=diags,
            logger=logger,
        )

        draft.compact_art = get_string_list_value_or_none_checked(
            art_tbl,
            Toml.KEY_COMPACT,
            where=_where(Toml.SECTION_ART),
            diagnostics=diags,
            logger=logger,
        )
        draft.extended_art = get_string_list_value_or_none_checked(
            art_tbl,
            Toml.KEY_EXTENDED,
            where=_where(Toml.SECTION_ART),
            diagnostics=diags,
            logger=logger,
        )
        draft.extended_justify = get_enum_value_checked(
            art_tbl,
            Toml.KEY_EXTENDED_JUSTIFY,
            ArtJustify,
            where=_where(Toml.SECTION_ART),
            diagnostics=diags,
            logger=logger,
        )

        draft.user = get_string_value_or_none_checked(
            user_tbl,
            Toml.KEY_NAME,
            where=_where(Toml.SECTION_USER),
            diagnostics=diags,
            logger=logger,
        )
        draft.email = get_string_value_or_none_checked(
            user_tbl,
            Toml.KEY_EMAIL,
            where=_where(Toml.SECTION_USER),
            diagnostics=diags,
            logger=logger,
        )

        git_where: str = _where(Toml.SECTION_GIT)
        draft.git_enabled = get_bool_value_or_none_checked(
            git_tbl, Toml.KEY_ENABLED, where=git_where, diagnostics=diags, logger=logger
        )
        draft.git_bin = get_string_value_or_none_checked(
            git_tbl, Toml.KEY_BIN, where=git_where, diagnostics=diags, logger=logger
        )
        draft.git_user_global = get_bool_value_or_none_checked(
            git_tbl, Toml.KEY_USER_GLOBAL, where=git_where, diagnostics=diags, logger=logger
        )
        draft.git_email_global = get_bool_value_or_none_checked(
            git_tbl, Toml.KEY_EMAIL_GLOBAL, where=git_where, diagnostics=diags, logger=logger
        )

        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``stdheader.toml`` and ``pyproject.toml`` (using its
        ``[tool.stdheader]`` table).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft if successful; None if the file cannot
                be parsed or a pyproject.toml has no ``[tool.stdheader]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable | None = try_load_toml_dict(path)
        if toml_data is None:
            return None

        if path.name == "pyproject.toml":
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, "tool"), PYPROJECT_TOOL_SECTION
            )
            if not tool_section:
                logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, where=str(path))
        draft.config_files = [path]
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are returned **root-most → nearest**; within one directory
        ``pyproject.toml`` comes before ``stdheader.toml`` so that the tool file
        wins on merge. A config setting ``root = true`` stops the walk after its
        directory.

        Args:
            start (Path): The Path instance where discovery starts.

        Returns:
            list[Path]: Discovered config file paths ordered for stable merging.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []

            for name in ("pyproject.toml", STDHEADER_CONFIG_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                mc: MutableConfig | None = cls.from_toml_file(p)
                if mc is None:
                    continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                root_stop_here = root_stop_here or mc.root

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def discover_user_config_file(cls) -> Path | None:
        """Return a user-scoped config path if it exists.

        Looks under XDG config (``$XDG_CONFIG_HOME/stdheader/stdheader.toml``) and a
        legacy fallback (``~/.stdheader.toml``). The first existing path is returned.
        """
        xdg: str | None = os.environ.get("XDG_CONFIG_HOME")
        base: Path = Path(xdg) if xdg else Path.home() / ".config"
        xdg_path: Path = base / "stdheader" / STDHEADER_CONFIG_NAME
        legacy: Path = Path.home() / f".{STDHEADER_CONFIG_NAME}"
        for p in (xdg_path, legacy):
            if p.is_file():
                return p
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Merge order (lowest → highest precedence):
            1) Built-in defaults
            2) User config (XDG / legacy)
            3) Project configs discovered upward **root → current**
            4) Extra config files passed explicitly via ``--config``

        Args:
            anchor (Path | None): Discovery start (CWD if None); a file's parent is used.
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                last, in the given order.
            no_config (bool): If True, skip user and project discovery.

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()
        start: Path = anchor or Path.cwd()

        if not no_config:
            user_cfg_path: Path | None = cls.discover_user_config_file()
            if user_cfg_path is not None:
                user_cfg: MutableConfig | None = cls.from_toml_file(user_cfg_path)
                if user_cfg is not None:
                    draft = draft.merge_with(user_cfg)
                    draft.diagnostics.add_info(f"Loaded user config {user_cfg_path}")

            for cfg_path in cls.discover_local_config_files(start):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)
                    draft.diagnostics.add_info(f"Loaded project config {cfg_path}")

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is None:
                draft.diagnostics.add_error(f"Cannot load config file {extra}")
                continue
            draft = draft.merge_with(mc)
            draft.diagnostics.add_info(f"Loaded config file {extra}")

        return draft

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where set values from ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """

        def _pick(name: str) -> object:
            value: object = getattr(other, name)
            return value if value is not None else getattr(self, name)

        merged = replace(
            self,
            length=_pick("length"),
            margin=_pick("margin"),
            compact_art=_pick("compact_art"),
            extended_art=_pick("extended_art"),
            extended_justify=_pick("extended_justify"),
            user=_pick("user"),
            email=_pick("email"),
            git_enabled=_pick("git_enabled"),
            git_bin=_pick("git_bin"),
            git_user_global=_pick("git_user_global"),
            git_email_global=_pick("git_email_global"),
            root=other.root,
            config_files=self.config_files + other.config_files,
            diagnostics=DiagnosticLog.from_iterable([*self.diagnostics, *other.diagnostics]),
        )
        return merged
