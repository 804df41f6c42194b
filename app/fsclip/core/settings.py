"""Engine settings.

Settings are stored in ~/.config/fsclip/config.toml. A missing file is
not an error: the defaults below apply.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fsclip.core.paths import get_settings_path

logger = logging.getLogger(__name__)


class EngineSettings(BaseModel):
    """Tunable behaviour of the action engine.

    Attributes:
        comment_marker: Prefix of lines ignored when reading back an edited list.
        confirm_delete: Ask "really delete?" before a delete batch starts.
        delete_continue_default: Default answer of "Continue?" after a failed delete.
        rename_continue_default: Default answer of "Continue?" after a failed rename.
        paste_continue_default: Default answer of "Continue?" after a failed copy or move.
        clipboard_apply_default: Default answer when applying clipboard edits.
        rename_apply_default: Default answer when applying bulk renames.
        directory_mode: Permission bits for directories created on demand.
        file_mode: Permission bits for files created by ``create``.
    """

    model_config = ConfigDict(extra="forbid")

    comment_marker: Annotated[
        str,
        Field(min_length=1, description="Comment line prefix in edited lists"),
    ] = "#"
    confirm_delete: Annotated[
        bool,
        Field(description="Confirm the target list before deleting"),
    ] = True
    delete_continue_default: Annotated[
        bool,
        Field(description="Continue a delete batch after an error by default"),
    ] = True
    rename_continue_default: Annotated[
        bool,
        Field(description="Continue a rename batch after an error by default"),
    ] = False
    paste_continue_default: Annotated[
        bool,
        Field(description="Continue a copy or move batch after an error by default"),
    ] = True
    clipboard_apply_default: Annotated[
        bool,
        Field(description="Apply clipboard edits by default"),
    ] = True
    rename_apply_default: Annotated[
        bool,
        Field(description="Apply bulk renames by default"),
    ] = False
    directory_mode: Annotated[
        int,
        Field(ge=0, le=0o7777, description="Mode for created directories"),
    ] = 0o755
    file_mode: Annotated[
        int,
        Field(ge=0, le=0o7777, description="Mode for created files"),
    ] = 0o644

    @field_validator("comment_marker")
    @classmethod
    def validate_comment_marker(cls, v: str) -> str:
        """Reject markers containing whitespace (they would never match a trimmed line)."""
        if any(ch.isspace() for ch in v):
            msg = "comment_marker must not contain whitespace"
            raise ValueError(msg)
        return v


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file is not valid TOML."""


def load_settings(path: Path | None = None) -> EngineSettings:
    """Load engine settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default location.

    Returns:
        Validated EngineSettings (defaults if the file does not exist).

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or fails validation.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return EngineSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return EngineSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e


def save_settings(settings: EngineSettings, path: Path | None = None) -> Path:
    """Save engine settings to a TOML file.

    The file is written to a temporary sibling first and moved into
    place with os.replace().

    Args:
        settings: Settings to save.
        path: Destination path. If None, uses the default location.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(settings.model_dump(), f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path
