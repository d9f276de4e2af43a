# internals/config/define_config.py
"""Header/footer settings profile dataclass, TOML persistence and validation."""

# region imports
from __future__ import annotations

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # Python 3.10

import tomli_w  # For writing (no stdlib equivalent yet)

import logging
from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from slideheaders.headers_footers import HeadersFooters
    from slideheaders.sheets import SlideShow

log = logging.getLogger("slideheaders")
# endregion


# region Enums
class HeadersFootersTarget(Enum):
    """Which sheet kind a profile applies to."""

    SLIDE = "slide"
    NOTES = "notes"


# endregion


# Field groups, in the order apply_to() writes them.
_TEXT_FIELDS = ("header_text", "footer_text", "date_time_text")
_BOOL_FIELDS = (
    "header_visible",
    "footer_visible",
    "date_time_visible",
    "user_date_visible",
    "slide_number_visible",
)


# region class HeadersFootersConfig
@dataclass
class HeadersFootersConfig:
    """A header/footer settings profile. Fields left as None are not touched when applied."""

    target: HeadersFootersTarget = HeadersFootersTarget.SLIDE

    header_text: Optional[str] = None
    footer_text: Optional[str] = None
    date_time_text: Optional[str] = None  # Custom date shown instead of today's date

    header_visible: Optional[bool] = None
    footer_visible: Optional[bool] = None
    date_time_visible: Optional[bool] = None
    user_date_visible: Optional[bool] = None
    slide_number_visible: Optional[bool] = None

    date_time_format: Optional[int] = None

    # region from_toml
    @classmethod
    def from_toml(cls, path: Path) -> HeadersFootersConfig:
        """
        Load a profile from a TOML file.

        The TOML file should have flat key-value pairs matching the field names.

        Example TOML:
            target = "slide"
            footer_text = "Quarterly review"
            slide_number_visible = true
            date_time_format = 3

        Args:
            path: Path to the .toml config file

        Returns:
            HeadersFootersConfig: Populated profile

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If TOML is invalid, has unknown keys, or holds invalid values
        """
        path = Path(path)
        if not path.exists():
            log.error(f"Config file not found: {path}")
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            error_msg = f"Invalid TOML syntax in {path}"
            log.error(error_msg)
            raise ValueError(error_msg) from e

        # Warn, but keep going.
        if not data:
            log.warning(f"Config toml file is empty: {path}. Nothing will be applied.")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            error_msg = f"Unknown keys in {path}: {unknown}. Valid keys: {sorted(known)}"
            log.error(error_msg)
            raise ValueError(error_msg)

        if "target" in data:
            try:
                data["target"] = HeadersFootersTarget(data["target"])
            except ValueError as e:
                error_msg = (
                    f"Invalid target: '{data['target']}'. "
                    f"Valid options: {[t.value for t in HeadersFootersTarget]}"
                )
                log.error(error_msg)
                raise ValueError(error_msg) from e

        cfg = cls(**data)
        try:
            cfg.validate()
        except ValueError as e:
            log.error(f"Invalid config in {path}: {e}")
            raise
        return cfg

    # endregion

    # region save_toml
    def save_toml(self, path: Path) -> None:
        """
        Save the profile to a TOML file.

        Args:
            path: Where to save the .toml file
        """
        path = Path(path)

        if path.exists() and path.is_dir():
            error_msg = f"Cannot save config: path is a directory, not a file: {path}."
            log.error(error_msg)
            raise ValueError(error_msg)

        path.parent.mkdir(parents=True, exist_ok=True)

        data: dict[str, object] = {"target": self.target.value}
        for name in (*_TEXT_FIELDS, *_BOOL_FIELDS, "date_time_format"):
            data[name] = getattr(self, name)

        # Filter out None values (TOML can't serialize None)
        data = {k: v for k, v in data.items() if v is not None}

        try:
            with open(path, "wb") as f:
                tomli_w.dump(data, f)
        except PermissionError as e:
            error_msg = f"Permission denied writing to: {path}"
            log.error(error_msg)
            raise PermissionError(error_msg) from e
        except OSError as e:
            error_msg = f"Failed to write config file to {path}"
            log.error(error_msg)
            raise OSError(error_msg) from e

    # endregion

    # region validate
    def validate(self) -> None:
        """Validate intrinsic config values (types only; no document access)."""

        if not isinstance(self.target, HeadersFootersTarget):
            raise ValueError(
                f"target must be a HeadersFootersTarget enum, got {type(self.target).__name__}. "
                f"Valid values: {[t.value for t in HeadersFootersTarget]}"
            )

        for field_name in _TEXT_FIELDS:
            val = getattr(self, field_name)
            if val is not None and not isinstance(val, str):
                raise ValueError(
                    f"{field_name} must be a string, got {type(val).__name__}"
                )

        for field_name in _BOOL_FIELDS:
            val = getattr(self, field_name)
            if val is not None and not isinstance(val, bool):
                raise ValueError(
                    f"{field_name} must be a boolean, got {type(val).__name__}"
                )

        # bool is an int subclass; reject it explicitly
        if self.date_time_format is not None and (
            isinstance(self.date_time_format, bool)
            or not isinstance(self.date_time_format, int)
        ):
            raise ValueError(
                f"date_time_format must be an integer, got {type(self.date_time_format).__name__}"
            )

    # endregion

    # region apply_to
    def apply_to(self, headers_footers: HeadersFooters) -> None:
        """
        Write every field that is set onto a HeadersFooters.

        Texts go first, so an explicit visibility of False wins over the
        visibility a text setter turns on.
        """
        self.validate()

        for name in _TEXT_FIELDS:
            value = getattr(self, name)
            if value is not None:
                setattr(headers_footers, name, value)

        for name in _BOOL_FIELDS:
            value = getattr(self, name)
            if value is not None:
                setattr(headers_footers, name, value)

        if self.date_time_format is not None:
            headers_footers.date_time_format = self.date_time_format

        log.debug(f"Applied {self.target.value} header/footer profile")

    def apply_to_slideshow(self, slideshow: SlideShow) -> HeadersFooters:
        """Resolve the slideshow's settings for this profile's target, apply, and return them."""
        if self.target is HeadersFootersTarget.NOTES:
            headers_footers = slideshow.get_notes_headers_footers()
        else:
            headers_footers = slideshow.get_slide_headers_footers()
        self.apply_to(headers_footers)
        return headers_footers

    # endregion


# endregion
