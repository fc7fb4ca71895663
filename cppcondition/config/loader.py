"""Helpers for loading parsing settings from TOML/JSON sources.

``load_settings`` accepts:

* None -> default CppParsingSettings
* dict -> CppParsingSettings.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings

TOML documents may keep the settings at the top level or in a
``[cppcondition]`` table.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from cppcondition.config.schema import CppParsingSettings

logger = logging.getLogger("cppcondition.config.loader")

SettingsSource = Union[str, Path, Dict[str, Any], None]

_TABLE = "cppcondition"


def _parse_toml(text: str) -> Dict[str, Any]:
    """Parse TOML text into a dict.

    Uses stdlib tomllib on Python 3.11+ and falls back to `tomli` on older
    interpreters.
    """
    try:
        import tomllib  # type: ignore[attr-defined]
    except ImportError:  # pragma: no cover - Python <3.11 path
        try:
            import tomli as tomllib  # type: ignore[import-not-found,no-redef]
        except ImportError as exc:
            raise RuntimeError(
                "TOML configuration requires Python 3.11+ (tomllib) or the "
                "`tomli` package installed"
            ) from exc
    return tomllib.loads(text)


def _parse_text(text: str, fmt: Optional[str]) -> Dict[str, Any]:
    if fmt == "json" or (fmt is None and text.lstrip().startswith("{")):
        data = json.loads(text)
    else:
        data = _parse_toml(text)

    if not isinstance(data, dict):
        raise ValueError("Settings must be a mapping")
    table = data.get(_TABLE)
    if isinstance(table, dict):
        return table
    return data


def load_settings(source: SettingsSource) -> CppParsingSettings:
    """Load CppParsingSettings from various configuration sources.

    Args:
        source: One of:
            * None: returns default settings
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        CppParsingSettings instance.

    Raises:
        ValueError: If the source cannot be parsed or fails validation.
    """
    if source is None:
        logger.debug("No settings source provided; using defaults")
        return CppParsingSettings()

    if isinstance(source, dict):
        logger.debug("Loading settings from provided dict")
        return CppParsingSettings.from_dict(source)

    path = Path(source)
    fmt: Optional[str] = None
    looks_like_path = isinstance(source, Path) or "\n" not in str(source)
    if looks_like_path and path.suffix.lower() in {".toml", ".tml", ".json"} and path.is_file():
        logger.debug("Loading settings from file %s", path)
        text = path.read_text(encoding="utf-8")
        fmt = "json" if path.suffix.lower() == ".json" else "toml"
    else:
        text = str(source)

    # JSONDecodeError and TOMLDecodeError are both ValueErrors
    try:
        data = _parse_text(text, fmt)
    except ValueError as exc:
        raise ValueError(f"Invalid settings: {exc}") from exc

    return CppParsingSettings.from_dict(data)
