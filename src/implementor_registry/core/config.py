"""Declarative settings for the inspection CLI.

Settings files are JSON or YAML mappings. Unknown keys are rejected so typos
fail loudly instead of being silently ignored.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

SUPPORTED_CONFIG_SUFFIXES: tuple[str, ...] = (".json", ".yaml", ".yml")


@dataclass(frozen=True, slots=True)
class InspectSettings:
    """Parsed ``inspect`` section of a settings file.

    Parameters
    ----------
    root : pathlib.Path | None
        Default ``trait.impl`` directory for ``list``.
    crate : str | None
        Default crate filter for ``list``.
    as_json : bool
        Whether ``show`` prints the table as JSON by default.
    """

    root: Path | None = None
    crate: str | None = None
    as_json: bool = False


def load_config_mapping(path: str | Path) -> dict[str, Any]:
    """Read a settings file for the ``show``/``list`` commands.

    Parameters
    ----------
    path : str | pathlib.Path
        File holding an ``inspect`` section, for example::

            inspect:
              root: docs/trait.impl
              crate: tower

        The suffix selects the decoder (`.json`, `.yaml` or `.yml`).

    Returns
    -------
    dict[str, Any]
        Decoded top-level object, not yet checked for known sections.

    Raises
    ------
    ValueError
        If the suffix has no decoder or the file does not hold an object.
    """

    config_path = Path(path)
    suffix = config_path.suffix.lower()
    if suffix not in SUPPORTED_CONFIG_SUFFIXES:
        supported = ", ".join(SUPPORTED_CONFIG_SUFFIXES)
        raise ValueError(
            f"unsupported config file extension {suffix!r}; expected one of {supported}"
        )

    with config_path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle) if suffix == ".json" else yaml.safe_load(handle)

    if not isinstance(raw, dict):
        raise ValueError("config root must be a JSON/YAML object")
    logger.debug("loaded settings from %s", config_path)
    return raw


def validate_allowed_keys(
    mapping: Mapping[str, Any],
    *,
    field_name: str,
    allowed_keys: Iterable[str],
) -> None:
    """Fail on misspelled settings keys such as ``inspect.crates``.

    ``field_name`` is the dotted location reported in the error, e.g.
    ``config.inspect``. Unknown keys are listed sorted.
    """

    unknown = sorted(set(map(str, mapping)) - set(map(str, allowed_keys)))
    if unknown:
        raise ValueError(f"{field_name} has unknown keys: {unknown}")


def inspect_settings_from_config(config: Mapping[str, Any]) -> InspectSettings:
    """Parse the ``inspect`` section of a settings mapping.

    Parameters
    ----------
    config : Mapping[str, Any]
        Whole settings mapping, as returned by :func:`load_config_mapping`.

    Returns
    -------
    InspectSettings
        Parsed settings. A missing section yields the defaults.

    Raises
    ------
    ValueError
        If unknown keys are present or a value has the wrong type.
    """

    validate_allowed_keys(config, field_name="config", allowed_keys=("inspect",))
    section = config.get("inspect")
    if section is None:
        return InspectSettings()
    if not isinstance(section, Mapping):
        raise ValueError("config.inspect must be an object")
    validate_allowed_keys(section, field_name="config.inspect", allowed_keys=("root", "crate", "json"))

    root = section.get("root")
    if root is not None and (not isinstance(root, str) or not root.strip()):
        raise ValueError("config.inspect.root must be a non-empty string")
    crate = section.get("crate")
    if crate is not None and (not isinstance(crate, str) or not crate.strip()):
        raise ValueError("config.inspect.crate must be a non-empty string")
    as_json = section.get("json", False)
    if not isinstance(as_json, bool):
        raise ValueError("config.inspect.json must be a boolean")

    return InspectSettings(
        root=Path(root) if root is not None else None,
        crate=crate,
        as_json=as_json,
    )


def load_inspect_settings(path: str | Path) -> InspectSettings:
    """Load and parse inspection settings from a JSON/YAML file."""

    return inspect_settings_from_config(load_config_mapping(path))


__all__ = [
    "InspectSettings",
    "SUPPORTED_CONFIG_SUFFIXES",
    "inspect_settings_from_config",
    "load_config_mapping",
    "load_inspect_settings",
    "validate_allowed_keys",
]
