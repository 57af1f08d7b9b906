"""Read, write and execute generated implementor artifacts.

A generated artifact is a self-registering script::

    (function() {var implementors = {
    "tower":[...],
    "tower_layer":[...]
    };if (window.register_implementors) {...} else {window.pending_implementors = implementors;}})()

The table literal between ``var implementors =`` and the registration trailer
is JSON. Executing the artifact from Python means decoding that literal and
handing it to :func:`~implementor_registry.registration.load_implementors`.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from implementor_registry.core.table import ImplementorTable, table_from_mapping
from implementor_registry.registration import RegistrationMailbox, load_implementors

logger = logging.getLogger(__name__)

ARTIFACT_HEADER = "(function() {var implementors = "
ARTIFACT_TRAILER = (
    ";if (window.register_implementors) {window.register_implementors(implementors);} "
    "else {window.pending_implementors = implementors;}})()"
)

_TABLE_PATTERN = re.compile(
    r"var\s+implementors\s*=\s*(?P<table>\{.*\})\s*;\s*if\s*\(\s*window\.register_implementors\s*\)",
    re.DOTALL,
)


class ArtifactFormatError(ValueError):
    """Raised when text is not a well-formed implementor artifact."""


def parse_artifact_text(text: str) -> ImplementorTable:
    """Decode the implementor table embedded in artifact text.

    Parameters
    ----------
    text : str
        Full artifact script.

    Returns
    -------
    dict[str, list[Any]]
        Embedded table with descriptors left untouched.

    Raises
    ------
    ArtifactFormatError
        If the registration wrapper is missing, the literal is not valid JSON,
        or the literal does not have the crate-to-list shape.
    """

    match = _TABLE_PATTERN.search(text)
    if match is None:
        raise ArtifactFormatError("implementor table literal not found in artifact")

    try:
        raw = json.loads(match.group("table"))
    except json.JSONDecodeError as exc:
        raise ArtifactFormatError(f"implementor table literal is not valid JSON: {exc}") from exc

    try:
        return table_from_mapping(raw)
    except ValueError as exc:
        raise ArtifactFormatError(str(exc)) from exc


def render_artifact_text(table: Mapping[str, list[Any]]) -> str:
    """Render ``table`` as a self-registering artifact script.

    Crates are written one per line in sorted order.
    """

    lines = [
        f"{json.dumps(crate, ensure_ascii=False)}:"
        f"{json.dumps(descriptors, ensure_ascii=False, separators=(',', ':'))}"
        for crate, descriptors in sorted(table.items())
    ]
    return ARTIFACT_HEADER + "{\n" + ",\n".join(lines) + "\n}" + ARTIFACT_TRAILER


def read_artifact(path: str | Path) -> ImplementorTable:
    """Read and decode one artifact file."""

    artifact_path = Path(path)
    text = artifact_path.read_text(encoding="utf-8")
    logger.debug("read artifact %s", artifact_path)
    return parse_artifact_text(text)


def write_artifact(table: Mapping[str, list[Any]], path: str | Path) -> Path:
    """Write ``table`` as an artifact file.

    Parameters
    ----------
    table : Mapping[str, list[Any]]
        Implementor table to serialize.
    path : str | pathlib.Path
        Destination path. Parent directories are created.

    Returns
    -------
    pathlib.Path
        Written file path.
    """

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_artifact_text(table), encoding="utf-8")
    return output_path


def run_artifact(path: str | Path, *, mailbox: RegistrationMailbox | None = None) -> ImplementorTable:
    """Execute one artifact: decode its table and register it.

    Parameters
    ----------
    path : str | pathlib.Path
        Artifact file.
    mailbox : RegistrationMailbox | None, optional
        Target mailbox. Defaults to the process-wide mailbox.

    Returns
    -------
    dict[str, list[Any]]
        Table that was forwarded or queued.
    """

    table = read_artifact(path)
    load_implementors(table, mailbox=mailbox)
    return table


__all__ = [
    "ARTIFACT_HEADER",
    "ARTIFACT_TRAILER",
    "ArtifactFormatError",
    "parse_artifact_text",
    "read_artifact",
    "render_artifact_text",
    "run_artifact",
    "write_artifact",
]
