"""Locate implementor artifacts in a documentation output tree.

Artifacts live under a ``trait.impl`` directory, one file per trait, at a path
mirroring the trait's module path: ``core/default/trait.Default.js`` holds the
implementors of ``core::default::Default``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from implementor_registry.core.table import ImplementorTable
from implementor_registry.registration import RegistrationMailbox

from .codec import run_artifact

logger = logging.getLogger(__name__)

_ARTIFACT_NAME = re.compile(r"^trait\.(?P<name>[A-Za-z_][A-Za-z0-9_]*)\.js$")


@dataclass(frozen=True, slots=True)
class TraitArtifact:
    """One discovered artifact.

    Parameters
    ----------
    trait_path : str
        ``::``-joined trait path, e.g. ``core::default::Default``.
    path : pathlib.Path
        Artifact file.
    """

    trait_path: str
    path: Path

    @property
    def crate(self) -> str:
        return self.trait_path.split("::", 1)[0]


def trait_path_from_artifact(path: str | Path, root: str | Path) -> str:
    """Derive the trait path of an artifact from its location under ``root``.

    Raises
    ------
    ValueError
        If ``path`` is outside ``root`` or its file name is not
        ``trait.<Name>.js``.
    """

    artifact_path = Path(path)
    try:
        relative = artifact_path.relative_to(Path(root))
    except ValueError as exc:
        raise ValueError(f"artifact {artifact_path} is not under {root}") from exc

    match = _ARTIFACT_NAME.match(relative.name)
    if match is None:
        raise ValueError(f"not an implementor artifact name: {relative.name!r}")
    return "::".join((*relative.parent.parts, match.group("name")))


def discover_trait_artifacts(root: str | Path, *, crate: str | None = None) -> tuple[TraitArtifact, ...]:
    """Find every trait artifact under ``root``.

    Parameters
    ----------
    root : str | pathlib.Path
        ``trait.impl`` directory to scan.
    crate : str | None, optional
        Only keep traits defined in this crate (first path segment).

    Returns
    -------
    tuple[TraitArtifact, ...]
        Records sorted by trait path.

    Raises
    ------
    FileNotFoundError
        If ``root`` is not a directory.
    """

    root_path = Path(root)
    if not root_path.is_dir():
        raise FileNotFoundError(f"artifact root is not a directory: {root_path}")

    found: list[TraitArtifact] = []
    for candidate in root_path.rglob("trait.*.js"):
        if not candidate.is_file() or _ARTIFACT_NAME.match(candidate.name) is None:
            continue
        record = TraitArtifact(trait_path=trait_path_from_artifact(candidate, root_path), path=candidate)
        if crate is not None and record.crate != crate:
            continue
        found.append(record)

    logger.debug("discovered %d artifact(s) under %s", len(found), root_path)
    return tuple(sorted(found, key=lambda item: item.trait_path))


def run_artifacts(
    records: Iterable[TraitArtifact],
    *,
    mailbox: RegistrationMailbox | None = None,
) -> tuple[ImplementorTable, ...]:
    """Execute artifacts in order and return their tables.

    With no consumer attached, each load replaces the previous pending table.
    """

    return tuple(run_artifact(record.path, mailbox=mailbox) for record in records)


__all__ = [
    "TraitArtifact",
    "discover_trait_artifacts",
    "run_artifacts",
    "trait_path_from_artifact",
]
