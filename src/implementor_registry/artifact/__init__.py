"""Codec and discovery for generated implementor artifacts."""

from .codec import (
    ARTIFACT_HEADER,
    ARTIFACT_TRAILER,
    ArtifactFormatError,
    parse_artifact_text,
    read_artifact,
    render_artifact_text,
    run_artifact,
    write_artifact,
)
from .discovery import TraitArtifact, discover_trait_artifacts, run_artifacts, trait_path_from_artifact

__all__ = [
    "ARTIFACT_HEADER",
    "ARTIFACT_TRAILER",
    "ArtifactFormatError",
    "TraitArtifact",
    "discover_trait_artifacts",
    "parse_artifact_text",
    "read_artifact",
    "render_artifact_text",
    "run_artifact",
    "run_artifacts",
    "trait_path_from_artifact",
    "write_artifact",
]
